import pytest

from tachyon.point_particle import PointParticle
from tachyon.vec3 import Vec3


def test_defaults_match_engine_values():
    p = PointParticle()
    assert p.inv_mass == 1.0
    assert p.damping == 0.99
    assert p.radius == 1.0
    assert p.initialized is False
    assert p.pos == Vec3()


def test_add_force_accumulates_and_clear_resets():
    p = PointParticle()
    p.add_force(Vec3(1.0, 2.0, 3.0))
    p.add_force(Vec3(1.0, 2.0, 3.0))
    assert tuple(p.force) == pytest.approx((2.0, 4.0, 6.0))
    p.clear_force()
    assert p.force == Vec3()


def test_default_vectors_are_not_shared():
    a = PointParticle()
    b = PointParticle()
    a.pos.x = 5.0
    assert b.pos.x == 0.0


def test_has_finite_mass():
    assert PointParticle(inv_mass=0.5).has_finite_mass()
    assert not PointParticle(inv_mass=0.0).has_finite_mass()


def test_integrate_constant_velocity():
    p = PointParticle(vel=Vec3(2.0, 0.0, 0.0), damping=1.0)
    p.integrate(0.5)
    assert tuple(p.pos) == pytest.approx((1.0, 0.0, 0.0))
    assert tuple(p.vel) == pytest.approx((2.0, 0.0, 0.0))


def test_integrate_records_previous_position_and_clears_force():
    start = Vec3(3.0, -1.0, 2.0)
    p = PointParticle(pos=start.copy(), vel=Vec3(1.0, 1.0, 1.0))
    p.add_force(Vec3(0.0, 5.0, 0.0))
    p.integrate(0.1)
    assert p.prev_pos == start
    assert p.force == Vec3()
    assert p.pos != start


def test_force_accelerates_along_its_direction():
    p = PointParticle(damping=1.0)
    p.add_force(Vec3(0.0, 10.0, 0.0))
    p.integrate(0.1)
    assert p.vel.y > 0.0
    assert p.pos.y > 0.0
    assert p.vel.x == 0.0


def test_damping_reduces_speed():
    p = PointParticle(vel=Vec3(4.0, 0.0, 0.0), damping=0.5)
    p.integrate(1.0)
    assert 0.0 < p.vel.x < 4.0


def test_immovable_particle_does_not_move():
    p = PointParticle(pos=Vec3(1.0, 1.0, 1.0), vel=Vec3(5.0, 5.0, 5.0), inv_mass=0.0)
    p.add_force(Vec3(100.0, 0.0, 0.0))
    p.integrate(1.0)
    assert p.pos == Vec3(1.0, 1.0, 1.0)
    assert p.vel == Vec3(5.0, 5.0, 5.0)
    assert p.force == Vec3(100.0, 0.0, 0.0)