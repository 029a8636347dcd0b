import math

import pytest

from tachyon.particle import Particle
from tachyon.vec3 import Vec3

EPSILON = 1e-5


def test_position_and_velocity():
    p = Particle()
    p.position = Vec3(1.0, 2.0, 3.0)
    p.velocity = Vec3(4.0, 5.0, 6.0)
    assert tuple(p.position) == pytest.approx((1.0, 2.0, 3.0), abs=EPSILON)
    assert tuple(p.velocity) == pytest.approx((4.0, 5.0, 6.0), abs=EPSILON)


def test_mass_damping():
    p = Particle()
    p.mass = 2.0
    p.damping = 0.9
    assert p.mass == pytest.approx(2.0, abs=EPSILON)
    assert p.inverse_mass == pytest.approx(0.5, abs=EPSILON)
    assert p.has_finite_mass()
    assert p.damping == pytest.approx(0.9, abs=EPSILON)


def test_force_application_and_clearing():
    p = Particle()
    p.add_force(Vec3(10.0, 0.0, 0.0))
    assert p.force_accum == Vec3(10.0, 0.0, 0.0)
    p.clear_accumulator()
    assert p.force_accum == Vec3()


def test_defaults():
    p = Particle()
    assert p.inverse_mass == 1.0
    assert p.damping == 0.99
    assert p.radius == 1.0
    assert p.initialized is False


def test_zero_inverse_mass_is_infinite():
    p = Particle(inverse_mass=0.0)
    assert p.mass == math.inf
    assert not p.has_finite_mass()


def test_integration():
    p = Particle(
        position=Vec3(0.0, 0.0, 0.0),
        velocity=Vec3(1.0, 0.0, 0.0),
        acceleration=Vec3(0.0, 1.0, 0.0),
        damping=1.0,
    )
    p.mass = 1.0
    p.integrate(1.0)
    assert p.position.x > 0.0
    assert p.position.y == pytest.approx(0.0, abs=EPSILON)
    assert p.velocity.y == pytest.approx(1.0, abs=EPSILON)
    p.integrate(1.0)
    assert p.position.y > 0.0
    assert p.velocity.y > 1.0


def test_integrate_clears_force():
    p = Particle()
    p.add_force(Vec3(0.0, 3.0, 0.0))
    p.integrate(0.1)
    assert p.force_accum == Vec3()
    assert p.velocity.y > 0.0


def test_integrate_immovable_particle_is_noop():
    p = Particle(velocity=Vec3(1.0, 1.0, 1.0), inverse_mass=0.0)
    p.add_force(Vec3(5.0, 0.0, 0.0))
    p.integrate(1.0)
    assert p.position == Vec3()
    assert p.force_accum == Vec3(5.0, 0.0, 0.0)


def test_to_gpu_copies_state():
    p = Particle(
        position=Vec3(0.0, 2.0, 0.0),
        velocity=Vec3(1.0, 0.0, 0.0),
        acceleration=Vec3(0.0, -9.8, 0.0),
        damping=0.99,
    )
    p.mass = 1.0
    p.add_force(Vec3(0.5, 0.0, 0.0))
    gpu = p.to_gpu()
    assert gpu.pos == p.position
    assert gpu.vel == p.velocity
    assert gpu.acc == p.acceleration
    assert gpu.fac == p.force_accum
    assert gpu.inv_mass == p.inverse_mass
    assert gpu.damp == p.damping
    p.position.x = 100.0
    assert gpu.pos.x == 0.0