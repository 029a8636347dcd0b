import pytest

from tachyon.rigid_body import ShapeType
from tachyon.vec3 import Vec3
from tachyon.world import World, main


def test_world_holds_requested_bodies_in_order():
    world = World(3, 2)
    kinds = [body.shape_type for body in world.bodies]
    assert kinds == [ShapeType.SPHERE] * 3 + [ShapeType.BOX] * 2


def test_initial_bodies_lie_within_spawn_region():
    world = World(5, 5)
    for body in world.bodies:
        assert -10.0 <= body.pos.x <= 10.0
        assert -10.0 <= body.pos.y <= 10.0
        assert body.pos.z == 0.0
    for box in world.bodies[5:]:
        assert box.bounding_radius == pytest.approx(box.half_extents.magnitude())


def test_same_seed_gives_same_simulation():
    first, second = World(4, 4, seed=7), World(4, 4, seed=7)
    for _ in range(20):
        first.update(0.008)
        second.update(0.008)
    assert [tuple(b.pos) for b in first.bodies] == [tuple(b.pos) for b in second.bodies]


def test_different_seeds_give_different_layouts():
    first, second = World(3, 0, seed=1), World(3, 0, seed=2)
    assert [tuple(b.pos) for b in first.bodies] != [tuple(b.pos) for b in second.bodies]


def test_gravity_accelerates_a_lone_body():
    world = World(1, 0)
    body = world.bodies[0]
    body.pos = Vec3(0.0, 0.0, 0.0)
    body.vel = Vec3(0.0, 0.0, 0.0)
    world.update(0.01)
    assert body.vel.y == pytest.approx(world.gravity.y * 0.01)
    assert body.vel.x == 0.0
    assert body.pos.y < 0.0


def test_body_past_bound_is_clamped_and_bounces():
    world = World(1, 0)
    body = world.bodies[0]
    body.pos = Vec3(world.world_bound + 2.0, 0.0, 0.0)
    body.vel = Vec3(1.0, 0.0, 0.0)
    world.update(0.01)
    assert body.pos.x == world.world_bound
    assert body.vel.x == pytest.approx(-0.7)


def test_lone_body_stays_inside_bounds():
    world = World(1, 0)
    for _ in range(300):
        world.update(0.008)
    body = world.bodies[0]
    assert abs(body.pos.x) <= world.world_bound
    assert abs(body.pos.y) <= world.world_bound


def test_empty_world_updates():
    world = World(0, 0)
    world.update(0.008)
    assert world.bodies == []
    assert world.grid.potential_pairs() == []


def test_main_reports_frame_time(capsys):
    assert main(["--frames", "200", "--spheres", "2", "--boxes", "2"]) == 0
    lines = [line for line in capsys.readouterr().out.splitlines() if line]
    assert len(lines) == 2
    assert all(line.startswith("Average Frame Time: ") for line in lines)


def test_main_rejects_bad_time_step():
    with pytest.raises(SystemExit):
        main(["--dt", "0", "--frames", "1"])