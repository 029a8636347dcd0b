"""A bounded world of falling spheres and boxes, and a headless runner for it."""

from __future__ import annotations

import argparse
import random
import time

from tachyon.contact_generator import ContactGenerator
from tachyon.contact_resolver import ContactResolver
from tachyon.grid import BroadphaseGrid
from tachyon.rigid_body import RigidBody
from tachyon.shapes import Box, Sphere
from tachyon.vec3 import Vec3

DEFAULT_DT = 0.008
_CELL_SIZE = 2.0
_BODY_MASS = 20.0
_BOUNCE = -0.7
_RESOLVER_ITERATIONS = 50


class World:
    """Randomly populated spheres and boxes under gravity inside a square boundary."""

    def __init__(self, num_spheres: int = 10, num_boxes: int = 10, seed: int = 44) -> None:
        self.world_bound = 10.0
        self.gravity = Vec3(0.0, -9.81, 0.0)
        self.grid = BroadphaseGrid(_CELL_SIZE)
        self.generator = ContactGenerator()
        self.resolver = ContactResolver()
        self.bodies: list[RigidBody] = []

        rng = random.Random(seed)

        def spread() -> float:
            return rng.uniform(-10.0, 10.0)

        def size() -> float:
            return rng.uniform(0.0, 2.0)

        for _ in range(num_spheres):
            radius = size()
            sphere = Sphere(radius, _BODY_MASS)
            sphere.pos = Vec3(spread(), spread(), 0.0)
            sphere.vel = Vec3(1.5 * spread(), 1.5 * spread(), 0.0)
            sphere.bounding_radius = radius
            sphere.linear_damp = 0.98
            sphere.angular_damp = 1.0
            self.bodies.append(sphere)

        for _ in range(num_boxes):
            half_size = Vec3(size(), size(), size())
            box = Box(half_size, _BODY_MASS)
            box.pos = Vec3(spread(), spread(), 0.0)
            box.vel = Vec3(1.5 * spread(), 1.5 * spread(), 0.0)
            box.ang_vel = Vec3(0.0, 0.0, 2.0)
            box.bounding_radius = half_size.magnitude()
            box.linear_damp = 0.98
            box.angular_damp = 0.98
            self.bodies.append(box)

    def update(self, dt: float) -> None:
        """Advance the simulation by one step of ``dt`` seconds."""
        self._apply_forces(dt)
        self._handle_bounds()
        pairs = self.grid.potential_pairs()
        contacts = self.generator.generate_contacts(pairs)
        self.resolver.resolve_contacts_iterative(contacts, dt, _RESOLVER_ITERATIONS)

    def _apply_forces(self, dt: float) -> None:
        self.grid.clear()
        for body in self.bodies:
            if body.inverse_mass > 0.0:
                body.add_force(self.gravity * (1.0 / body.inverse_mass))
            body.integrate(dt)
            self.grid.insert(body)

    def _handle_bounds(self) -> None:
        bound = self.world_bound
        for body in self.bodies:
            for axis in (0, 1):
                if body.pos[axis] < -bound:
                    body.pos[axis] = -bound
                    body.vel[axis] *= _BOUNCE
                if body.pos[axis] > bound:
                    body.pos[axis] = bound
                    body.vel[axis] *= _BOUNCE


def main(argv: list[str] | None = None) -> int:
    """Run the world for a number of frames and report average frame time."""
    parser = argparse.ArgumentParser(description="Run the rigid-body world simulation.")
    parser.add_argument("--frames", type=int, default=1000, help="number of frames to simulate")
    parser.add_argument("--dt", type=float, default=DEFAULT_DT, help="time step in seconds")
    parser.add_argument("--spheres", type=int, default=10, help="number of spheres")
    parser.add_argument("--boxes", type=int, default=10, help="number of boxes")
    parser.add_argument("--seed", type=int, default=44, help="random seed")
    args = parser.parse_args(argv)

    if args.frames < 0:
        parser.error("--frames must not be negative")
    if args.dt <= 0.0:
        parser.error("--dt must be positive")

    world = World(args.spheres, args.boxes, seed=args.seed)
    total_ms = 0.0
    for frame in range(1, args.frames + 1):
        start = time.perf_counter()
        world.update(args.dt)
        total_ms += (time.perf_counter() - start) * 1000.0
        if frame % 100 == 0:
            avg_ms = total_ms / frame
            fps = 1000.0 / avg_ms if avg_ms > 0.0 else float("inf")
            print(f"Average Frame Time: {avg_ms:g} ms, FPS: {fps:g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())