"""Uniform spatial hash grid for broad-phase collision detection."""

from __future__ import annotations

import math
from collections import defaultdict
from itertools import combinations, product

from tachyon.rigid_body import RigidBody
from tachyon.vec3 import Vec3

GridCoord = tuple[int, int, int]


class BroadphaseGrid:
    """Buckets bodies by the cells their bounding spheres overlap."""

    def __init__(self, cell_size: float) -> None:
        if cell_size <= 0.0:
            raise ValueError(f"cell size must be positive, got {cell_size}")
        self.cell_size = cell_size
        self._inv_cell_size = 1.0 / cell_size
        self._cells: defaultdict[GridCoord, list[RigidBody]] = defaultdict(list)

    def clear(self) -> None:
        self._cells.clear()

    def cell_coord(self, pos: Vec3) -> GridCoord:
        """Integer coordinates of the cell containing ``pos``."""
        return tuple(math.floor(c * self._inv_cell_size) for c in pos)  # type: ignore[return-value]

    def insert(self, body: RigidBody) -> None:
        """Add ``body`` to every cell touched by its bounding cube."""
        r = body.bounding_radius
        extent = Vec3(r, r, r)
        low = self.cell_coord(body.pos - extent)
        high = self.cell_coord(body.pos + extent)
        ranges = (range(lo, hi + 1) for lo, hi in zip(low, high))
        for coord in product(*ranges):
            self._cells[coord].append(body)

    def potential_pairs(self) -> list[tuple[RigidBody, RigidBody]]:
        """Every pair of bodies sharing a cell, once per shared cell."""
        return [pair for bodies in self._cells.values() for pair in combinations(bodies, 2)]