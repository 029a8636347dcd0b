"""Row-major 3x3 matrix used for rotations and inertia tensors."""

from __future__ import annotations

from numbers import Real as _Number
from typing import Iterable

from tachyon.vec3 import Vec3

_SINGULAR_EPSILON = 1e-6


class Matrix3:
    """A 3x3 real matrix stored as a list of rows in ``m``."""

    __slots__ = ("m",)

    def __init__(self, *values: float) -> None:
        if not values:
            self.m = [[0.0] * 3 for _ in range(3)]
        elif len(values) == 9:
            self.m = [list(values[0:3]), list(values[3:6]), list(values[6:9])]
        else:
            raise ValueError(f"Matrix3 takes 0 or 9 values, got {len(values)}")

    @classmethod
    def _from_rows(cls, rows: Iterable[Iterable[float]]) -> Matrix3:
        return cls(*(v for row in rows for v in row))

    @classmethod
    def zero(cls) -> Matrix3:
        return cls()

    @classmethod
    def identity(cls) -> Matrix3:
        return cls(1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0)

    def column(self, i: int) -> Vec3:
        return Vec3(*(row[i] for row in self.m))

    def transpose(self) -> Matrix3:
        return Matrix3._from_rows(zip(*self.m))

    def determinant(self) -> float:
        m = self.m
        return (
            m[0][0] * (m[1][1] * m[2][2] - m[1][2] * m[2][1])
            - m[0][1] * (m[1][0] * m[2][2] - m[1][2] * m[2][0])
            + m[0][2] * (m[1][0] * m[2][1] - m[1][1] * m[2][0])
        )

    def inverse(self) -> Matrix3:
        """Return the inverse, or the zero matrix when the matrix is near singular."""
        det = self.determinant()
        if abs(det) < _SINGULAR_EPSILON:
            return Matrix3()
        inv = 1.0 / det
        m = self.m
        return Matrix3(
            (m[1][1] * m[2][2] - m[1][2] * m[2][1]) * inv,
            -(m[0][1] * m[2][2] - m[0][2] * m[2][1]) * inv,
            (m[0][1] * m[1][2] - m[0][2] * m[1][1]) * inv,
            -(m[1][0] * m[2][2] - m[1][2] * m[2][0]) * inv,
            (m[0][0] * m[2][2] - m[0][2] * m[2][0]) * inv,
            -(m[0][0] * m[1][2] - m[0][2] * m[1][0]) * inv,
            (m[1][0] * m[2][1] - m[1][1] * m[2][0]) * inv,
            -(m[0][0] * m[2][1] - m[0][1] * m[2][0]) * inv,
            (m[0][0] * m[1][1] - m[0][1] * m[1][0]) * inv,
        )

    def __matmul__(self, other):
        if isinstance(other, Vec3):
            return Vec3(*(row[0] * other.x + row[1] * other.y + row[2] * other.z for row in self.m))
        if isinstance(other, Matrix3):
            cols = list(zip(*other.m))
            return Matrix3._from_rows(
                [sum(a * b for a, b in zip(row, col)) for col in cols] for row in self.m
            )
        return NotImplemented

    def __mul__(self, scalar: float) -> Matrix3:
        if not isinstance(scalar, _Number):
            return NotImplemented
        return Matrix3._from_rows([v * scalar for v in row] for row in self.m)

    __rmul__ = __mul__

    def __getitem__(self, index: tuple[int, int]) -> float:
        r, c = index
        return self.m[r][c]

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        r, c = index
        self.m[r][c] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix3):
            return NotImplemented
        return self.m == other.m

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix3({self.m!r})"