"""Row-major 4x4 affine transform built from an orientation and a position."""

from __future__ import annotations

from tachyon.matrix3 import Matrix3
from tachyon.quaternion import Quaternion
from tachyon.vec3 import Vec3


class Matrix4:
    """A 4x4 real matrix stored as a list of rows in ``m``; identity by default."""

    __slots__ = ("m",)

    def __init__(self) -> None:
        self.m: list[list[float]] = []
        self.set_identity()

    def set_zero(self) -> None:
        self.m = [[0.0] * 4 for _ in range(4)]

    def set_identity(self) -> None:
        self.set_zero()
        for i in range(4):
            self.m[i][i] = 1.0

    def set_rotation(self, rot: Matrix3) -> None:
        """Overwrite the upper-left block with ``rot`` and clear the rest of the frame."""
        self.m = [[*row, 0.0] for row in rot.m]
        self.m.append([0.0, 0.0, 0.0, 1.0])

    def set_translation(self, pos: Vec3) -> None:
        for row, value in zip(self.m, pos):
            row[3] = value

    @classmethod
    def from_transform(cls, q: Quaternion, pos: Vec3) -> Matrix4:
        result = cls()
        result.set_rotation(q.to_matrix3())
        result.set_translation(pos)
        return result

    def to_opengl_array(self) -> list[float]:
        """Return the 16 entries in column-major order."""
        return [value for column in zip(*self.m) for value in column]

    def transform_direction(self, v: Vec3) -> Vec3:
        """Apply the rotation part only, ignoring translation."""
        return Vec3(*(row[0] * v.x + row[1] * v.y + row[2] * v.z for row in self.m[:3]))

    def __matmul__(self, v):
        if not isinstance(v, Vec3):
            return NotImplemented
        return Vec3(*(row[0] * v.x + row[1] * v.y + row[2] * v.z + row[3] for row in self.m[:3]))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return self.m == other.m

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix4({self.m!r})"