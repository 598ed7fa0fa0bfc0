"""Vectors, 4x4 matrices (row-vector convention) and a look-at camera."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator

Row = tuple[float, float, float, float]
Rows = tuple[Row, Row, Row, Row]

_IDENTITY_ROWS: Rows = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)


@dataclass(frozen=True)
class Vector3:
    """Immutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, scale: float) -> Vector3:
        return Vector3(self.x * scale, self.y * scale, self.z * scale)

    __rmul__ = __mul__

    def __truediv__(self, scale: float) -> Vector3:
        return Vector3(self.x / scale, self.y / scale, self.z / scale)

    def dot(self, other: Vector3) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        """Cross product."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length_squared(self) -> float:
        """Squared Euclidean length."""
        return self.dot(self)

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.length_squared())

    def normalized(self) -> Vector3:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length == 0.0:
            return self
        return self / length

    def transform(self, matrix: Matrix) -> Vector3:
        """Transform as a point (w = 1) and project back by w."""
        m = matrix.rows
        x, y, z = self.x, self.y, self.z
        tx = x * m[0][0] + y * m[1][0] + z * m[2][0] + m[3][0]
        ty = x * m[0][1] + y * m[1][1] + z * m[2][1] + m[3][1]
        tz = x * m[0][2] + y * m[1][2] + z * m[2][2] + m[3][2]
        tw = x * m[0][3] + y * m[1][3] + z * m[2][3] + m[3][3]
        if tw != 1.0 and tw != 0.0:
            return Vector3(tx / tw, ty / tw, tz / tw)
        return Vector3(tx, ty, tz)


@dataclass(frozen=True)
class Matrix:
    """Immutable 4x4 matrix; vectors are rows, so ``a @ b`` applies a then b."""

    rows: Rows = _IDENTITY_ROWS

    def __getitem__(self, index: int) -> Row:
        return self.rows[index]

    @classmethod
    def identity(cls) -> Matrix:
        return cls(_IDENTITY_ROWS)

    @classmethod
    def rotation_x(cls, angle: float) -> Matrix:
        c, s = math.cos(angle), math.sin(angle)
        return cls(
            (
                (1.0, 0.0, 0.0, 0.0),
                (0.0, c, s, 0.0),
                (0.0, -s, c, 0.0),
                (0.0, 0.0, 0.0, 1.0),
            )
        )

    @classmethod
    def rotation_y(cls, angle: float) -> Matrix:
        c, s = math.cos(angle), math.sin(angle)
        return cls(
            (
                (c, 0.0, -s, 0.0),
                (0.0, 1.0, 0.0, 0.0),
                (s, 0.0, c, 0.0),
                (0.0, 0.0, 0.0, 1.0),
            )
        )

    @classmethod
    def rotation_z(cls, angle: float) -> Matrix:
        c, s = math.cos(angle), math.sin(angle)
        return cls(
            (
                (c, s, 0.0, 0.0),
                (-s, c, 0.0, 0.0),
                (0.0, 0.0, 1.0, 0.0),
                (0.0, 0.0, 0.0, 1.0),
            )
        )

    @classmethod
    def translation(cls, offset: Vector3) -> Matrix:
        return cls(
            (
                (1.0, 0.0, 0.0, 0.0),
                (0.0, 1.0, 0.0, 0.0),
                (0.0, 0.0, 1.0, 0.0),
                (offset.x, offset.y, offset.z, 1.0),
            )
        )

    @classmethod
    def scaling(cls, x: float, y: float, z: float) -> Matrix:
        return cls(
            (
                (x, 0.0, 0.0, 0.0),
                (0.0, y, 0.0, 0.0),
                (0.0, 0.0, z, 0.0),
                (0.0, 0.0, 0.0, 1.0),
            )
        )

    @classmethod
    def look_at(cls, eye: Vector3, target: Vector3, up: Vector3) -> Matrix:
        """Right-handed view matrix looking from ``eye`` towards ``target``."""
        r2 = (eye - target).normalized()
        r0 = up.cross(r2).normalized()
        r1 = r2.cross(r0)
        neg_eye = -eye
        d0, d1, d2 = r0.dot(neg_eye), r1.dot(neg_eye), r2.dot(neg_eye)
        return cls(
            (
                (r0.x, r1.x, r2.x, 0.0),
                (r0.y, r1.y, r2.y, 0.0),
                (r0.z, r1.z, r2.z, 0.0),
                (d0, d1, d2, 1.0),
            )
        )

    @classmethod
    def perspective_fov(
        cls, fov: float, aspect: float, near: float, far: float
    ) -> Matrix:
        """Right-handed perspective projection mapping depth to [0, 1]."""
        if near <= 0.0 or far <= 0.0 or near == far:
            raise ValueError("near and far must be positive and distinct")
        if aspect == 0.0:
            raise ValueError("aspect ratio must be non-zero")
        height = 1.0 / math.tan(fov / 2.0)
        width = height / aspect
        depth = far / (near - far)
        return cls(
            (
                (width, 0.0, 0.0, 0.0),
                (0.0, height, 0.0, 0.0),
                (0.0, 0.0, depth, -1.0),
                (0.0, 0.0, depth * near, 0.0),
            )
        )

    def __matmul__(self, other: Matrix) -> Matrix:
        columns = list(zip(*other.rows))
        return Matrix(
            tuple(
                tuple(sum(a * b for a, b in zip(row, col)) for col in columns)
                for row in self.rows
            )
        )

    def invert(self) -> Matrix:
        """Inverse matrix; raises ValueError when the matrix is singular."""
        work = [list(row) + list(ident) for row, ident in zip(self.rows, _IDENTITY_ROWS)]
        for col in range(4):
            pivot = max(range(col, 4), key=lambda r: abs(work[r][col]))
            if abs(work[pivot][col]) < 1e-12:
                raise ValueError("matrix is singular")
            work[col], work[pivot] = work[pivot], work[col]
            factor = work[col][col]
            work[col] = [value / factor for value in work[col]]
            for r, row in enumerate(work):
                if r != col and row[col] != 0.0:
                    scale = row[col]
                    work[r] = [a - scale * b for a, b in zip(row, work[col])]
        return Matrix(tuple(tuple(row[4:]) for row in work))


@dataclass
class Camera:
    """Camera that looks at a target from its position."""

    position: Vector3 = field(default_factory=Vector3)
    up: Vector3 = field(default_factory=lambda: Vector3(0.0, 1.0, 0.0))
    view: Matrix = field(default_factory=Matrix.identity)

    def initialize(self, position: Vector3) -> None:
        self.position = position
        self.up = Vector3(0.0, 1.0, 0.0)

    def update(self, target: Vector3) -> None:
        """Rebuild the view matrix to look at ``target``."""
        self.view = Matrix.look_at(self.position, target, self.up)