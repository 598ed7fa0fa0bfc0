"""Box and capsule colliders with overlap tests."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from jumpin.geometry import Matrix, Vector3


class Axis(enum.IntEnum):
    """Local axes of a box."""

    X = 0
    Y = 1
    Z = 2


@dataclass
class BoxCollider:
    """Box given by its center and half extents."""

    center: Vector3 = field(default_factory=Vector3)
    half_size: Vector3 = field(default_factory=Vector3)
    rotation: Vector3 = field(default_factory=Vector3)

    def project_length(
        self,
        axis: Vector3,
        e1: Vector3,
        e2: Vector3,
        e3: Vector3 | None = None,
    ) -> float:
        """Length of the half-axes projected onto a unit separating axis."""
        total = abs(axis.dot(e1)) + abs(axis.dot(e2))
        if e3 is not None:
            total += abs(axis.dot(e3))
        return total

    def direction(self, axis: Axis) -> Vector3:
        """Direction of a local axis.

        Orientation is not tracked, so every axis reports the zero vector.
        """
        Axis(axis)
        return Vector3()

    def half_length(self, axis: Axis) -> float:
        """Half extent along a local axis."""
        return (self.half_size.x, self.half_size.y, self.half_size.z)[Axis(axis)]

    def min_corner(self) -> Vector3:
        return self.center - self.half_size

    def max_corner(self) -> Vector3:
        return self.center + self.half_size


@dataclass
class CapsuleCollider:
    """Capsule from ``start`` along ``vector`` (rotated) with a radius."""

    start: Vector3 = field(default_factory=Vector3)
    vector: Vector3 = field(default_factory=Vector3)
    radius: float = 0.0
    rotation: Vector3 = field(default_factory=Vector3)

    def end(self) -> Vector3:
        """End point: the vector rotated about Z, then Y, then X, added to start."""
        v = self.vector.transform(Matrix.rotation_z(self.rotation.z))
        v = v.transform(Matrix.rotation_y(self.rotation.y))
        v = v.transform(Matrix.rotation_x(self.rotation.x))
        return self.start + v


def collide_boxes(first: BoxCollider, second: BoxCollider) -> bool:
    """Separating-axis test between two boxes; True when they overlap."""
    norm_a = [first.direction(a) for a in Axis]
    norm_b = [second.direction(a) for a in Axis]
    half_a = [n * first.half_length(a) for n, a in zip(norm_a, Axis)]
    half_b = [n * second.half_length(a) for n, a in zip(norm_b, Axis)]
    interval = first.center - second.center

    def separated(axis: Vector3, r_a: float, r_b: float) -> bool:
        return abs(interval.dot(axis)) > r_a + r_b

    for n, e in zip(norm_a, half_a):
        if separated(n, e.length(), first.project_length(n, *half_b)):
            return False
    for n, e in zip(norm_b, half_b):
        if separated(n, first.project_length(n, *half_a), e.length()):
            return False
    for i, na in enumerate(norm_a):
        others_a = [e for k, e in enumerate(half_a) if k != i]
        for j, nb in enumerate(norm_b):
            others_b = [e for k, e in enumerate(half_b) if k != j]
            cross = na.cross(nb)
            r_a = first.project_length(cross, *others_a)
            r_b = first.project_length(cross, *others_b)
            if separated(cross, r_a, r_b):
                return False
    return True


def sphere_hits_box(center: Vector3, radius: float, box: BoxCollider) -> bool:
    """True when a sphere touches or overlaps an axis-aligned box."""
    low, high = box.min_corner(), box.max_corner()
    closest = Vector3(
        max(low.x, min(center.x, high.x)),
        max(low.y, min(center.y, high.y)),
        max(low.z, min(center.z, high.z)),
    )
    return (closest - center).length_squared() <= radius * radius