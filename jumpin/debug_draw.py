"""Line primitives that outline bounding volumes and helper shapes."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

from jumpin.geometry import Matrix, Vector3

Color = tuple[float, float, float, float]

WHITE: Color = (1.0, 1.0, 1.0, 1.0)

RING_SEGMENTS = 32

_CUBE_CORNERS = (
    Vector3(-1.0, -1.0, -1.0),
    Vector3(1.0, -1.0, -1.0),
    Vector3(1.0, -1.0, 1.0),
    Vector3(-1.0, -1.0, 1.0),
    Vector3(-1.0, 1.0, -1.0),
    Vector3(1.0, 1.0, -1.0),
    Vector3(1.0, 1.0, 1.0),
    Vector3(-1.0, 1.0, 1.0),
)

_CUBE_INDICES = (
    0, 1, 1, 2, 2, 3, 3, 0,
    4, 5, 5, 6, 6, 7, 7, 4,
    0, 4, 1, 5, 2, 6, 3, 7,
)

_FRUSTUM_ORDER = (
    0, 1, 1, 2, 2, 3, 3, 0,
    0, 4, 1, 5, 2, 6, 3, 7,
    4, 5, 5, 6, 6, 7, 7, 4,
)


class Topology(enum.Enum):
    """How the vertices of a primitive are joined into lines."""

    LINE_LIST = "line_list"
    LINE_STRIP = "line_strip"


@dataclass(frozen=True)
class Vertex:
    """A coloured point."""

    position: Vector3
    color: Color = WHITE


@dataclass(frozen=True)
class Primitive:
    """A batch of vertices drawn with one topology, optionally indexed."""

    topology: Topology
    vertices: tuple[Vertex, ...]
    indices: tuple[int, ...] | None = None

    def segments(self) -> Iterator[tuple[Vertex, Vertex]]:
        """Yield the line segments this primitive draws."""
        order: Sequence[int]
        if self.indices is not None:
            order = self.indices
        else:
            order = range(len(self.vertices))
        points = [self.vertices[i] for i in order]
        if self.topology is Topology.LINE_LIST:
            yield from zip(points[::2], points[1::2])
        else:
            yield from zip(points, points[1:])


def _color(color: Iterable[float]) -> Color:
    values = tuple(float(c) for c in color)
    if len(values) != 4:
        raise ValueError("color must have four components")
    return values  # type: ignore[return-value]


def _strip(points: Iterable[Vector3], color: Iterable[float]) -> Primitive:
    rgba = _color(color)
    return Primitive(
        Topology.LINE_STRIP, tuple(Vertex(p, rgba) for p in points)
    )


def _cube(world: Matrix, color: Iterable[float]) -> Primitive:
    rgba = _color(color)
    vertices = tuple(Vertex(c.transform(world), rgba) for c in _CUBE_CORNERS)
    return Primitive(Topology.LINE_LIST, vertices, _CUBE_INDICES)


def _quaternion_matrix(q: Sequence[float]) -> Matrix:
    if len(q) != 4:
        raise ValueError("orientation must be a quaternion (x, y, z, w)")
    x, y, z, w = (float(v) for v in q)
    return Matrix(
        (
            (1 - 2 * y * y - 2 * z * z, 2 * x * y + 2 * z * w, 2 * x * z - 2 * y * w, 0.0),
            (2 * x * y - 2 * z * w, 1 - 2 * x * x - 2 * z * z, 2 * y * z + 2 * x * w, 0.0),
            (2 * x * z + 2 * y * w, 2 * y * z - 2 * x * w, 1 - 2 * x * x - 2 * y * y, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )
    )


def draw_ring(
    origin: Vector3,
    major_axis: Vector3,
    minor_axis: Vector3,
    color: Iterable[float] = WHITE,
) -> Primitive:
    """Closed ellipse of 32 segments spanned by two axes around ``origin``."""
    delta = 2.0 * math.pi / RING_SEGMENTS
    cos_delta, sin_delta = math.cos(delta), math.sin(delta)
    cos_value, sin_value = 1.0, 0.0
    points = []
    for _ in range(RING_SEGMENTS):
        points.append(origin + major_axis * cos_value + minor_axis * sin_value)
        # Rotate incrementally instead of evaluating sin/cos each step.
        cos_value, sin_value = (
            cos_value * cos_delta - sin_value * sin_delta,
            cos_value * sin_delta + sin_value * cos_delta,
        )
    points.append(points[0])
    return _strip(points, color)


def draw_sphere(
    center: Vector3, radius: float, color: Iterable[float] = WHITE
) -> list[Primitive]:
    """Three orthogonal rings outlining a sphere."""
    x_axis = Vector3(radius, 0.0, 0.0)
    y_axis = Vector3(0.0, radius, 0.0)
    z_axis = Vector3(0.0, 0.0, radius)
    return [
        draw_ring(center, x_axis, z_axis, color),
        draw_ring(center, x_axis, y_axis, color),
        draw_ring(center, y_axis, z_axis, color),
    ]


def draw_box(
    center: Vector3, extents: Vector3, color: Iterable[float] = WHITE
) -> Primitive:
    """Edges of an axis-aligned box given by its center and half extents."""
    world = Matrix.scaling(extents.x, extents.y, extents.z) @ Matrix.translation(center)
    return _cube(world, color)


def draw_oriented_box(
    center: Vector3,
    extents: Vector3,
    orientation: Sequence[float],
    color: Iterable[float] = WHITE,
) -> Primitive:
    """Edges of a box rotated by the quaternion ``orientation`` (x, y, z, w)."""
    world = (
        Matrix.scaling(extents.x, extents.y, extents.z)
        @ _quaternion_matrix(orientation)
        @ Matrix.translation(center)
    )
    return _cube(world, color)


def draw_frustum(
    corners: Sequence[Vector3], color: Iterable[float] = WHITE
) -> Primitive:
    """Edges of a frustum from its eight corners (near face, then far face)."""
    if len(corners) != 8:
        raise ValueError("a frustum has exactly eight corners")
    rgba = _color(color)
    vertices = tuple(Vertex(corners[i], rgba) for i in _FRUSTUM_ORDER)
    return Primitive(Topology.LINE_LIST, vertices)


def draw_grid(
    x_axis: Vector3,
    y_axis: Vector3,
    origin: Vector3,
    xdivs: int,
    ydivs: int,
    color: Iterable[float] = WHITE,
) -> Primitive:
    """Grid of lines spanning ``origin`` ± each axis; divisions are at least 1."""
    rgba = _color(color)
    xdivs = max(1, int(xdivs))
    ydivs = max(1, int(ydivs))
    vertices: list[Vertex] = []
    for along, across, divs in ((x_axis, y_axis, xdivs), (y_axis, x_axis, ydivs)):
        for i in range(divs + 1):
            percent = (i / divs) * 2.0 - 1.0
            point = along * percent + origin
            vertices.append(Vertex(point - across, rgba))
            vertices.append(Vertex(point + across, rgba))
    return Primitive(Topology.LINE_LIST, tuple(vertices))


def draw_ray(
    origin: Vector3,
    direction: Vector3,
    normalize: bool = True,
    color: Iterable[float] = WHITE,
) -> Primitive:
    """Line from ``origin`` along ``direction``, optionally of unit length."""
    ray = direction.normalized() if normalize else direction
    return _strip((origin, origin + ray), color)


def draw_triangle(
    point_a: Vector3,
    point_b: Vector3,
    point_c: Vector3,
    color: Iterable[float] = WHITE,
) -> Primitive:
    """Closed outline through three points."""
    return _strip((point_a, point_b, point_c, point_a), color)


def draw_quad(
    point_a: Vector3,
    point_b: Vector3,
    point_c: Vector3,
    point_d: Vector3,
    color: Iterable[float] = WHITE,
) -> Primitive:
    """Closed outline through four points."""
    return _strip((point_a, point_b, point_c, point_d, point_a), color)