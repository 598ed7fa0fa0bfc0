import math

import pytest

from jumpin.debug_draw import (
    WHITE,
    Primitive,
    Topology,
    Vertex,
    draw_box,
    draw_frustum,
    draw_grid,
    draw_oriented_box,
    draw_quad,
    draw_ray,
    draw_ring,
    draw_sphere,
    draw_triangle,
)
from jumpin.geometry import Vector3


def close(a: Vector3, b: Vector3, tol: float = 1e-9) -> bool:
    return (a - b).length() < tol


def flat(primitive):
    return [c for vertex in primitive.vertices for c in vertex.position]


def test_ring_is_closed_and_has_33_vertices():
    ring = draw_ring(Vector3(), Vector3(1, 0, 0), Vector3(0, 1, 0))
    assert ring.topology is Topology.LINE_STRIP
    assert len(ring.vertices) == 33
    assert ring.vertices[0] == ring.vertices[-1]
    assert close(ring.vertices[0].position, Vector3(1, 0, 0))


def test_ring_points_lie_on_circle():
    origin = Vector3(2, 3, 4)
    ring = draw_ring(origin, Vector3(0, 2, 0), Vector3(0, 0, 2))
    for vertex in ring.vertices:
        assert math.isclose((vertex.position - origin).length(), 2.0, rel_tol=1e-9)


def test_sphere_rings_at_radius():
    center = Vector3(1, 1, 1)
    rings = draw_sphere(center, 3.0, (1, 0, 0, 1))
    assert len(rings) == 3
    for ring in rings:
        assert len(ring.vertices) == 33
        for vertex in ring.vertices:
            assert math.isclose((vertex.position - center).length(), 3.0, rel_tol=1e-9)
            assert vertex.color == (1.0, 0.0, 0.0, 1.0)


def test_box_edges_follow_extents():
    center = Vector3(1, 2, 3)
    extents = Vector3(1, 2, 3)
    box = draw_box(center, extents)
    segments = list(box.segments())
    assert len(segments) == 12
    assert len({v.position for v in box.vertices}) == 8
    lengths = sorted(round((a.position - b.position).length(), 9) for a, b in segments)
    expected = sorted([2 * extents.x] * 4 + [2 * extents.y] * 4 + [2 * extents.z] * 4)
    assert lengths == expected
    for vertex in box.vertices:
        offset = vertex.position - center
        assert math.isclose(abs(offset.x), extents.x)
        assert math.isclose(abs(offset.y), extents.y)
        assert math.isclose(abs(offset.z), extents.z)


def test_oriented_box_with_identity_orientation_matches_box():
    center, extents = Vector3(0, 1, 0), Vector3(2, 1, 0.5)
    plain = draw_box(center, extents)
    oriented = draw_oriented_box(center, extents, (0, 0, 0, 1))
    assert len(oriented.vertices) == len(plain.vertices) == 8
    assert flat(oriented) == pytest.approx(flat(plain))


def test_oriented_box_rotation_keeps_distance_from_center():
    s = math.sin(math.pi / 8)
    c = math.cos(math.pi / 8)
    box = draw_oriented_box(Vector3(), Vector3(1, 1, 1), (0, 0, s, c))
    for vertex in box.vertices:
        assert math.isclose(vertex.position.length(), math.sqrt(3), rel_tol=1e-9)


def test_oriented_box_rejects_bad_quaternion():
    with pytest.raises(ValueError):
        draw_oriented_box(Vector3(), Vector3(1, 1, 1), (0, 0, 1))


def test_frustum_edges():
    corners = [Vector3(i, i * 2, i * 3) for i in range(8)]
    frustum = draw_frustum(corners)
    assert len(frustum.vertices) == 24
    segments = list(frustum.segments())
    assert len(segments) == 12
    assert segments[0][0].position == corners[0]
    assert segments[0][1].position == corners[1]
    assert segments[4][1].position == corners[4]


def test_frustum_requires_eight_corners():
    with pytest.raises(ValueError):
        draw_frustum([Vector3()] * 7)


def test_grid_counts_lines_and_clamps_divisions():
    grid = draw_grid(Vector3(1, 0, 0), Vector3(0, 0, 1), Vector3(), 2, 3)
    assert len(list(grid.segments())) == (2 + 1) + (3 + 1)
    clamped = draw_grid(Vector3(1, 0, 0), Vector3(0, 0, 1), Vector3(), 0, 0)
    assert len(list(clamped.segments())) == 4


def test_grid_lines_span_the_axes():
    x_axis, y_axis = Vector3(5, 0, 0), Vector3(0, 0, 5)
    grid = draw_grid(x_axis, y_axis, Vector3(), 10, 10)
    first = next(grid.segments())
    assert close(first[0].position, -x_axis - y_axis)
    assert close(first[1].position, -x_axis + y_axis)
    for vertex in grid.vertices:
        assert abs(vertex.position.x) <= 5 + 1e-9
        assert abs(vertex.position.z) <= 5 + 1e-9


def test_ray_normalized_and_raw():
    origin, direction = Vector3(1, 1, 1), Vector3(0, 0, 4)
    ray = draw_ray(origin, direction)
    assert len(ray.vertices) == 2
    assert close(ray.vertices[1].position - origin, direction.normalized())
    raw = draw_ray(origin, direction, normalize=False)
    assert close(raw.vertices[1].position, origin + direction)


def test_triangle_and_quad_close():
    a, b, c, d = Vector3(0, 0, 0), Vector3(1, 0, 0), Vector3(1, 1, 0), Vector3(0, 1, 0)
    tri = draw_triangle(a, b, c)
    assert [v.position for v in tri.vertices] == [a, b, c, a]
    quad = draw_quad(a, b, c, d)
    assert [v.position for v in quad.vertices] == [a, b, c, d, a]
    assert len(list(quad.segments())) == 4


def test_default_color_is_white():
    tri = draw_triangle(Vector3(), Vector3(1, 0, 0), Vector3(0, 1, 0))
    assert all(v.color == WHITE for v in tri.vertices)


def test_bad_color_rejected():
    with pytest.raises(ValueError):
        draw_triangle(Vector3(), Vector3(1, 0, 0), Vector3(0, 1, 0), (1, 1, 1))


def test_unindexed_line_list_segments():
    prim = Primitive(
        Topology.LINE_LIST,
        (Vertex(Vector3()), Vertex(Vector3(1, 0, 0)), Vertex(Vector3(2, 0, 0)), Vertex(Vector3(3, 0, 0))),
    )
    pairs = [(a.position.x, b.position.x) for a, b in prim.segments()]
    assert pairs == [(0, 1), (2, 3)]