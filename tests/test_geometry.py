import math

import pytest

from jumpin.geometry import Camera, Matrix, Vector3


def assert_vec(actual, expected):
    assert tuple(actual) == pytest.approx(tuple(expected), abs=1e-9)


def assert_matrix(actual, expected):
    for row_a, row_b in zip(actual.rows, expected.rows):
        assert row_a == pytest.approx(row_b, abs=1e-9)


def test_cross_of_axes_gives_third_axis():
    assert_vec(Vector3(1, 0, 0).cross(Vector3(0, 1, 0)), Vector3(0, 0, 1))


def test_cross_is_perpendicular():
    a, b = Vector3(1, 2, 3), Vector3(-4, 0.5, 2)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0)
    assert c.dot(b) == pytest.approx(0.0)


def test_length_and_normalize():
    v = Vector3(3, 4, 12)
    assert v.length_squared() == pytest.approx(v.dot(v))
    assert v.normalized().length() == pytest.approx(1.0)
    assert Vector3().normalized() == Vector3()


def test_rotation_z_maps_x_to_y():
    assert_vec(Vector3(1, 0, 0).transform(Matrix.rotation_z(math.pi / 2)), Vector3(0, 1, 0))


@pytest.mark.parametrize("make", [Matrix.rotation_x, Matrix.rotation_y, Matrix.rotation_z])
def test_rotations_preserve_length(make):
    v = Vector3(1.5, -2.0, 0.25)
    assert v.transform(make(0.7)).length() == pytest.approx(v.length())


def test_translation_moves_point():
    offset = Vector3(1, 2, 3)
    assert_vec(Vector3(4, 5, 6).transform(Matrix.translation(offset)), Vector3(4, 5, 6) + offset)


def test_matmul_applies_left_then_right():
    m = Matrix.scaling(2, 2, 2) @ Matrix.translation(Vector3(1, 0, 0))
    v = Vector3(1, 1, 1)
    expected = v.transform(Matrix.scaling(2, 2, 2)).transform(Matrix.translation(Vector3(1, 0, 0)))
    assert_vec(v.transform(m), expected)


def test_identity_is_neutral():
    m = Matrix.rotation_y(0.3) @ Matrix.translation(Vector3(1, 2, 3))
    assert_matrix(m @ Matrix.identity(), m)


def test_invert_round_trip():
    m = Matrix.scaling(2, 3, 4) @ Matrix.rotation_x(0.4) @ Matrix.translation(Vector3(1, -2, 5))
    assert_matrix(m @ m.invert(), Matrix.identity())


def test_invert_singular_raises():
    with pytest.raises(ValueError):
        Matrix.scaling(0, 1, 1).invert()


def test_look_at_puts_eye_at_origin_and_target_ahead():
    eye, target = Vector3(0, 3, 50), Vector3(0, 3, 0)
    view = Matrix.look_at(eye, target, Vector3(0, 1, 0))
    assert_vec(eye.transform(view), Vector3())
    distance = (eye - target).length()
    assert_vec(target.transform(view), Vector3(0, 0, -distance))


def test_perspective_maps_near_and_far_depths():
    near, far = 0.1, 100.0
    proj = Matrix.perspective_fov(math.radians(45), 16 / 9, near, far)
    assert Vector3(0, 0, -near).transform(proj).z == pytest.approx(0.0, abs=1e-9)
    assert Vector3(0, 0, -far).transform(proj).z == pytest.approx(1.0)


def test_perspective_rejects_bad_planes():
    with pytest.raises(ValueError):
        Matrix.perspective_fov(1.0, 1.0, 1.0, 1.0)


def test_camera_view_looks_at_target():
    camera = Camera()
    camera.initialize(Vector3(0, 5, 10))
    camera.update(Vector3(0, 2, 0))
    assert_vec(camera.position.transform(camera.view), Vector3())
    assert camera.up == Vector3(0, 1, 0)