import math

import numpy as np
import pytest

from orbitcam.frustum import (
    CameraFrustum,
    nwd_to_ndc,
    orthographic_matrix,
    orthographic_matrix_inv,
    perspective_matrix,
    perspective_matrix_inv,
    projection_matrix,
    projection_matrix_inv,
)
from orbitcam.transform import transform_point
from orbitcam.vector import Vec3

PARAMS = [
    (2.0, 2.0, 0.0, 0.0, 0.001, 100.0),
    (1.5, 2.5, 0.2, -0.3, 0.5, 20.0),
    (0.8, 1.2, -0.1, 0.4, 2.0, 7.0),
]


def test_camera_frustum_defaults():
    f = CameraFrustum()
    assert (f.aspect_x, f.aspect_y) == (2.0, 2.0)
    assert (f.shift_x, f.shift_y) == (0.0, 0.0)
    assert f.near == 0.001
    assert f.far == 100.0
    assert f.is_ortho is False


@pytest.mark.parametrize("params", PARAMS)
def test_perspective_inverse_round_trip(params):
    m = perspective_matrix(*params)
    inv = perspective_matrix_inv(*params)
    assert np.allclose(inv @ m, np.eye(4), atol=1e-9)
    assert np.allclose(m @ inv, np.eye(4), atol=1e-9)


@pytest.mark.parametrize("params", PARAMS)
def test_orthographic_inverse_round_trip(params):
    m = orthographic_matrix(*params)
    inv = orthographic_matrix_inv(*params)
    assert np.allclose(inv @ m, np.eye(4), atol=1e-9)


@pytest.mark.parametrize("build", [perspective_matrix, orthographic_matrix])
def test_reversed_depth_near_is_one_far_is_zero(build):
    n, f = 0.5, 20.0
    m = build(1.5, 2.5, 0.0, 0.0, n, f)
    assert math.isclose(transform_point(m, Vec3(0.0, 0.0, -n)).z, 1.0, rel_tol=1e-9)
    assert abs(transform_point(m, Vec3(0.0, 0.0, -f)).z) < 1e-9


def test_projection_matrix_dispatch():
    frustum = CameraFrustum(1.5, 2.5, 0.1, 0.2, 0.5, 30.0)
    args = (1.5, 2.5, 0.1, 0.2, 0.5, 30.0)
    assert np.array_equal(projection_matrix(frustum), perspective_matrix(*args))
    assert np.array_equal(projection_matrix_inv(frustum), perspective_matrix_inv(*args))
    frustum.is_ortho = True
    assert np.array_equal(projection_matrix(frustum), orthographic_matrix(*args))
    assert np.array_equal(projection_matrix_inv(frustum), orthographic_matrix_inv(*args))


def test_equal_planes_rejected():
    with pytest.raises(ValueError):
        perspective_matrix(1.0, 1.0, 0.0, 0.0, 5.0, 5.0)
    with pytest.raises(ValueError):
        orthographic_matrix(1.0, 1.0, 0.0, 0.0, 5.0, 5.0)
    with pytest.raises(ValueError):
        orthographic_matrix_inv(1.0, 1.0, 0.0, 0.0, 5.0, 5.0)


def test_perspective_inverse_rejects_zero_plane():
    with pytest.raises(ValueError):
        perspective_matrix_inv(1.0, 1.0, 0.0, 0.0, 0.0, 10.0)
    with pytest.raises(ValueError):
        perspective_matrix_inv(1.0, 1.0, 0.0, 0.0, 1.0, 0.0)


def test_nwd_to_ndc_corners():
    assert nwd_to_ndc(0.0, 0.0, 0.3) == Vec3(-1.0, 1.0, 0.3)
    assert nwd_to_ndc(1.0, 1.0, 0.7) == Vec3(1.0, -1.0, 0.7)
    assert nwd_to_ndc(0.5, 0.5, 0.25) == Vec3(0.0, 0.0, 0.25)


def test_view_point_survives_projection_and_back():
    frustum = CameraFrustum(1.5, 2.5, 0.2, -0.3, 0.5, 20.0)
    point = Vec3(0.7, -1.1, -4.0)
    clip = transform_point(projection_matrix(frustum), point)
    back = transform_point(projection_matrix_inv(frustum), clip)
    assert all(math.isclose(a, b, rel_tol=1e-9) for a, b in zip(back, point))


def test_screen_centre_lies_on_view_axis():
    frustum = CameraFrustum()
    ndc = nwd_to_ndc(0.5, 0.5, 0.5)
    v = transform_point(projection_matrix_inv(frustum), ndc)
    assert abs(v.x) < 1e-12 and abs(v.y) < 1e-12
    assert v.z < 0