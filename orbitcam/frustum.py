"""Camera frustums, projection matrices and normalised device coordinates.

Normalised device coordinates (NDC) are not defined the same way by every
graphics interface.  The conventions used here are:

* ``REVERSED_Y``: the origin of NDC.xy is the top-left corner.
* ``REVERSED_Z``: depth is 1 on the near plane and 0 on the far plane.
* ``Z_ZERO_ONE``: NDC.z ranges over [0, 1] instead of [-1, 1].

Normalised window and depth coordinates (NWD) always range over [0, 1]^3,
with (0, 0) at the top-left corner of the window.

All matrices are 4x4 numpy arrays indexed ``m[row, column]``.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from orbitcam.geometry import Plane
from orbitcam.vector import Vec3

REVERSED_Y = False
REVERSED_Z = True
Z_ZERO_ONE = True


@dataclass(frozen=True)
class Frustum:
    """A general frustum bounded by six planes."""

    l: Plane
    r: Plane
    t: Plane
    b: Plane
    n: Plane
    f: Plane


@dataclass
class CameraFrustum:
    """A frustum described by a few scalars.

    ``aspect_x`` and ``aspect_y`` are the focal length over the sensor width
    and height; ``shift_x`` and ``shift_y`` shift the lens axis off the sensor
    centre.  For an orthographic frustum these are reinterpreted as scales
    and offsets.
    """

    aspect_x: float = 2.0
    aspect_y: float = 2.0
    shift_x: float = 0.0
    shift_y: float = 0.0
    near: float = 0.001
    far: float = 100.0
    is_ortho: bool = False


def nwd_to_ndc(x: float, y: float, depth: float) -> Vec3:
    """Convert normalised window and depth coordinates to NDC."""
    ndc_x = 2.0 * x - 1.0
    ndc_y = 2.0 * y - 1.0 if REVERSED_Y else 1.0 - 2.0 * y
    ndc_z = depth if Z_ZERO_ONE else 2.0 * depth - 1.0
    return Vec3(ndc_x, ndc_y, ndc_z)


def _y_sign() -> float:
    return -1.0 if REVERSED_Y else 1.0


def _require_distinct(n: float, f: float) -> None:
    if n == f:
        raise ValueError("near and far planes must differ")


def projection_matrix(frustum: CameraFrustum) -> np.ndarray:
    """View to clip matrix of the frustum."""
    build = orthographic_matrix if frustum.is_ortho else perspective_matrix
    return build(
        frustum.aspect_x,
        frustum.aspect_y,
        frustum.shift_x,
        frustum.shift_y,
        frustum.near,
        frustum.far,
    )


def projection_matrix_inv(frustum: CameraFrustum) -> np.ndarray:
    """Clip to view matrix of the frustum."""
    build = orthographic_matrix_inv if frustum.is_ortho else perspective_matrix_inv
    return build(
        frustum.aspect_x,
        frustum.aspect_y,
        frustum.shift_x,
        frustum.shift_y,
        frustum.near,
        frustum.far,
    )


def perspective_matrix(ax, ay, sx, sy, n, f) -> np.ndarray:
    """Perspective projection matrix."""
    _require_distinct(n, f)
    ys = _y_sign()

    if Z_ZERO_ONE and REVERSED_Z:
        m22 = n / (f - n)
        m23 = n / (1.0 - n / f)
    elif Z_ZERO_ONE:
        m22 = -1.0 / (1.0 - n / f)
        m23 = -n / (1.0 - n / f)
    elif REVERSED_Z:
        m22 = (1.0 + n / f) / (1.0 - n / f)
        m23 = 2.0 * n / (1.0 - n / f)
    else:
        m22 = -(1.0 + n / f) / (1.0 - n / f)
        m23 = -2.0 * n / (1.0 - n / f)

    return np.array(
        [
            [ax, 0.0, sx, 0.0],
            [0.0, ys * ay, ys * sy, 0.0],
            [0.0, 0.0, m22, m23],
            [0.0, 0.0, -1.0, 0.0],
        ],
        dtype=np.float64,
    )


def perspective_matrix_inv(ax, ay, sx, sy, n, f) -> np.ndarray:
    """Inverse of the perspective projection matrix."""
    if n == 0 or f == 0:
        raise ValueError("near and far planes must be non zero")
    inv_ax = 1.0 / ax
    inv_ay = 1.0 / ay
    inv_n = 1.0 / n
    inv_f = 1.0 / f
    ys = _y_sign()

    if Z_ZERO_ONE and REVERSED_Z:
        m32 = inv_n - inv_f
        m33 = inv_f
    elif Z_ZERO_ONE:
        m32 = inv_f - inv_n
        m33 = inv_n
    elif REVERSED_Z:
        m32 = 0.5 * (inv_n - inv_f)
        m33 = 0.5 * (inv_n + inv_f)
    else:
        m32 = 0.5 * (inv_f - inv_n)
        m33 = 0.5 * (inv_n + inv_f)

    return np.array(
        [
            [inv_ax, 0.0, 0.0, sx * inv_ax],
            [0.0, ys * inv_ay, 0.0, ys * sy * inv_ay],
            [0.0, 0.0, 0.0, -1.0],
            [0.0, 0.0, m32, m33],
        ],
        dtype=np.float64,
    )


def orthographic_matrix(ax, ay, sx, sy, n, f) -> np.ndarray:
    """Orthographic projection matrix."""
    _require_distinct(n, f)
    ys = _y_sign()

    if Z_ZERO_ONE and REVERSED_Z:
        m22 = 1.0 / (f - n)
        m23 = 1.0 / (1.0 - n / f)
    elif Z_ZERO_ONE:
        m22 = -1.0 / (f - n)
        m23 = -n / (f - n)
    elif REVERSED_Z:
        m22 = 2.0 / (f - n)
        m23 = (1.0 + n / f) / (1.0 - n / f)
    else:
        m22 = -2.0 / (f - n)
        m23 = -(1.0 + n / f) / (1.0 - n / f)

    return np.array(
        [
            [ax, 0.0, 0.0, -sx],
            [0.0, ys * ay, 0.0, -ys * sy],
            [0.0, 0.0, m22, m23],
            [0.0, 0.0, 0.0, 1.0],
        ],
        dtype=np.float64,
    )


def orthographic_matrix_inv(ax, ay, sx, sy, n, f) -> np.ndarray:
    """Inverse of the orthographic projection matrix."""
    _require_distinct(n, f)
    inv_ax = 1.0 / ax
    inv_ay = 1.0 / ay
    ys = _y_sign()

    if Z_ZERO_ONE and REVERSED_Z:
        m22 = f - n
        m23 = -f
    elif Z_ZERO_ONE:
        m22 = n - f
        m23 = -n
    elif REVERSED_Z:
        m22 = 0.5 * (f - n)
        m23 = -0.5 * (n + f)
    else:
        m22 = 0.5 * (n - f)
        m23 = -0.5 * (n + f)

    return np.array(
        [
            [inv_ax, 0.0, 0.0, sx * inv_ax],
            [0.0, ys * inv_ay, 0.0, ys * sy * inv_ay],
            [0.0, 0.0, m22, m23],
            [0.0, 0.0, 0.0, 1.0],
        ],
        dtype=np.float64,
    )