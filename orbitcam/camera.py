"""A perspective or orthographic camera with a tracking target, and frustum culling."""

from __future__ import annotations

import itertools
import math
from enum import Enum, IntEnum
from typing import Iterable, Sequence

import numpy as np

from orbitcam.frustum import (
    CameraFrustum,
    nwd_to_ndc,
    projection_matrix,
    projection_matrix_inv,
)
from orbitcam.geometry import Aabb, Ray
from orbitcam.quaternion import Quat
from orbitcam.transform import compose, transform_point
from orbitcam.transform import orbit as orbit_point
from orbitcam.transform import rotate as rotate_vector
from orbitcam.vector import DEG2RAD, Vec3, approx_equal


class Visibility(IntEnum):
    """How much of a bounding box lies inside the view frustum."""

    NONE = 0
    PARTIAL = 1
    FULL = 2


class FovAxis(Enum):
    """Axis along which a field of view is measured."""

    HORIZONTAL = 0
    VERTICAL = 1


class Space(Enum):
    """Coordinate frame in which a translation or rotation is expressed."""

    VIEW = 0
    WORLD = 1


def _check_screen(x: float, y: float) -> None:
    if not (0.0 <= x <= 1.0 and 0.0 <= y <= 1.0):
        raise ValueError("normalised screen coordinates must lie in [0, 1]")


def _check_depth(depth: float) -> None:
    if not 0.0 <= depth <= 1.0:
        raise ValueError("normalised depth must lie in [0, 1]")


def _unit(r: Quat) -> Quat:
    length = r.norm()
    if approx_equal(length, 0.0):
        raise ValueError("rotation quaternion must not be zero")
    return r * (1.0 / length)


class Camera:
    """A camera placed in the world, looking at a target point.

    Without arguments the camera sits at the world origin with identity
    rotation and uses the default frustum.  With ``aspect_ratio`` and ``fov``
    (in degrees) the frustum is set up for that sensor and field of view.
    """

    def __init__(
        self,
        aspect_ratio: float | None = None,
        fov: float | None = None,
        axis: FovAxis = FovAxis.VERTICAL,
    ) -> None:
        self.frustum = CameraFrustum()
        self.rotation: Quat = Quat.identity()
        self.position: Vec3 = Vec3.ZERO
        self.target: Vec3 = Vec3.ZERO
        self._saved_rotation: Quat = Quat.identity()
        self._saved_position: Vec3 = Vec3.ZERO

        if aspect_ratio is None and fov is None:
            return
        if aspect_ratio is None or fov is None:
            raise ValueError("aspect_ratio and fov must be given together")
        if aspect_ratio <= 0 or fov <= 0:
            raise ValueError("aspect_ratio and fov must be positive")
        self._apply_fov(fov, axis, aspect_ratio)

    def _apply_fov(self, fov: float, axis: FovAxis, aspect_ratio: float) -> None:
        focal_ratio = 1.0 / math.tan(fov * DEG2RAD * 0.5)
        if axis == FovAxis.HORIZONTAL:
            self.frustum.aspect_x = focal_ratio
            self.frustum.aspect_y = focal_ratio * aspect_ratio
        else:
            self.frustum.aspect_x = focal_ratio / aspect_ratio
            self.frustum.aspect_y = focal_ratio

    @property
    def near(self) -> float:
        """Near clip distance."""
        return self.frustum.near

    @near.setter
    def near(self, value: float) -> None:
        self.frustum.near = value

    @property
    def far(self) -> float:
        """Far clip distance."""
        return self.frustum.far

    @far.setter
    def far(self, value: float) -> None:
        self.frustum.far = value

    def set_aspect(
        self, aspect_ratio: float, cst_axis: FovAxis = FovAxis.VERTICAL
    ) -> Camera:
        """Change the aspect ratio, keeping the fov along cst_axis."""
        if aspect_ratio <= 0:
            raise ValueError("aspect_ratio must be positive")
        if cst_axis == FovAxis.HORIZONTAL:
            self.frustum.aspect_y = self.frustum.aspect_x * aspect_ratio
        else:
            self.frustum.aspect_x = self.frustum.aspect_y / aspect_ratio
        return self

    def set_fov(self, fov: float, axis: FovAxis = FovAxis.VERTICAL) -> Camera:
        """Change the field of view (degrees), keeping the aspect ratio."""
        aspect_ratio = self.frustum.aspect_y / self.frustum.aspect_x
        self._apply_fov(fov, axis, aspect_ratio)
        return self

    def set_lense_shift(self, shift_x: float, shift_y: float) -> Camera:
        """Shift the lens axis off the sensor centre."""
        self.frustum.shift_x = shift_x
        self.frustum.shift_y = shift_y
        return self

    def set_orthographic(self, is_ortho: bool) -> Camera:
        """Switch between perspective and orthographic projection."""
        self.frustum.is_ortho = is_ortho
        return self

    def translate(self, t: Vec3, coord: Space = Space.VIEW) -> Camera:
        """Move the camera by t, expressed in view or world coordinates."""
        if coord == Space.VIEW:
            self.position = self.position + rotate_vector(t, self.rotation)
        else:
            self.position = self.position + t
        return self

    def _world_rotation(self, r: Quat, coord: Space) -> Quat:
        rot = _unit(r)
        if coord == Space.VIEW:
            rot = Quat.from_vector(rotate_vector(rot.xyz, self.rotation), rot.w)
        return rot

    def rotate(self, r: Quat, coord: Space = Space.VIEW) -> Camera:
        """Rotate the camera about its own centre."""
        rot = self._world_rotation(r, coord)
        self.rotation = compose(self.rotation, rot)
        return self

    def orbit(self, r: Quat, coord: Space = Space.VIEW) -> Camera:
        """Rotate the camera about its target point."""
        rot = self._world_rotation(r, coord)
        self.rotation = compose(self.rotation, rot).normalised()
        self.position = orbit_point(self.position, rot, self.target)
        return self

    def zoom(self, factor: float) -> Camera:
        """Divide the distance between the camera and its target by factor."""
        self.position = self.target + (1.0 / factor) * (self.position - self.target)
        return self

    def view_to_clip(self) -> np.ndarray:
        return projection_matrix(self.frustum)

    def clip_to_view(self) -> np.ndarray:
        return projection_matrix_inv(self.frustum)

    def world_to_view(self) -> np.ndarray:
        return compose(-self.position, -self.rotation).as_matrix()

    def view_to_world(self) -> np.ndarray:
        return compose(self.rotation, self.position).as_matrix()

    def world_to_clip(self) -> np.ndarray:
        return compose(self.world_to_view(), self.view_to_clip())

    def clip_to_world(self) -> np.ndarray:
        return compose(self.clip_to_view(), self.view_to_world())

    def view_ray_at(self, x: float, y: float) -> Ray:
        """Ray from the camera through normalised screen point (x, y), in view space."""
        _check_screen(x, y)
        ndc = nwd_to_ndc(x, y, 0.5)
        return Ray(Vec3.ZERO, transform_point(self.clip_to_view(), ndc))

    def world_ray_at(self, x: float, y: float) -> Ray:
        """Ray from the camera through normalised screen point (x, y), in world space."""
        _check_screen(x, y)
        ndc = nwd_to_ndc(x, y, 0.5)
        return Ray(self.position, transform_point(self.clip_to_world(), ndc))

    def view_coord_at(self, x: float, y: float, depth: float) -> Vec3:
        """View coordinates of a screen point at a normalised depth."""
        _check_screen(x, y)
        _check_depth(depth)
        return transform_point(self.clip_to_view(), nwd_to_ndc(x, y, depth))

    def world_coord_at(self, x: float, y: float, depth: float) -> Vec3:
        """World coordinates of a screen point at a normalised depth."""
        _check_screen(x, y)
        _check_depth(depth)
        return transform_point(self.clip_to_world(), nwd_to_ndc(x, y, depth))

    def save_spatial_state(self) -> None:
        """Remember the current position and rotation."""
        self._saved_rotation = self.rotation
        self._saved_position = self.position

    def restore_spatial_state(self) -> None:
        """Return to the last saved position and rotation."""
        self.rotation = self._saved_rotation
        self.position = self._saved_position


def _clip_flags(points: np.ndarray, pvm: Sequence[Sequence[float]]):
    m = np.asarray(pvm, dtype=np.float64)
    if m.shape != (4, 4):
        raise ValueError("pvm must be a 4x4 matrix")
    homogeneous = np.hstack([points, np.ones((points.shape[0], 1))])
    clip = m @ homogeneous.T
    w = clip[3]
    return clip[:3] > w, clip[:3] < -w


def is_visible(
    vertices: Iterable[Sequence[float]], pvm: Sequence[Sequence[float]]
) -> bool:
    """True unless all vertices lie beyond one same clip plane.

    ``pvm`` is a 4x4 matrix indexed ``m[row, column]``.
    """
    points = np.asarray(list(vertices), dtype=np.float64).reshape(-1, 3)
    if points.shape[0] == 0:
        return False
    above, below = _clip_flags(points, pvm)
    return not bool((above.all(axis=1) | below.all(axis=1)).any())


def visibility(bbox: Aabb, pvm: Sequence[Sequence[float]]) -> Visibility:
    """Classify a bounding box against the clip volume of pvm."""
    corners = np.array(
        list(
            itertools.product(
                (bbox.max.x, bbox.min.x),
                (bbox.max.y, bbox.min.y),
                (bbox.max.z, bbox.min.z),
            )
        ),
        dtype=np.float64,
    )
    above, below = _clip_flags(corners, pvm)
    if (above.all(axis=1) | below.all(axis=1)).any():
        return Visibility.NONE
    return Visibility.PARTIAL if (above | below).any() else Visibility.FULL