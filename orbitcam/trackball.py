"""Virtual trackballs turning pointer positions into rotations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from orbitcam.camera import Camera
from orbitcam.geometry import (
    great_circle_rotation,
    plane_from_normal_and_point,
    ray_plane_intersection,
)
from orbitcam.quaternion import Quat, quat_pow
from orbitcam.vector import Vec3


def screen_trackball(px: float, py: float, width: float, height: float) -> Vec3:
    """Map a pixel to the unit sphere by inverse stereographic projection.

    The screen is scaled to a square and the sphere is tangent to its sides.
    The result is oriented like view coordinates: the screen centre maps
    to (0, 0, 1).
    """
    x = (2.0 * px - width) / width
    y = (height - 2.0 * py) / height
    a = 2.0 / (1.0 + x * x + y * y)
    return Vec3(a * x, a * y, -1.0 + a)


def world_trackball(
    x: float, y: float, center: Vec3, radius: float, camera: Camera
) -> Vec3:
    """Map a normalised screen point to a unit vector on a world-space trackball.

    Returns the direction from the trackball centre to the touched point,
    or the z axis when no intersection exists.
    """
    view_dir = center - camera.position
    length = view_dir.norm()
    if length == 0:
        return Vec3.ZAXIS
    view_dir = view_dir * (1.0 / length)

    nearest = center - radius * view_dir
    tangent_plane = plane_from_normal_and_point(view_dir, nearest)
    ray = camera.world_ray_at(x, y)
    xyz, w = ray_plane_intersection(ray, tangent_plane)
    if w == 0:
        return Vec3.ZAXIS

    touch = xyz * (1.0 / w)
    # Shoot from the pole opposite to nearest towards touch, stopping on the sphere.
    sph_dir = (touch - center) * (1.0 / radius)
    tmp = view_dir.dot(sph_dir)
    s = 2.0 * (tmp - 1.0) / (sph_dir.dot(sph_dir) - 2.0 * tmp + 1.0)
    return view_dir + s * (view_dir - sph_dir)


@dataclass
class ScreenTrackball:
    """Turns pointer drags across the screen into rotations."""

    last_v: Vec3 = Vec3.ZAXIS
    sensitivity: float = 1.0

    def grab(self, px: float, py: float, width: float, height: float) -> None:
        """Start a drag at pixel (px, py)."""
        self.last_v = screen_trackball(px, py, width, height)

    def drag(
        self, px: float, py: float, width: float, height: float
    ) -> Tuple[Quat, bool]:
        """Rotation from the grab point to (px, py), and whether the grab was reset.

        The rotation is singular for nearly antipodal points, so when the
        pointer crosses into the opposite hemisphere the grab point moves to
        the current point and the flag is True.
        """
        v = screen_trackball(px, py, width, height)
        rot = great_circle_rotation(self.last_v, v)
        needs_reset = v.dot(self.last_v) < 0
        if needs_reset:
            self.last_v = v
        return quat_pow(rot, self.sensitivity).normalised(), needs_reset