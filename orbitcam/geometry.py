"""Rays, planes, spheres, bounding boxes and a few helpers on them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from orbitcam.quaternion import Quat
from orbitcam.vector import Vec3, approx_equal

_UNIT_TOLERANCE = 1e-6


def _require_unit(v: Vec3, name: str) -> None:
    if not math.isclose(v.norm(), 1.0, rel_tol=_UNIT_TOLERANCE):
        raise ValueError(f"{name} must be a unit vector")


@dataclass(frozen=True)
class Ray:
    """A half line starting at ``start`` and going along ``dir``."""

    start: Vec3
    dir: Vec3


@dataclass(frozen=True)
class Plane:
    """The plane a*x + b*y + c*z + d = 0, with normal (a, b, c)."""

    normal: Vec3
    d: float

    @property
    def a(self) -> float:
        return self.normal.x

    @property
    def b(self) -> float:
        return self.normal.y

    @property
    def c(self) -> float:
        return self.normal.z


@dataclass(frozen=True)
class Sphere:
    center: Vec3
    radius: float


@dataclass(frozen=True)
class Aabb:
    """An axis aligned bounding box."""

    min: Vec3
    max: Vec3

    def __or__(self, other: Aabb) -> Aabb:
        """The smallest box containing both boxes."""
        if not isinstance(other, Aabb):
            return NotImplemented
        lo, hi = self.min, self.max
        return Aabb(
            Vec3(
                other.min.x if other.min.x < lo.x else lo.x,
                other.min.y if other.min.y < lo.y else lo.y,
                other.min.z if other.min.z < lo.z else lo.z,
            ),
            Vec3(
                other.max.x if other.max.x > hi.x else hi.x,
                other.max.y if other.max.y > hi.y else hi.y,
                other.max.z if other.max.z > hi.z else hi.z,
            ),
        )


def plane_from_normal_and_point(normal: Vec3, point: Vec3) -> Plane:
    """The plane with the given normal passing through point."""
    return Plane(normal, -normal.dot(point))


def ray_plane_intersection(ray: Ray, plane: Plane) -> Tuple[Vec3, float]:
    """Homogeneous intersection point ``(xyz, w)``; the point is xyz / w.

    ``w`` is zero when the ray is parallel to the plane.
    """
    alpha = plane.normal.dot(ray.dir)
    beta = -plane.d - plane.normal.dot(ray.start)
    return alpha * ray.start + beta * ray.dir, alpha


def great_circle_rotation(start: Vec3, end: Vec3) -> Quat:
    """Unit quaternion rotating unit vector start onto unit vector end."""
    _require_unit(start, "start")
    _require_unit(end, "end")

    cos_angle = start.dot(end)
    if approx_equal(cos_angle, -1.0):
        return Quat(0.0, 0.0, 1.0, 0.0)

    cos_half_angle = math.sqrt((1.0 + cos_angle) / 2.0)
    if cos_half_angle == 0:
        raise ValueError("start and end are antipodal")
    xyz = start.cross(end) * (0.5 / cos_half_angle)
    return Quat.from_vector(xyz, cos_half_angle)


def triangle_normal(v1: Vec3, v2: Vec3, v3: Vec3) -> Vec3:
    """Unit normal of the triangle (v1, v2, v3), counter-clockwise orientation."""
    return (v2 - v1).cross(v3 - v1).normalized()