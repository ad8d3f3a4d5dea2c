"""Rotations, rigid transforms and 4x4 affine matrices in 3D."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from orbitcam.quaternion import Quat
from orbitcam.vector import Vec3

_UNIT_TOLERANCE = 1e-6


def _require_unit(q: Quat) -> None:
    if not math.isclose(q.norm(), 1.0, rel_tol=_UNIT_TOLERANCE):
        raise ValueError("rotation quaternion must have unit norm")


def rotate(v: Vec3, q: Quat) -> Vec3:
    """Rotate v by the unit quaternion q, i.e. q v q*."""
    _require_unit(q)
    u = q.xyz
    return 2.0 * u.dot(v) * u + (2.0 * q.w * q.w - 1.0) * v + 2.0 * q.w * u.cross(v)


def unrotate(v: Vec3, q: Quat) -> Vec3:
    """Apply the inverse rotation of the unit quaternion q, i.e. q* v q."""
    _require_unit(q)
    u = q.xyz
    return 2.0 * u.dot(v) * u + (2.0 * q.w * q.w - 1.0) * v - 2.0 * q.w * u.cross(v)


def orbit(point: Vec3, q: Quat, pivot: Vec3) -> Vec3:
    """Rotate point by q around pivot."""
    return rotate(point - pivot, q) + pivot


@dataclass(frozen=True)
class RigidTransform:
    """A rotation followed by a translation."""

    rot: Quat = field(default_factory=Quat.identity)
    trans: Vec3 = Vec3.ZERO

    @classmethod
    def identity(cls) -> RigidTransform:
        return cls(Quat.identity(), Vec3.ZERO)

    def inv(self) -> RigidTransform:
        return RigidTransform(-self.rot, -unrotate(self.trans, self.rot))

    def as_matrix(self) -> np.ndarray:
        """The 4x4 affine matrix, indexed ``m[row, column]``."""
        x, y, z, w = self.rot.x, self.rot.y, self.rot.z, self.rot.w
        xx, xy, xz, xw = x * x, x * y, x * z, x * w
        yy, yz, yw = y * y, y * z, y * w
        zz, zw = z * z, z * w
        t = self.trans
        return np.array(
            [
                [1.0 - 2.0 * (yy + zz), 2.0 * (xy - zw), 2.0 * (xz + yw), t.x],
                [2.0 * (xy + zw), 1.0 - 2.0 * (xx + zz), 2.0 * (yz - xw), t.y],
                [2.0 * (xz - yw), 2.0 * (yz + xw), 1.0 - 2.0 * (xx + yy), t.z],
                [0.0, 0.0, 0.0, 1.0],
            ],
            dtype=np.float64,
        )


def compose(a, b):
    """The transform that applies a first, then b.

    Accepts two quaternions, a quaternion and a translation (either order),
    two rigid transforms, or two 4x4 matrices.
    """
    if isinstance(a, Quat) and isinstance(b, Quat):
        return b * a
    if isinstance(a, Quat) and isinstance(b, Vec3):
        return RigidTransform(a, b)
    if isinstance(a, Vec3) and isinstance(b, Quat):
        return RigidTransform(b, rotate(a, b))
    if isinstance(a, RigidTransform) and isinstance(b, RigidTransform):
        return RigidTransform(b.rot * a.rot, rotate(a.trans, b.rot) + b.trans)
    if isinstance(a, np.ndarray) and isinstance(b, np.ndarray):
        if a.shape != (4, 4) or b.shape != (4, 4):
            raise ValueError("matrices must be 4x4")
        return b @ a
    raise TypeError(
        f"cannot compose {type(a).__name__} with {type(b).__name__}"
    )


def transform_point(m: np.ndarray, v: Vec3) -> Vec3:
    """Apply a 4x4 matrix to a point, with perspective division."""
    m = np.asarray(m, dtype=np.float64)
    prod = m[:, 0] * v.x + m[:, 1] * v.y + m[:, 2] * v.z + m[:, 3]
    inv_w = 1.0 / prod[3]
    return Vec3(float(prod[0] * inv_w), float(prod[1] * inv_w), float(prod[2] * inv_w))


def transform_vector4(m: np.ndarray, v: Sequence[float]) -> np.ndarray:
    """Apply a 4x4 matrix to a homogeneous 4-vector."""
    m = np.asarray(m, dtype=np.float64)
    vec = np.asarray(v, dtype=np.float64)
    if vec.shape != (4,):
        raise ValueError("expected a 4 component vector")
    return m @ vec