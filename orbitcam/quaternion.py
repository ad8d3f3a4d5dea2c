"""Quaternions, used mostly to represent rotations in 3D."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

from orbitcam.vector import Vec3


@dataclass(frozen=True)
class Quat:
    """An immutable quaternion x*i + y*j + z*k + w."""

    x: float
    y: float
    z: float
    w: float

    @classmethod
    def identity(cls) -> Quat:
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def from_vector(cls, xyz: Vec3, w: float) -> Quat:
        """Build a quaternion from its vector part and scalar part."""
        return cls(xyz.x, xyz.y, xyz.z, w)

    @property
    def xyz(self) -> Vec3:
        """The vector part."""
        return Vec3(self.x, self.y, self.z)

    def __mul__(self, other):
        if isinstance(other, Quat):
            a_xyz, b_xyz = self.xyz, other.xyz
            xyz = self.w * b_xyz + a_xyz * other.w + a_xyz.cross(b_xyz)
            return Quat.from_vector(xyz, self.w * other.w - a_xyz.dot(b_xyz))
        if isinstance(other, Real):
            return Quat(self.x * other, self.y * other, self.z * other, self.w * other)
        return NotImplemented

    def __rmul__(self, t):
        if isinstance(t, Real):
            return self.__mul__(t)
        return NotImplemented

    def __neg__(self) -> Quat:
        """The conjugate: for a unit quaternion, the inverse rotation."""
        return self.conj()

    def conj(self) -> Quat:
        return Quat(-self.x, -self.y, -self.z, self.w)

    def inv(self) -> Quat:
        return self.conj() * (1.0 / self.dot(self))

    def normalised(self) -> Quat:
        """A unit quaternion with the same direction."""
        return self * (1.0 / self.norm())

    def dot(self, other: Quat) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def norm(self) -> float:
        return math.sqrt(self.dot(self))


def quat_pow(q: Quat, t: float) -> Quat:
    """Raise a unit quaternion to a real power (scales its rotation angle by t)."""
    qw = min(max(q.w, -1.0), 1.0)
    omega = math.acos(qw)
    cto = math.cos(t * omega)
    sto = math.sin(t * omega)
    so = math.sin(omega)
    mult = sto / so if so != 0 else t
    return Quat.from_vector(mult * q.xyz, cto)


def slerp(q0: Quat, q1: Quat, t: float) -> Quat:
    """Spherical linear interpolation from q0 (t=0) to q1 (t=1)."""
    return q0 * quat_pow(q0.inv() * q1, t)