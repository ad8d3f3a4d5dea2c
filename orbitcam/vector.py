"""Two and three component vectors and a few scalar helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import ClassVar, Iterator

DEG2RAD = math.pi / 180.0


def approx_equal(a: float, b: float) -> bool:
    """Return True when all but the last two significant digits of a and b agree."""
    scaled_diff = (a - b) * 0.01
    return a + scaled_diff == a or b - scaled_diff == b


def clamp(x, low, high):
    """Restrict x to the closed interval [low, high]."""
    if x > high:
        return high
    if x < low:
        return low
    return x


def _check_index(n: int, size: int) -> int:
    if not isinstance(n, int) or isinstance(n, bool) or not 0 <= n < size:
        raise IndexError(f"component index {n!r} out of range 0..{size - 1}")
    return n


@dataclass(frozen=True)
class Vec2:
    """An immutable two component vector."""

    x: float
    y: float

    ZERO: ClassVar[Vec2]
    XAXIS: ClassVar[Vec2]
    YAXIS: ClassVar[Vec2]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __getitem__(self, n: int) -> float:
        return (self.x, self.y)[_check_index(n, 2)]

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, t: float) -> Vec2:
        if not isinstance(t, Real):
            return NotImplemented
        return Vec2(self.x * t, self.y * t)

    def __rmul__(self, t: float) -> Vec2:
        return self.__mul__(t)

    def __truediv__(self, t: float) -> Vec2:
        if not isinstance(t, Real):
            return NotImplemented
        return Vec2(self.x / t, self.y / t)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vec2) -> float:
        """The scalar z component of the 3D cross product."""
        return self.x * other.y - self.y * other.x

    def norm(self) -> float:
        return math.sqrt(self.dot(self))

    def normalized(self) -> Vec2:
        """Unit vector with the same direction; the zero vector is rejected."""
        length = self.norm()
        if length == 0:
            raise ZeroDivisionError("cannot normalise the zero vector")
        return self * (1.0 / length)


Vec2.ZERO = Vec2(0.0, 0.0)
Vec2.XAXIS = Vec2(1.0, 0.0)
Vec2.YAXIS = Vec2(0.0, 1.0)


@dataclass(frozen=True)
class Vec3:
    """An immutable three component vector."""

    x: float
    y: float
    z: float

    ZERO: ClassVar[Vec3]
    XAXIS: ClassVar[Vec3]
    YAXIS: ClassVar[Vec3]
    ZAXIS: ClassVar[Vec3]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, n: int) -> float:
        return (self.x, self.y, self.z)[_check_index(n, 3)]

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, t: float) -> Vec3:
        if not isinstance(t, Real):
            return NotImplemented
        return Vec3(self.x * t, self.y * t, self.z * t)

    def __rmul__(self, t: float) -> Vec3:
        return self.__mul__(t)

    def __truediv__(self, t: float) -> Vec3:
        if not isinstance(t, Real):
            return NotImplemented
        return Vec3(self.x / t, self.y / t, self.z / t)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def norm2(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def norm(self) -> float:
        return math.sqrt(self.norm2())

    def normalized(self) -> Vec3:
        """Unit vector with the same direction; the zero vector is returned as is."""
        length = self.norm()
        return self if length == 0 else self * (1.0 / length)

    def max(self) -> float:
        """Largest component."""
        if self.y > self.x:
            return self.z if self.z > self.y else self.y
        return self.z if self.z > self.x else self.x

    def min(self) -> float:
        """Smallest component."""
        if self.y < self.x:
            return self.z if self.z < self.y else self.y
        return self.z if self.z < self.x else self.x

    def abs(self) -> Vec3:
        """Component-wise absolute value."""
        return Vec3(
            -self.x if self.x < 0 else self.x,
            -self.y if self.y < 0 else self.y,
            -self.z if self.z < 0 else self.z,
        )


Vec3.ZERO = Vec3(0.0, 0.0, 0.0)
Vec3.XAXIS = Vec3(1.0, 0.0, 0.0)
Vec3.YAXIS = Vec3(0.0, 1.0, 0.0)
Vec3.ZAXIS = Vec3(0.0, 0.0, 1.0)