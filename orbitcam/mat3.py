"""3x3 matrices stored as three column vectors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from orbitcam.vector import Vec3


def _check(i: int, name: str) -> int:
    if not isinstance(i, int) or isinstance(i, bool) or not 0 <= i <= 2:
        raise IndexError(f"{name} index {i!r} out of range 0..2")
    return i


@dataclass(frozen=True)
class Mat3:
    """An immutable 3x3 matrix; ``m[i, j]`` is the entry at row i, column j."""

    cols: Tuple[Vec3, Vec3, Vec3]

    def __post_init__(self) -> None:
        cols = tuple(self.cols)
        if len(cols) != 3 or not all(isinstance(c, Vec3) for c in cols):
            raise ValueError("a Mat3 needs exactly three Vec3 columns")
        object.__setattr__(self, "cols", cols)

    def __getitem__(self, index: Tuple[int, int]) -> float:
        if not isinstance(index, tuple) or len(index) != 2:
            raise TypeError("Mat3 entries are addressed as m[row, column]")
        i, j = index
        return self.cols[_check(j, "column")][_check(i, "row")]

    def column(self, j: int) -> Vec3:
        """The j-th column."""
        return self.cols[_check(j, "column")]

    def __matmul__(self, other: Mat3) -> Mat3:
        if not isinstance(other, Mat3):
            return NotImplemented
        a0, a1, a2 = self.cols
        return Mat3(
            tuple(
                a0 * other[0, j] + a1 * other[1, j] + a2 * other[2, j]
                for j in range(3)
            )
        )

    def format(self) -> str:
        """Rows of the matrix, three decimals per entry, one row per line."""
        return "".join(
            " ".join(f"{self[i, j]:.3f}" for j in range(3)) + "\n" for i in range(3)
        )