"""An abstract matrix interface and a handful of vector operations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence, Tuple

import numpy as np


def _vectors(x: Sequence[float], y: Sequence[float]) -> Tuple[np.ndarray, np.ndarray]:
    xa = np.asarray(x, dtype=np.float64)
    ya = np.asarray(y, dtype=np.float64)
    if xa.shape != ya.shape:
        raise ValueError(f"vector shapes differ: {xa.shape} and {ya.shape}")
    return xa, ya


class Matrix(ABC):
    """A linear operator known only through its matrix-vector product."""

    def __init__(self, rows: int, cols: int) -> None:
        self.rows = rows
        self.cols = cols

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    @abstractmethod
    def mvp(self, x: np.ndarray) -> np.ndarray:
        """Return the product A x."""

    def __matmul__(self, x: Sequence[float]) -> np.ndarray:
        vec = np.asarray(x, dtype=np.float64)
        if vec.shape != (self.cols,):
            raise ValueError(f"expected a vector of length {self.cols}")
        return np.asarray(self.mvp(vec), dtype=np.float64)


def axpy(a: float, x: Sequence[float], y: Sequence[float]) -> np.ndarray:
    """Return a * x + y."""
    xa, ya = _vectors(x, y)
    return ya + a * xa


def axpby(a: float, x: Sequence[float], b: float, y: Sequence[float]) -> np.ndarray:
    """Return a * x + b * y."""
    xa, ya = _vectors(x, y)
    return a * xa + b * ya


def dot(x: Sequence[float], y: Sequence[float]) -> float:
    """Euclidean inner product of x and y."""
    xa, ya = _vectors(x, y)
    return float(np.dot(xa, ya))