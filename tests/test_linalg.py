import numpy as np
import pytest

from orbitcam.linalg import Matrix, axpby, axpy, dot


class _Diagonal(Matrix):
    def __init__(self, diag):
        super().__init__(len(diag), len(diag))
        self.diag = np.asarray(diag, dtype=float)

    def mvp(self, x):
        return self.diag * x


def test_abstract_matrix_cannot_be_built():
    with pytest.raises(TypeError):
        Matrix(2, 2)


def test_matmul_uses_mvp():
    m = _Diagonal([2.0, 3.0])
    assert m.shape == (2, 2)
    result = Matrix.__matmul__(m, [1.0, 1.0])
    assert np.array_equal(result, np.array([2.0, 3.0]))
    assert dot(result, [1.0, 1.0]) == 5.0


def test_matmul_checks_length():
    m = _Diagonal([1.0, 1.0])
    with pytest.raises(ValueError):
        Matrix.__matmul__(m, [1.0, 2.0, 3.0])


def test_axpy_value():
    assert np.array_equal(axpy(2.0, [1.0, 2.0], [3.0, 4.0]), np.array([5.0, 8.0]))


def test_axpy_does_not_modify_inputs():
    y = np.array([1.0, 1.0])
    axpy(3.0, [1.0, 1.0], y)
    assert np.array_equal(y, np.array([1.0, 1.0]))


def test_axpy_with_zero_scale_is_y():
    y = [0.5, -2.0, 7.0]
    assert np.array_equal(axpy(0.0, [9.0, 9.0, 9.0], y), np.array(y))


def test_axpby_value():
    assert np.array_equal(axpby(2.0, [1.0, 2.0], -1.0, [3.0, 4.0]), np.array([-1.0, 0.0]))


def test_axpby_generalises_axpy():
    x, y = [1.0, -2.0, 3.0], [4.0, 0.5, -6.0]
    assert np.allclose(axpby(1.5, x, 1.0, y), axpy(1.5, x, y))


def test_dot_value_and_symmetry():
    assert dot([1.0, 2.0], [3.0, 4.0]) == 11.0
    assert dot([1.0, -5.0, 2.0], [0.5, 2.0, 3.0]) == dot([0.5, 2.0, 3.0], [1.0, -5.0, 2.0])


def test_dot_of_orthogonal_vectors_is_zero():
    assert dot([1.0, 0.0, 0.0], [0.0, 1.0, 0.0]) == 0.0


@pytest.mark.parametrize("op", [lambda: dot([1.0], [1.0, 2.0]), lambda: axpy(1.0, [1.0], [1.0, 2.0])])
def test_length_mismatch(op):
    with pytest.raises(ValueError):
        op()