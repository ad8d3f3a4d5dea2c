import pytest

from orbitcam.mat3 import Mat3
from orbitcam.vector import Vec3

IDENTITY = Mat3((Vec3.XAXIS, Vec3.YAXIS, Vec3.ZAXIS))
A = Mat3((Vec3(1, 4, 7), Vec3(2, 5, 8), Vec3(3, 6, 9)))
B = Mat3((Vec3(2, 0, 1), Vec3(-1, 3, 0), Vec3(4, 1, 5)))
C = Mat3((Vec3(0, 1, 1), Vec3(1, 0, 2), Vec3(3, 2, 1)))


def test_entry_access_is_row_then_column():
    assert A[0, 1] == 2
    assert A[1, 0] == 4
    assert A[2, 2] == 9


def test_column_matches_entries():
    for j in range(3):
        col = A.column(j)
        assert [col[i] for i in range(3)] == [A[i, j] for i in range(3)]


def test_identity_is_neutral():
    assert IDENTITY @ A == A
    assert A @ IDENTITY == A


def test_product_is_associative():
    assert (A @ B) @ C == A @ (B @ C)


def test_product_entry_is_row_dot_column():
    prod = A @ B
    for i in range(3):
        row = Vec3(A[i, 0], A[i, 1], A[i, 2])
        for j in range(3):
            assert prod[i, j] == row.dot(B.column(j))


def test_format_identity():
    assert IDENTITY.format() == "1.000 0.000 0.000\n0.000 1.000 0.000\n0.000 0.000 1.000\n"


@pytest.mark.parametrize("index", [(3, 0), (0, 3), (-1, 0)])
def test_out_of_range_entry(index):
    with pytest.raises(IndexError):
        A.__getitem__(index)


def test_out_of_range_column():
    with pytest.raises(IndexError):
        A.column(3)


def test_wrong_column_count():
    with pytest.raises(ValueError):
        Mat3((Vec3.XAXIS, Vec3.YAXIS))