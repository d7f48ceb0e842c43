import pytest

from containerlib.bigint import BigInt
from containerlib.matrix import Matrix, identity, power, transpose


def build(rows):
    matrix = Matrix(len(rows), len(rows[0]) if rows else 0)
    for i, row in enumerate(rows):
        for j, cell in enumerate(row):
            matrix[i][j] = cell
    return matrix


def test_shape_and_fill():
    m = Matrix(2, 3, 7)
    assert m.row_count() == 2
    assert m.col_count() == 3
    assert all(cell == 7 for row in m for cell in row)


def test_empty_matrix():
    m = Matrix()
    assert m.row_count() == 0 and m.col_count() == 0


def test_negative_size_raises():
    with pytest.raises(ValueError):
        Matrix(-1, 2)


def test_cells_are_independent():
    m = Matrix(2, 2, 0)
    m[0][1] = 5
    assert m[1][1] == 0
    assert m[0][1] == 5


def test_add_and_sub_round_trip():
    a = build([[1, 2], [3, 4]])
    b = build([[5, 6], [7, 8]])
    assert (a + b) - b == a
    assert a + b == b + a


def test_add_mismatch_raises():
    with pytest.raises(ValueError):
        Matrix(2, 2) + Matrix(2, 3)
    with pytest.raises(ValueError):
        Matrix(2, 2) - Matrix(3, 2)


def test_equality_different_shapes():
    assert (Matrix(1, 2) == Matrix(2, 1)) is False


def test_negation():
    a = build([[1, -2], [3, 0]])
    assert -a + a == Matrix(2, 2, 0)
    assert -(-a) == a


def test_identity_is_neutral():
    a = build([[1, 2, 3], [4, 5, 6]])
    assert identity(2) * a == a
    assert a * identity(3) == a


def test_multiplication_shape_and_mismatch():
    a = Matrix(2, 3, 1)
    b = Matrix(3, 4, 1)
    product = a * b
    assert product.row_count() == 2 and product.col_count() == 4
    assert all(cell == 3 for row in product for cell in row)
    with pytest.raises(ValueError):
        b * a


def test_scalar_multiplication_both_sides():
    a = build([[1, 2], [3, 4]])
    assert a * 3 == 3 * a
    assert a * 2 == a + a


def test_division():
    assert Matrix(2, 2, 3) / 2 == Matrix(2, 2, 1.5)


def test_transpose_round_trip():
    a = build([[1, 2, 3], [4, 5, 6]])
    t = transpose(a)
    assert t.row_count() == 3 and t.col_count() == 2
    assert t[2][0] == a[0][2]
    assert transpose(t) == a


def test_power():
    a = build([[1, 1], [1, 0]])
    assert power(a, 0) == identity(2)
    assert power(a, 1) == a
    assert power(a, 5) == a * a * a * a * a


def test_power_errors():
    with pytest.raises(ValueError):
        power(Matrix(2, 3), 2)
    with pytest.raises(ValueError):
        power(identity(2), -1)


def test_power_with_bigint_cells():
    ints = build([[1, 1], [1, 0]])
    bigs = build([[BigInt(1), BigInt(1)], [BigInt(1), BigInt(0)]])
    expected = power(ints, 120)
    result = power(bigs, 120)
    for i in range(2):
        for j in range(2):
            assert str(result[i][j]) == str(expected[i][j])


def test_str_float_format():
    assert str(Matrix(1, 1, 1.5)) == "\n     1.50000000\n"


def test_str_layout():
    text = str(Matrix(2, 3, 4))
    lines = text.split("\n")
    assert lines[0] == ""
    assert len(lines) == 4
    assert all(len(line) == 45 for line in lines[1:3])
    assert lines[1].split() == ["4", "4", "4"]