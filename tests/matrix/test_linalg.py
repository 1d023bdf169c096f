"""
Tests for transpose, matrix product, inverse and the LU-based solvers.
"""

import numpy as np
import pytest

from pymatrix import (
    DimensionMismatchError,
    Matrix,
    NotSquareError,
    SingularMatrixError,
    ValidationError,
    allclose,
    condition_number,
    det,
    inverse,
    lu,
    multiply,
    solve,
    sum_elements,
    transpose,
)
from pymatrix.core.compute.tolerances import (
    CPU_FP64,
    ILL_CONDITIONED_THRESHOLD,
    select_tolerance,
)


SHAPES = [(1, 1), (1, 4), (4, 1), (2, 3), (5, 5), (7, 2)]


class TestTranspose:

    def test_concrete(self, a_2x2):
        assert transpose(a_2x2) == Matrix(2, 2, [1, 3, 2, 4])
        assert a_2x2.T == a_2x2.transpose()

    @pytest.mark.parametrize("rows, columns", SHAPES)
    def test_elements(self, random_matrix, rows, columns):
        a = random_matrix(rows, columns)
        t = transpose(a)
        assert t.shape == (columns, rows)
        for i in range(rows):
            for j in range(columns):
                assert t[j, i] == a[i, j]

    def test_row_vector(self):
        t = transpose(Matrix(1, 3, [1, 2, 3]))
        assert t.shape == (3, 1)
        assert t.data == [1.0, 2.0, 3.0]

    @pytest.mark.parametrize("rows, columns", SHAPES)
    def test_involution(self, random_matrix, rows, columns):
        a = random_matrix(rows, columns)
        assert transpose(transpose(a)) == a


class TestMultiply:

    def test_concrete(self, a_2x2, b_2x2):
        expected = Matrix(2, 2, [15, 19, 33, 43])
        assert multiply(a_2x2, b_2x2) == expected
        assert a_2x2 * b_2x2 == expected
        assert a_2x2 @ b_2x2 == expected

    def test_non_square_shapes(self):
        a = Matrix(2, 3, [1, 2, 3, 4, 5, 6])
        b = Matrix(3, 1, [1, 0, -1])
        assert multiply(a, b) == Matrix(2, 1, [-2, -2])

    def test_outer_product(self):
        col = Matrix(3, 1, [1, 2, 3])
        row = Matrix(1, 2, [4, 5])
        assert col * row == Matrix(3, 2, [4, 5, 8, 10, 12, 15])

    def test_matches_definition(self, random_matrix):
        a, b = random_matrix(3, 4), random_matrix(4, 2)
        c = multiply(a, b)
        for i in range(3):
            for j in range(2):
                assert c[i, j] == sum(a[i, k] * b[k, j] for k in range(4))

    @pytest.mark.parametrize("rows, columns", SHAPES)
    def test_identity_property(self, random_matrix, rows, columns):
        a = random_matrix(rows, columns)
        assert multiply(a, Matrix.identity(columns)) == a
        assert multiply(Matrix.identity(rows), a) == a

    def test_transpose_law(self, random_matrix):
        for m, k, n in [(1, 1, 1), (2, 3, 4), (5, 1, 3), (4, 4, 4)]:
            a, b = random_matrix(m, k), random_matrix(k, n)
            assert transpose(multiply(a, b)) == multiply(transpose(b), transpose(a))

    def test_inner_dimension_mismatch(self):
        with pytest.raises(DimensionMismatchError) as exc_info:
            multiply(Matrix(2, 3), Matrix(2, 3))
        assert exc_info.value.operation == 'multiply'

    def test_operator_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            Matrix(2, 3) * Matrix(2, 2)

    def test_unknown_backend(self, a_2x2):
        with pytest.raises(ValidationError, match="Unknown backend"):
            multiply(a_2x2, a_2x2, backend='tpu')

    def test_auto_backend_matches_cpu(self, random_matrix):
        a, b = random_matrix(4, 3), random_matrix(3, 5)
        result = multiply(a, b, backend='auto')
        assert allclose(result, multiply(a, b))


class TestInverse:

    def test_known_2x2(self):
        a = Matrix(2, 2, [4, 7, 2, 6])
        assert allclose(inverse(a), Matrix(2, 2, [0.6, -0.7, -0.2, 0.4]))

    def test_identity_inverse(self):
        assert inverse(Matrix.identity(4)) == Matrix.identity(4)

    def test_method_form(self, a_2x2):
        assert a_2x2.inverse() == inverse(a_2x2)

    def test_one_by_one(self):
        assert inverse(Matrix(1, 1, [4.0])) == Matrix(1, 1, [0.25])

    def test_requires_pivoting(self):
        """Zero in the leading position only works with row interchanges."""
        a = Matrix(2, 2, [0, 1, 1, 0])
        assert inverse(a) == a

    @pytest.mark.parametrize("size", [1, 2, 3, 5, 10])
    def test_round_trip(self, well_conditioned, size):
        a = well_conditioned(size)
        product = multiply(inverse(a), a)
        assert abs(sum_elements(product) - a.rows) < 1e-6
        assert allclose(product, Matrix.identity(size), atol=1e-10)

    def test_round_trip_random_entries(self, rng):
        """Random matrices with entries drawn from [-100, 100] in steps of 0.1."""
        for _ in range(20):
            size = int(rng.integers(1, 11))
            values = rng.integers(-1000, 1001, size=size * size) / 10.0
            a = Matrix(size, size, values)
            cond = condition_number(a)
            if cond > 1e8:
                continue
            product = inverse(a) * a
            assert sum_elements(product) - size < 1e-6
            tol = select_tolerance('cpu_fp64', is_ill_conditioned=cond > ILL_CONDITIONED_THRESHOLD)
            assert allclose(product, Matrix.identity(size), rtol=tol.rtol, atol=max(tol.atol, 1e-9))

    def test_not_square(self):
        with pytest.raises(NotSquareError) as exc_info:
            inverse(Matrix(2, 3))
        assert exc_info.value.shape == (2, 3)

    def test_singular(self, singular_3x3):
        with pytest.raises(SingularMatrixError) as exc_info:
            inverse(singular_3x3)
        assert exc_info.value.pivot_index is not None

    def test_zero_matrix_singular(self):
        with pytest.raises(SingularMatrixError):
            Matrix(2, 2).inverse()

    def test_input_unchanged(self, a_2x2):
        inverse(a_2x2)
        assert a_2x2.data == [1.0, 2.0, 3.0, 4.0]


class TestLU:

    def test_reconstruction(self, well_conditioned):
        a = well_conditioned(4)
        f = lu(a)
        np.testing.assert_allclose(
            f.P @ f.L @ f.U, a.to_numpy(), rtol=CPU_FP64.rtol, atol=CPU_FP64.atol
        )

    def test_singular_reported(self, singular_3x3):
        assert lu(singular_3x3).is_singular

    def test_not_square(self):
        with pytest.raises(NotSquareError):
            lu(Matrix(3, 2))


class TestSolve:

    def test_matches_inverse(self, well_conditioned, rng):
        a = well_conditioned(4)
        b = Matrix.from_array(rng.standard_normal((4, 2)))
        assert allclose(solve(a, b), inverse(a) * b, atol=1e-10)

    def test_known_system(self):
        # 2x + y = 5, x + 3y = 10  ->  x = 1, y = 3
        a = Matrix(2, 2, [2, 1, 1, 3])
        b = Matrix(2, 1, [5, 10])
        assert allclose(solve(a, b), Matrix(2, 1, [1, 3]))

    def test_rhs_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            solve(Matrix.identity(3), Matrix(2, 1))

    def test_singular(self, singular_3x3):
        with pytest.raises(SingularMatrixError):
            solve(singular_3x3, Matrix(3, 1, [1, 2, 3]))

    def test_not_square(self):
        with pytest.raises(NotSquareError):
            solve(Matrix(2, 3), Matrix(2, 1))


class TestDeterminant:

    def test_known(self, a_2x2):
        assert det(a_2x2) == pytest.approx(-2.0, rel=1e-12)

    def test_identity(self):
        assert det(Matrix.identity(5)) == 1.0

    def test_singular_is_zero(self, singular_3x3):
        assert det(singular_3x3) == 0.0

    def test_not_square(self):
        with pytest.raises(NotSquareError):
            det(Matrix(1, 2))


class TestConditionNumber:

    def test_identity(self):
        assert condition_number(Matrix.identity(3)) == pytest.approx(1.0)

    def test_singular(self):
        assert condition_number(Matrix(2, 2)) == float('inf')
