"""
Tests for the LU kernels in core/compute/linalg/lu.py.

Validates:
    - Factor reconstruction A == P @ L @ U and triangular structure
    - Pivot convention matches scipy.linalg.lu_factor
    - Zero-pivot detection (raised or reported)
    - Inverse (getri) and solve (getrs) from the factors
    - Determinant and permutation sign
"""

import numpy as np
import pytest
from scipy.linalg import lu_factor

from pymatrix.core.compute.linalg import (
    LUResult,
    lu_cpu,
    lu_inverse_cpu,
    lu_solve_cpu,
)
from pymatrix.core.compute.tolerances import CPU_FP64
from pymatrix.core.exceptions import SingularMatrixError


@pytest.fixture
def A(rng):
    return rng.standard_normal((5, 5)) + 5 * np.eye(5)


class TestFactorization:

    def test_reconstruction(self, A):
        f = lu_cpu(A, check_singular=True)
        np.testing.assert_allclose(f.P @ f.L @ f.U, A, rtol=CPU_FP64.rtol, atol=CPU_FP64.atol)

    def test_permutation_rows(self, A):
        f = lu_cpu(A, check_singular=True)
        np.testing.assert_allclose(A[f.permutation], f.L @ f.U, rtol=CPU_FP64.rtol, atol=CPU_FP64.atol)

    def test_triangular_structure(self, A):
        f = lu_cpu(A, check_singular=True)
        np.testing.assert_array_equal(f.L, np.tril(f.L))
        np.testing.assert_array_equal(np.diag(f.L), np.ones(5))
        np.testing.assert_array_equal(f.U, np.triu(f.U))

    def test_partial_pivoting_bounds_multipliers(self, rng):
        """Partial pivoting keeps every |L[i, j]| <= 1."""
        A = rng.standard_normal((8, 8))
        f = lu_cpu(A, check_singular=False)
        assert np.all(np.abs(f.L) <= 1.0 + 1e-15)

    def test_pivots_match_scipy(self, A):
        f = lu_cpu(A, check_singular=True)
        lu, piv = lu_factor(A)
        np.testing.assert_array_equal(f.piv, piv)
        np.testing.assert_allclose(f.lu, lu, rtol=1e-14)

    def test_input_not_modified(self, A):
        original = A.copy()
        lu_cpu(A, check_singular=True)
        np.testing.assert_array_equal(A, original)

    def test_pivoting_swaps_rows(self):
        """Zero leading entry forces a row interchange."""
        A = np.array([[0.0, 1.0], [1.0, 0.0]])
        f = lu_cpu(A, check_singular=True)
        assert f.permutation_sign == -1.0
        np.testing.assert_array_equal(f.P @ f.L @ f.U, A)


class TestSingular:

    def test_raises_when_checked(self):
        A = np.array([[1.0, 2.0], [2.0, 4.0]])
        with pytest.raises(SingularMatrixError) as exc_info:
            lu_cpu(A, check_singular=True, matrix_name='M')
        assert exc_info.value.matrix_name == 'M'
        assert exc_info.value.pivot_index == 1

    def test_reported_when_unchecked(self):
        A = np.zeros((3, 3))
        f = lu_cpu(A, check_singular=False)
        assert f.is_singular
        assert f.zero_pivot == 0
        assert f.determinant() == 0.0

    def test_inverse_refuses_singular_factors(self):
        f = lu_cpu(np.zeros((2, 2)), check_singular=False)
        with pytest.raises(SingularMatrixError):
            lu_inverse_cpu(f)

    def test_solve_refuses_singular_factors(self):
        f = lu_cpu(np.zeros((2, 2)), check_singular=False)
        with pytest.raises(SingularMatrixError):
            lu_solve_cpu(f, np.ones((2, 1)))


class TestInverseAndSolve:

    def test_inverse(self, A):
        inv = lu_inverse_cpu(lu_cpu(A, check_singular=True))
        np.testing.assert_allclose(inv, np.linalg.inv(A), rtol=1e-10, atol=1e-12)
        assert inv.flags['C_CONTIGUOUS']

    def test_inverse_known_2x2(self):
        A = np.array([[4.0, 7.0], [2.0, 6.0]])
        inv = lu_inverse_cpu(lu_cpu(A, check_singular=True))
        np.testing.assert_allclose(inv, [[0.6, -0.7], [-0.2, 0.4]], rtol=1e-12)

    def test_solve(self, A, rng):
        B = rng.standard_normal((5, 2))
        X = lu_solve_cpu(lu_cpu(A, check_singular=True), B)
        np.testing.assert_allclose(A @ X, B, rtol=1e-10, atol=1e-12)


class TestDeterminant:

    def test_matches_numpy(self, A):
        f = lu_cpu(A, check_singular=True)
        assert f.determinant() == pytest.approx(np.linalg.det(A), rel=1e-12)

    def test_identity(self):
        f = lu_cpu(np.eye(4), check_singular=True)
        assert f.determinant() == 1.0
        assert f.permutation_sign == 1.0

    def test_result_is_frozen(self):
        f = lu_cpu(np.eye(2), check_singular=True)
        assert isinstance(f, LUResult)
        with pytest.raises(AttributeError):
            f.zero_pivot = 1
