"""
Tests for QR decomposition and QR-based solves.

Validates:
    - Q·R ≈ A and QᴴQ ≈ I for every method
    - R upper-triangular and equal to numpy's R up to row phases
    - Method support per scalar kind (Givens is real only)
    - Gram-Schmidt pass limit and dependent columns
    - Default method selection
"""

import numpy as np
import pytest

from pylinalg import qr
from pylinalg.algebra.matrix import Matrix
from pylinalg.core.compute.tolerances import FLOAT64_ILL_CONDITIONED
from pylinalg.core.compute.linalg import (
    gauss_from_qr,
    qr_givens,
    qr_gram_schmidt,
    qr_householder,
)
from pylinalg.core.exceptions import (
    NotSquareError,
    SingularMatrixError,
    SizeMismatchError,
    UnsupportedOperationError,
    ValidationError,
)
from pylinalg.numbers import Complex


METHODS = ['householder', 'givens', 'gram_schmidt']
COMPLEX_METHODS = ['householder', 'gram_schmidt']


# ═══════════════════════════════════════════════════════════════════════
# Kernels
# ═══════════════════════════════════════════════════════════════════════


class TestKernels:

    @pytest.mark.parametrize("kernel", [qr_householder, qr_givens, qr_gram_schmidt])
    def test_identity(self, kernel):
        result = kernel(Matrix.identity(2))
        assert result.Q == Matrix.identity(2)
        assert result.R == Matrix.identity(2)

    @pytest.mark.parametrize("kernel", [qr_householder, qr_givens, qr_gram_schmidt])
    def test_not_square(self, kernel):
        with pytest.raises(NotSquareError):
            kernel(Matrix(2, 3))

    def test_householder_leaves_triangular_input(self):
        A = Matrix.from_rows([[2, 1], [0, 3]])
        result = qr_householder(A)
        assert result.Q == Matrix.identity(2)
        assert result.R == A

    def test_givens_skips_zero_entries(self):
        # nothing below the diagonal, so no rotation flips the sign of row 0
        A = Matrix.from_rows([[-1, 0], [0, 1]])
        result = qr_givens(A)
        assert result.Q == Matrix.identity(2)
        assert result.R == A

    def test_givens_rejects_complex(self):
        A = Matrix.from_list([Complex(1, 1), Complex(0, 0), Complex(0, 0), Complex(1, 0)], 2)
        with pytest.raises(UnsupportedOperationError) as exc_info:
            qr_givens(A)
        assert exc_info.value.operation == 'givens'
        assert exc_info.value.scalar_type == 'Complex'

    def test_givens_checks_kind_before_shape(self):
        A = Matrix(2, 3, Complex)
        with pytest.raises(UnsupportedOperationError):
            qr_givens(A)

    def test_gram_schmidt_dependent_column(self):
        A = Matrix.from_rows([[1, 0], [1, 0]])
        with pytest.raises(SingularMatrixError) as exc_info:
            qr_gram_schmidt(A)
        assert exc_info.value.pivot_index == 1

    def test_gram_schmidt_pass_limit(self, well_conditioned):
        A = Matrix.from_array(well_conditioned)
        with pytest.warns(RuntimeWarning, match="did not settle"):
            result = qr_gram_schmidt(A, reortho_epsilon=1e-300, max_passes=1)
        assert result.passes == (1,) * 6
        # column 0 has nothing to project against
        assert len(result.warnings) == 5

    def test_gram_schmidt_records_passes(self, well_conditioned):
        result = qr_gram_schmidt(Matrix.from_array(well_conditioned))
        assert len(result.passes) == 6
        assert result.passes[0] == 1
        assert all(p >= 1 for p in result.passes)
        assert result.warnings == ()

    def test_gauss_mismatched_rhs(self):
        with pytest.raises(SizeMismatchError):
            gauss_from_qr(Matrix.identity(2), Matrix.identity(2), Matrix(1, 3))


# ═══════════════════════════════════════════════════════════════════════
# decompose()
# ═══════════════════════════════════════════════════════════════════════


class TestDecompose:

    @pytest.mark.parametrize("method", METHODS)
    def test_reconstruction(self, well_conditioned, method):
        result = qr.decompose(well_conditioned, method)
        Q = result.Q.to_array()
        R = result.R.to_array()

        np.testing.assert_allclose(Q @ R, well_conditioned, atol=1e-10)
        np.testing.assert_allclose(Q.T @ Q, np.eye(6), atol=1e-10)
        np.testing.assert_allclose(np.tril(R, k=-1), 0.0, atol=1e-10)
        assert result.residual_norm < 1e-10
        assert result.orthogonality_error < 1e-10
        assert result.method == method

    @pytest.mark.parametrize("method", METHODS)
    def test_matches_numpy_up_to_sign(self, well_conditioned, method):
        _, R_ref = np.linalg.qr(well_conditioned)
        result = qr.decompose(well_conditioned, method)
        np.testing.assert_allclose(
            np.abs(result.R.to_array()), np.abs(R_ref), atol=1e-10
        )

    @pytest.mark.parametrize("method", COMPLEX_METHODS)
    def test_complex(self, complex_well_conditioned, method):
        result = qr.decompose(complex_well_conditioned, method)
        Q = result.Q.to_array()
        R = result.R.to_array()

        np.testing.assert_allclose(Q @ R, complex_well_conditioned, atol=1e-10)
        np.testing.assert_allclose(Q.conj().T @ Q, np.eye(5), atol=1e-10)
        assert result.info['scalar_type'] == 'Complex'

    def test_complex_givens_rejected(self, complex_well_conditioned):
        with pytest.raises(UnsupportedOperationError):
            qr.decompose(complex_well_conditioned, 'givens')

    def test_default_method(self, well_conditioned):
        result = qr.decompose(well_conditioned)
        assert result.method == 'gram_schmidt'
        assert len(result.passes) == 6
        assert result.info['passes'] == result.passes

    def test_householder_has_no_passes(self, well_conditioned):
        result = qr.decompose(well_conditioned, 'householder')
        assert result.passes == ()
        assert 'passes' not in result.info

    def test_unknown_method(self, well_conditioned):
        with pytest.raises(ValidationError, match="unknown QR method"):
            qr.decompose(well_conditioned, 'cholesky')

    def test_not_square(self):
        with pytest.raises(NotSquareError):
            qr.decompose(np.ones((3, 2)), 'householder')

    def test_pass_limit_surfaces_in_result(self, well_conditioned):
        with pytest.warns(RuntimeWarning):
            result = qr.decompose(
                well_conditioned, 'gram_schmidt', reortho_epsilon=1e-300, max_passes=1
            )
        assert len(result.warnings) == 5
        assert result.residual_norm < 1e-8

    def test_timing_sections(self, well_conditioned):
        result = qr.decompose(well_conditioned, 'givens')
        assert 'factorization' in result.timing
        assert 'residual' in result.timing
        assert result.backend_name == 'givens'

    def test_summary(self, well_conditioned):
        summary = qr.decompose(well_conditioned, 'householder').summary()
        assert "QR Decomposition Results" in summary
        assert "householder" in summary


# ═══════════════════════════════════════════════════════════════════════
# Solving
# ═══════════════════════════════════════════════════════════════════════


class TestSolve:

    @pytest.mark.parametrize("method", METHODS)
    def test_matches_numpy(self, well_conditioned, rng, method):
        b = rng.standard_normal(6)
        result = qr.solve(well_conditioned, b, method)
        np.testing.assert_allclose(
            result.to_array(), np.linalg.solve(well_conditioned, b), rtol=1e-9
        )
        assert result.residual_norm < 1e-10
        assert result.method == method

    def test_default_solve_method(self, well_conditioned):
        result = qr.solve(well_conditioned, np.ones(6))
        assert result.method == 'householder'

    def test_complex(self, complex_well_conditioned, rng):
        b = rng.standard_normal(5) + 1j * rng.standard_normal(5)
        result = qr.solve(complex_well_conditioned, b, 'householder')
        np.testing.assert_allclose(
            result.to_array(), np.linalg.solve(complex_well_conditioned, b), rtol=1e-9
        )

    def test_solve_from_decomposition(self, well_conditioned):
        factors = qr.decompose(well_conditioned, 'givens')
        result = factors.solve(np.arange(6.0))
        assert result.method == 'givens'
        np.testing.assert_allclose(
            result.to_array(), np.linalg.solve(well_conditioned, np.arange(6.0)), rtol=1e-9
        )

    def test_solve_from_factors_without_method(self):
        result = qr.solve_from_factors(Matrix.identity(2), Matrix.identity(2), [3.0, 4.0])
        np.testing.assert_allclose(result.to_array(), [3.0, 4.0])
        assert result.method == 'qr'
        assert result.backend_name == 'qr_substitution'

    def test_rhs_wrong_length(self, well_conditioned):
        with pytest.raises(SizeMismatchError):
            qr.solve(well_conditioned, np.ones(4))

    def test_zero_matrix_householder(self):
        # every layer is skipped, so R comes back all zero
        with pytest.raises(SingularMatrixError) as exc_info:
            qr.solve([[0, 0], [0, 0]], [1, 1], 'householder')
        assert exc_info.value.pivot_index == 1

    def test_solve_from_factors_zero_diagonal(self):
        R = Matrix.from_rows([[1, 2], [0, 0]])
        with pytest.raises(SingularMatrixError) as exc_info:
            qr.solve_from_factors(Matrix.identity(2), R, [1.0, 1.0])
        assert exc_info.value.pivot_index == 1


class TestTolerance:

    @pytest.mark.parametrize("method", METHODS)
    def test_float_within_tolerance(self, well_conditioned, method):
        result = qr.decompose(well_conditioned, method)
        assert result.within_tolerance()
        assert "Within tolerance: True" in result.summary()

    def test_loose_tier_accepts_truncated_passes(self, well_conditioned):
        with pytest.warns(RuntimeWarning):
            result = qr.decompose(
                well_conditioned, 'gram_schmidt', reortho_epsilon=1e-300, max_passes=1
            )
        assert result.within_tolerance(FLOAT64_ILL_CONDITIONED)
