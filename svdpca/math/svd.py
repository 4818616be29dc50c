"""Thin singular value decomposition backed by LAPACK through numpy."""

from typing import Tuple
import numpy as np

from ..exceptions import DimensionError, ElementTypeError


def _check_matrix(A: np.ndarray) -> np.ndarray:
    A = np.asarray(A)
    if A.ndim != 2:
        raise DimensionError(A.ndim, 2)
    if not np.issubdtype(A.dtype, np.floating):
        raise ElementTypeError(A.dtype, np.dtype(np.float64))
    return A


def svd(A: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Compute the left singular vectors and singular values of a matrix.

    LAPACK returns the singular values sorted by decreasing magnitude, so
    callers can rely on that order without sorting.

    Args:
        A: Real matrix of shape (M, N).

    Returns:
        U: Left singular vectors, shape (M, min(M, N)), orthonormal columns.
        sigma: Singular values, shape (min(M, N),), non-increasing.

    Raises:
        numpy.linalg.LinAlgError: If the decomposition does not converge.
    """
    A = _check_matrix(A)
    U, sigma, _ = np.linalg.svd(A, full_matrices=False, compute_uv=True)
    return U, sigma


def svd_values(A: np.ndarray) -> np.ndarray:
    """Compute only the singular values of a matrix (non-increasing)."""
    A = _check_matrix(A)
    return np.linalg.svd(A, compute_uv=False)
