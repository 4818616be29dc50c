"""Subspace alignment metrics for comparing PCA bases.

Principal axes from an SVD are only defined up to sign, so per-axis
comparisons here either take absolute values or flip signs first.
"""

import numpy as np


def _as_columns(U: np.ndarray) -> np.ndarray:
    U = np.asarray(U, dtype=np.float64)
    if U.shape[0] < U.shape[1]:
        U = U.T
    return U


def _as_rows(U: np.ndarray) -> np.ndarray:
    U = np.asarray(U, dtype=np.float64)
    if U.shape[0] > U.shape[1]:
        U = U.T
    return U


def principal_angles(U: np.ndarray, V: np.ndarray) -> np.ndarray:
    """Compute principal angles between two subspaces.

    Zero angles indicate identical directions, pi/2 indicates orthogonality.

    Args:
        U: First basis, shape (n_features, k) or (k, n_features).
        V: Second basis, shape (n_features, k) or (k, n_features).

    Returns:
        Array of principal angles in radians [0, pi/2], sorted ascending.
    """
    U = _as_columns(U)
    V = _as_columns(V)

    # Orthonormalize (in case inputs are not perfectly orthonormal)
    U, _ = np.linalg.qr(U)
    V, _ = np.linalg.qr(V)

    # SVD of U^T @ V gives cos(angles)
    s = np.linalg.svd(U.T @ V, compute_uv=False)
    s = np.clip(s, -1.0, 1.0)

    return np.sort(np.arccos(s))


def subspace_distance(
    U: np.ndarray,
    V: np.ndarray,
    metric: str = 'grassmann',
) -> float:
    """Compute distance between subspaces.

    Args:
        U: First basis.
        V: Second basis.
        metric: Distance metric to use:
            - 'grassmann': Geodesic distance on Grassmann manifold
            - 'chordal': Chordal (Frobenius) distance
            - 'projection': Projection distance (sin of largest angle)

    Returns:
        Distance value (0 = identical subspaces).
    """
    angles = principal_angles(U, V)

    if metric == 'grassmann':
        return np.sqrt(np.sum(angles ** 2))
    elif metric == 'chordal':
        return np.sqrt(np.sum(np.sin(angles) ** 2))
    elif metric == 'projection':
        return np.sin(angles[-1]) if len(angles) > 0 else 0.0
    else:
        raise ValueError(f"Unknown metric: {metric}")


def alignment_score(U: np.ndarray, V: np.ndarray) -> float:
    """Mean cosine of the principal angles, in [0, 1] (1 = same subspace)."""
    return np.mean(np.cos(principal_angles(U, V)))


def component_correlation(
    U: np.ndarray,
    V: np.ndarray,
    match_sign: bool = True,
) -> np.ndarray:
    """Compute cosine similarity between corresponding components.

    Args:
        U: First set of components, shape (k, n_features).
        V: Second set of components, shape (k, n_features).
        match_sign: If True, take absolute value (sign ambiguity in PCA).

    Returns:
        Array of correlations for each component pair.
    """
    U = _as_rows(U)
    V = _as_rows(V)

    k = min(U.shape[0], V.shape[0])
    correlations = np.zeros(k)

    for i in range(k):
        corr = np.dot(U[i], V[i]) / (np.linalg.norm(U[i]) * np.linalg.norm(V[i]) + 1e-10)
        if match_sign:
            corr = np.abs(corr)
        correlations[i] = corr

    return correlations


def sign_align(U: np.ndarray, reference: np.ndarray) -> np.ndarray:
    """Flip rows of `U` so each points the same way as the matching reference row.

    Args:
        U: Components to align, shape (k, n_features).
        reference: Reference components, shape (k, n_features).

    Returns:
        Copy of `U` with rows negated where their dot product with the
        reference is negative.
    """
    U = np.array(U, dtype=np.float64)
    reference = np.asarray(reference, dtype=np.float64)
    if U.shape != reference.shape:
        raise ValueError(f"Shape mismatch: {U.shape} vs {reference.shape}")

    signs = np.sign(np.sum(U * reference, axis=1))
    signs[signs == 0] = 1.0
    return U * signs[:, np.newaxis]
