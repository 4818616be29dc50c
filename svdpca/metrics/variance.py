"""Explained variance metrics for trained PCA machines."""

import numpy as np

from ..machine import LinearMachine


def explained_variance_ratio(eigenvalues: np.ndarray) -> np.ndarray:
    """Fraction of the total variance carried by each principal axis.

    Args:
        eigenvalues: Eigenvalues returned by a trainer, shape (n_components,).

    Returns:
        Array of variance ratios, shape (n_components,). All zeros when the
        total variance is zero.
    """
    eigenvalues = np.asarray(eigenvalues, dtype=np.float64)
    total_var = eigenvalues.sum()
    if total_var > 0:
        return eigenvalues / total_var
    return np.zeros_like(eigenvalues)


def cumulative_explained_variance(eigenvalues: np.ndarray) -> np.ndarray:
    """Cumulative explained variance ratio, shape (n_components,)."""
    return np.cumsum(explained_variance_ratio(eigenvalues))


def output_variance(machine: LinearMachine, X: np.ndarray) -> np.ndarray:
    """Per-axis sample variance of the machine outputs.

    Uses the same n - 1 divisor as the trainer's eigenvalues, so for the
    training set it reproduces them (or ones, with z-score conversion).

    Args:
        machine: Trained machine.
        X: Data array of shape (n_samples, n_inputs), n_samples > 1.

    Returns:
        Array of variances, shape (n_outputs,).
    """
    X = np.asarray(X)
    if len(X) < 2:
        raise ValueError(f"Need at least 2 samples to compute a variance, got {len(X)}")
    return np.var(machine(X), axis=0, ddof=1)
