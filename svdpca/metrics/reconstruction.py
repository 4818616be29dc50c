"""Reconstruction error metrics for trained PCA machines."""

import numpy as np

from ..machine import LinearMachine


def reconstruction_error(
    X: np.ndarray,
    machine: LinearMachine,
    metric: str = 'mse',
) -> float:
    """Compute reconstruction error.

    Args:
        X: Original data array of shape (n_samples, n_features).
        machine: Trained machine with orthonormal weight rows.
        metric: Error metric to use:
            - 'mse': Mean Squared Error
            - 'rmse': Root Mean Squared Error
            - 'mae': Mean Absolute Error

    Returns:
        Reconstruction error value.
    """
    X = np.asarray(X, dtype=np.float64)
    X_reconstructed = machine.inverse(machine(X))

    diff = X - X_reconstructed

    if metric == 'mse':
        return np.mean(diff ** 2)
    elif metric == 'rmse':
        return np.sqrt(np.mean(diff ** 2))
    elif metric == 'mae':
        return np.mean(np.abs(diff))
    else:
        raise ValueError(f"Unknown metric: {metric}")


def relative_reconstruction_error(
    X: np.ndarray,
    machine: LinearMachine,
) -> float:
    """Compute relative reconstruction error of the centered data.

    Args:
        X: Original data array of shape (n_samples, n_features).
        machine: Trained machine.

    Returns:
        Relative error: ||X - X_hat|| / ||X - mean||
    """
    X = np.asarray(X, dtype=np.float64)
    X_reconstructed = machine.inverse(machine(X))

    error_norm = np.linalg.norm(X - X_reconstructed, 'fro')
    data_norm = np.linalg.norm(X - machine.input_subtraction, 'fro')

    return error_norm / (data_norm + 1e-10)
