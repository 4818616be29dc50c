"""Principal Component Analysis trained through Singular Value Decomposition.

The trainer never forms the covariance matrix. It centers the
n_features x n_samples data matrix and decomposes it directly:

    X_c = U @ diag(sigma) @ V^T

The columns of U are the principal axes and sigma**2 / (n_samples - 1) are
the sample variances along them, i.e. the eigenvalues of the unbiased
covariance estimate.
"""

import logging
from typing import Callable, Optional, Tuple
import numpy as np

from .base import LinearTrainerBase
from ..exceptions import ShapeError
from ..io import Arrayset
from ..machine import LinearMachine
from ..math import svd as lapack_svd

logger = logging.getLogger(__name__)

Decomposition = Callable[[np.ndarray], Tuple[np.ndarray, np.ndarray]]


class SVDPCATrainer(LinearTrainerBase):
    """Trains a LinearMachine to project data onto its principal components.

    After training, the machine subtracts the training mean, projects onto
    the principal axes ordered by decreasing variance, and optionally divides
    each axis by its standard deviation (z-score).

    Attributes:
        zscore_convert: Divide each output axis by its standard deviation.
        svd: Decomposition used for training. Must return the left singular
             vectors and the singular values in non-increasing order.
    """

    def __init__(self, zscore_convert: bool = False, svd: Optional[Decomposition] = None):
        """Initialize the trainer.

        Args:
            zscore_convert: If True, trained machines output unit-variance axes.
            svd: Optional decomposition with the contract of
                 `svdpca.math.svd`. Defaults to LAPACK through numpy.
        """
        self._zscore_convert = bool(zscore_convert)
        self._svd = svd if svd is not None else lapack_svd

    @property
    def zscore_convert(self) -> bool:
        return self._zscore_convert

    @property
    def svd(self) -> Decomposition:
        return self._svd

    def train(self, machine: LinearMachine, arrayset: Arrayset) -> np.ndarray:
        """Train a machine with PCA.

        Args:
            machine: Machine to resize to (n_features, n_sigma) and overwrite.
            arrayset: Flat float64 samples of length n_features.

        Returns:
            Eigenvalues of shape (n_sigma,), n_sigma = min(n_features, n_samples),
            in the order of the machine's output axes (non-increasing).

        Raises:
            ElementTypeError: If the samples are not float64.
            DimensionError: If the samples are not 1-D.
            numpy.linalg.LinAlgError: If the decomposition fails.
        """
        self._check_arrayset(arrayset)

        # checked once, samples are homogeneous from here on
        n_samples = len(arrayset)
        n_features = arrayset.shape[0]
        if n_samples == 0:
            raise ValueError("Cannot train on an empty arrayset")
        if n_samples < 2:
            logger.warning(
                "Training PCA on %d sample(s): eigenvalues are undefined", n_samples
            )
        logger.debug("Training PCA on %d samples of %d features", n_samples, n_features)

        # one sample per column
        data = np.empty((n_features, n_samples), dtype=np.float64)
        for i, sample in enumerate(arrayset):
            data[:, i] = sample

        mean = data.mean(axis=1)
        data -= mean[:, np.newaxis]

        # sigma comes sorted by decreasing magnitude, do not re-sort
        U, sigma = self._svd(data)
        n_sigma = min(n_features, n_samples)
        if U.shape != (n_features, n_sigma):
            raise ShapeError(U.shape, (n_features, n_sigma), 'left singular vectors')
        if sigma.shape != (n_sigma,):
            raise ShapeError(sigma.shape, (n_sigma,), 'singular values')

        with np.errstate(divide='ignore', invalid='ignore'):
            eigenvalues = sigma ** 2 / (n_samples - 1)

        # all fallible steps are done, commit to the machine
        machine.resize(n_features, n_sigma)
        machine.set_input_subtraction(mean)
        machine.set_input_division(1.0)
        machine.set_biases(0.0)
        machine.set_weights(U.T)

        if self._zscore_convert:
            machine.set_input_division(np.sqrt(eigenvalues), per_output=True)

        if logger.isEnabledFor(logging.DEBUG):
            total = eigenvalues.sum()
            leading = eigenvalues[0] / total if total > 0 else 0.0
            logger.debug(
                "PCA trained: %d components, total variance %g, first axis %.1f%%",
                n_sigma, total, 100.0 * leading,
            )

        return eigenvalues

    def __repr__(self) -> str:
        return f"SVDPCATrainer(zscore_convert={self._zscore_convert})"
