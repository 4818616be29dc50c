"""Base class for trainers that populate a LinearMachine."""

from abc import ABC, abstractmethod
import numpy as np

from ..exceptions import DimensionError, ElementTypeError
from ..io import Arrayset, ElementType
from ..machine import LinearMachine


class LinearTrainerBase(ABC):
    """Abstract base class for trainers of linear machines.

    Subclasses estimate machine parameters from an Arrayset of flat float64
    samples. Input checks happen once, up front, in `_check_arrayset`.
    """

    element_type = ElementType.FLOAT64
    ndim = 1

    @abstractmethod
    def train(self, machine: LinearMachine, arrayset: Arrayset) -> np.ndarray:
        """Train `machine` on `arrayset`.

        Args:
            machine: Machine to resize and overwrite.
            arrayset: Training samples.

        Returns:
            Per-output statistics computed during training.
        """
        pass

    def _check_arrayset(self, arrayset: Arrayset) -> None:
        """Check element type and rank once for the whole set.

        Raises:
            ElementTypeError: If samples are not of `element_type`.
            DimensionError: If samples are not of rank `ndim`.
            ValueError: If the set has no samples and no declared shape.
        """
        if arrayset.element_type != self.element_type:
            raise ElementTypeError(arrayset.element_type, self.element_type)
        if arrayset.ndim is None:
            raise ValueError("Cannot train on an empty arrayset")
        if arrayset.ndim != self.ndim:
            raise DimensionError(arrayset.ndim, self.ndim)
