"""Principal Component Analysis trained through Singular Value Decomposition."""

from .exceptions import (
    SVDPCAError,
    ElementTypeError,
    DimensionError,
    ShapeError,
    NotTrainedError,
)
from .io import Arrayset, ElementType
from .machine import LinearMachine
from .trainer import SVDPCATrainer

__version__ = '0.1.0'

__all__ = [
    'SVDPCAError',
    'ElementTypeError',
    'DimensionError',
    'ShapeError',
    'NotTrainedError',
    'Arrayset',
    'ElementType',
    'LinearMachine',
    'SVDPCATrainer',
]
