"""Exceptions raised by the PCA trainer and its collaborators."""

from typing import Any, Optional


class SVDPCAError(Exception):
    """Base class for all errors raised by this package."""


class ElementTypeError(SVDPCAError, TypeError):
    """Raised when an array or arrayset has an unsupported element type.

    Attributes:
        found: Element type that was observed.
        expected: Element type that was required.
    """

    def __init__(self, found: Any, expected: Any):
        self.found = found
        self.expected = expected
        super().__init__(
            f"Unsupported element type: found {_name(found)}, expected {_name(expected)}"
        )


class DimensionError(SVDPCAError, ValueError):
    """Raised when an array has the wrong number of dimensions.

    Attributes:
        found: Number of dimensions observed.
        expected: Number of dimensions required.
    """

    def __init__(self, found: int, expected: int):
        self.found = found
        self.expected = expected
        super().__init__(
            f"Unsupported number of dimensions: found {found}, expected {expected}"
        )


class ShapeError(SVDPCAError, ValueError):
    """Raised when an array does not have the expected shape."""

    def __init__(self, found: tuple, expected: tuple, what: Optional[str] = None):
        self.found = tuple(found)
        self.expected = tuple(expected)
        prefix = f"{what}: " if what else ""
        super().__init__(
            f"{prefix}shape mismatch: found {self.found}, expected {self.expected}"
        )


class NotTrainedError(SVDPCAError, RuntimeError):
    """Raised when a machine with no inputs or outputs is applied."""


def _name(element_type: Any) -> str:
    # ElementType members and numpy dtypes both print nicely through .name
    return getattr(element_type, 'name', str(element_type)).lower()
