"""In-memory collection of equally shaped arrays used as training samples.

An Arrayset fixes its element type and per-sample shape with the first
sample it receives, so consumers can check both once instead of per sample.
"""

from enum import Enum
from typing import Iterable, Iterator, List, Optional, Tuple, Union
import numpy as np

from ..exceptions import ElementTypeError, ShapeError


class ElementType(Enum):
    """Element kinds an Arrayset can hold."""
    BOOL = "bool"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    FLOAT128 = "longdouble"
    COMPLEX64 = "complex64"
    COMPLEX128 = "complex128"

    @property
    def dtype(self) -> np.dtype:
        return np.dtype(self.value)

    @classmethod
    def from_dtype(cls, dtype: Union[np.dtype, type, str]) -> 'ElementType':
        """Map a numpy dtype (or anything numpy accepts as one) to an ElementType."""
        # byte order does not change the element kind
        dtype = np.dtype(dtype).newbyteorder('=')
        for member in cls:
            if member.dtype == dtype:
                return member
        raise ElementTypeError(dtype, [m.name for m in cls])


class Arrayset:
    """Ordered collection of samples sharing one element type and shape.

    Attributes:
        element_type: ElementType of every sample, None while empty.
        shape: Shape of every sample, None while empty.
    """

    def __init__(
        self,
        arrays: Optional[Iterable[np.ndarray]] = None,
        element_type: Optional[ElementType] = None,
        shape: Optional[Tuple[int, ...]] = None,
    ):
        """Create an Arrayset.

        Args:
            arrays: Optional initial samples, appended in order.
            element_type: Declared element type. If None, taken from the
                          first sample.
            shape: Declared sample shape. If None, taken from the first sample.
        """
        self._element_type = element_type
        self._shape = tuple(shape) if shape is not None else None
        self._arrays: List[np.ndarray] = []

        if arrays is not None:
            for array in arrays:
                self.append(array)

    @classmethod
    def from_array(cls, data: np.ndarray) -> 'Arrayset':
        """Build an Arrayset from the rows of a stacked array.

        Args:
            data: Array of shape (n_samples, ...). Each entry along the
                  first axis becomes one sample.

        Returns:
            New Arrayset holding copies of the rows.
        """
        data = np.asarray(data)
        if data.ndim < 1:
            raise ShapeError(data.shape, ('n_samples', '...'), 'stacked samples')
        return cls(
            list(data),
            element_type=ElementType.from_dtype(data.dtype),
            shape=data.shape[1:],
        )

    @property
    def element_type(self) -> Optional[ElementType]:
        return self._element_type

    @property
    def shape(self) -> Optional[Tuple[int, ...]]:
        return self._shape

    @property
    def ndim(self) -> Optional[int]:
        return len(self._shape) if self._shape is not None else None

    def append(self, array) -> int:
        """Add a sample to the end of the set.

        Args:
            array: Sample to add. It is copied.

        Returns:
            Index of the new sample.
        """
        array = np.asarray(array)
        array = array.astype(array.dtype.newbyteorder('='), copy=True)
        element_type = ElementType.from_dtype(array.dtype)

        if self._element_type is None:
            self._element_type = element_type
        elif element_type != self._element_type:
            raise ElementTypeError(element_type, self._element_type)

        if self._shape is None:
            self._shape = array.shape
        elif array.shape != self._shape:
            raise ShapeError(array.shape, self._shape, 'sample')

        array.setflags(write=False)
        self._arrays.append(array)
        return len(self._arrays) - 1

    def get(self, index: int) -> np.ndarray:
        """Return sample `index` as a read-only array."""
        return self._arrays[index]

    def __getitem__(self, index: int) -> np.ndarray:
        return self.get(index)

    def __len__(self) -> int:
        return len(self._arrays)

    def __iter__(self) -> Iterator[np.ndarray]:
        return iter(self._arrays)

    def __repr__(self) -> str:
        element_type = self._element_type.name.lower() if self._element_type else None
        return f"Arrayset(n_samples={len(self)}, element_type={element_type}, shape={self._shape})"
