"""Unit tests for the sample container."""

import numpy as np
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from svdpca import (
    Arrayset,
    ElementType,
    ElementTypeError,
    LinearMachine,
    ShapeError,
    SVDPCATrainer,
)


class TestArrayset:
    """Tests for building and reading an Arrayset."""

    def test_from_array(self):
        data = np.random.randn(5, 3)
        arrayset = Arrayset.from_array(data)

        assert len(arrayset) == 5
        assert arrayset.element_type == ElementType.FLOAT64
        assert arrayset.shape == (3,)
        assert arrayset.ndim == 1
        for i, row in enumerate(data):
            assert np.array_equal(arrayset.get(i), row)
            assert np.array_equal(arrayset[i], row)

    def test_first_sample_fixes_type_and_shape(self):
        arrayset = Arrayset()
        assert arrayset.element_type is None
        assert arrayset.ndim is None

        arrayset.append(np.zeros((2, 2), dtype=np.int16))
        assert arrayset.element_type == ElementType.INT16
        assert arrayset.shape == (2, 2)
        assert arrayset.ndim == 2

    def test_type_mismatch(self):
        arrayset = Arrayset([np.zeros(3)])
        with pytest.raises(ElementTypeError) as excinfo:
            arrayset.append(np.zeros(3, dtype=np.int64))
        assert excinfo.value.found == ElementType.INT64
        assert excinfo.value.expected == ElementType.FLOAT64
        assert "int64" in str(excinfo.value)

    def test_shape_mismatch(self):
        arrayset = Arrayset([np.zeros(3)])
        with pytest.raises(ShapeError):
            arrayset.append(np.zeros(4))

    def test_declared_type(self):
        arrayset = Arrayset(element_type=ElementType.FLOAT32, shape=(2,))
        with pytest.raises(ElementTypeError):
            arrayset.append(np.zeros(2))

    def test_samples_are_copies(self):
        """Changing the source array does not change the stored sample."""
        sample = np.ones(3)
        arrayset = Arrayset([sample])
        sample[0] = 5.0

        assert arrayset[0][0] == 1.0
        with pytest.raises(ValueError):
            arrayset[0][0] = 2.0

    def test_iteration_order(self):
        data = np.arange(12, dtype=np.float64).reshape(4, 3)
        arrayset = Arrayset.from_array(data)
        assert np.array_equal(np.vstack(list(arrayset)), data)

    def test_big_endian_samples(self):
        """Non-native byte order is stored natively and trains as float64."""
        data = np.arange(6, dtype='>f8').reshape(3, 2)
        arrayset = Arrayset.from_array(data)

        assert arrayset.element_type == ElementType.FLOAT64
        assert arrayset[0].dtype == np.dtype(np.float64)
        assert np.array_equal(np.vstack(list(arrayset)), data)

        machine = LinearMachine()
        SVDPCATrainer().train(machine, arrayset)
        assert np.allclose(machine.input_subtraction, [2., 3.])


class TestElementType:
    """Tests for dtype mapping."""

    @pytest.mark.parametrize("dtype,expected", [
        (np.float64, ElementType.FLOAT64),
        (np.float32, ElementType.FLOAT32),
        (np.uint8, ElementType.UINT8),
        (np.bool_, ElementType.BOOL),
        (np.complex128, ElementType.COMPLEX128),
        (np.dtype('>i4'), ElementType.INT32),
    ])
    def test_from_dtype(self, dtype, expected):
        assert ElementType.from_dtype(dtype) == expected
        assert expected.dtype == np.dtype(dtype).newbyteorder('=')

    def test_unsupported(self):
        with pytest.raises(ElementTypeError):
            ElementType.from_dtype(np.dtype('U5'))


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
