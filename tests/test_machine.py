"""Unit tests for the linear machine."""

import numpy as np
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from svdpca import DimensionError, LinearMachine, NotTrainedError, ShapeError


def make_machine(n_inputs=4, n_outputs=2, seed=0):
    """Machine with random orthonormal weight rows and non-trivial parameters."""
    np.random.seed(seed)
    Q, _ = np.linalg.qr(np.random.randn(n_inputs, n_outputs))
    machine = LinearMachine.from_weights(Q.T)
    machine.set_input_subtraction(np.random.randn(n_inputs))
    machine.set_biases(np.random.randn(n_outputs))
    return machine


class TestLinearMachine:
    """Tests for shape handling and parameter setters."""

    def test_resize_resets(self):
        machine = make_machine()
        machine.set_input_division(2.0)
        machine.resize(3, 5)

        assert machine.shape == (3, 5)
        assert machine.weights.shape == (5, 3)
        assert np.all(machine.weights == 0)
        assert np.all(machine.biases == 0)
        assert np.all(machine.input_subtraction == 0)
        assert machine.input_division == 1.0

    def test_scalar_biases_broadcast(self):
        machine = LinearMachine(3, 2)
        machine.set_biases(0.5)
        assert np.array_equal(machine.biases, [0.5, 0.5])

    @pytest.mark.parametrize("setter,value", [
        ('set_weights', np.zeros((3, 2))),
        ('set_biases', np.zeros(3)),
        ('set_input_subtraction', np.zeros(2)),
        ('set_input_division', np.ones(2)),
    ])
    def test_setter_shape_checked(self, setter, value):
        machine = LinearMachine(3, 2)
        with pytest.raises(ShapeError):
            getattr(machine, setter)(value)

    def test_output_division_shape_checked(self):
        machine = LinearMachine(3, 2)
        with pytest.raises(ShapeError):
            machine.set_input_division(np.ones(3), per_output=True)

    def test_negative_shape(self):
        with pytest.raises(ValueError):
            LinearMachine(-1, 2)

    def test_from_weights_needs_matrix(self):
        with pytest.raises(DimensionError):
            LinearMachine.from_weights(np.ones(3))


class TestForward:
    """Tests for applying the machine."""

    def test_formula(self):
        machine = make_machine()
        machine.set_input_division(np.array([1., 2., 3., 4.]))
        x = np.random.randn(4)

        expected = ((x - machine.input_subtraction) / machine.input_division) @ machine.weights.T
        assert np.allclose(machine(x), expected + machine.biases)

    def test_per_output_division(self):
        machine = make_machine()
        machine.set_input_division(np.array([2., 4.]), per_output=True)
        x = np.random.randn(4)

        expected = ((x - machine.input_subtraction) @ machine.weights.T) / [2., 4.]
        assert np.allclose(machine(x), expected + machine.biases)

    def test_batch_matches_single(self):
        machine = make_machine()
        X = np.random.randn(10, 4)
        batch = machine(X)
        assert batch.shape == (10, 2)
        assert np.allclose(batch, np.vstack([machine(x) for x in X]))

    def test_wrong_input_size(self):
        with pytest.raises(ShapeError):
            make_machine()(np.zeros(3))

    def test_wrong_input_rank(self):
        with pytest.raises(DimensionError):
            make_machine()(np.zeros((2, 2, 4)))

    def test_empty_machine(self):
        with pytest.raises(NotTrainedError):
            LinearMachine()(np.zeros(0))

    @pytest.mark.parametrize("division,per_output", [
        (3.0, False),
        (np.array([1., 2.]), True),
    ])
    def test_inverse_on_span(self, division, per_output):
        """Inputs in the span of the weights are reconstructed exactly."""
        machine = make_machine()
        machine.set_input_division(division, per_output=per_output)

        X = np.random.randn(5, 2) @ machine.weights + machine.input_subtraction

        assert np.allclose(machine.inverse(machine(X)), X)


class TestSerialization:
    """Tests for dictionary export."""

    @pytest.mark.parametrize("per_output", [False, True])
    def test_dict_round_trip(self, per_output):
        machine = make_machine()
        machine.set_input_division(np.array([2., 3.]) if per_output else 0.5, per_output=per_output)

        restored = LinearMachine.from_dict(machine.to_dict())
        X = np.random.randn(6, 4)

        assert restored.shape == machine.shape
        assert restored.division_per_output == machine.division_per_output
        assert np.allclose(restored(X), machine(X))

    def test_dict_holds_copies(self):
        machine = make_machine()
        params = machine.to_dict()
        params['weights'][:] = 0
        assert not np.all(machine.weights == 0)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
