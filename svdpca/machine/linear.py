"""Affine projection machine populated by trainers."""

from typing import Dict, Tuple, Union
import numpy as np

from ..exceptions import DimensionError, NotTrainedError, ShapeError


class LinearMachine:
    """Linear machine computing ``((x - subtraction) / division) @ W.T + b``.

    The division is either a scalar broadcast to every element, a vector
    with one entry per input feature, or a vector with one entry per output
    axis. Per-output division is applied to the projected values, which for
    a linear map is the same as dividing the centered input along each row
    of the weight matrix.

    Attributes:
        weights: Weight matrix (n_outputs x n_inputs).
        biases: Bias vector (n_outputs,).
        input_subtraction: Vector subtracted from inputs (n_inputs,).
        input_division: Scalar or vector dividing the centered inputs.
        division_per_output: True when input_division is indexed by output axis.
    """

    def __init__(self, n_inputs: int = 0, n_outputs: int = 0):
        """Create a machine with zero weights.

        Args:
            n_inputs: Number of input features.
            n_outputs: Number of output axes.
        """
        self.resize(n_inputs, n_outputs)

    @classmethod
    def from_weights(cls, weights: np.ndarray) -> 'LinearMachine':
        """Create a machine sized after `weights` (n_outputs x n_inputs)."""
        weights = np.asarray(weights, dtype=np.float64)
        if weights.ndim != 2:
            raise DimensionError(weights.ndim, 2)
        machine = cls(weights.shape[1], weights.shape[0])
        machine.set_weights(weights)
        return machine

    def resize(self, n_inputs: int, n_outputs: int) -> None:
        """Reallocate every parameter for a new shape.

        Weights, biases and subtraction are reset to zero and the division
        to a scalar one.
        """
        if n_inputs < 0 or n_outputs < 0:
            raise ValueError(f"Invalid machine shape: ({n_inputs}, {n_outputs})")
        self._weights = np.zeros((n_outputs, n_inputs))
        self._biases = np.zeros(n_outputs)
        self._input_subtraction = np.zeros(n_inputs)
        self._input_division: Union[float, np.ndarray] = 1.0
        self._division_per_output = False

    @property
    def shape(self) -> Tuple[int, int]:
        """(n_inputs, n_outputs)"""
        return self._weights.shape[1], self._weights.shape[0]

    @property
    def n_inputs(self) -> int:
        return self._weights.shape[1]

    @property
    def n_outputs(self) -> int:
        return self._weights.shape[0]

    @property
    def weights(self) -> np.ndarray:
        return self._weights

    @property
    def biases(self) -> np.ndarray:
        return self._biases

    @property
    def input_subtraction(self) -> np.ndarray:
        return self._input_subtraction

    @property
    def input_division(self) -> Union[float, np.ndarray]:
        return self._input_division

    @property
    def division_per_output(self) -> bool:
        return self._division_per_output

    def set_weights(self, weights: np.ndarray) -> None:
        weights = np.array(weights, dtype=np.float64)
        if weights.shape != self._weights.shape:
            raise ShapeError(weights.shape, self._weights.shape, 'weights')
        self._weights = weights

    def set_biases(self, biases: Union[float, np.ndarray]) -> None:
        self._biases = self._vector_or_fill(biases, self.n_outputs, 'biases')

    def set_input_subtraction(self, subtraction: Union[float, np.ndarray]) -> None:
        self._input_subtraction = self._vector_or_fill(
            subtraction, self.n_inputs, 'input subtraction'
        )

    def set_input_division(
        self,
        division: Union[float, np.ndarray],
        per_output: bool = False,
    ) -> None:
        """Set the division applied to centered inputs.

        Args:
            division: Scalar, or vector of length n_inputs (per_output=False)
                      or n_outputs (per_output=True).
            per_output: Index a vector division by output axis.
        """
        if np.ndim(division) == 0:
            self._input_division = float(division)
            self._division_per_output = False
            return

        size = self.n_outputs if per_output else self.n_inputs
        what = 'output division' if per_output else 'input division'
        self._input_division = self._vector_or_fill(division, size, what)
        self._division_per_output = per_output

    def forward(self, X: np.ndarray) -> np.ndarray:
        """Apply the machine to one vector or to a batch of row vectors.

        Args:
            X: Input of shape (n_inputs,) or (n_samples, n_inputs).

        Returns:
            Output of shape (n_outputs,) or (n_samples, n_outputs).
        """
        if self.n_inputs == 0 or self.n_outputs == 0:
            raise NotTrainedError("Machine has no inputs or outputs. Resize or train it first.")

        X = np.asarray(X, dtype=np.float64)
        if X.ndim not in (1, 2):
            raise DimensionError(X.ndim, 2)
        if X.shape[-1] != self.n_inputs:
            raise ShapeError(X.shape, X.shape[:-1] + (self.n_inputs,), 'input')

        centered = X - self._input_subtraction
        if self._division_per_output:
            projected = (centered @ self._weights.T) / self._input_division
        else:
            projected = (centered / self._input_division) @ self._weights.T

        return projected + self._biases

    __call__ = forward

    def inverse(self, Y: np.ndarray) -> np.ndarray:
        """Map outputs back to input space.

        Exact on the span of the weights when their rows are orthonormal,
        as they are after PCA training.

        Args:
            Y: Output of shape (n_outputs,) or (n_samples, n_outputs).

        Returns:
            Reconstructed input of shape (n_inputs,) or (n_samples, n_inputs).
        """
        if self.n_inputs == 0 or self.n_outputs == 0:
            raise NotTrainedError("Machine has no inputs or outputs. Resize or train it first.")

        Y = np.asarray(Y, dtype=np.float64) - self._biases
        if self._division_per_output:
            return (Y * self._input_division) @ self._weights + self._input_subtraction
        return (Y @ self._weights) * self._input_division + self._input_subtraction

    def to_dict(self) -> Dict:
        """Convert parameters to a dictionary of copies."""
        return {
            'weights': self._weights.copy(),
            'biases': self._biases.copy(),
            'input_subtraction': self._input_subtraction.copy(),
            'input_division': np.copy(self._input_division),
            'division_per_output': self._division_per_output,
        }

    @classmethod
    def from_dict(cls, params: Dict) -> 'LinearMachine':
        """Rebuild a machine from the output of `to_dict`."""
        machine = cls.from_weights(params['weights'])
        machine.set_biases(params['biases'])
        machine.set_input_subtraction(params['input_subtraction'])
        machine.set_input_division(
            params['input_division'],
            per_output=params.get('division_per_output', False),
        )
        return machine

    def __repr__(self) -> str:
        return f"LinearMachine(n_inputs={self.n_inputs}, n_outputs={self.n_outputs})"

    @staticmethod
    def _vector_or_fill(value, size: int, what: str) -> np.ndarray:
        if np.ndim(value) == 0:
            return np.full(size, float(value))
        value = np.array(value, dtype=np.float64)
        if value.shape != (size,):
            raise ShapeError(value.shape, (size,), what)
        return value
