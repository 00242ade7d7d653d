"""
network.py
~~~~~~~~~~

A fully-connected feed-forward neural network trained by stochastic
backpropagation, one example at a time.

Every layer keeps its activations in a :class:`~feedforward.vector.Vector`;
each pair of adjacent layers is joined by a weight
:class:`~feedforward.matrix.Matrix` of shape ``(size(i), size(i + 1))`` and
a bias vector of length ``size(i + 1)``. Activations use the logistic
sigmoid.

Training overwrites the layer vectors in place: the output layer first
receives its error terms, then each earlier layer receives the error
propagated back through the weights it feeds. A scratch vector sized to
the widest layer holds the new error terms while the old activations are
still needed for the weight update. When the step finishes every layer is
reset to :data:`~feedforward.vector.ABSENT`.
"""

import logging
from typing import Any, List, Optional, Sequence

import numpy as np

from feedforward.matrix import Matrix
from feedforward.vector import ABSENT, Vector, to_int

logger = logging.getLogger(__name__)

LEARNING_RATE = 0.03


def valid_layer_size(layer_size: Any) -> int:
    """
    Normalize a requested layer size.

    Sizes are truncated to integers and clamped to a minimum of 1, so
    ``-3.7`` and ``0`` both become ``1``. Bad sizes are corrected rather
    than rejected. Truncation wraps into the signed 32-bit range, so
    ``1e12`` becomes negative and is clamped to ``1``; positive sizes below
    ``2 ** 31`` are kept as given and are not clamped from above.
    """
    size = to_int(layer_size)
    if size is None or size < 1:
        return 1
    return size


def as_layer_values(
    values: Any,
    layer_size: int,
    description: str,
    layer_name: str
) -> Optional[np.ndarray]:
    """
    Convert ``values`` to a flat float array of length ``layer_size``.

    Returns None, after logging the mismatch, when the values are not
    numeric or their shape is not ``(layer_size,)``; column vectors and
    nested lists are rejected rather than reshaped.
    """
    try:
        array = np.asarray(values, dtype=np.float64)
    except (TypeError, ValueError):
        logger.error(f"Provided {description} are not numeric")
        return None

    if array.shape != (layer_size,):
        logger.error(
            f"Provided {description} (shape {array.shape}) do not match "
            f"{layer_name} layer size ({layer_size})"
        )
        return None

    return array


def sigmoid(z: np.ndarray) -> np.ndarray:
    """The logistic sigmoid function."""
    return 1.0 / (1.0 + np.exp(-np.clip(z, -500, 500)))


def sigmoid_prime_from_output(a: np.ndarray) -> np.ndarray:
    """Derivative of the sigmoid, given the sigmoid's output ``a``."""
    return a * (1.0 - a)


class NeuralNetwork:
    """
    Linear stack of dense sigmoid layers.

    Args:
        input_size: Number of input nodes
        output_size: Number of output nodes
        hidden_sizes: Sizes of the hidden layers, input side first
        rng: numpy Generator used for weight initialization
    """

    def __init__(
        self,
        input_size: Any,
        output_size: Any,
        hidden_sizes: Optional[Sequence[Any]] = None,
        rng: Optional[np.random.Generator] = None
    ):
        hidden_sizes = list(hidden_sizes) if hidden_sizes is not None else []

        self.sizes: List[int] = (
            [valid_layer_size(input_size)]
            + [valid_layer_size(size) for size in hidden_sizes]
            + [valid_layer_size(output_size)]
        )
        self.layers: List[Vector] = [Vector(size) for size in self.sizes]

        self.weights: List[Matrix] = []
        self.biases: List[Vector] = []

        scratch_size = self.sizes[0]
        for current_size, next_size in zip(self.sizes[:-1], self.sizes[1:]):
            self.weights.append(Matrix(current_size, next_size))
            self.biases.append(Vector(next_size))
            scratch_size = max(scratch_size, next_size)

        # Reused by every training step; never reallocated.
        self._scratch = Vector(scratch_size)

        self._rng = rng if rng is not None else np.random.default_rng()
        self.randomize_weights_and_biases()

        logger.debug(f"Created network with layer sizes {self.sizes}")

    def randomize_weights_and_biases(self) -> None:
        """Draw every weight uniformly from [-2, 2) and zero every bias."""
        for weight_matrix in self.weights:
            weight_matrix.array[...] = (
                4 * self._rng.random(weight_matrix.shape) - 2
            )

        for bias_vector in self.biases:
            bias_vector.array.fill(0.0)

        logger.debug(
            f"Randomized {sum(w.entry_count for w in self.weights)} weights "
            f"and zeroed {sum(len(b) for b in self.biases)} biases"
        )

    def clear_layer_outputs(self) -> None:
        """Reset every node of every layer to ABSENT."""
        for layer in self.layers:
            layer.array.fill(ABSENT)

    def set_input_values(self, input_values: Sequence[float]) -> bool:
        """
        Load ``input_values`` into the input layer.

        Returns:
            bool: True if loaded, False if the values are not a flat
            sequence matching the input layer (nothing is written then)
        """
        input_layer = self.layers[0]

        values = as_layer_values(
            input_values, len(input_layer), "input values", "input"
        )
        if values is None:
            return False

        input_layer.array[:] = values
        return True

    def get_output_values(self) -> List[float]:
        """Return a copy of the output layer."""
        return self.layers[-1].snapshot()

    def calculate_outputs(self) -> None:
        """Propagate the input layer forward through every layer in order."""
        for layer_index in range(len(self.layers) - 1):
            current_layer = self.layers[layer_index].array
            next_layer = self.layers[layer_index + 1].array

            z = (
                self.biases[layer_index].array
                + current_layer @ self.weights[layer_index].array
            )
            next_layer[:] = sigmoid(z)

    def train_weights_and_biases(
        self,
        input_values: Sequence[float],
        expected_output_values: Sequence[float]
    ) -> bool:
        """
        Run one forward and backward pass for a single example and update
        weights and biases in place.

        The output error is ``(expected - actual) * actual * (1 - actual)``
        and parameters move by ``+= LEARNING_RATE * source * error``.

        Args:
            input_values: One value per input node
            expected_output_values: One target per output node

        Returns:
            bool: True if the step ran, False if either argument did not
            match its layer (weights and biases are left untouched)
        """
        output_layer = self.layers[-1]

        expected = as_layer_values(
            expected_output_values,
            len(output_layer),
            "expected output values",
            "output"
        )
        if expected is None:
            return False

        if not self.set_input_values(input_values):
            return False

        self.calculate_outputs()

        actual = output_layer.array
        actual[:] = (expected - actual) * sigmoid_prime_from_output(actual)

        scratch = self._scratch.array

        for layer_index in range(len(self.layers) - 2, -1, -1):
            current_layer = self.layers[layer_index].array
            next_errors = self.layers[layer_index + 1].array
            weights = self.weights[layer_index].array
            biases = self.biases[layer_index].array
            node_count = len(current_layer)

            # Errors for this layer must use the weights before the update.
            scratch[:node_count] = (
                (weights @ next_errors)
                * sigmoid_prime_from_output(current_layer)
            )

            weights += LEARNING_RATE * np.outer(current_layer, next_errors)
            biases += LEARNING_RATE * next_errors

            current_layer[:] = scratch[:node_count]

        self.clear_layer_outputs()
        return True

    def __repr__(self) -> str:
        return f"NeuralNetwork(sizes={self.sizes})"
