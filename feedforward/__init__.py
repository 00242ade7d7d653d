"""
feedforward package
~~~~~~~~~~~~~~~~~~~

Minimal fully-connected feed-forward neural network library.
Contains bounds-checked vector and matrix containers, the network with
forward propagation and single-example backpropagation, and logging setup.
"""

from feedforward.vector import ABSENT, Vector, is_absent
from feedforward.matrix import Matrix
from feedforward.network import LEARNING_RATE, NeuralNetwork
from feedforward.logging_config import configure_logging

__version__ = "1.0.0"

__all__ = [
    'ABSENT',
    'LEARNING_RATE',
    'Matrix',
    'NeuralNetwork',
    'Vector',
    'configure_logging',
    'is_absent',
]
