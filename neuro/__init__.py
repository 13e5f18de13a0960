from neuro.errors import (
    DimensionMismatchError,
    InvalidRoleError,
    InvalidTopologyError,
    NeuroError,
    UnsetValueError,
)
from neuro.neural_network import LEARNING_RATE, Network, TrainingData
from neuro.nmath import make_weight_source, random_weight, sigmoid, sigmoid_derivative

__all__ = [
    "DimensionMismatchError",
    "InvalidRoleError",
    "InvalidTopologyError",
    "LEARNING_RATE",
    "Network",
    "NeuroError",
    "TrainingData",
    "UnsetValueError",
    "make_weight_source",
    "random_weight",
    "sigmoid",
    "sigmoid_derivative",
]
