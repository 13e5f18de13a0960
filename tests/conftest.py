import itertools

import pytest

from neuro.neural_network import TrainingData


@pytest.fixture
def weight_sequence():
    """Build a weight source that hands out the given weights in order, cycling."""

    def factory(weights):
        values = itertools.cycle(weights)
        return lambda: next(values)

    return factory


@pytest.fixture
def xor_data():
    return [
        TrainingData([1.0, 1.0], [0.0]),
        TrainingData([1.0, 0.0], [1.0]),
        TrainingData([0.0, 1.0], [1.0]),
        TrainingData([0.0, 0.0], [0.0]),
    ]
