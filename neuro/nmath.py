import numpy as np

# Process-wide source for initial weights. Replace it with seed() or inject
# a make_weight_source() callable into Network for reproducible runs.
_rng = np.random.default_rng()


def sigmoid(x):
    return float(1 / (1 + np.exp(-x)))


def sigmoid_derivative(a):
    # a is the already activated value, not the weighted sum
    return a * (1 - a)


def random_weight():
    """Draw an initial weight in [0, 1)."""
    return float(_rng.random())


def seed(value=None):
    """Reseed the process-wide generator used by random_weight()."""
    global _rng
    _rng = np.random.default_rng(value)


def make_weight_source(seed=None):
    """Return an independent random_weight()-like callable with its own seed."""
    rng = np.random.default_rng(seed)

    def weight_source():
        return float(rng.random())

    return weight_source
