from collections import namedtuple
from numbers import Integral

import numpy as np

from neuro.errors import DimensionMismatchError, InvalidTopologyError
from neuro.neuron import Neuron
from neuro.nmath import random_weight

LEARNING_RATE = 0.8
MIN_LAYERS = 3  # input layer, at least one hidden layer, output layer
LOG_INTERVAL = 1000

# One training example: input vector and the expected output vector.
TrainingData = namedtuple("TrainingData", ["inputs", "targets"])


class Network(object):

    def __init__(self, sizes, learning_rate=LEARNING_RATE, weight_source=None):
        sizes = list(sizes)
        if len(sizes) < MIN_LAYERS:
            raise InvalidTopologyError(
                "sizes must have at least {0} elements (one input layer, at least one "
                "hidden layer and one output layer), got {1}".format(MIN_LAYERS, len(sizes))
            )
        for size in sizes:
            if not isinstance(size, Integral) or size < 1:
                raise InvalidTopologyError("Layer sizes must be positive integers, got {0!r}".format(size))

        if weight_source is None:
            weight_source = random_weight

        self.num_layers = len(sizes)
        self.sizes = sizes
        self.learning_rate = learning_rate

        # Each neuron of layer i gets one synapse from every neuron of layer i-1
        self.layers = [[Neuron() for _ in range(sizes[0])]]
        for size in sizes[1:]:
            previous = self.layers[-1]
            self.layers.append([Neuron(previous, weight_source) for _ in range(size)])

        # Flat views over the graph; the network is the only owner of both
        self.neurons = [neuron for layer in self.layers for neuron in layer]
        self.synapses = [s for neuron in self.neurons for s in neuron.input_synapses]

    @property
    def input_layer(self):
        return self.layers[0]

    @property
    def hidden_layers(self):
        return self.layers[1:-1]

    @property
    def output_layer(self):
        return self.layers[-1]

    def run(self, inputs):
        """Return the output layer's values for the given input vector."""
        self.propagate_forward(inputs)
        return [neuron.get_output() for neuron in self.output_layer]

    def train(self, training_data, num_rounds, test_data=None,
              log_fn=print, epoch_callback=None, log_interval=LOG_INTERVAL):
        """
        Online stochastic gradient descent.

        - training_data  : [(inputs, targets), ...], visited in the given order
        - num_rounds     : number of epochs
        - test_data      : optional examples scored on every logged epoch
        - log_fn(msg)    : logger (print by default, None to silence)
        - epoch_callback(epoch, metrics, network) : called after every epoch
        """
        if not isinstance(num_rounds, Integral) or num_rounds < 1:
            raise ValueError("num_rounds must be a positive integer, got {0!r}".format(num_rounds))
        if log_interval < 1:
            raise ValueError("log_interval must be at least 1, got {0!r}".format(log_interval))

        if log_fn is None:
            def log_fn(msg):
                pass

        training_data = list(training_data)
        if test_data is not None:
            test_data = list(test_data)

        log_fn("Starting training: {0} examples, {1} epochs, learning rate {2}".format(
            len(training_data), num_rounds, self.learning_rate))

        for j in range(num_rounds):
            for inputs, targets in training_data:
                self.propagate_forward(inputs)
                self.propagate_backward(targets)

            metrics = {"epoch": j + 1, "epochs": num_rounds}
            should_log = (j + 1) % log_interval == 0 or j + 1 == num_rounds

            # test_data is only scored on logged epochs
            if test_data and should_log:
                mse = self.mean_squared_error(test_data)
                correct = self.evaluate(test_data)
                metrics.update({
                    "test_mse": mse,
                    "test_correct": correct,
                    "test_total": len(test_data),
                })
                log_fn("Epoch {0}/{1}: mse={2:.6f}, {3} / {4} within tolerance".format(
                    j + 1, num_rounds, mse, correct, len(test_data)))
            elif should_log:
                log_fn("Epoch {0}/{1} complete".format(j + 1, num_rounds))

            if epoch_callback is not None:
                try:
                    epoch_callback(epoch=j + 1, metrics=metrics, network=self)
                except Exception as e:
                    log_fn(f"[epoch_callback error] {e}")

    def propagate_forward(self, inputs):
        if len(inputs) != len(self.input_layer):
            raise DimensionMismatchError(
                "Input layer contains {0} neurons but {1} inputs were provided".format(
                    len(self.input_layer), len(inputs)))
        for neuron, value in zip(self.input_layer, inputs):
            neuron.set_output(value)

    def propagate_backward(self, targets):
        self._check_targets(targets)
        for neuron, target in zip(self.output_layer, targets):
            output = neuron.get_output()
            neuron.set_delta((output - target) * output * (1 - output))
            neuron.update_input_weights(self.learning_rate)
        # Reading get_delta() here pulls the deltas back from the output layer
        for layer in self.hidden_layers:
            for neuron in layer:
                neuron.update_input_weights(self.learning_rate)

    def mean_squared_error(self, test_data):
        """Mean of the squared output errors over every example and output neuron."""
        errors = []
        for inputs, targets in test_data:
            self.run(inputs)
            self._check_targets(targets)
            errors.extend(n.calculate_error(t) for n, t in zip(self.output_layer, targets))
        if not errors:
            raise ValueError("mean_squared_error needs at least one example")
        return float(np.mean(errors))

    def evaluate(self, test_data, tolerance=0.1):
        """Number of examples whose outputs all lie within tolerance of the targets."""
        correct = 0
        for inputs, targets in test_data:
            outputs = self.run(inputs)
            self._check_targets(targets)
            correct += int(all(abs(o - t) <= tolerance for o, t in zip(outputs, targets)))
        return correct

    def _check_targets(self, targets):
        if len(targets) != len(self.output_layer):
            raise DimensionMismatchError(
                "Output layer contains {0} neurons but {1} targets were provided".format(
                    len(self.output_layer), len(targets)))

    def __repr__(self):
        return "Network(sizes={0}, learning_rate={1})".format(self.sizes, self.learning_rate)
