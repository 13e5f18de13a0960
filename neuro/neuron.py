from neuro.errors import InvalidRoleError, UnsetValueError
from neuro.memo import MemoizedValue
from neuro.nmath import sigmoid, sigmoid_derivative
from neuro.synapse import Synapse


class Neuron(object):
    """
    Node of the network graph.

    The role of a neuron is fixed by its synapses:
      - no input synapses  -> input neuron, its output is set from outside
      - no output synapses -> output neuron, its delta is set from outside
    Every other output/delta is derived from the neighbours and memoized
    until an upstream value changes. Derived deltas are only refreshed by
    set_delta(), not by set_output().
    """

    def __init__(self, input_neurons=(), weight_source=None):
        self.input_synapses = []
        self.output_synapses = []

        for input_neuron in input_neurons:
            synapse = Synapse(input_neuron, self, weight_source)
            self.input_synapses.append(synapse)
            input_neuron.output_synapses.append(synapse)

        self._output = MemoizedValue(self._compute_output)
        self._delta = MemoizedValue(self._compute_delta)

    @property
    def is_input(self):
        return not self.input_synapses

    @property
    def is_output(self):
        return not self.output_synapses

    # ------------------------------------------------------------------
    # Forward: output
    # ------------------------------------------------------------------

    def get_output(self):
        return self._output.read()

    def set_output(self, value):
        if self.input_synapses:
            raise InvalidRoleError("Cannot set output on a neuron in a non-input layer")
        self._output.set(value)
        self._reset_dependent_outputs()

    def _compute_output(self):
        if not self.input_synapses:
            raise UnsetValueError("The output for this input-layer neuron has not been set")
        # logistic sigmoid of the weighted sum of inputs
        return sigmoid(sum(s.weight * s.input_neuron.get_output() for s in self.input_synapses))

    def _reset_dependent_outputs(self):
        # An empty cell never has a filled cell downstream of it, so the walk
        # can stop there and still clear the whole transitive closure.
        for synapse in self.output_synapses:
            neuron = synapse.output_neuron
            if neuron._output.has_value:
                neuron._output.invalidate()
                neuron._reset_dependent_outputs()

    # ------------------------------------------------------------------
    # Backward: delta
    # ------------------------------------------------------------------

    def get_delta(self):
        return self._delta.read()

    def set_delta(self, value):
        if self.output_synapses:
            raise InvalidRoleError("Cannot set delta on a neuron in a non-output layer")
        self._delta.set(value)
        self._reset_dependent_deltas()

    def _compute_delta(self):
        if not self.output_synapses:
            raise UnsetValueError("The delta for this output-layer neuron has not been set")
        error = sum(s.weight * s.output_neuron.get_delta() for s in self.output_synapses)
        return error * sigmoid_derivative(self.get_output())

    def _reset_dependent_deltas(self):
        for synapse in self.input_synapses:
            neuron = synapse.input_neuron
            if neuron._delta.has_value:
                neuron._delta.invalidate()
                neuron._reset_dependent_deltas()

    # ------------------------------------------------------------------

    def update_input_weights(self, learning_rate):
        for synapse in self.input_synapses:
            d_weight = -learning_rate * self.get_delta() * synapse.input_neuron.get_output()
            synapse.weight += d_weight

    def calculate_error(self, target):
        """Squared error of the current output against target."""
        return (self.get_output() - target) ** 2

    def __repr__(self):
        if self.is_input:
            role = "input"
        elif self.is_output:
            role = "output"
        else:
            role = "hidden"
        return "Neuron({0}, inputs={1}, outputs={2})".format(
            role, len(self.input_synapses), len(self.output_synapses)
        )
