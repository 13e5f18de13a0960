from neuro import nmath


class Synapse(object):
    """Weighted edge from a neuron to a neuron of the next layer."""

    def __init__(self, input_neuron, output_neuron, weight_source=None):
        if weight_source is None:
            weight_source = nmath.random_weight
        self.input_neuron = input_neuron
        self.output_neuron = output_neuron
        self.weight = float(weight_source())

    def __repr__(self):
        return "Synapse(weight={0:.6f})".format(self.weight)
