"""End-to-end XOR training, plus the logging and callback plumbing of train()."""

import pytest

from neuro.neural_network import Network, TrainingData
from neuro.nmath import make_weight_source

EPOCHS = 100000


@pytest.mark.slow
def test_xor_converges(xor_data):
    net = Network([2, 3, 1], learning_rate=0.8, weight_source=make_weight_source(0))
    before = net.mean_squared_error(xor_data)
    assert net.evaluate(xor_data) < 4

    net.train(xor_data, EPOCHS, log_fn=None)

    for inputs, targets in xor_data:
        output = net.run(inputs)[0]
        assert abs(output - targets[0]) < 0.1
    assert net.evaluate(xor_data) == 4
    assert net.mean_squared_error(xor_data) < before


@pytest.mark.slow
def test_xor_training_lowers_error(xor_data):
    """Seed independent: whatever minimum it reaches, the error goes down."""
    net = Network([2, 3, 1], weight_source=make_weight_source(2024))
    before = net.mean_squared_error(xor_data)

    net.train(xor_data, EPOCHS, log_fn=None)

    assert net.mean_squared_error(xor_data) < before


class TestTrainLoop:
    def test_rejects_non_positive_rounds(self, xor_data):
        net = Network([2, 3, 1], weight_source=make_weight_source(0))
        for rounds in (0, -1, 2.5):
            with pytest.raises(ValueError):
                net.train(xor_data, rounds, log_fn=None)

    def test_accepts_plain_tuples_and_generators(self, xor_data):
        a = Network([2, 3, 1], weight_source=make_weight_source(1))
        b = Network([2, 3, 1], weight_source=make_weight_source(1))

        a.train(xor_data, 3, log_fn=None)
        b.train(((list(d.inputs), list(d.targets)) for d in xor_data), 3, log_fn=None)

        assert [s.weight for s in a.synapses] == [s.weight for s in b.synapses]

    def test_examples_are_processed_in_order(self, xor_data):
        forward = Network([2, 3, 1], weight_source=make_weight_source(1))
        backward = Network([2, 3, 1], weight_source=make_weight_source(1))

        forward.train(xor_data, 1, log_fn=None)
        backward.train(list(reversed(xor_data)), 1, log_fn=None)

        assert [s.weight for s in forward.synapses] != [s.weight for s in backward.synapses]

    def test_log_lines(self, xor_data):
        net = Network([2, 3, 1], weight_source=make_weight_source(0))
        lines = []
        net.train(xor_data, 5, log_fn=lines.append, log_interval=2)

        assert lines[0].startswith("Starting training: 4 examples, 5 epochs")
        assert lines[1:] == [
            "Epoch 2/5 complete",
            "Epoch 4/5 complete",
            "Epoch 5/5 complete",
        ]

    def test_epoch_callback_metrics(self, xor_data):
        net = Network([2, 3, 1], weight_source=make_weight_source(0))
        seen = []

        def callback(epoch, metrics, network):
            seen.append((epoch, metrics, network))

        net.train(xor_data, 3, test_data=xor_data, log_fn=None, epoch_callback=callback, log_interval=1)

        assert [epoch for epoch, _, _ in seen] == [1, 2, 3]
        for epoch, metrics, network in seen:
            assert network is net
            assert metrics["epoch"] == epoch
            assert metrics["epochs"] == 3
            assert metrics["test_total"] == 4
            assert 0 <= metrics["test_correct"] <= 4
            assert 0.0 <= metrics["test_mse"] <= 1.0

    def test_test_data_scored_on_logged_epochs_only(self, xor_data):
        net = Network([2, 3, 1], weight_source=make_weight_source(0))
        seen = {}
        lines = []

        def callback(epoch, metrics, network):
            seen[epoch] = metrics

        net.train(xor_data, 7, test_data=xor_data, log_fn=lines.append,
                  epoch_callback=callback, log_interval=3)

        scored = [epoch for epoch, metrics in seen.items() if "test_mse" in metrics]
        assert scored == [3, 6, 7]
        assert sorted(seen) == list(range(1, 8))
        assert len(lines) == 4
        assert lines[-1].startswith("Epoch 7/7: mse=")

    def test_callback_errors_are_logged(self, xor_data):
        net = Network([2, 3, 1], weight_source=make_weight_source(0))
        lines = []

        def callback(epoch, metrics, network):
            raise RuntimeError("boom")

        net.train(xor_data, 2, log_fn=lines.append, epoch_callback=callback)

        assert lines.count("[epoch_callback error] boom") == 2


class TestScoring:
    def test_mean_squared_error_by_hand(self, weight_sequence):
        net = Network([1, 1, 1], weight_source=weight_sequence([0.0]))
        # all weights 0 -> every output is sigmoid(0) = 0.5
        data = [TrainingData([1.0], [0.0]), TrainingData([0.0], [1.0])]
        assert net.mean_squared_error(data) == pytest.approx(0.25)

    def test_mean_squared_error_needs_examples(self):
        net = Network([1, 1, 1], weight_source=make_weight_source(0))
        with pytest.raises(ValueError):
            net.mean_squared_error([])

    def test_evaluate_tolerance(self, weight_sequence):
        net = Network([1, 1, 1], weight_source=weight_sequence([0.0]))
        data = [TrainingData([1.0], [0.55]), TrainingData([0.0], [0.9])]
        assert net.evaluate(data) == 1
        assert net.evaluate(data, tolerance=0.5) == 2
