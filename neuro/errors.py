"""Exceptions raised by the network graph.

Every error here is a programming or configuration mistake: nothing in the
package catches or retries them.
"""


class NeuroError(Exception):
    """Base class for all network errors."""


class InvalidTopologyError(NeuroError):
    """The layer sizes do not describe a valid network."""


class DimensionMismatchError(NeuroError):
    """An input or target vector does not match its layer size."""


class InvalidRoleError(NeuroError):
    """A value was written to a neuron that derives it itself."""


class UnsetValueError(NeuroError):
    """A value that must be supplied externally was read before being set."""
