"""Exceptions raised by the simulator and optimizer."""


class ApolloError(Exception):
    """Base class for errors raised by this package."""


class InvalidStateError(ApolloError, RuntimeError):
    """A result was read before the run that produces it has completed."""
