"""Exception types raised by the simulation core."""
from __future__ import annotations


class BanditError(ValueError):
    """Base class for every error the core raises on bad input."""


class InvalidParameter(BanditError):
    """A single numeric argument is outside its valid range.

    Raised for probabilities outside ``[0, 1]``, non-positive distribution
    shape parameters, non-positive step counts and out-of-range arm indices.
    """


class ConfigurationError(BanditError):
    """The simulation request as a whole cannot be run.

    Raised when fewer than two arms are configured, no algorithm is enabled,
    or an unknown algorithm name is requested.
    """
