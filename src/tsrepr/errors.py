"""
Exceptions raised by tsrepr.

Both concrete errors subclass ValueError so callers that already guard
numeric code with ``except ValueError`` keep working.
"""


class ReprError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgument(ReprError, ValueError):
    """A parameter is outside its allowed domain, or the input is too short."""


class NumericPrecondition(ReprError, ValueError):
    """Input contains NaN or infinite values."""
