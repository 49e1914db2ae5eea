"""
Exceptions raised by date offsets.

All errors derive from OffsetError so callers can catch the whole family.
"""


class OffsetError(Exception):
    """Base exception for all offset-related errors."""


class UnconfiguredOffsetError(OffsetError):
    """Arithmetic was attempted on a DateOffset built without a duration."""


class DateRangeError(OffsetError, OverflowError):
    """The computed point in time cannot be represented by ``datetime``."""
