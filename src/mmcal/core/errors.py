class MmcalError(Exception):
    """Base error."""

class InvalidDateError(MmcalError, ValueError):
    """Raised by the opt-in validating layer for out-of-range date components."""

class DateParseError(MmcalError, ValueError):
    """Raised by the strict parser when a date-time string cannot be read."""
