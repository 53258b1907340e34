class PaschalionError(Exception):
    """Base error."""

class DateRangeError(PaschalionError, ValueError):
    """Raised when a computed day falls outside the range of datetime.date."""
