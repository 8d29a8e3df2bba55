class AstrocalError(Exception):
    """Base error."""

class CalendarArgumentError(AstrocalError, ValueError):
    """Raised when a calendar page is requested with an out-of-range month, week start or column count."""
