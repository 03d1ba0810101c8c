class LitcalError(Exception):
    """Base error."""

class InvalidDateError(LitcalError, ValueError):
    """Raised when a date input cannot be turned into a calendar date."""

class UnsupportedYearError(LitcalError, ValueError):
    """Raised for years outside the range the computus and tables support."""

class CalendarDataIntegrityError(LitcalError):
    """Raised at load time when the static celebration tables are malformed."""
