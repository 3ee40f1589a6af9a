"""Error types raised by the calorie tracker."""


class TrackerError(Exception):
    """Base class for calorie tracker errors."""


class ValidationError(TrackerError, ValueError):
    """Raised when user input cannot form a valid value."""


class PersistenceError(TrackerError):
    """Raised when a storage slot cannot be read or written."""


class DateConflictError(TrackerError):
    """Raised when a date edit would put two records on one calendar day."""
