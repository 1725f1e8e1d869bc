class SuntimesError(Exception):
    """Base error."""

class InvalidEventError(SuntimesError, ValueError):
    """Raised when an event has no elevation threshold (noon, midnight)."""

class DependencyUnavailableError(SuntimesError, RuntimeError):
    """Raised when an optional extra (diagnostics, ephemeris) is not installed."""
