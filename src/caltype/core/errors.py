class CaltypeError(Exception):
    """Base error."""

class InvalidDate(CaltypeError, ValueError):
    """Raised when a year/month/day/hour/minute tuple is out of range for a calendar."""

class UnsupportedCalendarIdentifier(CaltypeError, LookupError):
    """Raised when a calendar name does not map to a registered calendar type."""

class AmbiguousOrMissingTimezone(CaltypeError, ValueError):
    """Raised when a timezone spec cannot be resolved to a single UTC offset."""

class ConfigurationError(CaltypeError, ValueError):
    """Raised when settings (usually from the environment) fail validation."""
