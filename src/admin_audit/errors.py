class AuditError(Exception):
    """Base class for audit dispatcher errors."""


class InvalidEvent(AuditError):
    """An event is missing required data or is not a known user event."""


class InvalidRecord(AuditError):
    """A record's template does not agree with its fields."""
