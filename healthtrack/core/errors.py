"""
Typed errors raised by the repositories.

The API layer maps each kind to a distinct HTTP status in ``healthtrack.main``.
A normal lookup miss is never an error: ``get`` methods return ``None``.
"""

from typing import Any, Dict, List, Optional


class HealthTrackError(Exception):
    """Base class for all domain errors."""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class ValidationError(HealthTrackError):
    """Input outside the allowed domain. Carries field-level errors."""

    def __init__(self, errors: List[Dict[str, Any]], message: str = "Invalid data"):
        super().__init__(message)
        self.errors = errors

    @classmethod
    def from_pydantic(cls, exc) -> "ValidationError":
        return cls(errors=format_validation_errors(exc.errors()))


class NotFound(HealthTrackError):
    pass


class DuplicateKey(HealthTrackError):
    pass


class StoreUnavailable(HealthTrackError):
    """The database did not respond, timed out, or dropped the connection."""

    def __init__(self, message: str = "Storage temporarily unavailable", operation: Optional[str] = None):
        super().__init__(message)
        self.operation = operation


def format_validation_errors(raw_errors) -> List[Dict[str, Any]]:
    """Flatten pydantic error dicts to ``{"field", "message"}`` pairs."""
    formatted = []
    for err in raw_errors:
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        formatted.append({
            "field": ".".join(loc) if loc else None,
            "message": err.get("msg", "Invalid value"),
        })
    return formatted
