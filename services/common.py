"""Shared helpers for the service layer: clock and request-body field checks."""

from datetime import datetime, timezone
from typing import Any, Mapping

from app.exceptions import ServiceValidationError


def utc_now() -> datetime:
    """Current time, timezone-aware UTC"""
    return datetime.now(timezone.utc)


def require_non_empty_str(payload: Mapping[str, Any], field: str, message: str) -> str:
    """
    Return ``payload[field]`` if it is a non-empty string.

    Raises:
        ServiceValidationError: if the field is missing, empty or not a string
    """
    value = payload.get(field)
    if not isinstance(value, str) or not value:
        raise ServiceValidationError(message, details={"field": field})
    return value
