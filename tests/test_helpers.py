"""
Shared test helpers and utilities.
"""

import uuid


def unique_email(prefix: str = "test") -> str:
    """
    Generate unique email address using UUID to avoid conflicts.

    Args:
        prefix: Prefix for the email address (default: "test")

    Returns:
        Unique email address in format: prefix-uuid@example.com
    """
    return f"{prefix}-{uuid.uuid4()}@example.com"
