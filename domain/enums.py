"""
Domain enums for PlateShare.
"""

import enum


class RequestStatus(str, enum.Enum):
    """Food request states assigned by the service.

    Only the initial state is set server-side. Status updates accept any
    non-empty string, so stored documents may carry values not listed here.
    """

    PENDING = "pending"
