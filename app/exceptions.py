from typing import Any, Mapping, Optional


class ServiceValidationError(Exception):
    """Raised when a required request field is missing or has the wrong type.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field name, received value)
        http_status: suggested HTTP status code for handlers (400)
    """

    http_status = 400

    def __init__(self, message: str = "Invalid input", details: Optional[Mapping[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        """Response payload; ``details`` is kept for logs only"""
        return {"error": self.message}

    def __str__(self) -> str:
        return self.message


class NotFoundError(Exception):
    """Raised when a document addressed by identifier does not exist.

    The payload uses the ``message`` key; http_status is 404.
    """

    http_status = 404

    def __init__(self, message: str = "Not found", details: Optional[Mapping[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        return {"message": self.message}

    def __str__(self) -> str:
        return self.message


class DatabaseUnavailableError(Exception):
    """Raised when a request needs the database but no handle was configured."""

    http_status = 500

    def __init__(self, message: str = "Database not available"):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.message}

    def __str__(self) -> str:
        return self.message
