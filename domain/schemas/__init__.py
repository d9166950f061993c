"""
Domain schemas package - Pydantic response models.
"""

from domain.schemas.result_schemas import (
    InsertResultResponse,
    UpdateResultResponse,
    DeleteResultResponse,
    MessageResponse,
    ErrorResponse,
)

__all__ = [
    "InsertResultResponse",
    "UpdateResultResponse",
    "DeleteResultResponse",
    "MessageResponse",
    "ErrorResponse",
]
