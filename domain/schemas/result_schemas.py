"""
Response schemas for database operation outcomes and error payloads.

Field names serialize in camelCase (``insertedId``, ``matchedCount``...) so
clients written against the MongoDB driver's result objects keep working.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class InsertResultResponse(_CamelModel):
    """Outcome of insert_one"""

    acknowledged: bool = Field(True, description="Write acknowledged by the server")
    inserted_id: str = Field(..., description="Generated document identifier (hex)")


class UpdateResultResponse(_CamelModel):
    """Outcome of update_one"""

    acknowledged: bool = Field(True, description="Write acknowledged by the server")
    matched_count: int = Field(..., description="Documents matched by the filter")
    modified_count: int = Field(..., description="Documents actually changed")
    upserted_count: int = Field(0, description="Documents inserted by upsert")
    upserted_id: Optional[str] = Field(None, description="Identifier of upserted document")


class DeleteResultResponse(_CamelModel):
    """Outcome of delete_one"""

    acknowledged: bool = Field(True, description="Write acknowledged by the server")
    deleted_count: int = Field(..., description="Documents removed (0 or 1)")


class MessageResponse(BaseModel):
    """Informational or not-found payload"""

    message: str


class ErrorResponse(BaseModel):
    """Error payload for 400/500 responses"""

    error: str
