"""
API dependencies for dependency injection
"""

import json
from typing import Any, Dict

from fastapi import Request
from pymongo.database import Database

from app.exceptions import DatabaseUnavailableError, ServiceValidationError


def get_database(request: Request) -> Database:
    """
    Shared database handle for FastAPI routes.

    The handle is injected once when the application is built and stored on
    ``app.state``.

    Usage:
        @router.get("/example")
        def example(db: Database = Depends(get_database)):
            ...
    """
    db = getattr(request.app.state, "database", None)
    if db is None:
        raise DatabaseUnavailableError()
    return db


def _is_json_content_type(content_type: str) -> bool:
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


async def get_json_body(request: Request) -> Dict[str, Any]:
    """
    Request body as a document.

    A missing body, an empty body, or a body sent with a non-JSON content
    type reads as ``{}``; field checks happen in the services.

    Raises:
        ServiceValidationError: if a JSON body is malformed or not an object
    """
    if not _is_json_content_type(request.headers.get("content-type", "")):
        return {}
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        payload = json.loads(raw)
    except ValueError:
        raise ServiceValidationError("Malformed JSON body")
    if not isinstance(payload, dict):
        raise ServiceValidationError("Request body must be a JSON object")
    return payload
