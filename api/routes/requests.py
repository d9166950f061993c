"""Food request routes"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query
from pymongo.database import Database

from api.dependencies import get_database, get_json_body
from domain.mappers import DocumentMapper, ResultMapper
from domain.schemas import ErrorResponse, InsertResultResponse, UpdateResultResponse
from services import RequestService

router = APIRouter(
    prefix="/requests",
    tags=["Requests"],
    responses={500: {"model": ErrorResponse}},
)


@router.post("", response_model=InsertResultResponse)
def create_request(
    payload: Dict[str, Any] = Depends(get_json_body), db: Database = Depends(get_database)
):
    """Request a food. The stored request always starts as ``pending``."""
    return ResultMapper.insert_to_response(RequestService.create_request(db, payload))


@router.get("")
def list_requests(
    food_id: Optional[str] = Query(None, alias="foodId", description="Exact foodId match"),
    email: Optional[str] = Query(None, description="Exact requester_email match"),
    db: Database = Depends(get_database),
):
    """Requests matching every supplied filter; no filters returns all."""
    return DocumentMapper.to_response_list(
        RequestService.list_requests(db, food_id=food_id, email=email)
    )


@router.patch(
    "/{request_id}",
    response_model=UpdateResultResponse,
    responses={400: {"model": ErrorResponse}},
)
def update_request_status(
    request_id: str,
    payload: Dict[str, Any] = Depends(get_json_body),
    db: Database = Depends(get_database),
):
    """Set only the ``status`` field; other body fields are ignored."""
    return ResultMapper.update_to_response(
        RequestService.update_status(db, request_id, payload)
    )
