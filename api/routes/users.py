"""User registration routes"""

from typing import Any, Dict, Union

from fastapi import APIRouter, Depends
from pymongo.database import Database

from api.dependencies import get_database, get_json_body
from domain.mappers import ResultMapper
from domain.schemas import ErrorResponse, InsertResultResponse, MessageResponse
from services import UserService

router = APIRouter(prefix="/users", tags=["Users"])


@router.post(
    "",
    response_model=Union[InsertResultResponse, MessageResponse],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def create_user(
    payload: Dict[str, Any] = Depends(get_json_body), db: Database = Depends(get_database)
):
    """Register a user once per email; repeated emails report existence."""
    result = UserService.register_user(db, payload)
    if result is None:
        return MessageResponse(message="User already exists")
    return ResultMapper.insert_to_response(result)
