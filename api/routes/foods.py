"""Shared food listing routes"""

from typing import Any, Dict

from fastapi import APIRouter, Depends
from pymongo.database import Database

from api.dependencies import get_database, get_json_body
from domain.mappers import DocumentMapper, ResultMapper
from domain.schemas import (
    DeleteResultResponse,
    ErrorResponse,
    InsertResultResponse,
    MessageResponse,
    UpdateResultResponse,
)
from services import FoodService

router = APIRouter(
    prefix="/foods",
    tags=["Foods"],
    responses={500: {"model": ErrorResponse}},
)


@router.get("")
def list_foods(db: Database = Depends(get_database)):
    """All foods, newest first."""
    return DocumentMapper.to_response_list(FoodService.list_foods(db))


@router.get("/{food_id}", responses={404: {"model": MessageResponse}})
def get_food(food_id: str, db: Database = Depends(get_database)):
    """One food by its 24-character hex identifier."""
    return DocumentMapper.to_response(FoodService.get_food(db, food_id))


@router.post("", response_model=InsertResultResponse)
def create_food(
    payload: Dict[str, Any] = Depends(get_json_body), db: Database = Depends(get_database)
):
    """Share a food; ``createdAt`` is assigned by the server."""
    return ResultMapper.insert_to_response(FoodService.create_food(db, payload))


@router.patch("/{food_id}", response_model=UpdateResultResponse)
def update_food(
    food_id: str,
    patch: Dict[str, Any] = Depends(get_json_body),
    db: Database = Depends(get_database),
):
    """
    Shallow-merge the body into the stored food.

    Fields absent from the body are untouched. An unknown identifier is not
    an error: the result simply reports zero matches.
    """
    return ResultMapper.update_to_response(FoodService.update_food(db, food_id, patch))


@router.delete("/{food_id}", response_model=DeleteResultResponse)
def delete_food(food_id: str, db: Database = Depends(get_database)):
    return ResultMapper.delete_to_response(FoodService.delete_food(db, food_id))
