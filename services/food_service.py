from typing import Any, Dict, List
import logging

from pymongo.database import Database
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from repositories import FoodRepository
from services import common
from app.exceptions import NotFoundError

logger = logging.getLogger("plateshare.foods")

# Keys a patch may never overwrite: the identifier and the server-assigned timestamp
PROTECTED_FIELDS = frozenset({"_id", "createdAt"})


class FoodService:
    """Business logic for shared food listings"""

    @staticmethod
    def list_foods(db: Database) -> List[Dict[str, Any]]:
        """All foods, newest first"""
        foods = FoodRepository(db).list_newest_first()
        logger.info("foods_listed count=%d", len(foods))
        return foods

    @staticmethod
    def get_food(db: Database, food_id: str) -> Dict[str, Any]:
        """
        Fetch one food by identifier.

        Raises:
            NotFoundError: if no food has this identifier
            bson.errors.InvalidId: if ``food_id`` is not a valid ObjectId
        """
        food = FoodRepository(db).get_by_id(food_id)
        if food is None:
            logger.warning("food_not_found id=%s", food_id)
            raise NotFoundError("Food not found")
        return food

    @staticmethod
    def create_food(db: Database, payload: Dict[str, Any]) -> InsertOneResult:
        """Insert a food stamped with a server-side ``createdAt``"""
        food = dict(payload)
        food["createdAt"] = common.utc_now()
        result = FoodRepository(db).insert_one(food)
        logger.info("food_created id=%s", result.inserted_id)
        return result

    @staticmethod
    def update_food(db: Database, food_id: str, patch: Dict[str, Any]) -> UpdateResult:
        """
        Shallow-merge ``patch`` into the stored food.

        Protected keys are dropped from the patch. A patch left empty is still
        sent, and the server rejects it.
        """
        fields = {k: v for k, v in patch.items() if k not in PROTECTED_FIELDS}
        dropped = sorted(set(patch) - set(fields))
        if dropped:
            logger.warning("food_patch_fields_dropped id=%s fields=%s", food_id, dropped)

        result = FoodRepository(db).update_by_id(food_id, fields)
        logger.info(
            "food_updated id=%s matched=%d modified=%d",
            food_id,
            result.matched_count,
            result.modified_count,
        )
        return result

    @staticmethod
    def delete_food(db: Database, food_id: str) -> DeleteResult:
        result = FoodRepository(db).delete_by_id(food_id)
        logger.info("food_deleted id=%s deleted=%d", food_id, result.deleted_count)
        return result
