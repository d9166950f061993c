from typing import Any, Dict, Optional
import logging

from pymongo.database import Database
from pymongo.errors import DuplicateKeyError
from pymongo.results import InsertOneResult

from repositories import UserRepository
from services.common import require_non_empty_str

logger = logging.getLogger("plateshare.users")


def _is_email_conflict(exc: DuplicateKeyError) -> bool:
    key_pattern = (exc.details or {}).get("keyPattern") or {}
    return "email" in key_pattern


class UserService:
    """Business logic for user registration"""

    @staticmethod
    def ensure_indexes(db: Database) -> None:
        """Create the unique email index the registration relies on"""
        index_name = UserRepository(db).ensure_indexes()
        logger.info("user_indexes_ensured index=%s", index_name)

    @staticmethod
    def register_user(db: Database, payload: Dict[str, Any]) -> Optional[InsertOneResult]:
        """
        Insert the payload as a new user unless one with the same email exists.

        Returns the insertion result, or None when the email is already
        registered (nothing is written in that case). A concurrent registration
        that wins the race is caught by the unique email index and reported
        the same way.

        Raises:
            ServiceValidationError: if ``email`` is missing or empty
        """
        email = require_non_empty_str(payload, "email", "Email is required")

        user_repo = UserRepository(db)
        if user_repo.get_by_email(email) is not None:
            logger.info("user_exists email=%s", email)
            return None

        try:
            result = user_repo.insert_one(dict(payload))
        except DuplicateKeyError as exc:
            if not _is_email_conflict(exc):
                raise
            logger.info("user_exists email=%s concurrent=true", email)
            return None

        logger.info("user_created email=%s id=%s", email, result.inserted_id)
        return result
