from typing import Any, Dict, List, Optional
import logging

from pymongo.database import Database
from pymongo.results import InsertOneResult, UpdateResult

from domain.enums import RequestStatus
from repositories import RequestRepository
from services import common

logger = logging.getLogger("plateshare.requests")


class RequestService:
    """Business logic for food requests"""

    @staticmethod
    def create_request(db: Database, payload: Dict[str, Any]) -> InsertOneResult:
        """Insert a request; ``createdAt`` and ``status`` are always set here"""
        request = dict(payload)
        request["createdAt"] = common.utc_now()
        request["status"] = RequestStatus.PENDING.value
        result = RequestRepository(db).insert_one(request)
        logger.info(
            "request_created id=%s food_id=%s", result.inserted_id, request.get("foodId")
        )
        return result

    @staticmethod
    def build_filter(food_id: Optional[str] = None, email: Optional[str] = None) -> Dict[str, Any]:
        """
        Conjunctive filter from the optional query parameters.

        Empty values impose no constraint. ``email`` matches the request's
        ``requester_email`` field.
        """
        filter_doc: Dict[str, Any] = {}
        if food_id:
            filter_doc["foodId"] = food_id
        if email:
            filter_doc["requester_email"] = email
        return filter_doc

    @staticmethod
    def list_requests(
        db: Database, food_id: Optional[str] = None, email: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        filter_doc = RequestService.build_filter(food_id, email)
        requests = RequestRepository(db).find(filter_doc)
        logger.info("requests_listed filter=%s count=%d", filter_doc, len(requests))
        return requests

    @staticmethod
    def update_status(db: Database, request_id: str, payload: Dict[str, Any]) -> UpdateResult:
        """
        Set the request's ``status`` to the payload value. Any non-empty string
        is accepted; there is no transition graph.

        Raises:
            ServiceValidationError: if ``status`` is missing or empty
        """
        status = common.require_non_empty_str(payload, "status", "Status is required")
        result = RequestRepository(db).set_status(request_id, status)
        logger.info(
            "request_status_updated id=%s status=%s matched=%d",
            request_id,
            status,
            result.matched_count,
        )
        return result
