"""
Request Repository - Data access layer for food requests
"""

from pymongo.results import UpdateResult

from repositories.base import BaseRepository


class RequestRepository(BaseRepository):
    """Repository for food request data access"""

    collection_name = "requests"

    def set_status(self, request_id: str, status: str) -> UpdateResult:
        """Overwrite only the ``status`` field of one request"""
        return self.update_by_id(request_id, {"status": status})
