"""
Food Repository - Data access layer for shared food listings
"""

from typing import List

from pymongo import DESCENDING

from repositories.base import BaseRepository, Document


class FoodRepository(BaseRepository):
    """Repository for food data access"""

    collection_name = "foods"

    def list_newest_first(self) -> List[Document]:
        """All foods ordered by ``createdAt`` descending"""
        return self.find({}, sort=[("createdAt", DESCENDING)])
