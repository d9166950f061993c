"""
Base repository interface for data access layer.
This follows the Repository pattern to separate request mapping from data access.
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple
from abc import ABC

from bson import ObjectId
from pymongo.database import Database
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

Document = Dict[str, Any]
SortSpec = Sequence[Tuple[str, int]]


def id_filter(entity_id: str) -> Document:
    """
    Build an ``_id`` filter from a 24-character hex string.

    Raises:
        bson.errors.InvalidId: if the string is not a valid ObjectId
    """
    return {"_id": ObjectId(entity_id)}


class BaseRepository(ABC):
    """
    Base repository providing the single-call operations over one collection.
    Subclasses set ``collection_name``.
    """

    collection_name: str = ""

    def __init__(self, db: Database):
        self.db = db
        self.collection = db[self.collection_name]

    def find_one(self, filter_doc: Document) -> Optional[Document]:
        """Return the first document matching the filter, or None"""
        return self.collection.find_one(filter_doc)

    def find(self, filter_doc: Optional[Document] = None, sort: Optional[SortSpec] = None) -> List[Document]:
        """Return all documents matching the filter, optionally sorted"""
        cursor = self.collection.find(filter_doc or {})
        if sort:
            cursor = cursor.sort(list(sort))
        return list(cursor)

    def insert_one(self, document: Document) -> InsertOneResult:
        """Insert a document; the database assigns ``_id``"""
        return self.collection.insert_one(document)

    def update_one(self, filter_doc: Document, patch: Document) -> UpdateResult:
        """Shallow-merge ``patch`` into the first matching document"""
        return self.collection.update_one(filter_doc, {"$set": patch})

    def delete_one(self, filter_doc: Document) -> DeleteResult:
        """Delete the first matching document"""
        return self.collection.delete_one(filter_doc)

    def get_by_id(self, entity_id: str) -> Optional[Document]:
        """Get document by its hex identifier"""
        return self.find_one(id_filter(entity_id))

    def update_by_id(self, entity_id: str, patch: Document) -> UpdateResult:
        return self.update_one(id_filter(entity_id), patch)

    def delete_by_id(self, entity_id: str) -> DeleteResult:
        return self.delete_one(id_filter(entity_id))
