"""
User Repository - Data access layer for the users collection
"""

from typing import Optional

from repositories.base import BaseRepository, Document


class UserRepository(BaseRepository):
    """Repository for user data access"""

    collection_name = "users"

    def ensure_indexes(self) -> str:
        """Unique index on ``email``; a concurrent duplicate insert then fails"""
        return self.collection.create_index("email", unique=True)

    def get_by_email(self, email: str) -> Optional[Document]:
        """Get user by email"""
        return self.find_one({"email": email})
