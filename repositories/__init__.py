"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository, id_filter
from repositories.user_repository import UserRepository
from repositories.food_repository import FoodRepository
from repositories.request_repository import RequestRepository

__all__ = [
    "BaseRepository",
    "id_filter",
    "UserRepository",
    "FoodRepository",
    "RequestRepository",
]
