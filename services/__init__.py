"""Services package - Business logic layer"""

from services.user_service import UserService
from services.food_service import FoodService
from services.request_service import RequestService

__all__ = [
    "UserService",
    "FoodService",
    "RequestService",
]
