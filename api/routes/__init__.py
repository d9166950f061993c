"""API routes package"""

from . import users, foods, requests, health

__all__ = ["users", "foods", "requests", "health"]
