"""Liveness and health check routes"""

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse
import logging

from adapters import mongo_adapter
from app.config import settings

router = APIRouter(tags=["Health"])
logger = logging.getLogger("plateshare.api.health")

LIVENESS_MESSAGE = "PlateShare API Server Running..."


@router.get("/", response_class=PlainTextResponse)
def root():
    """Liveness check"""
    return LIVENESS_MESSAGE


@router.get("/health-check")
def health_check(request: Request):
    """Service status with a database ping"""
    db = getattr(request.app.state, "database", None)
    reachable = mongo_adapter.ping(db)
    if not reachable:
        logger.warning("health_check database unreachable")
    return {
        "status": "ok",
        "service": settings.app_name,
        "database": "connected" if reachable else "unavailable",
    }
