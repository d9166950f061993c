"""MongoDB adapter: client creation, liveness ping and shutdown.
"""

from typing import Optional, Tuple
import logging

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi

logger = logging.getLogger("plateshare.mongo")


# ------------------ Connection ------------------
def connect(uri: str, db_name: str, timeout_ms: int = 5000) -> Tuple[MongoClient, Database]:
    """Create the shared client and return it with the named database.

    The client is returned even when the initial ping fails: pymongo keeps
    reconnecting in the background, so requests made later can still succeed.
    """
    client = MongoClient(
        uri,
        server_api=ServerApi("1", strict=False, deprecation_errors=True),
        serverSelectionTimeoutMS=timeout_ms,
        tz_aware=True,
    )
    db = client[db_name]
    if ping(db):
        logger.info("MongoDB connected successfully (database: %s)", db_name)
    else:
        logger.error(
            "MongoDB ping failed at startup (database: %s); serving anyway", db_name
        )
    return client, db


def ping(db: Optional[Database]) -> bool:
    """Return True when the server answers a ping."""
    if db is None:
        return False
    try:
        db.client.admin.command("ping")
        return True
    except PyMongoError as exc:
        logger.warning("MongoDB ping failed: %s", exc)
        return False


def close(client: Optional[MongoClient]) -> None:
    """Close MongoDB connection."""
    if client is None:
        return
    try:
        client.close()
        logger.info("MongoDB client closed")
    except PyMongoError:
        logger.exception("Error closing MongoDB client")
