"""
Async MongoDB connection holder.

Owns one Motor client for the lifetime of the app and hands services a
database handle.

Example:
    from common.database import MongoDB

    mongo = MongoDB()
    await mongo.connect(uri="mongodb://localhost:27017", database_name="zephyr")
    profiles = mongo.db["profiles"]
"""

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

logger = logging.getLogger(__name__)


def _redact(uri: str) -> str:
    """Drop the user:password part of a connection string."""
    scheme, sep, rest = uri.partition("://")
    if not sep:
        return uri
    return f"{scheme}://{rest.rsplit('@', 1)[-1]}"


class MongoDB:
    """Holds the Motor client and the selected database."""

    def __init__(self):
        self._client: Optional[AsyncIOMotorClient] = None
        self._database_name: Optional[str] = None

    async def connect(self, uri: str, database_name: str) -> None:
        """
        Create the client.

        Motor opens sockets lazily, so nothing goes over the wire here.
        """
        logger.info(f"Connecting to MongoDB at {_redact(uri)}")

        self._client = AsyncIOMotorClient(uri)
        self._database_name = database_name

        logger.info(f"Using MongoDB database: {database_name}")

    async def disconnect(self) -> None:
        if self._client is None:
            return
        self._client.close()
        self._client = None
        self._database_name = None
        logger.info("MongoDB client closed")

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    @property
    def db(self) -> AsyncIOMotorDatabase:
        """
        Raises:
            RuntimeError: If connect() has not been called
        """
        if self._client is None:
            raise RuntimeError("Database not connected")
        return self._client[self._database_name]
