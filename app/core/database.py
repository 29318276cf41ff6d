"""MongoDB client lifecycle and the store dependency used by routes."""

import logging
from typing import Any

from fastapi import Request
from pymongo import ASCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

from app.core.config import Settings
from app.core.errors import StoreUnavailableError

logger = logging.getLogger(__name__)


class MongoStore:
    """
    Owns the MongoClient for the lifetime of the app.

    Constructed once at startup, connect() pings the server and creates the
    unique index on users.email; close() releases the connection pool.
    """

    def __init__(
        self,
        uri: str,
        db_name: str,
        timeout_ms: int = 5000,
        client: MongoClient | None = None,
    ) -> None:
        self.uri = uri
        self.db_name = db_name
        self.timeout_ms = timeout_ms
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> "MongoStore":
        return cls(
            settings.MONGODB_URI,
            settings.MONGODB_DB_NAME,
            timeout_ms=settings.MONGODB_TIMEOUT_MS,
        )

    @property
    def db(self) -> Database:
        if self._client is None:
            raise StoreUnavailableError("Database client is not connected")
        return self._client[self.db_name]

    def collection(self, name: str) -> Collection:
        return self.db[name]

    def connect(self, users_collection: str = "users") -> None:
        """Open the client, verify the server is reachable and ensure indexes."""
        if self._client is None:
            self._client = MongoClient(
                self.uri,
                serverSelectionTimeoutMS=self.timeout_ms,
                connectTimeoutMS=self.timeout_ms,
                socketTimeoutMS=self.timeout_ms,
            )
        try:
            self._client.admin.command("ping")
            self.collection(users_collection).create_index(
                [("email", ASCENDING)], unique=True, name="uniq_email"
            )
        except PyMongoError as e:
            logger.error("MongoDB connection failed: %s", e)
            raise StoreUnavailableError("Could not connect to the database") from e
        logger.info("Connected to MongoDB", extra={"db_name": self.db_name})

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
            logger.info("MongoDB connection closed")

    def is_connected(self) -> bool:
        """Run a trivial command to verify the database is reachable."""
        if self._client is None:
            return False
        try:
            self._client.admin.command("ping")
            return True
        except PyMongoError:
            return False


def get_store(request: Request) -> MongoStore:
    """Dependency that returns the store created in the app lifespan."""
    return request.app.state.store


def get_app_settings(request: Request) -> Settings:
    """Dependency that returns the settings the app was created with."""
    return request.app.state.settings


def serialize_document(doc: dict[str, Any] | None) -> dict[str, Any] | None:
    """Render a Mongo document as JSON-safe data (_id as a hex string)."""
    if doc is None:
        return None
    data = dict(doc)
    if "_id" in data:
        data["_id"] = str(data["_id"])
    return data
