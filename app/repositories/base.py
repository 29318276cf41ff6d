"""Base repository providing the CRUD helpers shared by all collections."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from bson import ObjectId
from pymongo.collection import Collection
from pymongo.errors import ConnectionFailure

from app.core.database import serialize_document
from app.core.errors import InvalidIdentifierError, StoreUnavailableError

logger = logging.getLogger(__name__)


@contextmanager
def store_errors() -> Iterator[None]:
    """
    Translate connection and network failures (ConnectionFailure, which covers
    AutoReconnect, NetworkTimeout and ServerSelectionTimeoutError) into
    StoreUnavailableError. Errors where the server rejected the operation,
    such as DuplicateKeyError or WriteError, propagate unchanged.
    """
    try:
        yield
    except ConnectionFailure as e:
        logger.error("MongoDB unreachable: %s", e)
        raise StoreUnavailableError() from e


def to_object_id(entity_id: str | ObjectId, label: str = "document") -> ObjectId:
    """Convert a path identifier to ObjectId. Raises InvalidIdentifierError when malformed."""
    if isinstance(entity_id, ObjectId):
        return entity_id
    if not isinstance(entity_id, str) or not ObjectId.is_valid(entity_id):
        raise InvalidIdentifierError(f"Invalid {label} ID format")
    return ObjectId(entity_id)


class DocumentRepository:
    """
    One collection, one repository. Documents are returned serialized
    (plain dicts with _id as a hex string).
    """

    label = "document"

    def __init__(self, collection: Collection) -> None:
        self.collection = collection

    def find_all(
        self,
        query: dict[str, Any] | None = None,
        sort: list[tuple[str, int]] | None = None,
    ) -> list[dict[str, Any]]:
        with store_errors():
            cursor = self.collection.find(query or {})
            if sort:
                cursor = cursor.sort(sort)
            return [serialize_document(doc) for doc in cursor]

    def find_by_id(self, entity_id: str) -> dict[str, Any] | None:
        _id = to_object_id(entity_id, self.label)
        with store_errors():
            return serialize_document(self.collection.find_one({"_id": _id}))

    def insert(self, document: dict[str, Any]) -> str:
        """Insert and return the new id as a hex string."""
        doc = dict(document)
        doc.pop("_id", None)
        with store_errors():
            result = self.collection.insert_one(doc)
        return str(result.inserted_id)

    def update(self, entity_id: str, fields: dict[str, Any]) -> bool:
        """$set fields on one document. Returns False when no document matched."""
        _id = to_object_id(entity_id, self.label)
        changes = {k: v for k, v in fields.items() if k != "_id"}
        if not changes:
            with store_errors():
                return self.collection.find_one({"_id": _id}) is not None
        with store_errors():
            result = self.collection.update_one({"_id": _id}, {"$set": changes})
        return result.matched_count > 0

    def delete(self, entity_id: str) -> bool:
        _id = to_object_id(entity_id, self.label)
        with store_errors():
            result = self.collection.delete_one({"_id": _id})
        return result.deleted_count > 0
