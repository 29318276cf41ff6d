"""In-memory stand-ins for the PyMongo objects the app touches, plus app builders for tests."""

import copy
import re
from datetime import timedelta
from types import SimpleNamespace
from typing import Any

from bson import ObjectId
from fastapi import FastAPI
from pymongo.errors import DuplicateKeyError, ServerSelectionTimeoutError, WriteError

from app.core.config import Settings
from app.core.database import MongoStore
from app.core.security import create_access_token
from app.main import create_app

TEST_SECRET = "test-secret"


def _matches(doc: dict[str, Any], query: dict[str, Any]) -> bool:
    for key, expected in query.items():
        value = doc.get(key)
        if isinstance(expected, dict) and "$regex" in expected:
            flags = re.IGNORECASE if "i" in expected.get("$options", "") else 0
            if not isinstance(value, str) or not re.search(expected["$regex"], value, flags):
                return False
        elif value != expected:
            return False
    return True


def _reject_operator_fields(doc: dict[str, Any]) -> None:
    """Top-level '$' field names are refused by the server on insert and $set."""
    for key in doc:
        if key.startswith("$"):
            raise WriteError(f"Field name '{key}' is not valid for storage", code=52)


class FakeCursor:
    def __init__(self, docs: list[dict[str, Any]]) -> None:
        self._docs = docs

    def sort(self, key_or_list, direction: int | None = None) -> "FakeCursor":
        keys = key_or_list if isinstance(key_or_list, list) else [(key_or_list, direction or 1)]
        for key, order in reversed(keys):
            self._docs.sort(key=lambda d: d.get(key), reverse=order < 0)
        return self

    def __iter__(self):
        return iter(self._docs)


class FakeCollection:
    """Subset of pymongo Collection: find/insert/update/delete plus unique indexes."""

    def __init__(self, down: bool = False) -> None:
        self.docs: list[dict[str, Any]] = []
        self.unique_fields: set[str] = set()
        self.down = down

    def _check(self) -> None:
        if self.down:
            raise ServerSelectionTimeoutError("fake server unavailable")

    def create_index(self, keys, unique: bool = False, name: str | None = None) -> str:
        self._check()
        fields = [keys] if isinstance(keys, str) else [k for k, _ in keys]
        if unique:
            self.unique_fields.update(fields)
        return name or "_".join(fields)

    def find_one(self, query: dict[str, Any]) -> dict[str, Any] | None:
        self._check()
        for doc in self.docs:
            if _matches(doc, query):
                return copy.deepcopy(doc)
        return None

    def find(self, query: dict[str, Any] | None = None) -> FakeCursor:
        self._check()
        return FakeCursor([copy.deepcopy(d) for d in self.docs if _matches(d, query or {})])

    def insert_one(self, doc: dict[str, Any]) -> SimpleNamespace:
        self._check()
        _reject_operator_fields(doc)
        for field in self.unique_fields:
            if any(d.get(field) == doc.get(field) for d in self.docs):
                raise DuplicateKeyError(f"E11000 duplicate key error: {field}", code=11000)
        stored = copy.deepcopy(doc)
        stored.setdefault("_id", ObjectId())
        self.docs.append(stored)
        return SimpleNamespace(inserted_id=stored["_id"], acknowledged=True)

    def update_one(self, query: dict[str, Any], update: dict[str, Any]) -> SimpleNamespace:
        self._check()
        for doc in self.docs:
            if _matches(doc, query):
                changes = update.get("$set", {})
                _reject_operator_fields(changes)
                modified = any(doc.get(k) != v for k, v in changes.items())
                doc.update(copy.deepcopy(changes))
                return SimpleNamespace(matched_count=1, modified_count=int(modified))
        return SimpleNamespace(matched_count=0, modified_count=0)

    def delete_one(self, query: dict[str, Any]) -> SimpleNamespace:
        self._check()
        for i, doc in enumerate(self.docs):
            if _matches(doc, query):
                del self.docs[i]
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)


class FakeDatabase:
    def __init__(self, client: "FakeMongoClient") -> None:
        self._client = client
        self._collections: dict[str, FakeCollection] = {}

    def __getitem__(self, name: str) -> FakeCollection:
        if name not in self._collections:
            self._collections[name] = FakeCollection(down=self._client.down)
        return self._collections[name]


class FakeMongoClient:
    """Stands in for MongoClient; set down=True to simulate an unreachable server."""

    def __init__(self, down: bool = False) -> None:
        self.down = down
        self.closed = False
        self._databases: dict[str, FakeDatabase] = {}
        self.admin = SimpleNamespace(command=self._command)

    def _command(self, name: str) -> dict[str, Any]:
        if self.down:
            raise ServerSelectionTimeoutError("fake server unavailable")
        return {"ok": 1.0}

    def __getitem__(self, name: str) -> FakeDatabase:
        if name not in self._databases:
            self._databases[name] = FakeDatabase(self)
        return self._databases[name]

    def close(self) -> None:
        self.closed = True


def make_settings(**overrides: Any) -> Settings:
    values: dict[str, Any] = {
        "MONGODB_URI": "mongodb://localhost:27017",
        "MONGODB_DB_NAME": "testShop",
        "JWT_SECRET": TEST_SECRET,
        "JWT_EXPIRES_IN": "1h",
        "BCRYPT_ROUNDS": 4,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def make_store(settings: Settings, client: FakeMongoClient | None = None) -> MongoStore:
    return MongoStore(
        settings.MONGODB_URI,
        settings.MONGODB_DB_NAME,
        client=client or FakeMongoClient(),
    )


def make_app(**overrides: Any) -> tuple[FastAPI, FakeMongoClient]:
    """App wired to a fresh in-memory store; the fake client is returned for inspection."""
    settings = make_settings(**overrides)
    client = FakeMongoClient()
    return create_app(settings=settings, store=make_store(settings, client)), client


def auth_header(email: str = "admin@x.com", role: str = "admin", name: str | None = None) -> dict[str, str]:
    """Authorization header carrying a token signed with the test secret."""
    token = create_access_token(
        {"email": email, "role": role, "name": name}, TEST_SECRET, timedelta(minutes=5)
    )
    return {"Authorization": f"Bearer {token}"}
