"""Core app configuration, store client and security primitives."""

from app.core.config import Settings, get_settings
from app.core.database import MongoStore, get_store

__all__ = ["MongoStore", "Settings", "get_settings", "get_store"]
