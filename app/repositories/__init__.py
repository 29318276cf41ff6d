"""Repositories over MongoDB collections."""

from app.repositories.base import DocumentRepository
from app.repositories.catalog import CategoryRepository, ProductRepository
from app.repositories.orders import OrderRepository
from app.repositories.users import UserRepository

__all__ = [
    "CategoryRepository",
    "DocumentRepository",
    "OrderRepository",
    "ProductRepository",
    "UserRepository",
]
