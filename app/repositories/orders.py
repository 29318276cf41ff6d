"""Repository for orders."""

from typing import Any

from pymongo import DESCENDING

from app.repositories.base import DocumentRepository


class OrderRepository(DocumentRepository):
    label = "order"

    def find_filtered(
        self, email: str | None = None, status: str | None = None
    ) -> list[dict[str, Any]]:
        """Orders newest first, optionally narrowed to one customer and/or status."""
        query: dict[str, Any] = {}
        if email:
            query["email"] = email
        if status:
            query["status"] = status
        return self.find_all(query, sort=[("createdAt", DESCENDING)])
