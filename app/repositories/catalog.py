"""Repositories for the product and category collections."""

import re
from typing import Any

from app.repositories.base import DocumentRepository


class ProductRepository(DocumentRepository):
    label = "product"

    def search_by_category(self, category: str | None) -> list[dict[str, Any]]:
        """Case-insensitive substring match on category; all products when empty."""
        if not category:
            return self.find_all()
        return self.find_all(
            {"category": {"$regex": re.escape(category), "$options": "i"}}
        )


class CategoryRepository(DocumentRepository):
    label = "category"
