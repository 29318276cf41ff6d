"""Document models persisted in MongoDB."""

from app.models.base import Document, PyObjectId
from app.models.order import Order, OrderItem
from app.models.user import User

__all__ = ["Document", "Order", "OrderItem", "PyObjectId", "User"]
