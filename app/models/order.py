"""Order document: items, totals and plain-string status fields."""

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.models.base import Document, reject_operator_keys


class OrderItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    product_id: str = Field(alias="productId")
    title: str | None = None
    quantity: int = Field(default=1, ge=1)
    price: float = Field(default=0.0, ge=0)

    @model_validator(mode="before")
    @classmethod
    def check_field_names(cls, data: Any) -> Any:
        return reject_operator_keys(data)


class Order(Document):
    """Placed order. status and paymentStatus are not constrained to a fixed set."""

    email: str
    name: str | None = None
    items: list[OrderItem] = Field(default_factory=list)
    total_price: float = Field(default=0.0, alias="totalPrice")
    shipping_address: dict[str, Any] | str | None = Field(default=None, alias="shippingAddress")
    phone: str | None = None
    status: str = "pending"
    payment_status: str = Field(default="unpaid", alias="paymentStatus")
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC), alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")
