"""Request schemas for orders."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from app.models.base import reject_operator_keys
from app.models.order import OrderItem


class OrderCreate(BaseModel):
    """New order. totalPrice defaults to the sum of item price * quantity."""

    model_config = ConfigDict(populate_by_name=True)

    email: str | None = Field(default=None, max_length=320)
    name: str | None = None
    items: list[OrderItem] = Field(..., min_length=1)
    total_price: float | None = Field(default=None, ge=0, alias="totalPrice")
    shipping_address: dict[str, Any] | str | None = Field(default=None, alias="shippingAddress")
    phone: str | None = None

    @model_validator(mode="before")
    @classmethod
    def check_field_names(cls, data: Any) -> Any:
        return reject_operator_keys(data)


class OrderUpdate(BaseModel):
    """Partial update of an order's tracking fields."""

    model_config = ConfigDict(populate_by_name=True)

    status: str | None = Field(default=None, min_length=1, max_length=32)
    payment_status: str | None = Field(
        default=None, min_length=1, max_length=32, alias="paymentStatus"
    )
    shipping_address: dict[str, Any] | str | None = Field(default=None, alias="shippingAddress")
    phone: str | None = None

    @model_validator(mode="before")
    @classmethod
    def check_field_names(cls, data: Any) -> Any:
        return reject_operator_keys(data)

    @field_validator("status", "payment_status")
    @classmethod
    def reject_null(cls, v: str | None) -> str:
        # Only runs for values sent in the body; an explicit null would erase tracking state.
        if v is None:
            raise ValueError("must not be null")
        return v
