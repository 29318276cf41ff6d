"""Request schemas for products and categories.

Products and categories are free-form documents: the well-known fields are
typed, anything else the client sends is stored as-is.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from app.models.base import reject_operator_keys


class ProductBase(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    image: str | None = None
    title: str | None = None
    category: str | None = None
    description: str | None = None
    price: float | None = Field(default=None, ge=0)
    prev_price: float | None = Field(default=None, ge=0, alias="prevPrice")
    is_flash_sale: bool | None = Field(default=None, alias="isFlashSale")
    rating: float | None = Field(default=None, ge=0, le=5)
    stock: int | None = Field(default=None, ge=0)

    @model_validator(mode="before")
    @classmethod
    def check_field_names(cls, data: Any) -> Any:
        return reject_operator_keys(data)


class ProductCreate(ProductBase):
    title: str = Field(..., min_length=1, max_length=500)


class ProductUpdate(ProductBase):
    """Partial update; only fields present in the request are written."""

    title: str | None = Field(default=None, min_length=1, max_length=500)

    @field_validator("title", "category", "price")
    @classmethod
    def reject_null(cls, v: Any) -> Any:
        # Only runs for values sent in the body; omitted fields keep their default.
        if v is None:
            raise ValueError("must not be null")
        return v


class CategoryCreate(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str = Field(..., min_length=1, max_length=255)
    image: str | None = None

    @model_validator(mode="before")
    @classmethod
    def check_field_names(cls, data: Any) -> Any:
        return reject_operator_keys(data)
