"""Order endpoints: place, list, read, update tracking fields, delete."""

import logging
from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from app.api.v1.auth import require_writer
from app.core.config import Settings
from app.core.database import MongoStore, get_app_settings, get_store
from app.core.errors import BadRequestError, NotFoundError
from app.models.order import Order
from app.repositories.orders import OrderRepository
from app.schemas.auth import CurrentUser
from app.schemas.common import ApiResponse, InsertResult
from app.schemas.order import OrderCreate, OrderUpdate

logger = logging.getLogger(__name__)
router = APIRouter()


def get_orders(
    store: Annotated[MongoStore, Depends(get_store)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> OrderRepository:
    return OrderRepository(store.collection(settings.ORDERS_COLLECTION))


@router.get("", response_model=ApiResponse)
def list_orders(
    orders: Annotated[OrderRepository, Depends(get_orders)],
    email: Annotated[str | None, Query(max_length=320)] = None,
    order_status: Annotated[str | None, Query(alias="status", max_length=32)] = None,
) -> ApiResponse:
    """All orders newest first; filter by customer email and/or status."""
    return ApiResponse(
        message="All Orders retrieved successfully",
        data=orders.find_filtered(email=email, status=order_status),
    )


@router.get("/{order_id}", response_model=ApiResponse)
def get_order(
    order_id: str,
    orders: Annotated[OrderRepository, Depends(get_orders)],
) -> ApiResponse:
    order = orders.find_by_id(order_id)
    if order is None:
        raise NotFoundError("Order not found")
    return ApiResponse(message="Order retrieved successfully", data=order)


@router.post("", response_model=ApiResponse, status_code=status.HTTP_201_CREATED)
def create_order(
    body: OrderCreate,
    orders: Annotated[OrderRepository, Depends(get_orders)],
    user: Annotated[CurrentUser | None, Depends(require_writer)],
) -> ApiResponse:
    """
    Place an order. The customer email comes from the body, or from the token
    when the body omits it. totalPrice defaults to the sum over items.
    """
    email = body.email or (user.email if user else None)
    if not email:
        raise BadRequestError("Order email is required")
    total = body.total_price
    if total is None:
        total = round(sum(item.price * item.quantity for item in body.items), 2)
    order = Order(
        email=email,
        name=body.name or (user.name if user else None),
        items=body.items,
        total_price=total,
        shipping_address=body.shipping_address,
        phone=body.phone,
    )
    inserted_id = orders.insert(order.to_mongo())
    logger.info("Order placed", extra={"order_id": inserted_id, "email": email})
    return ApiResponse(
        message="Order placed successfully",
        data=InsertResult(insertedId=inserted_id).model_dump(),
    )


@router.put("/{order_id}", response_model=ApiResponse)
def update_order(
    order_id: str,
    body: OrderUpdate,
    orders: Annotated[OrderRepository, Depends(get_orders)],
    _user: Annotated[CurrentUser | None, Depends(require_writer)],
) -> ApiResponse:
    """Update status, payment status or shipping details. 400 for a malformed id, 404 when not found."""
    changes = body.model_dump(by_alias=True, exclude_unset=True)
    if changes:
        changes["updatedAt"] = datetime.now(UTC)
    if not orders.update(order_id, changes):
        raise NotFoundError("Order not found")
    return ApiResponse(message="Order updated successfully", data=orders.find_by_id(order_id))


@router.delete("/{order_id}", response_model=ApiResponse)
def delete_order(
    order_id: str,
    orders: Annotated[OrderRepository, Depends(get_orders)],
    _user: Annotated[CurrentUser | None, Depends(require_writer)],
) -> ApiResponse:
    if not orders.delete(order_id):
        raise NotFoundError("Order not found")
    return ApiResponse(message="Order deleted successfully")
