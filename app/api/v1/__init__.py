"""API v1 routes."""

from fastapi import APIRouter

from app.api.v1 import auth, categories, health, orders, products

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, tags=["auth"])
router.include_router(products.router, tags=["products"])
router.include_router(categories.router, tags=["categories"])
router.include_router(orders.router, prefix="/orders", tags=["orders"])
