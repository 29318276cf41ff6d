"""Product endpoints: list, read, search by category, create, update, delete."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from app.api.v1.auth import require_catalog_writer
from app.core.config import Settings
from app.core.database import MongoStore, get_app_settings, get_store
from app.core.errors import NotFoundError
from app.repositories.catalog import ProductRepository
from app.schemas.auth import CurrentUser
from app.schemas.catalog import ProductCreate, ProductUpdate
from app.schemas.common import ApiResponse, InsertResult

logger = logging.getLogger(__name__)
router = APIRouter()


def get_products(
    store: Annotated[MongoStore, Depends(get_store)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> ProductRepository:
    return ProductRepository(store.collection(settings.PRODUCTS_COLLECTION))


@router.get("/products", response_model=ApiResponse)
def list_products(
    products: Annotated[ProductRepository, Depends(get_products)],
) -> ApiResponse:
    return ApiResponse(
        message="All Products retrieved successfully",
        data=products.find_all(),
    )


@router.get("/products/{product_id}", response_model=ApiResponse)
def get_product(
    product_id: str,
    products: Annotated[ProductRepository, Depends(get_products)],
) -> ApiResponse:
    product = products.find_by_id(product_id)
    if product is None:
        raise NotFoundError("Product not found")
    return ApiResponse(message="Product retrieved successfully", data=product)


@router.get("/baby-accessories", response_model=ApiResponse)
def list_by_category(
    products: Annotated[ProductRepository, Depends(get_products)],
    category: Annotated[str | None, Query(max_length=200)] = None,
) -> ApiResponse:
    """Products whose category contains the query text (case-insensitive); all when omitted."""
    return ApiResponse(message="success", data=products.search_by_category(category))


@router.post("/products", response_model=ApiResponse, status_code=status.HTTP_201_CREATED)
@router.post("/product", response_model=ApiResponse, status_code=status.HTTP_201_CREATED)
def create_product(
    body: ProductCreate,
    products: Annotated[ProductRepository, Depends(get_products)],
    _user: Annotated[CurrentUser | None, Depends(require_catalog_writer)],
) -> ApiResponse:
    inserted_id = products.insert(body.model_dump(by_alias=True, exclude_unset=True))
    logger.info("Product created", extra={"product_id": inserted_id})
    return ApiResponse(
        message="Product created successfully",
        data=InsertResult(insertedId=inserted_id).model_dump(),
    )


@router.put("/products/{product_id}", response_model=ApiResponse)
def update_product(
    product_id: str,
    body: ProductUpdate,
    products: Annotated[ProductRepository, Depends(get_products)],
    _user: Annotated[CurrentUser | None, Depends(require_catalog_writer)],
) -> ApiResponse:
    """Set the fields present in the body. 400 for a malformed id, 404 when no product matches."""
    changes = body.model_dump(by_alias=True, exclude_unset=True)
    if not products.update(product_id, changes):
        raise NotFoundError("Product not found")
    return ApiResponse(message="Product updated successfully", data=products.find_by_id(product_id))


@router.delete("/products/{product_id}", response_model=ApiResponse)
def delete_product(
    product_id: str,
    products: Annotated[ProductRepository, Depends(get_products)],
    _user: Annotated[CurrentUser | None, Depends(require_catalog_writer)],
) -> ApiResponse:
    if not products.delete(product_id):
        raise NotFoundError("Product not found")
    logger.info("Product deleted", extra={"product_id": product_id})
    return ApiResponse(message="Product deleted successfully")
