"""Category endpoints: list and create."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from app.api.v1.auth import require_catalog_writer
from app.core.config import Settings
from app.core.database import MongoStore, get_app_settings, get_store
from app.repositories.catalog import CategoryRepository
from app.schemas.auth import CurrentUser
from app.schemas.catalog import CategoryCreate
from app.schemas.common import ApiResponse, InsertResult

router = APIRouter()


def get_categories(
    store: Annotated[MongoStore, Depends(get_store)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> CategoryRepository:
    return CategoryRepository(store.collection(settings.CATEGORIES_COLLECTION))


@router.get("/categories", response_model=ApiResponse)
def list_categories(
    categories: Annotated[CategoryRepository, Depends(get_categories)],
) -> ApiResponse:
    return ApiResponse(
        message="All Categories retrieved successfully",
        data=categories.find_all(),
    )


@router.post("/categories", response_model=ApiResponse, status_code=status.HTTP_201_CREATED)
@router.post("/category", response_model=ApiResponse, status_code=status.HTTP_201_CREATED)
def create_category(
    body: CategoryCreate,
    categories: Annotated[CategoryRepository, Depends(get_categories)],
    _user: Annotated[CurrentUser | None, Depends(require_catalog_writer)],
) -> ApiResponse:
    inserted_id = categories.insert(body.model_dump(exclude_unset=True))
    return ApiResponse(
        message="Category created successfully",
        data=InsertResult(insertedId=inserted_id).model_dump(),
    )
