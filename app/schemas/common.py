"""Response envelope shared by catalog and order endpoints."""

from typing import Any

from pydantic import BaseModel


class ApiResponse(BaseModel):
    """{success, message, data} envelope returned by every CRUD route."""

    success: bool = True
    message: str
    data: Any = None


class InsertResult(BaseModel):
    acknowledged: bool = True
    insertedId: str
