"""Shared pydantic base for documents stored in MongoDB."""

from typing import Annotated, Any

from bson import ObjectId
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer


def validate_object_id(v: Any) -> ObjectId | None:
    if v is None:
        return None
    if isinstance(v, ObjectId):
        return v
    if isinstance(v, str) and ObjectId.is_valid(v):
        return ObjectId(v)
    raise ValueError(f"Invalid ObjectId: {v}")


# ObjectId on the Mongo side, hex string when dumped for JSON.
PyObjectId = Annotated[
    ObjectId,
    BeforeValidator(validate_object_id),
    PlainSerializer(lambda x: str(x), return_type=str, when_used="json"),
]


class Document(BaseModel):
    """Base for documents: optional _id plus field aliases matching stored keys."""

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    id: PyObjectId | None = Field(default=None, alias="_id")

    def to_mongo(self) -> dict[str, Any]:
        """Convert to a MongoDB document (stored key names, no unset _id)."""
        return self.model_dump(by_alias=True, exclude_none=True)


def reject_operator_keys(value: Any, path: str = "") -> Any:
    """
    Raise ValueError when any mapping key, at any depth, starts with '$' or
    contains '.'; MongoDB reads those as operators or nested paths.
    """
    if isinstance(value, dict):
        for key, item in value.items():
            name = str(key)
            where = f"{path}.{name}" if path else name
            if name.startswith("$") or "." in name:
                raise ValueError(f"Field name {where!r} must not start with '$' or contain '.'")
            reject_operator_keys(item, where)
    elif isinstance(value, list):
        for i, item in enumerate(value):
            reject_operator_keys(item, f"{path}[{i}]")
    return value
