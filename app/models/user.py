"""User document for registration, login and role checks."""

from typing import Any

from pydantic import AliasChoices, Field, field_validator

from app.models.base import Document

DEFAULT_ROLE = "customer"


class User(Document):
    """
    Registered account. email is unique (unique index on the users collection).

    role is a free-form tag such as 'customer' or 'admin'. Documents written by
    earlier deployments keep the hash under 'password' and may hold null name
    or role; both are still read.
    """

    name: str | None = None
    email: str
    role: str = DEFAULT_ROLE
    password_hash: str = Field(
        alias="passwordHash",
        validation_alias=AliasChoices("passwordHash", "password"),
    )

    @field_validator("role", mode="before")
    @classmethod
    def default_missing_role(cls, v: Any) -> Any:
        if v is None or (isinstance(v, str) and not v.strip()):
            return DEFAULT_ROLE
        return v
