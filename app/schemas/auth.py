"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RegisterRequest(BaseModel):
    """New account details."""

    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    email: str = Field(..., min_length=3, max_length=320, description="Email (login key)")
    role: str = Field(default="customer", min_length=1, max_length=32, description="Role tag")
    password: str = Field(..., min_length=1, max_length=128, description="Password")

    @field_validator("name", "email", "role")
    @classmethod
    def strip_and_require(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: str = Field(..., min_length=1, max_length=320, description="Email")
    password: str = Field(..., min_length=1, max_length=128, description="Password")

    @field_validator("email")
    @classmethod
    def strip_email(cls, v: str) -> str:
        return v.strip()


class MessageResponse(BaseModel):
    success: bool = True
    message: str


class LoginResponse(BaseModel):
    """JWT returned after successful login, under both keys existing clients read."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str = "Login successful"
    token: str = Field(..., description="JWT access token")
    access_token: str = Field(..., alias="accessToken", description="Same JWT as token")
    token_type: str = Field(default="bearer", alias="tokenType")


class CurrentUser(BaseModel):
    """Authenticated identity taken from verified token claims."""

    email: str
    role: str
    name: str | None = None


class CurrentUserResponse(BaseModel):
    success: bool = True
    message: str = "Authenticated user retrieved successfully"
    data: CurrentUser
