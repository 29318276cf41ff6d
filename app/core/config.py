"""Application configuration loaded from environment variables."""

from datetime import timedelta
from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.security import parse_expires_in

# Allowed URL schemes for MONGODB_URI (module-level so validators can use it).
VALID_MONGODB_URI_PREFIXES = (
    "mongodb://",
    "mongodb+srv://",
)


class Settings(BaseSettings):
    """Validated application settings from env and optional .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    APP_ENV: Literal["dev", "prod"] = "dev"
    DEBUG: bool = False
    API_PREFIX: str = ""
    PORT: int = 5000
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = ["*"]

    # MongoDB: required; SERVER_URI is accepted for existing deployments
    MONGODB_URI: str = Field(validation_alias=AliasChoices("MONGODB_URI", "SERVER_URI"))
    MONGODB_DB_NAME: str = "babKrShop"
    MONGODB_TIMEOUT_MS: int = 5000

    USERS_COLLECTION: str = "users"
    PRODUCTS_COLLECTION: str = "baby accessories"
    CATEGORIES_COLLECTION: str = "categories"
    ORDERS_COLLECTION: str = "orders"

    # JWT authentication
    JWT_SECRET: SecretStr
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRES_IN: str = Field(
        default="1d",
        validation_alias=AliasChoices("JWT_EXPIRES_IN", "EXPIRES_IN"),
    )
    BCRYPT_ROUNDS: int = 10

    # When False, catalog and order writes are open to anonymous clients.
    PROTECT_WRITES: bool = True
    ADMIN_ONLY_CATALOG_WRITES: bool = False

    @field_validator("MONGODB_URI")
    @classmethod
    def validate_mongodb_uri(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("MONGODB_URI must be set and non-empty")
        if not any(v.strip().startswith(prefix) for prefix in VALID_MONGODB_URI_PREFIXES):
            raise ValueError(
                "MONGODB_URI must be a MongoDB URL (e.g. mongodb:// or mongodb+srv://)"
            )
        return v.strip()

    @field_validator("MONGODB_DB_NAME")
    @classmethod
    def validate_mongodb_db_name(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("MONGODB_DB_NAME must be set and non-empty")
        return v.strip()

    @field_validator("MONGODB_TIMEOUT_MS")
    @classmethod
    def validate_mongodb_timeout(cls, v: int) -> int:
        if v <= 0 or v > 120_000:
            raise ValueError(
                "MONGODB_TIMEOUT_MS must be greater than 0 and at most 120000"
            )
        return v

    @field_validator("JWT_SECRET")
    @classmethod
    def validate_jwt_secret(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value() or not v.get_secret_value().strip():
            raise ValueError("JWT_SECRET must be set and non-empty")
        return v

    @field_validator("JWT_ALGORITHM")
    @classmethod
    def validate_jwt_algorithm(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("JWT_ALGORITHM must be set and non-empty")
        return v.strip()

    @field_validator("JWT_EXPIRES_IN")
    @classmethod
    def validate_jwt_expires_in(cls, v: str) -> str:
        ttl = parse_expires_in(v)
        if ttl <= timedelta(0) or ttl > timedelta(days=30):
            raise ValueError("JWT_EXPIRES_IN must be between 1 second and 30 days")
        return v.strip()

    @field_validator("BCRYPT_ROUNDS")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        if v < 4 or v > 31:
            raise ValueError("BCRYPT_ROUNDS must be between 4 and 31")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError("LOG_LEVEL must be a standard logging level name")
        return level

    @property
    def jwt_ttl(self) -> timedelta:
        return parse_expires_in(self.JWT_EXPIRES_IN)


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance. Raises ValidationError when required env is missing."""
    return Settings()
