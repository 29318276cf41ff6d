"""Registration and login: credential store + password hasher + token issuer."""

import logging

from app.core.config import Settings
from app.core.errors import DuplicateUserError, InvalidCredentialsError, UnauthorizedError
from app.core.security import (
    InvalidTokenError,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from app.models.user import User
from app.repositories.users import UserRepository
from app.schemas.auth import CurrentUser

logger = logging.getLogger(__name__)


class AuthService:
    """
    Stateless auth operations. Every login issues a fresh token; nothing is
    kept server-side between requests.
    """

    def __init__(self, users: UserRepository, settings: Settings) -> None:
        self.users = users
        self.settings = settings

    def register(self, name: str, email: str, role: str, password: str) -> User:
        """
        Create a user with a bcrypt hash of password.
        Raises DuplicateUserError when the email is already registered.
        """
        if self.users.find_by_email(email) is not None:
            logger.info("Registration rejected: email already exists", extra={"email": email})
            raise DuplicateUserError()
        user = User(
            name=name,
            email=email,
            role=role,
            password_hash=hash_password(password, rounds=self.settings.BCRYPT_ROUNDS),
        )
        # The unique index also raises DuplicateUserError if a concurrent request won the race.
        created = self.users.insert(user)
        logger.info("User registered", extra={"email": email, "role": role})
        return created

    def login(self, email: str, password: str) -> str:
        """Verify credentials and return a signed access token. Raises InvalidCredentialsError."""
        user = self.users.find_by_email(email)
        if user is None:
            logger.info("Login failed", extra={"email": email, "reason": "unknown_email"})
            raise InvalidCredentialsError()
        if not verify_password(password, user.password_hash):
            logger.info("Login failed", extra={"email": email, "reason": "bad_password"})
            raise InvalidCredentialsError()
        return self.issue_token(user)

    def issue_token(self, user: User) -> str:
        claims = {"email": user.email, "role": user.role, "name": user.name or None}
        return create_access_token(
            claims,
            self.settings.JWT_SECRET.get_secret_value(),
            self.settings.jwt_ttl,
            algorithm=self.settings.JWT_ALGORITHM,
        )


def verify_token(token: str, settings: Settings) -> CurrentUser:
    """
    Return the identity carried by a bearer token.
    Raises UnauthorizedError for malformed, tampered or expired tokens.
    """
    try:
        payload = decode_access_token(
            token,
            settings.JWT_SECRET.get_secret_value(),
            algorithm=settings.JWT_ALGORITHM,
        )
    except InvalidTokenError as e:
        logger.info("Token rejected", extra={"reason": e.reason})
        raise UnauthorizedError("Invalid or expired token") from e
    email = payload.get("email")
    role = payload.get("role")
    if not email or not role:
        logger.info("Token rejected", extra={"reason": "missing_claims"})
        raise UnauthorizedError("Invalid token payload")
    return CurrentUser(email=email, role=role, name=payload.get("name"))
