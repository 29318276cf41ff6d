"""Password hashing and JWT creation/verification for authentication."""

import re
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

# Bcrypt cost (rounds); 10 matches the cost existing password hashes were created with.
BCRYPT_ROUNDS = 10
BCRYPT_MAX_BYTES = 72

DEFAULT_ALGORITHM = "HS256"

_EXPIRES_IN_RE = re.compile(r"^\s*(\d+)\s*([smhdw]?)\s*$", re.IGNORECASE)
_EXPIRES_IN_UNITS = {
    "": "seconds",
    "s": "seconds",
    "m": "minutes",
    "h": "hours",
    "d": "days",
    "w": "weeks",
}


class InvalidTokenError(Exception):
    """Raised when a token cannot be trusted. reason: malformed, bad_signature, expired or invalid."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


def hash_password(plain_password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt only reads the first 72 bytes; newer releases raise instead of truncating.
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError, AttributeError):
        return False


def parse_expires_in(value: str | int) -> timedelta:
    """
    Parse a token lifetime: bare seconds ("3600", 3600) or a count with a unit
    suffix s, m, h, d or w ("30m", "1d"). Raises ValueError for anything else.
    """
    if isinstance(value, int):
        return timedelta(seconds=value)
    match = _EXPIRES_IN_RE.match(value or "")
    if match is None:
        raise ValueError(f"Invalid token lifetime: {value!r}")
    amount, unit = match.groups()
    return timedelta(**{_EXPIRES_IN_UNITS[unit.lower()]: int(amount)})


def create_access_token(
    claims: dict[str, Any],
    secret: str,
    ttl: timedelta,
    algorithm: str = DEFAULT_ALGORITHM,
) -> str:
    """Create a signed JWT carrying claims plus iat and exp (now + ttl)."""
    now = datetime.now(UTC)
    payload: dict[str, Any] = {
        **{k: v for k, v in claims.items() if v is not None},
        "iat": now,
        "exp": now + ttl,
    }
    return jwt.encode(payload, secret, algorithm=algorithm)


def decode_access_token(
    token: str,
    secret: str,
    algorithm: str = DEFAULT_ALGORITHM,
) -> dict[str, Any]:
    """
    Decode and validate a JWT; return its payload.
    Raises InvalidTokenError with a reason suitable for logs; callers should
    report every reason to the client the same way.
    """
    try:
        return jwt.decode(
            token,
            secret,
            algorithms=[algorithm],
            options={"require": ["exp"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise InvalidTokenError("expired") from e
    except jwt.InvalidSignatureError as e:
        raise InvalidTokenError("bad_signature") from e
    except jwt.DecodeError as e:
        raise InvalidTokenError("malformed") from e
    except jwt.PyJWTError as e:
        raise InvalidTokenError("invalid") from e
