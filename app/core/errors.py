"""Application error taxonomy. Each error carries the HTTP status it maps to."""


class AppError(Exception):
    """Base class for errors that are reported to the client as-is."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class BadRequestError(AppError):
    """Request body or query is missing required data."""

    status_code = 400


class DuplicateUserError(AppError):
    """A user with the same email is already registered."""

    status_code = 400

    def __init__(self, message: str = "User already exists") -> None:
        super().__init__(message)


class InvalidCredentialsError(AppError):
    """Login failed: unknown email or wrong password."""

    status_code = 401

    def __init__(self, message: str = "Invalid email or password") -> None:
        super().__init__(message)


class UnauthorizedError(AppError):
    """Bearer token missing, malformed, expired or signed with another secret."""

    status_code = 401


class ForbiddenError(AppError):
    status_code = 403


class InvalidIdentifierError(AppError):
    """Path identifier is not a valid document id."""

    status_code = 400


class NotFoundError(AppError):
    status_code = 404


class StoreUnavailableError(AppError):
    """The document store could not be reached or the operation failed in transport."""

    status_code = 503

    def __init__(self, message: str = "Database unavailable") -> None:
        super().__init__(message)
