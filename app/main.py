"""FastAPI application entrypoint. No business logic; only wiring, lifecycle and error mapping."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import UTC, datetime

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.v1 import router as v1_router
from app.core.config import Settings, get_settings
from app.core.database import MongoStore
from app.core.errors import AppError, UnauthorizedError
from app.core.logging import configure_logging
from app.schemas.health import RootStatus

logger = logging.getLogger(__name__)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Known errors: report the message with the status the error maps to."""
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, UnauthorizedError) else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.message},
        headers=headers,
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={"success": False, "message": "Invalid request", "errors": errors},
    )


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Anything else: log with traceback, never leak internals to the client."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"success": False, "message": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)


def create_app(settings: Settings | None = None, store: MongoStore | None = None) -> FastAPI:
    """
    Build the app. Settings are read from env when not given (missing
    MONGODB_URI or JWT_SECRET fails here, before the server starts).
    """
    load_dotenv()
    settings = settings or get_settings()
    store = store or MongoStore.from_settings(settings)
    configure_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        store.connect(users_collection=settings.USERS_COLLECTION)
        try:
            yield
        finally:
            store.close()

    app = FastAPI(
        title="Baby Accessories Shop API",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS if settings.APP_ENV == "dev" else [
            origin for origin in settings.CORS_ORIGINS if origin != "*"
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    @app.get("/", response_model=RootStatus)
    def root() -> RootStatus:
        """Root route; reports that the server is up."""
        return RootStatus(
            status_message="Baby Care Shop Server is running very smoothly!",
            time_stamp=datetime.now(UTC),
        )

    app.include_router(v1_router, prefix=settings.API_PREFIX)
    return app


def main() -> None:
    settings = get_settings()
    uvicorn.run("app.main:create_app", factory=True, host="0.0.0.0", port=settings.PORT)


if __name__ == "__main__":
    main()
