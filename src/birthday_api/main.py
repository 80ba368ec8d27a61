from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .app_logging import configure_logging
from .errors import NotFoundError
from .repositories import InMemoryBirthdayRepository
from .routers import birthdays as birthdays_router
from .routers import settings as settings_router
from .settings import Settings, get_settings
from .settings_stores import NotificationSettingsStore, ReminderSettingsStore

logger = logging.getLogger(__name__)

openapi_tags = [
    {"name": "health", "description": "Service health and status endpoints."},
    {
        "name": "birthdays",
        "description": "CRUD operations for birthday records, calendar ordering and statistics.",
    },
    {
        "name": "settings",
        "description": "Reminder schedule and notification channel settings.",
    },
]


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Return a consistent JSON structure for request validation errors.

    Response format:
        {
            "error": "ValidationError",
            "detail": [... pydantic/fastapi error details ...],
            "message": "Request validation failed"
        }
    """
    return JSONResponse(
        status_code=400,
        content={
            "error": "ValidationError",
            "message": "Request validation failed",
            "detail": jsonable_encoder(exc.errors()),
        },
    )


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": "Birthday not found"})


async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"error": "InternalError", "message": "Internal server error"},
    )


# PUBLIC_INTERFACE
def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application with its own record store and settings stores.

    Each call returns an independent application; the stores live as long as
    the application and are reached by handlers through app.state.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Birthday Tracker",
        description="Backend API for tracking birthdays, with reminder and notification channel settings.",
        version="0.1.0",
        openapi_tags=openapi_tags,
    )

    app.state.settings = settings
    app.state.birthdays = InMemoryBirthdayRepository()
    app.state.reminder_settings = ReminderSettingsStore()
    app.state.notification_settings = NotificationSettingsStore()

    # Configure CORS based on settings (.env -> CORS_ALLOW_ORIGINS), with '*' fallback
    allow_all = (settings.cors_allow_origins == ["*"]) or (len(settings.cors_allow_origins) == 0)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all else settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(Exception, internal_error_handler)

    # PUBLIC_INTERFACE
    @app.get("/", summary="Health Check", tags=["health"])
    def health_check():
        """
        Health check endpoint.

        Returns:
            A JSON object indicating service health.
        """
        return {"message": "Healthy", "records": len(app.state.birthdays.list())}

    app.include_router(birthdays_router.router)
    app.include_router(settings_router.router)

    logger.info(
        "Application created (locale=%s, leap_day_rule=%s)",
        settings.display_locale,
        settings.leap_day_rule,
    )
    return app


app = create_app()
