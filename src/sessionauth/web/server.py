from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from sessionauth.app import App
from sessionauth.errors import UserError
from sessionauth.web.error_handlers import (
    general_exception_handler,
    request_validation_error_handler,
    user_error_handler,
)
from sessionauth.web.openapi import set_custom_openapi
from sessionauth.web.routers import auth_router, session_router


def create_fastapi_app(app_instance: App) -> FastAPI:
    """Create and configure FastAPI application."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
        """FastAPI application lifespan management."""
        async with app_instance.lifespan():
            yield

    app = FastAPI(
        title="SessionAuth API",
        lifespan=lifespan,
    )

    # Store app instance in app state
    app.state.app = app_instance

    app.include_router(auth_router, prefix="/api")
    app.include_router(session_router, prefix="/api")

    # Register error handlers
    app.add_exception_handler(UserError, user_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    set_custom_openapi(app)

    return app
