from typing import Any

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from pydantic import BaseModel, Field


def set_custom_openapi(app: FastAPI) -> None:
    def custom_openapi() -> dict[str, Any]:
        if app.openapi_schema:
            return app.openapi_schema

        openapi_schema = get_openapi(
            title="SessionAuth API",
            version="0.1.0",
            summary="Credential check, signed tokens and in-memory sessions",
            routes=app.routes,
        )

        # Add security schemes
        openapi_schema.setdefault("components", {})["securitySchemes"] = {
            "SignedToken": {
                "type": "apiKey",
                "in": "header",
                "name": "Authorization",
                "description": "Signed token issued at login, raw or as 'Bearer <token>'",
            },
            "SessionId": {
                "type": "apiKey",
                "in": "header",
                "name": "Session-ID",
                "description": "Session identifier issued at login",
            },
        }

        # Only token validation reads both headers
        secured_endpoints = {
            ("POST", "/api/validate-jwt"),
        }

        for path, path_item in openapi_schema["paths"].items():
            for method, operation in path_item.items():
                if (method.upper(), path) in secured_endpoints:
                    operation["security"] = [{"SignedToken": [], "SessionId": []}]

        app.openapi_schema = openapi_schema
        return app.openapi_schema

    app.openapi = custom_openapi  # type: ignore[method-assign]


class ErrorResponse(BaseModel):
    """Standard error response format."""

    message: str = Field(..., description="Human-readable error message")
    type: str = Field(..., description="Machine-readable error type")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"message": "Unauthorized", "type": "authentication_error"},
                {"message": "Session expired", "type": "authentication_error"},
                {"message": "Session not found", "type": "not_found"},
                {"message": "Invalid request", "type": "validation_error"},
            ]
        }
    }
