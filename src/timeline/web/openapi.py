from typing import Any

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from pydantic import BaseModel, Field

from timeline.core.modules.session.store import SESSION_COOKIE_NAME


def set_custom_openapi(app: FastAPI) -> None:
    def custom_openapi() -> dict[str, Any]:
        if app.openapi_schema:
            return app.openapi_schema

        openapi_schema = get_openapi(
            title="Timeline Web",
            version="0.1.0",
            summary="Server-side front end of the timeline service",
            routes=app.routes,
        )

        openapi_schema.setdefault("components", {})["securitySchemes"] = {
            "SessionCookie": {
                "type": "apiKey",
                "in": "cookie",
                "name": SESSION_COOKIE_NAME,
                "description": "Signed session token set by login or registration",
            },
        }
        openapi_schema["security"] = [{"SessionCookie": []}]

        # Pages reachable without a session
        public_endpoints = {
            ("GET", "/login"),
            ("POST", "/login"),
            ("GET", "/register"),
            ("POST", "/register"),
            ("GET", "/health"),
        }

        for path, path_item in openapi_schema["paths"].items():
            for method, operation in path_item.items():
                if (method.upper(), path) in public_endpoints:
                    operation["security"] = []

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
                {"message": "Invalid email or password", "type": "credentials_error"},
                {"message": "Login required", "type": "authentication_error"},
                {"message": "The service is temporarily unavailable. Please try again later.", "type": "backend_unavailable"},
            ]
        }
    }
