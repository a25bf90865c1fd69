from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from timeline.app import App
from timeline.config import Config
from timeline.errors import UserError
from timeline.web.error_handlers import general_exception_handler, user_error_handler
from timeline.web.gate import RouteGateMiddleware
from timeline.web.openapi import set_custom_openapi
from timeline.web.routers import auth_router, pages_router, tweets_router


def create_fastapi_app(app_instance: App, config: Config) -> FastAPI:
    """Create and configure FastAPI application."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
        """FastAPI application lifespan management."""
        async with app_instance.lifespan():
            yield

    app = FastAPI(
        title="Timeline Web",
        lifespan=lifespan,
    )
    # Available before startup so requests made without the lifespan still resolve it
    app.state.app = app_instance
    app.state.config = config

    # Runs ahead of routing; decides allow/redirect from the session cookie alone
    app.add_middleware(RouteGateMiddleware, codec=app_instance.core.codec, secure=config.production)

    if config.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # Health check endpoint (excluded from the route gate)
    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy"}

    app.include_router(auth_router)
    app.include_router(pages_router)
    app.include_router(tweets_router, prefix="/api")

    # Register error handlers
    app.add_exception_handler(UserError, user_error_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    set_custom_openapi(app)

    return app
