from __future__ import annotations

from fastapi import FastAPI
from starlette.middleware import Middleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.middleware.cors import CORSMiddleware

from commitai import __version__
from commitai.api.router import endpoint_routers
from commitai.core.config import Settings, get_settings
from commitai.core.errors import AppError
from commitai.core.handlers import handle_app_error
from commitai.core.lifespan import lifespan
from commitai.core.logging import setup_logging
from commitai.core.middleware import log_requests
from commitai.core.routing import ensure_unique_routes


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Application factory for creating FastAPI instances.

    Args:
        settings: Optional settings override. If None, loads from environment.
                  Useful for testing with custom configuration.

    Raises:
        ConfigurationError: if two endpoints share a method and path.
    """
    if settings is None:
        settings = get_settings()

    middleware: list[Middleware] = []
    if settings.cors_allow_origins:
        middleware.append(
            Middleware(
                CORSMiddleware,
                allow_origins=settings.cors_allow_origins,
                allow_credentials=True,
                allow_methods=["GET"],
                allow_headers=["*"],
            )
        )

    app = FastAPI(
        title="CommitAI API",
        version=__version__,
        middleware=middleware,
        lifespan=lifespan,
    )
    routers = endpoint_routers()
    ensure_unique_routes(routers, prefix=settings.api_prefix)
    for router in routers:
        app.include_router(router, prefix=settings.api_prefix)
    app.state.settings = settings

    app.add_middleware(BaseHTTPMiddleware, dispatch=log_requests)
    app.add_exception_handler(AppError, handle_app_error)  # type: ignore[arg-type]

    return app


# Initialize logging once at module load
setup_logging()

# Default app instance for uvicorn (uvicorn commitai.api.app:app)
app = create_app()
