from __future__ import annotations

import logging
import os
from typing import Optional

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .config import Settings, get_settings
from .logging_config import setup_logging
from .middleware.error_handler import error_handler
from .middleware.rate_limit import RateLimitMiddleware
from .middleware.security_headers import SecurityHeadersMiddleware
from .routes import frontend, system

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application.

    Without ``settings`` the app is configured from the environment, logging
    included. Passing ``settings`` replaces the environment-derived settings
    for every route and leaves logging alone, which is how the tests build it.
    """
    app = FastAPI(title="Advent of Code Leaderboard", version=__version__)
    if settings is None:
        setup_logging()
        settings = get_settings()
    else:
        app.dependency_overrides[get_settings] = lambda: settings

    frontend.register_routes(app)
    app.include_router(system.router)
    app.add_exception_handler(StarletteHTTPException, error_handler)
    app.add_exception_handler(Exception, error_handler)

    app.add_middleware(SecurityHeadersMiddleware, hsts=settings.cookie_secure)

    # Added last so it runs first
    if settings.rate_limit_enabled:
        logger.info(
            f"Rate limiting form actions: {settings.rate_limit_requests} requests "
            f"per {settings.rate_limit_window_seconds} seconds"
        )
        app.add_middleware(
            RateLimitMiddleware,
            requests=settings.rate_limit_requests,
            window_seconds=settings.rate_limit_window_seconds,
        )
    else:
        logger.warning("Rate limiting is DISABLED. Only use this in trusted environments.")

    return app


def main() -> None:
    import uvicorn

    port = int(os.getenv("PORT", "8000"))
    uvicorn.run(create_app(), host=os.getenv("HOST", "127.0.0.1"), port=port)


if __name__ == "__main__":
    main()
