"""FastAPI application setup."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from lineardash import __version__
from lineardash.config import DashboardConfig
from lineardash.logging import get_logger, setup_logging
from lineardash.web.dependencies import close_config, init_config
from lineardash.web.routes import dashboard, health

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = get_logger("web")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    # Startup
    if app.state.configure_logging:
        setup_logging()
    config = init_config(app.state.config)
    if config.has_credential:
        logger.info("Dashboard ready (endpoint=%s, page_size=%d)", config.api_url, config.page_size)
    else:
        logger.info("LINEAR_API_KEY not set; serving setup instructions")

    yield
    # Shutdown
    close_config()


def create_app(
    config: DashboardConfig | None = None, configure_logging: bool = True
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: Dashboard configuration. Loaded from the environment when omitted.
        configure_logging: Whether to install the rotating file and console handlers on startup.
    """
    app = FastAPI(
        title="Linear Tasks Dashboard",
        description="Your assigned tasks from Linear",
        version=__version__,
        lifespan=lifespan,
    )

    # Store config for lifespan manager
    app.state.config = config if config is not None else DashboardConfig.from_env()
    app.state.configure_logging = configure_logging

    app.include_router(dashboard.router)
    app.include_router(health.router)

    return app


# Default app instance
app = create_app()
