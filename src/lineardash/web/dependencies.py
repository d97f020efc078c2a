"""FastAPI dependencies for dependency injection."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from lineardash.config import DashboardConfig
from lineardash.linear import IssueFetcher

# Global config (initialized on app creation)
_config: DashboardConfig | None = None


def init_config(config: DashboardConfig) -> DashboardConfig:
    """Initialize the global DashboardConfig instance."""
    global _config  # noqa: PLW0603
    _config = config
    return _config


def close_config() -> None:
    """Drop the global DashboardConfig instance."""
    global _config  # noqa: PLW0603
    _config = None


def get_config() -> DashboardConfig:
    """Dependency that provides the DashboardConfig instance."""
    if _config is None:
        raise RuntimeError("DashboardConfig not initialized. Call init_config() first.")
    return _config


# Type alias for dependency injection
ConfigDep = Annotated[DashboardConfig, Depends(get_config)]


def get_fetcher(config: ConfigDep) -> IssueFetcher:
    """Dependency that provides a fresh IssueFetcher per request."""
    return IssueFetcher(config)


# Type alias for dependency injection
FetcherDep = Annotated[IssueFetcher, Depends(get_fetcher)]
