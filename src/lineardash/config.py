"""Dashboard configuration, loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_API_URL = "https://api.linear.app/graphql"
DEFAULT_TIMEOUT = 10.0
DEFAULT_PAGE_SIZE = 50
DEFAULT_REVALIDATE_SECONDS = 60


@dataclass(frozen=True)
class DashboardConfig:
    """Configuration for the dashboard.

    ``api_key`` is ``None`` when no credential is configured. That is a valid
    state: the page renders setup instructions instead of issues.
    """

    api_key: str | None = None
    api_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT
    page_size: int = DEFAULT_PAGE_SIZE
    revalidate_seconds: int = DEFAULT_REVALIDATE_SECONDS

    @classmethod
    def from_env(cls) -> DashboardConfig:
        api_key = os.getenv("LINEAR_API_KEY", "").strip() or None
        api_url = os.getenv("LINEAR_API_URL", DEFAULT_API_URL).strip() or DEFAULT_API_URL
        timeout = float(os.getenv("LINEARDASH_TIMEOUT", str(DEFAULT_TIMEOUT)))
        page_size = int(os.getenv("LINEARDASH_PAGE_SIZE", str(DEFAULT_PAGE_SIZE)))
        revalidate_seconds = int(
            os.getenv("LINEARDASH_REVALIDATE_SECONDS", str(DEFAULT_REVALIDATE_SECONDS))
        )

        config = cls(
            api_key=api_key,
            api_url=api_url,
            timeout=timeout,
            page_size=page_size,
            revalidate_seconds=revalidate_seconds,
        )
        config.validate()
        return config

    @property
    def has_credential(self) -> bool:
        return bool(self.api_key)

    def validate(self) -> None:
        if self.timeout <= 0:
            msg = "LINEARDASH_TIMEOUT must be a positive number of seconds"
            raise ValueError(msg)
        if not 1 <= self.page_size <= 250:
            msg = "LINEARDASH_PAGE_SIZE must be between 1 and 250"
            raise ValueError(msg)
        if self.revalidate_seconds < 0:
            msg = "LINEARDASH_REVALIDATE_SECONDS must not be negative"
            raise ValueError(msg)
