"""IssueFetcher - Loads the viewer's assigned issues with their state and team."""

from __future__ import annotations

import asyncio
import dataclasses
from collections.abc import Awaitable, Iterable
from typing import Protocol, TypeVar

from lineardash.config import DashboardConfig
from lineardash.linear.client import LinearClient
from lineardash.linear.exceptions import LinearError, LinearRequestError
from lineardash.linear.models import Issue, IssueRef, Team, Viewer, WorkflowState
from lineardash.logging import get_logger

logger = get_logger("linear")

T = TypeVar("T")


class IssueSource(Protocol):
    """Interface of the Linear client calls the fetcher relies on."""

    async def get_viewer(self) -> Viewer: ...

    async def list_assigned_issues(self, user_id: str, first: int = ...) -> list[IssueRef]: ...

    async def get_workflow_state(self, state_id: str) -> WorkflowState | None: ...

    async def get_team(self, team_id: str) -> Team | None: ...

    async def close(self) -> None: ...


class ClientFactory(Protocol):
    """Builds an IssueSource from connection settings."""

    def __call__(self, api_key: str, base_url: str, timeout: float) -> IssueSource: ...


async def gather_all(awaitables: Iterable[Awaitable[T]]) -> list[T]:
    """Run awaitables concurrently and wait for all of them.

    Results are returned in input order. If any awaitable raises, every task
    still pending is cancelled and the first exception is re-raised.
    """
    tasks = [asyncio.ensure_future(aw) for aw in awaitables]
    if not tasks:
        return []

    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            task.cancel()
        # Let cancelled tasks finish unwinding before the error propagates
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


class IssueFetcher:
    """Fetches the issues assigned to the owner of the configured API key.

    One list call is followed by a concurrent fan-out of state and team
    lookups for every issue. The fetch is all-or-nothing: any failure fails
    the whole batch.
    """

    def __init__(
        self,
        config: DashboardConfig,
        client_factory: ClientFactory = LinearClient,
    ) -> None:
        """Initialize the fetcher.

        Args:
            config: Dashboard configuration (API key, endpoint, timeout, page size).
            client_factory: Builds the Linear client; replaced in tests.
        """
        self.config = config
        self.client_factory = client_factory

    async def fetch_issues(self) -> list[Issue]:
        """Fetch assigned issues, propagating any Linear failure.

        Returns:
            Resolved issues in upstream order, or an empty list when no API
            key is configured (no client is created in that case).

        Raises:
            LinearError: If any upstream call fails.
        """
        api_key = self.config.api_key
        if not api_key:
            logger.info("No Linear API key configured; skipping fetch")
            return []

        try:
            client = self.client_factory(
                api_key=api_key,
                base_url=self.config.api_url,
                timeout=self.config.timeout,
            )
        except LinearError:
            raise
        except Exception as e:
            raise LinearRequestError(
                f"Could not create Linear client: {type(e).__name__}: {e}"
            ) from e

        try:
            viewer = await client.get_viewer()
            refs = await client.list_assigned_issues(viewer.id, first=self.config.page_size)
            issues = await gather_all(self._resolve(client, ref) for ref in refs)
        except LinearError:
            raise
        except Exception as e:
            # Clients other than LinearClient may raise their own types
            raise LinearError(f"Unexpected client failure: {type(e).__name__}: {e}") from e
        finally:
            await client.close()

        logger.info("Fetched %d issue(s) for %s", len(issues), viewer.name or viewer.id)
        return issues

    async def fetch_assigned_issues(self) -> list[Issue]:
        """Fetch assigned issues, degrading to an empty list on failure.

        This is where upstream errors are deliberately discarded: the failure
        is logged and the page shows no issues rather than an error.
        """
        try:
            return await self.fetch_issues()
        except LinearError as e:
            logger.error("Error fetching issues: %s: %s", type(e).__name__, e)
            return []

    async def _resolve(self, client: IssueSource, ref: IssueRef) -> Issue:
        state, team = await gather_all(
            [self._get_state(client, ref.state_id), self._get_team(client, ref.team_id)]
        )
        return Issue.from_ref(ref, state=state, team=team)

    @staticmethod
    async def _get_state(client: IssueSource, state_id: str | None) -> WorkflowState | None:
        if not state_id:
            return None
        return await client.get_workflow_state(state_id)

    @staticmethod
    async def _get_team(client: IssueSource, team_id: str | None) -> Team | None:
        if not team_id:
            return None
        return await client.get_team(team_id)


async def fetch_assigned_issues(
    api_key: str | None,
    config: DashboardConfig | None = None,
    client_factory: ClientFactory = LinearClient,
) -> list[Issue]:
    """Fetch the issues assigned to the owner of ``api_key``.

    Returns an empty list without touching the network when ``api_key`` is
    missing, and an empty list (after logging) when any upstream call fails.

    Args:
        api_key: Linear API key, or None when not configured.
        config: Other connection settings; defaults are used when omitted.
        client_factory: Builds the Linear client; replaced in tests.
    """
    base = config if config is not None else DashboardConfig()
    fetcher = IssueFetcher(
        dataclasses.replace(base, api_key=api_key or None),
        client_factory=client_factory,
    )
    return await fetcher.fetch_assigned_issues()
