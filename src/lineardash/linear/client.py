"""LinearClient - Read-only access to the Linear GraphQL API."""

from __future__ import annotations

from datetime import datetime
from typing import Any

import httpx

from lineardash.config import DEFAULT_API_URL, DEFAULT_TIMEOUT
from lineardash.linear.exceptions import (
    LinearAuthError,
    LinearRequestError,
    LinearResponseError,
)
from lineardash.linear.models import IssueRef, Team, Viewer, WorkflowState
from lineardash.logging import get_logger, sanitize_for_log

logger = get_logger("linear")

VIEWER_QUERY = """
query {
    viewer {
        id
        name
        email
    }
}
"""

ASSIGNED_ISSUES_QUERY = """
query($userId: String!, $first: Int!) {
    user(id: $userId) {
        assignedIssues(first: $first) {
            nodes {
                id
                identifier
                title
                priority
                url
                createdAt
                state {
                    id
                }
                team {
                    id
                }
            }
        }
    }
}
"""

WORKFLOW_STATE_QUERY = """
query($id: String!) {
    workflowState(id: $id) {
        name
        color
    }
}
"""

TEAM_QUERY = """
query($id: String!) {
    team(id: $id) {
        name
        key
    }
}
"""


def _parse_datetime(value: str) -> datetime:
    # Linear sends UTC timestamps with a trailing "Z"
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def _parse_issue_ref(node: dict[str, Any]) -> IssueRef:
    state = node.get("state") or {}
    team = node.get("team") or {}
    return IssueRef(
        id=str(node["id"]),
        identifier=str(node["identifier"]),
        title=str(node["title"]),
        priority=int(node.get("priority") or 0),
        url=str(node["url"]),
        created_at=_parse_datetime(node["createdAt"]),
        state_id=state.get("id"),
        team_id=team.get("id"),
    )


def _is_auth_failure(response: httpx.Response) -> bool:
    # Linear reports a bad key as HTTP 400 with an AUTHENTICATION_ERROR extension
    if response.status_code != 400:
        return False
    try:
        errors = response.json().get("errors") or []
    except (ValueError, AttributeError):
        return False
    return any(
        (error.get("extensions") or {}).get("code") == "AUTHENTICATION_ERROR"
        for error in errors
        if isinstance(error, dict)
    )


class LinearClient:
    """Async client for the Linear GraphQL API.

    Only the read calls the dashboard needs are implemented: the current
    viewer, their assigned issues, and the workflow state and team behind
    each issue.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: Linear personal API key
            base_url: Linear GraphQL endpoint (for testing/proxies)
            timeout: Per-request timeout in seconds
        """
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Get or create HTTP client for GraphQL API."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                headers={
                    # Personal API keys are sent as-is, without "Bearer"
                    "Authorization": self.api_key,
                    "Content-Type": "application/json",
                },
                timeout=self.timeout,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> LinearClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def _graphql(
        self, query: str, variables: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """Execute a GraphQL query.

        Args:
            query: GraphQL query string
            variables: Query variables

        Returns:
            Response data

        Raises:
            LinearAuthError: If the API key is rejected
            LinearRequestError: If the request fails
            LinearResponseError: If the response carries errors or no data
        """
        payload: dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = variables

        try:
            response = await self.client.post(self.base_url, json=payload)
        except httpx.HTTPError as e:
            raise LinearRequestError(
                f"GraphQL request failed: {type(e).__name__}: {sanitize_for_log(str(e))}"
            ) from e

        if response.status_code in (401, 403) or _is_auth_failure(response):
            raise LinearAuthError(f"Linear rejected the API key ({response.status_code})")
        if response.status_code != 200:
            raise LinearRequestError(
                f"GraphQL request failed: {response.status_code} - "
                f"{sanitize_for_log(response.text[:500])}"
            )

        try:
            data = response.json()
        except ValueError as e:
            raise LinearResponseError("GraphQL response is not valid JSON") from e

        if not isinstance(data, dict):
            raise LinearResponseError(f"GraphQL response is not an object: {type(data).__name__}")
        if data.get("errors"):
            raise LinearResponseError(f"GraphQL errors: {data['errors']}")
        if not isinstance(data.get("data"), dict):
            raise LinearResponseError("GraphQL response has no data")

        return dict(data["data"])

    async def get_viewer(self) -> Viewer:
        """Get the user the API key belongs to.

        Raises:
            LinearResponseError: If the viewer is missing from the response
        """
        data = await self._graphql(VIEWER_QUERY)
        viewer = data.get("viewer")
        if not isinstance(viewer, dict) or not viewer.get("id"):
            raise LinearResponseError("Viewer not found in response")

        return Viewer(
            id=str(viewer["id"]),
            name=viewer.get("name") or "",
            email=viewer.get("email") or "",
        )

    async def list_assigned_issues(self, user_id: str, first: int = 50) -> list[IssueRef]:
        """Get the first issues assigned to a user.

        Issues come back in Linear's default order; no sort is applied.

        Args:
            user_id: Linear user ID (usually the viewer's)
            first: Page size

        Returns:
            Issue references with unresolved state and team
        """
        logger.debug("Listing up to %d issue(s) assigned to %s", first, user_id)
        data = await self._graphql(ASSIGNED_ISSUES_QUERY, {"userId": user_id, "first": first})

        user = data.get("user")
        if not user:
            raise LinearResponseError(f"User {user_id} not found")

        try:
            nodes = user["assignedIssues"]["nodes"]
            refs = [_parse_issue_ref(node) for node in nodes]
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise LinearResponseError(f"Malformed issue list: {e!r}") from e

        logger.info("Found %d assigned issue(s)", len(refs))
        return refs

    async def get_workflow_state(self, state_id: str) -> WorkflowState | None:
        """Get a workflow state by ID. Returns None if Linear has no such state."""
        data = await self._graphql(WORKFLOW_STATE_QUERY, {"id": state_id})
        state = data.get("workflowState")
        if not state:
            return None

        try:
            return WorkflowState(name=str(state["name"]), color=str(state["color"]))
        except (KeyError, TypeError) as e:
            raise LinearResponseError(f"Malformed workflow state {state_id}: {e!r}") from e

    async def get_team(self, team_id: str) -> Team | None:
        """Get a team by ID. Returns None if Linear has no such team."""
        data = await self._graphql(TEAM_QUERY, {"id": team_id})
        team = data.get("team")
        if not team:
            return None

        try:
            return Team(name=str(team["name"]), key=str(team["key"]))
        except (KeyError, TypeError) as e:
            raise LinearResponseError(f"Malformed team {team_id}: {e!r}") from e
