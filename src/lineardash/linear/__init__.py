"""Linear client - reads the viewer's assigned issues from the Linear GraphQL API."""

from lineardash.linear.client import LinearClient
from lineardash.linear.exceptions import (
    LinearAuthError,
    LinearError,
    LinearRequestError,
    LinearResponseError,
)
from lineardash.linear.fetcher import IssueFetcher, fetch_assigned_issues, gather_all
from lineardash.linear.models import Issue, IssueRef, Team, Viewer, WorkflowState

__all__ = [
    "Issue",
    "IssueFetcher",
    "IssueRef",
    "LinearAuthError",
    "LinearClient",
    "LinearError",
    "LinearRequestError",
    "LinearResponseError",
    "Team",
    "Viewer",
    "WorkflowState",
    "fetch_assigned_issues",
    "gather_all",
]
