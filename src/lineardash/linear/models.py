"""Data models for Linear issues."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Viewer:
    """The user the API key belongs to."""

    id: str
    name: str = ""
    email: str = ""


@dataclass(frozen=True)
class WorkflowState:
    """Workflow status of an issue, e.g. "In Progress"."""

    name: str
    color: str  # hex, e.g. "#f2c94c"


@dataclass(frozen=True)
class Team:
    """Team that owns an issue."""

    name: str
    key: str  # e.g. "ENG"


@dataclass(frozen=True)
class IssueRef:
    """An assigned issue as returned by the list call, before its state and team are resolved."""

    id: str
    identifier: str
    title: str
    priority: int
    url: str
    created_at: datetime
    state_id: str | None = None
    team_id: str | None = None


@dataclass(frozen=True)
class Issue:
    """A fully resolved issue, ready for rendering."""

    id: str
    identifier: str  # e.g. "ENG-42"
    title: str
    priority: int
    url: str
    created_at: datetime
    state: WorkflowState | None = None
    team: Team | None = None

    @classmethod
    def from_ref(
        cls, ref: IssueRef, state: WorkflowState | None, team: Team | None
    ) -> Issue:
        return cls(
            id=ref.id,
            identifier=ref.identifier,
            title=ref.title,
            priority=ref.priority,
            url=ref.url,
            created_at=ref.created_at,
            state=state,
            team=team,
        )
