"""Dashboard page rendering."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from jinja2 import Environment, PackageLoader, select_autoescape

from lineardash.linear.models import Issue
from lineardash.priority import PriorityLabel, label_for

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")
_WEB_URL = re.compile(r"^https?://", re.IGNORECASE)

_env = Environment(
    loader=PackageLoader("lineardash.web", "templates"),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


class DashboardView(str, Enum):
    """Mutually exclusive page states."""

    SETUP = "setup"
    EMPTY = "empty"
    ISSUES = "issues"


@dataclass(frozen=True)
class IssueRow:
    """An issue with its display attributes resolved."""

    issue: Issue
    priority: PriorityLabel
    state_style: str | None
    href: str | None


def select_view(issues: Sequence[Issue], has_credential: bool) -> DashboardView:
    """Pick which branch of the page to render.

    Without a credential the setup instructions win regardless of issues.
    """
    if not has_credential:
        return DashboardView.SETUP
    if not issues:
        return DashboardView.EMPTY
    return DashboardView.ISSUES


def state_badge_style(color: str) -> str | None:
    """Inline style for a state badge: the state's color on a translucent tint of itself."""
    if not _HEX_COLOR.match(color):
        return None
    return f"background-color: {color}20; color: {color}"


def safe_href(url: str) -> str | None:
    """Only http(s) links are rendered; anything else (e.g. javascript:) is dropped."""
    url = url.strip()
    return url if _WEB_URL.match(url) else None


def to_row(issue: Issue) -> IssueRow:
    return IssueRow(
        issue=issue,
        priority=label_for(issue.priority),
        state_style=state_badge_style(issue.state.color) if issue.state else None,
        href=safe_href(issue.url),
    )


def render_dashboard(issues: Sequence[Issue], has_credential: bool) -> str:
    """Render the dashboard page as HTML."""
    view = select_view(issues, has_credential)
    rows = [to_row(issue) for issue in issues] if view is DashboardView.ISSUES else []
    template = _env.get_template("dashboard.html")
    return template.render(view=view.value, rows=rows)
