"""Shared pytest fixtures and configuration."""

from datetime import datetime, timezone

import pytest

from lineardash.linear import Issue, Team, WorkflowState


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")
    config.addinivalue_line("markers", "real: calls the real Linear API (needs LINEAR_API_KEY)")


# Shared fixtures


@pytest.fixture
def sample_issues() -> list[Issue]:
    """Three resolved issues covering present and missing state/team."""
    created = datetime(2026, 1, 15, 9, 30, tzinfo=timezone.utc)
    return [
        Issue(
            id="issue-1",
            identifier="ENG-1",
            title="Fix login redirect",
            priority=1,
            url="https://linear.app/acme/issue/ENG-1",
            created_at=created,
            state=WorkflowState(name="In Progress", color="#f2c94c"),
            team=Team(name="Engineering", key="ENG"),
        ),
        Issue(
            id="issue-2",
            identifier="ENG-2",
            title="Write onboarding docs",
            priority=4,
            url="https://linear.app/acme/issue/ENG-2",
            created_at=created,
            state=WorkflowState(name="Todo", color="#e2e2e2"),
            team=None,
        ),
        Issue(
            id="issue-3",
            identifier="OPS-7",
            title="Rotate certificates",
            priority=0,
            url="https://linear.app/acme/issue/OPS-7",
            created_at=created,
            state=None,
            team=Team(name="Operations", key="OPS"),
        ),
    ]
