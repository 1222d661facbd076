"""Test configuration and fixtures."""

from collections.abc import Callable
from datetime import datetime, timezone

import pytest

from gh_milestones.github_client.models import GitHubMilestone


class FakeMilestoneSource:
    """In-memory MilestoneSource serving fixed pages and recording updates."""

    def __init__(self, pages: list[list[GitHubMilestone]] | None = None):
        self.pages = pages or []
        self.requested_pages: list[int] = []
        self.updates: list[tuple[int, str]] = []

    def get_milestones(self, page: int) -> list[GitHubMilestone]:
        self.requested_pages.append(page)
        if 1 <= page <= len(self.pages):
            return self.pages[page - 1]
        return []

    def update_milestone_state(self, milestone_number: int, state: str) -> None:
        self.updates.append((milestone_number, state))


@pytest.fixture
def make_milestone() -> Callable[..., GitHubMilestone]:
    """Build GitHubMilestone objects with sensible defaults."""

    def _factory(
        number: int = 1,
        open_issues: int = 0,
        closed_issues: int = 0,
        state: str = "open",
        title: str | None = None,
    ) -> GitHubMilestone:
        return GitHubMilestone(
            id=1000 + number,
            number=number,
            title=title or f"Sprint {number}",
            description="First sprint",
            updated_at=datetime(2020, 1, 1, 17, 0, tzinfo=timezone.utc),
            open_issues=open_issues,
            closed_issues=closed_issues,
            state=state,
        )

    return _factory


@pytest.fixture
def fake_source() -> Callable[..., FakeMilestoneSource]:
    """Create a FakeMilestoneSource serving the given pages."""

    def _factory(*pages: list[GitHubMilestone]) -> FakeMilestoneSource:
        return FakeMilestoneSource(list(pages))

    return _factory
