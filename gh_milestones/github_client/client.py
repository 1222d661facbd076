"""GitHub API client using PyGitHub."""

import logging
import os

from github import Github
from github.GithubException import UnknownObjectException
from github.Milestone import Milestone
from github.Repository import Repository

from .models import GitHubMilestone

logger = logging.getLogger(__name__)

MILESTONES_PER_PAGE = 100
MILESTONE_STATES = ("open", "closed")


class GitHubClient:
    """GitHub API client for listing and updating repository milestones."""

    def __init__(self, token: str | None = None, per_page: int = MILESTONES_PER_PAGE):
        """Initialize GitHub client with authentication.

        Args:
            token: GitHub personal access token. If None, reads from
                GITHUB_TOKEN env var.
            per_page: Page size used for paginated listings.
        """
        self.token = token or os.getenv("GITHUB_TOKEN")
        if not self.token:
            raise ValueError(
                "GitHub token is required. Set GITHUB_TOKEN environment variable."
            )

        self.per_page = per_page
        self.github = Github(self.token, per_page=per_page)

    def _convert_milestone(self, github_milestone: Milestone) -> GitHubMilestone:
        """Convert PyGitHub milestone to our model."""
        return GitHubMilestone(
            id=github_milestone.id,
            number=github_milestone.number,
            title=github_milestone.title,
            description=github_milestone.description,
            updated_at=github_milestone.updated_at,
            open_issues=github_milestone.open_issues,
            closed_issues=github_milestone.closed_issues,
            state=github_milestone.state,
        )

    def get_repository(self, org: str, repo: str) -> Repository:
        """Get repository object."""
        try:
            return self.github.get_repo(f"{org}/{repo}")
        except UnknownObjectException:
            raise ValueError(f"Repository {org}/{repo} not found")

    def list_milestones(
        self, repository: Repository, state: str = "open", page: int = 1
    ) -> list[GitHubMilestone]:
        """Fetch a single page of milestones for a repository.

        Args:
            repository: Repository returned by get_repository()
            state: Milestone state filter (open, closed, all)
            page: 1-based page number

        Returns:
            List of GitHubMilestone objects, empty once past the last page
        """
        if page < 1:
            raise ValueError(f"Page numbers start at 1, got {page}")

        # PyGitHub pages are 0-based
        milestones = repository.get_milestones(state=state).get_page(page - 1)
        logger.debug(
            "Fetched %d milestone(s) from %s page %d",
            len(milestones),
            repository.full_name,
            page,
        )
        return [self._convert_milestone(milestone) for milestone in milestones]

    def update_milestone_state(
        self, repository: Repository, milestone_number: int, state: str
    ) -> None:
        """Set the state of a milestone with a single PATCH request.

        Args:
            repository: Repository returned by get_repository()
            milestone_number: Milestone number
            state: New state, 'open' or 'closed'

        Raises:
            ValueError: If the state is invalid or the milestone is not found
            GithubException: For other API errors
        """
        if state not in MILESTONE_STATES:
            raise ValueError(
                f"Invalid milestone state '{state}'. "
                f"Expected one of: {', '.join(MILESTONE_STATES)}"
            )

        try:
            self.github.requester.requestJsonAndCheck(
                "PATCH",
                f"{repository.url}/milestones/{milestone_number}",
                input={"state": state},
            )
        except UnknownObjectException:
            raise ValueError(
                f"Milestone #{milestone_number} not found in {repository.full_name}"
            )

        logger.info(
            "Set milestone #%d in %s to %s",
            milestone_number,
            repository.full_name,
            state,
        )
