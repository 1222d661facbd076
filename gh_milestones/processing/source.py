"""Milestone sources the processor reads from and writes to."""

from functools import cached_property
from typing import Protocol

from github.Repository import Repository

from ..github_client.client import GitHubClient
from ..github_client.models import GitHubMilestone


class MilestoneSource(Protocol):
    """Paged access to a repository's open milestones."""

    def get_milestones(self, page: int) -> list[GitHubMilestone]:
        """Return one page of open milestones; an empty list ends the data."""
        ...

    def update_milestone_state(self, milestone_number: int, state: str) -> None:
        """Set a milestone to 'open' or 'closed'."""
        ...


class RepositoryMilestoneSource:
    """MilestoneSource backed by a single GitHub repository.

    The repository is looked up once, on first use, so every page fetch and
    every state change costs exactly one API request.
    """

    def __init__(self, client: GitHubClient, org: str, repo: str):
        self.client = client
        self.org = org
        self.repo = repo

    @cached_property
    def repository(self) -> Repository:
        return self.client.get_repository(self.org, self.repo)

    def get_milestones(self, page: int) -> list[GitHubMilestone]:
        return self.client.list_milestones(self.repository, state="open", page=page)

    def update_milestone_state(self, milestone_number: int, state: str) -> None:
        self.client.update_milestone_state(self.repository, milestone_number, state)
