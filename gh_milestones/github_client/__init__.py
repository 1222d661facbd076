"""GitHub client package for API interaction."""

from .client import MILESTONE_STATES, GitHubClient
from .models import GitHubMilestone

__all__ = [
    "GitHubClient",
    "GitHubMilestone",
    "MILESTONE_STATES",
]
