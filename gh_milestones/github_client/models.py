"""Pydantic models for GitHub data structures.

These models map directly to GitHub's REST API v3 response structures.
API Reference: https://docs.github.com/en/rest/issues/milestones
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class GitHubMilestone(BaseModel):
    """GitHub milestone model representing a group of issues.

    Maps to GitHub REST API Milestone object.
    API Reference: https://docs.github.com/en/rest/issues/milestones
    """

    id: int = Field(..., description="Unique milestone identifier (integer)")
    number: int = Field(
        ..., description="Milestone number within the repository (integer)"
    )
    title: str = Field(..., description="Title of the milestone (string)")
    description: str | None = Field(
        None, description="Description of the milestone in markdown (string)"
    )
    updated_at: datetime = Field(
        ..., description="Timestamp of last milestone update (ISO 8601)"
    )
    open_issues: int = Field(
        ..., ge=0, description="Number of open issues in the milestone"
    )
    closed_issues: int = Field(
        ..., ge=0, description="Number of closed issues in the milestone"
    )
    state: Literal["open", "closed"] = Field(
        ..., description="Current state: 'open' or 'closed'"
    )

    @property
    def total_issues(self) -> int:
        """Open and closed issues combined."""
        return self.open_issues + self.closed_issues
