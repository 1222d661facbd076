"""Data models for milestone processing runs."""

from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from ..github_client.models import GitHubMilestone

OPERATIONS_PER_RUN = 100


class MilestoneAction(str, Enum):
    """Decision taken for a single milestone."""

    CLOSE = "close"
    REOPEN = "reopen"
    SKIP = "skip"


class ProcessingOptions(BaseModel):
    """Thresholds and switches for a processing run."""

    model_config = ConfigDict(frozen=True)

    min_issues: int = Field(
        1,
        ge=0,
        description="Minimum open plus closed issues before a milestone is acted on",
    )
    reopen_active: bool = Field(
        False, description="Reopen closed milestones that still have open issues"
    )
    debug_only: bool = Field(
        False, description="Record decisions without changing any milestone"
    )
    operations_per_run: int = Field(
        OPERATIONS_PER_RUN,
        ge=1,
        description="Maximum number of page fetches in one run",
    )


@dataclass
class RunResult:
    """Milestones acted on during one run and the operations left over."""

    closed_milestones: list[GitHubMilestone] = field(default_factory=list)
    reopened_milestones: list[GitHubMilestone] = field(default_factory=list)
    operations_left: int = 0

    @property
    def has_changes(self) -> bool:
        return bool(self.closed_milestones or self.reopened_milestones)
