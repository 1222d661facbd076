"""Milestone close/reopen processing."""

from .models import OPERATIONS_PER_RUN, MilestoneAction, ProcessingOptions, RunResult
from .processor import MilestoneProcessor, classify_milestone
from .source import MilestoneSource, RepositoryMilestoneSource

__all__ = [
    "OPERATIONS_PER_RUN",
    "MilestoneAction",
    "MilestoneProcessor",
    "MilestoneSource",
    "ProcessingOptions",
    "RepositoryMilestoneSource",
    "RunResult",
    "classify_milestone",
]
