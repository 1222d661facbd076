"""Configuration for milestone processing read from the environment.

Variable names follow the GitHub Action inputs (``INPUT_<NAME>``) so the tool
runs unchanged inside a workflow step.
"""

import os
from typing import Optional

from .processing.models import OPERATIONS_PER_RUN, ProcessingOptions

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off", ""}


def _parse_bool(name: str, value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean (true/false), got '{value}'")


def _parse_int(name: str, value: str) -> int:
    try:
        return int(value.strip())
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{value}'")


class MilestoneConfig:
    """Configuration class for a milestone processing run."""

    def __init__(self) -> None:
        """Initialize configuration from environment variables."""
        self.token: Optional[str] = os.getenv("INPUT_REPO-TOKEN") or os.getenv(
            "GITHUB_TOKEN"
        )
        self.repository: Optional[str] = os.getenv("GITHUB_REPOSITORY")
        self.min_issues_raw: str = os.getenv("INPUT_MIN-ISSUES", "1")
        self.reopen_active_raw: str = os.getenv("INPUT_REOPEN-ACTIVE", "false")
        self.debug_only_raw: str = os.getenv("INPUT_DEBUG-ONLY", "false")

    @property
    def min_issues(self) -> int:
        return _parse_int("INPUT_MIN-ISSUES", self.min_issues_raw)

    @property
    def reopen_active(self) -> bool:
        return _parse_bool("INPUT_REOPEN-ACTIVE", self.reopen_active_raw)

    @property
    def debug_only(self) -> bool:
        return _parse_bool("INPUT_DEBUG-ONLY", self.debug_only_raw)

    def split_repository(self) -> tuple[str, str] | None:
        """Return (org, repo) from GITHUB_REPOSITORY, or None if unset."""
        if not self.repository:
            return None
        parts = self.repository.strip().split("/")
        if len(parts) != 2 or not parts[0] or not parts[1]:
            raise ValueError(
                f"GITHUB_REPOSITORY must look like 'owner/repo', "
                f"got '{self.repository}'"
            )
        return parts[0], parts[1]

    def apply_overrides(
        self,
        org: str | None = None,
        repo: str | None = None,
        token: str | None = None,
        min_issues: int | None = None,
        reopen_active: bool = False,
        debug_only: bool = False,
    ) -> None:
        """Layer command line values over the environment.

        ``org`` alone keeps the repository from GITHUB_REPOSITORY when it
        belongs to that owner. Boolean switches can only turn a setting on.

        Raises:
            ValueError: If the repository cannot be resolved from the arguments
        """
        if repo and not org:
            raise ValueError("--org is required when --repo is specified")

        if org and repo:
            self.repository = f"{org}/{repo}"
        elif org:
            current = self.split_repository()
            if current is None or current[0] != org:
                raise ValueError(
                    f"--repo is required unless GITHUB_REPOSITORY belongs to {org}"
                )

        if token:
            self.token = token
        if min_issues is not None:
            self.min_issues_raw = str(min_issues)
        if reopen_active:
            self.reopen_active_raw = "true"
        if debug_only:
            self.debug_only_raw = "true"

    def validate(self) -> None:
        """Validate configuration and raise error if invalid."""
        missing = []
        if not self.token:
            missing.append("GITHUB_TOKEN (or --token)")
        if not self.repository:
            missing.append("GITHUB_REPOSITORY (or --org/--repo)")

        if missing:
            raise ValueError(f"Missing required settings: {', '.join(missing)}")

        self.split_repository()
        self.to_options()

    def to_options(
        self, operations_per_run: int = OPERATIONS_PER_RUN
    ) -> ProcessingOptions:
        """Build processing options from the configured inputs."""
        min_issues = self.min_issues
        if min_issues < 0:
            raise ValueError(f"INPUT_MIN-ISSUES must be >= 0, got {min_issues}")
        return ProcessingOptions(
            min_issues=min_issues,
            reopen_active=self.reopen_active,
            debug_only=self.debug_only,
            operations_per_run=operations_per_run,
        )
