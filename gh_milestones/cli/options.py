"""Standardized CLI option definitions for consistent shorthand mappings."""

import typer

from ..processing.models import OPERATIONS_PER_RUN

# Repository options
ORG_OPTION = typer.Option(
    None,
    "--org",
    "-o",
    help="GitHub organization or owner (defaults to the GITHUB_REPOSITORY owner)",
)

REPO_OPTION = typer.Option(
    None,
    "--repo",
    "-r",
    help="GitHub repository name "
    "(defaults to GITHUB_REPOSITORY when --org matches its owner)",
)

# Authentication options
TOKEN_OPTION = typer.Option(
    None, "--token", "-t", help="GitHub API token (defaults to GITHUB_TOKEN env var)"
)

# Decision options
MIN_ISSUES_OPTION = typer.Option(
    None,
    "--min-issues",
    min=0,
    help="Minimum open plus closed issues before a milestone is changed "
    "(defaults to INPUT_MIN-ISSUES or 1)",
)

REOPEN_ACTIVE_OPTION = typer.Option(
    False,
    "--reopen-active",
    help="Reopen closed milestones that still have open issues "
    "(also enabled by INPUT_REOPEN-ACTIVE)",
)

# Behavior options
DEBUG_ONLY_OPTION = typer.Option(
    False,
    "--debug-only",
    "--dry-run",
    "-d",
    help="Preview changes without applying them (also enabled by INPUT_DEBUG-ONLY)",
)

START_PAGE_OPTION = typer.Option(
    1, "--start-page", min=1, help="First page of milestones to fetch"
)

MAX_OPERATIONS_OPTION = typer.Option(
    OPERATIONS_PER_RUN,
    "--max-operations",
    min=1,
    help="Maximum number of milestone pages fetched in one run",
)

VERBOSE_OPTION = typer.Option(
    False, "--verbose", "-v", help="Show debug logging for every milestone"
)
