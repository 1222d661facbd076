"""CLI command for closing and reopening milestones based on issue counts."""

import logging

import typer
from rich.console import Console

from ..config import MilestoneConfig
from ..github_client.client import GitHubClient
from ..processing.processor import MilestoneProcessor
from ..processing.source import RepositoryMilestoneSource
from ..processing.summary import generate_dry_run_summary, generate_execution_summary
from .options import (
    DEBUG_ONLY_OPTION,
    MAX_OPERATIONS_OPTION,
    MIN_ISSUES_OPTION,
    ORG_OPTION,
    REOPEN_ACTIVE_OPTION,
    REPO_OPTION,
    START_PAGE_OPTION,
    TOKEN_OPTION,
    VERBOSE_OPTION,
)

console = Console()

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT, force=True)


def process_milestones(
    org: str | None = ORG_OPTION,
    repo: str | None = REPO_OPTION,
    token: str | None = TOKEN_OPTION,
    min_issues: int | None = MIN_ISSUES_OPTION,
    reopen_active: bool = REOPEN_ACTIVE_OPTION,
    debug_only: bool = DEBUG_ONLY_OPTION,
    start_page: int = START_PAGE_OPTION,
    max_operations: int = MAX_OPERATIONS_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Close milestones whose issues are all closed and reopen active ones.

    Open milestones with at least --min-issues issues and no open issues left
    are closed. With --reopen-active, closed milestones that have open issues
    again are reopened. Settings not given on the command line are read from
    the GitHub Action inputs (INPUT_MIN-ISSUES, INPUT_REOPEN-ACTIVE,
    INPUT_DEBUG-ONLY) and GITHUB_REPOSITORY.

    Examples:
        # Preview which milestones would be closed
        uv run gh-milestones process --org myorg --repo myrepo --dry-run

        # Close finished milestones with at least 5 issues, reopen active ones
        uv run gh-milestones process --org myorg --repo myrepo \
            --min-issues 5 --reopen-active
    """
    _configure_logging(verbose)

    config = MilestoneConfig()

    try:
        config.apply_overrides(
            org=org,
            repo=repo,
            token=token,
            min_issues=min_issues,
            reopen_active=reopen_active,
            debug_only=debug_only,
        )
        config.validate()
        org, repo = config.split_repository()
        options = config.to_options(operations_per_run=max_operations)
    except ValueError as e:
        console.print(f"❌ [red]Error: {e}[/red]")
        raise typer.Exit(1)

    if options.debug_only:
        console.print(
            "⚠️  [yellow]Debug mode enabled - no milestones will be changed[/yellow]"
        )

    console.print(
        f"🔍 [blue]Processing milestones for {org}/{repo} "
        f"(min issues: {options.min_issues})[/blue]"
    )

    try:
        client = GitHubClient(token=config.token)
        source = RepositoryMilestoneSource(client, org, repo)
        processor = MilestoneProcessor(source, options)
        result = processor.run(start_page=start_page)
    except KeyboardInterrupt:
        console.print("\n❌ [yellow]Operation cancelled by user[/yellow]")
        raise typer.Exit(1)
    except Exception as e:
        console.print(f"❌ [red]Error: {e}[/red]")
        raise typer.Exit(1)

    if options.debug_only:
        console.print("\n📋 [blue]Planned Changes:[/blue]")
        console.print(generate_dry_run_summary(result), markup=False)
    else:
        console.print("\n📊 [blue]Execution Summary:[/blue]")
        console.print(generate_execution_summary(result), markup=False)

    if result.operations_left == 0:
        console.print(
            "⚠️  [yellow]Operation budget used up; run again to continue "
            "with later pages[/yellow]"
        )
