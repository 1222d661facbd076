"""Plain-text summaries of milestone processing runs."""

from ..github_client.models import GitHubMilestone
from .models import RunResult


def _describe(milestone: GitHubMilestone) -> str:
    return (
        f"#{milestone.number} {milestone.title} "
        f"({milestone.open_issues} open, {milestone.closed_issues} closed)"
    )


def generate_dry_run_summary(result: RunResult) -> str:
    """Describe the changes a debug-only run would have made.

    Args:
        result: Result of a run with debug_only enabled

    Returns:
        Formatted summary text for console output
    """
    if not result.has_changes:
        return "No milestone changes needed based on current issue counts."

    lines = []
    total = len(result.closed_milestones) + len(result.reopened_milestones)
    lines.append(f"Found {total} milestone(s) that need a state change:")
    lines.append("")

    if result.closed_milestones:
        lines.append("  Close:")
        for milestone in result.closed_milestones:
            lines.append(f"    - {_describe(milestone)}")

    if result.reopened_milestones:
        lines.append("  Reopen:")
        for milestone in result.reopened_milestones:
            lines.append(f"    + {_describe(milestone)}")

    lines.append("")
    lines.append(f"Operations left: {result.operations_left}")
    return "\n".join(lines)


def generate_execution_summary(result: RunResult) -> str:
    """Generate a summary of the changes applied during a run."""
    if not result.has_changes:
        return (
            "No milestone changes needed based on current issue counts.\n"
            f"Operations left: {result.operations_left}"
        )

    lines = [
        f"Closed {len(result.closed_milestones)} milestone(s)",
    ]
    for milestone in result.closed_milestones:
        lines.append(f"  - {_describe(milestone)}")

    lines.append(f"Reopened {len(result.reopened_milestones)} milestone(s)")
    for milestone in result.reopened_milestones:
        lines.append(f"  + {_describe(milestone)}")

    lines.append(f"Operations left: {result.operations_left}")
    return "\n".join(lines)
