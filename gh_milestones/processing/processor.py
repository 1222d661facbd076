"""Close or reopen milestones based on their open and closed issue counts."""

import logging

from ..github_client.models import GitHubMilestone
from .models import MilestoneAction, ProcessingOptions, RunResult
from .source import MilestoneSource

logger = logging.getLogger(__name__)


def classify_milestone(
    milestone: GitHubMilestone, options: ProcessingOptions
) -> MilestoneAction:
    """Decide what to do with a single milestone.

    Milestones below the issue threshold are never touched. A milestone with
    open issues is only ever reopened, and a milestone without open issues is
    only ever closed.
    """
    if milestone.total_issues < options.min_issues:
        logger.debug(
            "Skipping %s because it has less than %d issues",
            milestone.title,
            options.min_issues,
        )
        return MilestoneAction.SKIP

    if milestone.open_issues > 0:
        if milestone.state == "open":
            logger.debug("Skipping %s because it has open issues/prs", milestone.title)
            return MilestoneAction.SKIP
        if options.reopen_active:
            return MilestoneAction.REOPEN
        return MilestoneAction.SKIP

    if milestone.state == "open":
        # Close right away, there is no way to tag a milestone and revisit it
        return MilestoneAction.CLOSE

    return MilestoneAction.SKIP


class MilestoneProcessor:
    """Walks the pages of a milestone source and applies close/reopen decisions."""

    def __init__(self, source: MilestoneSource, options: ProcessingOptions):
        """Initialize the processor.

        Args:
            source: Where milestones are read from and state changes are sent
            options: Thresholds and switches for the run
        """
        self.source = source
        self.options = options

        if self.options.debug_only:
            logger.warning(
                "Executing in debug mode. Debug output will be written but "
                "no milestones will be processed."
            )

    def run(self, start_page: int = 1) -> RunResult:
        """Process every page of open milestones starting at ``start_page``.

        One operation is spent per page fetch. The run stops on the first
        empty page or once the operations are used up.

        Returns:
            RunResult with the milestones closed and reopened in this run
        """
        result = RunResult(operations_left=self.options.operations_per_run)
        seen: set[int] = set()
        page = start_page

        while True:
            if result.operations_left <= 0:
                logger.warning("Reached max number of operations to process. Exiting.")
                result.operations_left = 0
                return result

            milestones = self.source.get_milestones(page)
            result.operations_left -= 1

            if not milestones:
                logger.debug("No more milestones found to process. Exiting.")
                return result

            for milestone in milestones:
                if milestone.number in seen:
                    logger.debug(
                        "Skipping milestone #%d, already handled in this run",
                        milestone.number,
                    )
                    continue
                seen.add(milestone.number)
                self._process_milestone(milestone, result)

            page += 1

    def process_milestones(self, page: int = 1) -> int:
        """Run from ``page`` and return the number of operations left."""
        return self.run(start_page=page).operations_left

    def _process_milestone(self, milestone: GitHubMilestone, result: RunResult) -> None:
        logger.debug(
            "Found milestone: milestone #%d - %s last updated %s",
            milestone.number,
            milestone.title,
            milestone.updated_at.isoformat(),
        )

        action = classify_milestone(milestone, self.options)
        if action is MilestoneAction.CLOSE:
            self._close_milestone(milestone, result)
        elif action is MilestoneAction.REOPEN:
            self._reopen_milestone(milestone, result)

    def _close_milestone(self, milestone: GitHubMilestone, result: RunResult) -> None:
        logger.debug("Closing milestone #%d - %s", milestone.number, milestone.title)

        result.closed_milestones.append(milestone)

        if self.options.debug_only:
            return

        self.source.update_milestone_state(milestone.number, "closed")

    def _reopen_milestone(self, milestone: GitHubMilestone, result: RunResult) -> None:
        logger.debug("Reopening milestone #%d - %s", milestone.number, milestone.title)

        result.reopened_milestones.append(milestone)

        if self.options.debug_only:
            return

        self.source.update_milestone_state(milestone.number, "open")
