"""Close and reopen GitHub milestones based on their issue counts."""

__version__ = "0.1.0"
