"""Command line interface for gh-milestones."""
