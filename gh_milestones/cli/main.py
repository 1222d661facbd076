"""Main CLI entry point."""

import typer
from rich.console import Console

from .process import process_milestones

app = typer.Typer(
    name="gh-milestones",
    help="Close and reopen GitHub milestones based on issue counts",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


app.command(name="process", context_settings={"help_option_names": ["-h", "--help"]})(
    process_milestones
)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def version() -> None:
    """Show version information."""
    from gh_milestones import __version__

    console.print(f"GitHub Milestones v{__version__}")


if __name__ == "__main__":
    app()
