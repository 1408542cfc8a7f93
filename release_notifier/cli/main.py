"""Main CLI entry point."""

import typer
from dotenv import load_dotenv
from rich.console import Console

from .notify import notify

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="release-notifier",
    help="Push release details from GitHub pull requests to monday.com tasks",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


app.command(name="notify", context_settings={"help_option_names": ["-h", "--help"]})(
    notify
)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def version() -> None:
    """Show version information."""
    from release_notifier import __version__

    console.print(f"Release Notifier v{__version__}")


if __name__ == "__main__":
    app()
