"""CLI command for pushing release details to monday.com tasks."""

import os
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from ..config import build_config
from ..errors import ReleaseNotifierError
from ..log import configure_logging
from ..monday.models import TaskStatus
from ..pipeline import RunSummary, run_pipeline
from .options import (
    BOARD_ID_OPTION,
    COLUMN_OPTION,
    COMMIT_RANGE_OPTION,
    DESCRIPTION_OPTION,
    DRY_RUN_OPTION,
    ENVIRONMENT_OPTION,
    GITHUB_TOKEN_OPTION,
    MONDAY_TOKEN_OPTION,
    REPO_OPTION,
    REPO_PATH_OPTION,
    VERBOSE_OPTION,
    VERSION_OPTION,
)

console = Console()

STATUS_STYLES = {
    TaskStatus.SUCCESS: "green",
    TaskStatus.SKIPPED: "yellow",
    TaskStatus.FAILED: "red",
}


def notify(
    commit_range: str = COMMIT_RANGE_OPTION,
    version: str = VERSION_OPTION,
    environment: str = ENVIRONMENT_OPTION,
    description: str = DESCRIPTION_OPTION,
    column: str = COLUMN_OPTION,
    monday_token: str = MONDAY_TOKEN_OPTION,
    repo: str = REPO_OPTION,
    github_token: str | None = GITHUB_TOKEN_OPTION,
    board_id: str | None = BOARD_ID_OPTION,
    repo_path: Path | None = REPO_PATH_OPTION,
    dry_run: bool = DRY_RUN_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Record a release on the monday.com tasks referenced by merged PRs.

    Pull requests are found for every commit in the range; each PR body is
    scanned for "Ticket number: <id>" lines and every referenced task gets its
    release column set to ENVIRONMENT+VERSION plus an update describing the
    release.

    Examples:
        release-notifier notify --commit-range v1.2.0..v1.3.0 \\
            --version 1.3.0 --environment prod --description "Spring release" \\
            --column status_1 --repo myorg/myrepo --monday-token $MONDAY_TOKEN

        # Preview which tasks would be touched
        release-notifier notify ... --dry-run
    """
    configure_logging(
        verbose=verbose, github_actions=os.getenv("GITHUB_ACTIONS") == "true"
    )

    try:
        config = build_config(
            commit_range=commit_range,
            version=version,
            environment=environment,
            description=description,
            column_id=column,
            monday_token=monday_token,
            github_token=github_token,
            repository=repo,
            board_id=board_id,
            dry_run=dry_run,
        )

        if dry_run:
            console.print(
                "⚠️  [yellow]Dry run - monday.com will not be modified[/yellow]"
            )

        summary = run_pipeline(config, repo_path=repo_path)
    except ReleaseNotifierError as e:
        console.print(f"❌ [red]Error: {e}[/red]")
        raise typer.Exit(1)
    except Exception as e:
        console.print(f"❌ [red]Action failed with error: {e}[/red]")
        raise typer.Exit(1)

    _print_summary(summary)


def _print_summary(summary: RunSummary) -> None:
    if not summary.task_ids:
        console.print("✅ [yellow]No task IDs found in PR descriptions[/yellow]")
        return

    table = Table(title="monday.com Updates")
    table.add_column("Task ID", style="cyan")
    table.add_column("Item ID")
    table.add_column("Status")
    table.add_column("Details")

    for outcome in summary.outcomes:
        style = STATUS_STYLES[outcome.status]
        table.add_row(
            outcome.task_id,
            outcome.item_id or "-",
            f"[{style}]{outcome.status.value}[/{style}]",
            outcome.message or "",
        )

    console.print(table)
    console.print(
        f"✅ [green]Processed {len(summary.outcomes)} task(s) from "
        f"{len(summary.pull_requests)} pull request(s)[/green]"
    )
