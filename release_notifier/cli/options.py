"""Standardized CLI option definitions.

Each input can also be supplied through the environment variable GitHub
Actions sets for an action input of the same name (``INPUT_<NAME>``), so the
command runs unchanged as a workflow step.
"""

import typer

COMMIT_RANGE_OPTION = typer.Option(
    ...,
    "--commit-range",
    "-c",
    envvar="INPUT_COMMIT_RANGE",
    help="Git revision range to scan, e.g. 'v1.2.0..HEAD'",
)

VERSION_OPTION = typer.Option(
    ..., "--version", envvar="INPUT_VERSION", help="Version being released"
)

ENVIRONMENT_OPTION = typer.Option(
    ...,
    "--environment",
    "-e",
    envvar="INPUT_ENVIRONMENT",
    help="Environment the release is deployed to",
)

DESCRIPTION_OPTION = typer.Option(
    ...,
    "--description",
    envvar="INPUT_DESCRIPTION",
    help="Release description posted on each task",
)

COLUMN_OPTION = typer.Option(
    ...,
    "--column",
    envvar="INPUT_MONDAY_COLUMN_NAME",
    help="monday.com column id that receives environment+version",
)

MONDAY_TOKEN_OPTION = typer.Option(
    ...,
    "--monday-token",
    envvar="INPUT_MONDAY_API_TOKEN",
    help="monday.com API token",
    show_default=False,
)

GITHUB_TOKEN_OPTION = typer.Option(
    None,
    "--github-token",
    envvar=["INPUT_GITHUB_TOKEN", "GITHUB_TOKEN"],
    help="GitHub API token (defaults to GITHUB_TOKEN env var)",
    show_default=False,
)

REPO_OPTION = typer.Option(
    ...,
    "--repo",
    "-r",
    envvar="GITHUB_REPOSITORY",
    help="GitHub repository as owner/name",
)

BOARD_ID_OPTION = typer.Option(
    None,
    "--board-id",
    "-b",
    envvar="INPUT_MONDAY_BOARD_ID",
    help="monday.com board id (resolved from the first task when omitted)",
)

REPO_PATH_OPTION = typer.Option(
    None,
    "--repo-path",
    help="Local checkout to read git history from (defaults to current directory)",
)

DRY_RUN_OPTION = typer.Option(
    False, "--dry-run", "-d", help="Preview changes without applying them"
)

VERBOSE_OPTION = typer.Option(False, "--verbose", help="Enable debug logging")
