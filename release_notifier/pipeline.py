"""End-to-end run: commits -> pull requests -> task ids -> monday.com updates."""

import logging
from pathlib import Path

from pydantic import BaseModel, Field

from .config import NotifierConfig
from .git.commits import list_commits
from .github_client.client import GitHubClient
from .github_client.models import PullRequest
from .github_client.resolver import PullRequestResolver
from .monday.board import resolve_board
from .monday.client import MondayClient
from .monday.models import Board, TaskOutcome, TaskStatus
from .monday.updater import TaskUpdater
from .tickets import extract_task_ids

logger = logging.getLogger(__name__)


class RunSummary(BaseModel):
    """What a notification run found and did."""

    commits: list[str] = Field(default_factory=list)
    pull_requests: list[PullRequest] = Field(default_factory=list)
    task_ids: list[str] = Field(default_factory=list)
    board: Board | None = None
    outcomes: list[TaskOutcome] = Field(default_factory=list)

    def count(self, status: TaskStatus) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status == status)


def run_pipeline(
    config: NotifierConfig,
    github_client: GitHubClient | None = None,
    monday_client: MondayClient | None = None,
    repo_path: Path | None = None,
) -> RunSummary:
    """Notify monday.com about the release described by ``config``.

    Clients are created from ``config`` unless supplied.

    Raises:
        RangeResolutionError: If the commit range cannot be listed
        BoardResolutionError: If the board owning the tasks cannot be found
    """
    logger.info("Processing commit range: %s", config.commit_range)
    logger.info("Version: %s, Environment: %s", config.version, config.environment)

    summary = RunSummary()
    summary.commits = list_commits(config.commit_range, cwd=repo_path)
    logger.info("Found %d commits in range", len(summary.commits))
    if not summary.commits:
        logger.warning("No commits found in range %s", config.commit_range)
        return summary
    logger.info("Commits: %s", ", ".join(summary.commits))

    github = github_client or GitHubClient(token=config.github_token)
    resolver = PullRequestResolver(github, config.owner, config.repo_name)
    summary.pull_requests = resolver.resolve(summary.commits)
    logger.info("Found %d pull requests", len(summary.pull_requests))
    for pr in summary.pull_requests:
        logger.info('PR #%d: "%s" - Body: %s', pr.number, pr.title, pr.body_preview())

    summary.task_ids = extract_task_ids(summary.pull_requests)
    if not summary.task_ids:
        logger.warning("No task IDs found in PR descriptions")
        return summary
    logger.info("Found task IDs: %s", ", ".join(summary.task_ids))

    monday = monday_client or MondayClient(
        config.monday_token, api_url=config.monday_api_url
    )
    try:
        if config.board_id:
            summary.board = Board(id=config.board_id)
            logger.info("Using configured board ID: %s", config.board_id)
        else:
            summary.board = resolve_board(monday, summary.task_ids[0])

        updater = TaskUpdater(
            monday, summary.board.id, config.column_id, dry_run=config.dry_run
        )
        summary.outcomes = updater.update(
            summary.task_ids, config.version, config.environment, config.description
        )
    finally:
        if monday_client is None:
            monday.close()

    logger.info(
        "Updated %d task(s), skipped %d, failed %d",
        summary.count(TaskStatus.SUCCESS),
        summary.count(TaskStatus.SKIPPED),
        summary.count(TaskStatus.FAILED),
    )
    return summary
