"""Record a release on the monday.com items referenced by merged PRs."""

import json
import logging
from collections.abc import Callable, Iterable

import httpx

from ..errors import MondayAPIError
from .client import MondayClient
from .models import (
    ColumnUpdate,
    Comment,
    GraphQLResponse,
    Item,
    TaskOutcome,
    TaskStatus,
)

logger = logging.getLogger(__name__)

NAME_COLUMN = "name"
TITLE_COLUMN = "title"


def build_column_value(environment: str, version: str) -> str:
    """Value written to the release column: environment then version, unseparated."""
    return f"{environment}{version}"


def build_comment_body(version: str, environment: str, description: str) -> str:
    return (
        f"Version: {version}\n"
        f"Environment: {environment}\n"
        f"Description: {description}"
    )


class TaskUpdater:
    """Write release details onto monday.com items, one task id at a time.

    Each task is isolated: a task that cannot be found is skipped, a failed
    mutation is logged, and neither stops the remaining tasks.
    """

    def __init__(
        self,
        client: MondayClient,
        board_id: str,
        column_id: str,
        dry_run: bool = False,
    ):
        self.client = client
        self.board_id = board_id
        self.column_id = column_id
        self.dry_run = dry_run

    def update(
        self,
        task_ids: Iterable[str],
        version: str,
        environment: str,
        description: str,
    ) -> list[TaskOutcome]:
        """Update every task and report what happened to each."""
        outcomes = []
        for task_id in task_ids:
            try:
                outcome = self._update_task(task_id, version, environment, description)
            except Exception as e:
                logger.error("Failed to update task %s: %s", task_id, e)
                if isinstance(e, httpx.HTTPStatusError):
                    logger.error("Response data: %s", e.response.text)
                outcome = TaskOutcome(
                    task_id=task_id, status=TaskStatus.FAILED, message=str(e)
                )
            outcomes.append(outcome)
        return outcomes

    def _update_task(
        self, task_id: str, version: str, environment: str, description: str
    ) -> TaskOutcome:
        logger.info("Looking for task %s in monday.com", task_id)

        response = self._lookup(task_id)
        if not response.ok:
            logger.error("monday.com API errors for task %s:", task_id)
            _log_errors(response)
            return TaskOutcome(
                task_id=task_id,
                status=TaskStatus.SKIPPED,
                message="lookup returned API errors",
            )

        page = (response.data or {}).get("items_page_by_column_values") or {}
        items = page.get("items") or []
        if not items:
            logger.warning("Task %s not found in monday.com", task_id)
            return TaskOutcome(
                task_id=task_id, status=TaskStatus.SKIPPED, message="not found"
            )

        item = Item.model_validate(items[0])
        logger.info("Found task %s with item ID: %s", task_id, item.id)

        update = ColumnUpdate(
            item_id=item.id,
            column_id=self.column_id,
            value=build_column_value(environment, version),
        )
        comment = Comment(
            item_id=item.id, body=build_comment_body(version, environment, description)
        )

        if self.dry_run:
            logger.info(
                'Dry run: would set column "%s" to "%s" and comment: %s',
                update.column_id,
                update.value,
                json.dumps(comment.body),
            )
            return TaskOutcome(
                task_id=task_id,
                status=TaskStatus.SKIPPED,
                item_id=item.id,
                message="dry run",
            )

        logger.info(
            'Updating column "%s" with value: "%s"', update.column_id, update.value
        )
        column_error = self._mutate(
            f"Failed to update column for task {task_id}",
            lambda: self.client.change_column_value(
                self.board_id, update.item_id, update.column_id, update.value
            ),
        )
        if column_error is None:
            logger.info("Successfully updated column for task %s", task_id)

        logger.info("Adding comment to task %s: %s", task_id, json.dumps(comment.body))
        comment_error = self._mutate(
            f"Failed to add comment for task {task_id}",
            lambda: self.client.create_update(comment.item_id, comment.body),
        )
        if comment_error is None:
            logger.info("Successfully added comment to task %s", task_id)

        errors = [error for error in (column_error, comment_error) if error]
        if errors:
            return TaskOutcome(
                task_id=task_id,
                status=TaskStatus.FAILED,
                item_id=item.id,
                message="; ".join(errors),
            )

        logger.info("Successfully updated task %s (item ID: %s)", task_id, item.id)
        return TaskOutcome(task_id=task_id, status=TaskStatus.SUCCESS, item_id=item.id)

    def _lookup(self, task_id: str) -> GraphQLResponse:
        """Find the item named ``task_id``, retrying on the 'title' column."""
        try:
            return self.client.find_items_by_column_value(
                self.board_id, NAME_COLUMN, task_id
            )
        except httpx.HTTPError as e:
            logger.warning(
                "First query failed for task %s, trying alternative: %s", task_id, e
            )
            return self.client.find_items_by_column_value(
                self.board_id, TITLE_COLUMN, task_id
            )

    def _mutate(
        self, context: str, send: Callable[[], GraphQLResponse]
    ) -> str | None:
        """Send a mutation, returning an error message instead of raising."""
        try:
            send().raise_for_errors(context)
        except MondayAPIError as e:
            logger.error("%s:", context)
            for error in e.errors:
                logger.error("  - %s", error.get("message", error))
            if not e.errors:
                logger.error("  - %s", e)
                return f"{context}: {e}"
            return str(e)
        except httpx.HTTPError as e:
            logger.error("%s: %s", context, e)
            if isinstance(e, httpx.HTTPStatusError):
                logger.error("Response data: %s", e.response.text)
            return f"{context}: {e}"
        return None


def _log_errors(response: GraphQLResponse) -> None:
    for error in response.error_list:
        logger.error("  - %s", error.get("message", error))
        if error.get("extensions"):
            logger.error("    Extensions: %s", json.dumps(error["extensions"]))
