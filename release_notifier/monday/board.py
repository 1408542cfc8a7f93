"""Resolve which monday.com board the release tasks live on."""

import logging

import httpx

from ..errors import BoardResolutionError, MondayAPIError
from .client import MondayClient
from .models import Board

logger = logging.getLogger(__name__)


def resolve_board(client: MondayClient, task_id: str) -> Board:
    """Find the board owning ``task_id``.

    All tasks of a release are assumed to share one board, so a failure here
    abandons the update phase for the whole run.

    Raises:
        BoardResolutionError: If the item cannot be read or does not exist
    """
    logger.info("Attempting to find board ID from task ID: %s", task_id)

    try:
        response = client.get_items([task_id])
        response.raise_for_errors("Failed to get item info")
    except MondayAPIError as e:
        for error in e.errors:
            logger.error("  - %s", error.get("message", error))
        raise BoardResolutionError(
            f"Could not determine board ID from task {task_id}: {e}"
        ) from e
    except httpx.HTTPError as e:
        raise BoardResolutionError(
            f"Could not determine board ID from task {task_id}: {e}"
        ) from e

    items = (response.data or {}).get("items") or []
    if not items or not items[0].get("board"):
        raise BoardResolutionError(
            f"Could not determine board ID: item {task_id} not found. "
            "Provide --board-id to skip board resolution."
        )

    board = Board.model_validate(items[0]["board"])
    logger.info("Found board ID: %s (Board: %s)", board.id, board.name)
    return board
