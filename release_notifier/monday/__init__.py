"""monday.com client package for board and item updates."""

from .board import resolve_board
from .client import MondayClient
from .models import Board, GraphQLResponse, TaskOutcome, TaskStatus
from .updater import TaskUpdater, build_column_value, build_comment_body

__all__ = [
    "Board",
    "GraphQLResponse",
    "MondayClient",
    "TaskOutcome",
    "TaskStatus",
    "TaskUpdater",
    "build_column_value",
    "build_comment_body",
    "resolve_board",
]
