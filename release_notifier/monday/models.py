"""Pydantic models for monday.com data structures."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from ..errors import MondayAPIError


class GraphQLResponse(BaseModel):
    """Envelope returned by the monday.com GraphQL endpoint.

    Besides the GraphQL ``errors`` list, the API can reply with a top-level
    ``error_code`` / ``error_message`` pair and no ``data``; that shape is
    treated as an error too.
    """

    data: dict[str, Any] | None = Field(None, description="Query payload")
    errors: list[dict[str, Any]] | None = Field(
        None, description="GraphQL errors, each with at least a 'message'"
    )
    error_code: Any = Field(None, description="Error code of a non-GraphQL error")
    error_message: str | None = Field(
        None, description="Message of a non-GraphQL error"
    )

    @property
    def error_list(self) -> list[dict[str, Any]]:
        """All errors in GraphQL shape, including a top-level error_message."""
        if self.errors:
            return self.errors
        if self.data is None and self.error_message:
            error: dict[str, Any] = {"message": self.error_message}
            if self.error_code is not None:
                error["extensions"] = {"code": self.error_code}
            return [error]
        return []

    @property
    def ok(self) -> bool:
        return not self.error_list

    def raise_for_errors(self, context: str) -> None:
        """Raise MondayAPIError if the response carries errors."""
        errors = self.error_list
        if errors:
            messages = "; ".join(str(error.get("message", error)) for error in errors)
            raise MondayAPIError(f"{context}: {messages}", errors)



class Board(BaseModel):
    """monday.com board that owns the release tasks."""

    id: str = Field(..., description="Board identifier")
    name: str = Field("", description="Board display name")


class Item(BaseModel):
    """monday.com item (a task row on a board)."""

    id: str = Field(..., description="Item identifier")
    name: str = Field(..., description="Item name column value")


class ColumnUpdate(BaseModel):
    """Value written to the release column of an item."""

    item_id: str
    column_id: str
    value: str


class Comment(BaseModel):
    """Update posted on an item to record a release."""

    item_id: str
    body: str


class TaskStatus(str, Enum):
    """Result of processing one task id."""

    SUCCESS = "success"
    SKIPPED = "skipped"
    FAILED = "failed"


class TaskOutcome(BaseModel):
    """Per-task result reported by the task updater."""

    task_id: str = Field(..., description="Task id extracted from a PR body")
    status: TaskStatus = Field(..., description="Outcome for this task")
    item_id: str | None = Field(None, description="monday.com item id, if found")
    message: str | None = Field(None, description="Reason for a skip or failure")
