"""Test configuration and fixtures."""

import json
from collections.abc import Callable, Iterator
from typing import Any

import httpx
import pytest

from release_notifier.config import NotifierConfig
from release_notifier.github_client.models import PullRequest
from release_notifier.monday.client import MondayClient


class FakeMondayAPI:
    """Scripted monday.com endpoint served through httpx.MockTransport.

    Responses are consumed in order; each entry is either a JSON payload,
    a ``(status_code, payload)`` tuple, a ready-made ``httpx.Response``, or an
    exception class to raise.
    """

    def __init__(self) -> None:
        self.requests: list[dict[str, Any]] = []
        self._responses: list[Any] = []

    def queue(self, *responses: Any) -> None:
        self._responses.extend(responses)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(
            {"headers": dict(request.headers), **json.loads(request.content)}
        )
        if not self._responses:
            raise AssertionError(f"Unexpected monday.com request: {request.content!r}")

        response = self._responses.pop(0)
        if isinstance(response, type) and issubclass(response, httpx.HTTPError):
            raise response("simulated transport failure", request=request)
        if isinstance(response, httpx.Response):
            return response
        if isinstance(response, tuple):
            status_code, payload = response
            return httpx.Response(status_code, json=payload)
        return httpx.Response(200, json=response)

    @staticmethod
    def item_page(*item_ids: str) -> dict[str, Any]:
        """Payload for an items_page_by_column_values lookup."""
        return {
            "data": {
                "items_page_by_column_values": {
                    "items": [
                        {"id": item_id, "name": f"task-{item_id}", "column_values": []}
                        for item_id in item_ids
                    ]
                }
            }
        }

    @staticmethod
    def items(
        item_id: str, board_id: str = "500", board_name: str = "Sprint"
    ) -> dict[str, Any]:
        """Payload for an items-by-id lookup."""
        return {
            "data": {
                "items": [
                    {
                        "id": item_id,
                        "name": f"task-{item_id}",
                        "board": {"id": board_id, "name": board_name},
                    }
                ]
            }
        }

    @staticmethod
    def ok(item_id: str = "1") -> dict[str, Any]:
        return {"data": {"result": {"id": item_id}}}

    @staticmethod
    def errors(*messages: str) -> dict[str, Any]:
        return {"errors": [{"message": message} for message in messages]}

    def queries(self) -> list[str]:
        return [request["query"] for request in self.requests]

    def variables(self) -> list[dict[str, Any]]:
        return [request["variables"] for request in self.requests]


@pytest.fixture
def fake_monday() -> FakeMondayAPI:
    """Scripted monday.com API."""
    return FakeMondayAPI()


@pytest.fixture
def monday_client(fake_monday: FakeMondayAPI) -> Iterator[MondayClient]:
    """monday.com client wired to the fake API."""
    http_client = httpx.Client(transport=httpx.MockTransport(fake_monday.handler))
    client = MondayClient(
        "monday-token", api_url="https://monday.test/v2", http_client=http_client
    )
    yield client
    client.close()


@pytest.fixture
def make_pr() -> Callable[..., PullRequest]:
    """Factory for pull request models."""

    def _make(
        number: int,
        body: str | None = None,
        head_sha: str = "0" * 40,
        merge_commit_sha: str | None = None,
        title: str | None = None,
    ) -> PullRequest:
        return PullRequest(
            number=number,
            title=title or f"PR {number}",
            body=body,
            head_sha=head_sha,
            merge_commit_sha=merge_commit_sha,
        )

    return _make


@pytest.fixture
def config() -> NotifierConfig:
    """Valid run configuration."""
    return NotifierConfig(
        commit_range="v1.0.0..v1.1.0",
        version="1.2.3",
        environment="prod",
        description="Spring release",
        column_id="release_col",
        monday_token="monday-token",
        github_token="github-token",
        repository="acme/widgets",
    )
