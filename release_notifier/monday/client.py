"""monday.com GraphQL API client using httpx."""

import json
import logging
from types import TracebackType
from typing import Any

import httpx

from ..config import MONDAY_API_URL
from ..errors import MondayAPIError
from .models import GraphQLResponse
from .queries import (
    CHANGE_COLUMN_VALUE_MUTATION,
    CREATE_UPDATE_MUTATION,
    ITEMS_BY_COLUMN_VALUE_QUERY,
    ITEMS_BY_ID_QUERY,
)

logger = logging.getLogger(__name__)


class MondayClient:
    """Thin client for the monday.com GraphQL endpoint.

    Every method returns the raw GraphQLResponse so callers decide how to
    treat ``errors``. HTTP failures raise ``httpx.HTTPError``.
    """

    def __init__(
        self,
        token: str,
        api_url: str = MONDAY_API_URL,
        http_client: httpx.Client | None = None,
    ):
        """Initialize monday.com client.

        Args:
            token: monday.com API token
            api_url: GraphQL endpoint
            http_client: Preconfigured httpx client, mainly for tests
        """
        if not token:
            raise ValueError("monday.com API token is required.")

        self.api_url = api_url
        self.headers = {
            "Authorization": token,
            "Content-Type": "application/json",
            "User-Agent": "release-notifier/0.1.0",
        }
        self._http = http_client or httpx.Client()

    def __enter__(self) -> "MondayClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    def execute(
        self, query: str, variables: dict[str, Any] | None = None
    ) -> GraphQLResponse:
        """POST a GraphQL document and parse the response envelope.

        Raises:
            httpx.HTTPStatusError: On a non-2xx response
            httpx.HTTPError: On transport failures
            MondayAPIError: If a 2xx body is not a valid GraphQL envelope
        """
        response = self._http.post(
            self.api_url,
            json={"query": query, "variables": variables or {}},
            headers=self.headers,
        )
        response.raise_for_status()
        try:
            result = GraphQLResponse.model_validate(response.json())
        except ValueError as e:
            logger.debug("Unparseable monday.com response: %s", response.text)
            raise MondayAPIError(f"Invalid monday.com response: {e}") from e
        logger.debug("monday.com response: %s", result.model_dump_json(indent=2))
        return result

    def get_items(self, item_ids: list[str]) -> GraphQLResponse:
        """Look up items by id, including their owning board."""
        return self.execute(ITEMS_BY_ID_QUERY, {"ids": item_ids})

    def find_items_by_column_value(
        self, board_id: str, column_id: str, value: str
    ) -> GraphQLResponse:
        """Find the first item on a board whose column equals ``value``."""
        return self.execute(
            ITEMS_BY_COLUMN_VALUE_QUERY,
            {"boardId": board_id, "columnId": column_id, "value": value},
        )

    def change_column_value(
        self, board_id: str, item_id: str, column_id: str, value: str
    ) -> GraphQLResponse:
        """Set a text column on an item."""
        return self.execute(
            CHANGE_COLUMN_VALUE_MUTATION,
            {
                "boardId": board_id,
                "itemId": item_id,
                "columnId": column_id,
                # JSON scalar: a text column takes a JSON-encoded string
                "value": json.dumps(value),
            },
        )

    def create_update(self, item_id: str, body: str) -> GraphQLResponse:
        """Post an update (comment) on an item."""
        return self.execute(CREATE_UPDATE_MUTATION, {"itemId": item_id, "body": body})
