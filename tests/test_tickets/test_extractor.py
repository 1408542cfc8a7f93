"""Tests for ticket id extraction from PR bodies."""

from collections.abc import Callable

import pytest

from release_notifier.github_client.models import PullRequest
from release_notifier.tickets import extract_task_ids, extract_task_ids_from_text


class TestExtractTaskIdsFromText:
    """Test single-body extraction."""

    @pytest.mark.parametrize(
        "body",
        [
            "ticket number:ABC-1",
            "Ticket Number:  ABC-1",
            "TICKET NUMBER:ABC-1",
            "Some intro\n\nTicket number: ABC-1\nMore text",
        ],
    )
    def test_case_and_whitespace_tolerant(self, body: str) -> None:
        """Test that case and spacing variants all yield the same id."""
        assert extract_task_ids_from_text(body) == ["ABC-1"]

    def test_multiple_lines(self) -> None:
        """Test that every ticket line contributes an id."""
        body = "Ticket number: 111\nTicket number: task_two\n"
        assert extract_task_ids_from_text(body) == ["111", "task_two"]

    def test_token_stops_at_other_characters(self) -> None:
        """Test that the id is made of letters, digits, hyphen and underscore."""
        assert extract_task_ids_from_text("Ticket number: 42.5 (urgent)") == ["42"]

    @pytest.mark.parametrize("body", [None, "", "No tickets here", "Ticket: 12"])
    def test_no_match(self, body: str | None) -> None:
        """Test bodies without a ticket line."""
        assert extract_task_ids_from_text(body) == []


class TestExtractTaskIds:
    """Test extraction across pull requests."""

    def test_unique_across_prs(self, make_pr: Callable[..., PullRequest]) -> None:
        """Test that an id referenced by several PRs appears once."""
        prs = [
            make_pr(1, body="Ticket number: 100\nTicket number: 200"),
            make_pr(2, body="ticket number: 200"),
            make_pr(3, body="Ticket number: 300"),
        ]

        assert extract_task_ids(prs) == ["100", "200", "300"]

    def test_prs_without_tickets(self, make_pr: Callable[..., PullRequest]) -> None:
        """Test that PRs without ticket lines give an empty result."""
        prs = [make_pr(1, body=None), make_pr(2, body="Refactor only")]

        assert extract_task_ids(prs) == []

    def test_no_prs(self) -> None:
        """Test empty input."""
        assert extract_task_ids([]) == []
