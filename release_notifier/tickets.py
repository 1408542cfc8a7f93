"""Extract monday.com task ids from pull request descriptions."""

import re
from collections.abc import Iterable

from .github_client.models import PullRequest

# Matches lines like "Ticket number: 1234567890" anywhere in a PR body
TICKET_PATTERN = re.compile(r"Ticket number:\s*([A-Za-z0-9\-_]+)", re.IGNORECASE)


def extract_task_ids_from_text(text: str | None) -> list[str]:
    """Return every task id referenced in ``text``, in order of appearance."""
    if not text:
        return []
    return [
        match.group(1).strip()
        for match in TICKET_PATTERN.finditer(text)
        if match.group(1).strip()
    ]


def extract_task_ids(pull_requests: Iterable[PullRequest]) -> list[str]:
    """Collect the unique task ids referenced across ``pull_requests``.

    Args:
        pull_requests: Pull requests with full bodies

    Returns:
        Task ids, each once, in the order they were first seen
    """
    task_ids: dict[str, None] = {}
    for pr in pull_requests:
        for task_id in extract_task_ids_from_text(pr.body):
            task_ids.setdefault(task_id, None)
    return list(task_ids)
