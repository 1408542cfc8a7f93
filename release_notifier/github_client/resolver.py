"""Resolve commits to the pull requests that introduced them."""

import logging
from collections.abc import Iterable

from .client import GitHubClient
from .models import PullRequest

logger = logging.getLogger(__name__)

FALLBACK_PULL_LIMIT = 100


class PullRequestResolver:
    """Find the pull requests behind a sequence of commits.

    Each commit is first looked up through GitHub's "pull requests associated
    with commit" endpoint. When that call fails, the resolver scans the most
    recently updated pull requests for one whose head or merge commit is the
    commit in question. Failures of both strategies are logged and the commit
    is skipped.
    """

    def __init__(
        self,
        client: GitHubClient,
        owner: str,
        repo: str,
        fallback_limit: int = FALLBACK_PULL_LIMIT,
    ):
        self.client = client
        self.owner = owner
        self.repo = repo
        self.fallback_limit = fallback_limit

    def resolve(self, commits: Iterable[str]) -> list[PullRequest]:
        """Return the pull requests for ``commits``, one entry per PR number.

        Order is the order in which each PR was first discovered.
        """
        found: dict[int, PullRequest] = {}

        for sha in commits:
            try:
                self._add_associated(sha, found)
            except Exception as e:
                logger.warning("Failed to process commit %s: %s", sha, e)
                try:
                    logger.info("Trying fallback method for commit %s", sha)
                    self._add_from_listing(sha, found)
                except Exception as fallback_error:
                    logger.warning(
                        "Fallback method also failed for commit %s: %s",
                        sha,
                        fallback_error,
                    )

        return list(found.values())

    def _add_associated(self, sha: str, found: dict[int, PullRequest]) -> None:
        logger.info("Looking for PRs associated with commit: %s", sha)
        associated = self.client.list_pull_requests_for_commit(
            self.owner, self.repo, sha
        )
        logger.info("Found %d PRs for commit %s", len(associated), sha)

        for pr in associated:
            self._add(pr.number, found)

    def _add_from_listing(self, sha: str, found: dict[int, PullRequest]) -> None:
        candidates = self.client.list_pull_requests(
            self.owner,
            self.repo,
            state="all",
            sort="updated",
            direction="desc",
            limit=self.fallback_limit,
        )

        for pr in candidates:
            if pr.matches_commit(sha):
                self._add(pr.number, found, via="fallback")

    def _add(
        self, number: int, found: dict[int, PullRequest], via: str | None = None
    ) -> None:
        if number in found:
            logger.debug("PR #%d already collected", number)
            return

        full_pr = self.client.get_pull_request(self.owner, self.repo, number)
        found[number] = full_pr
        suffix = f" via {via}" if via else ""
        logger.info('Added PR #%d%s: "%s"', number, suffix, full_pr.title)
