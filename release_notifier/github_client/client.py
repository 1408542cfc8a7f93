"""GitHub API client using PyGitHub."""

import logging
import os
import time

from github import Github
from github.GithubException import UnknownObjectException
from github.PullRequest import PullRequest as GithubPullRequest
from github.Repository import Repository

from .models import PullRequest

logger = logging.getLogger(__name__)


class GitHubClient:
    """GitHub API client with rate limiting and authentication."""

    def __init__(self, token: str | None = None):
        """Initialize GitHub client with authentication.

        Args:
            token: GitHub personal access token. If None, reads from
                GITHUB_TOKEN env var.
        """
        self.token = token or os.getenv("GITHUB_TOKEN")
        if not self.token:
            raise ValueError(
                "GitHub token is required. Set GITHUB_TOKEN environment variable."
            )

        self.github = Github(self.token)
        self._repositories: dict[str, Repository] = {}
        self._check_rate_limit()

    def _check_rate_limit(self) -> None:
        """Check rate limit and sleep if necessary."""
        try:
            rate_limit = self.github.get_rate_limit()
            remaining = rate_limit.rate.remaining

            logger.info("GitHub API rate limit: %s requests remaining", remaining)

            if remaining < 10:
                reset_time = rate_limit.rate.reset.timestamp()
                sleep_time = reset_time - time.time() + 1
                logger.warning(
                    "Rate limit low, sleeping for %.1f seconds...", sleep_time
                )
                time.sleep(sleep_time)

        except Exception as e:
            logger.warning("Could not check rate limit: %s", e)

    def _convert_pull_request(self, github_pr: GithubPullRequest) -> PullRequest:
        """Convert PyGitHub pull request to our model."""
        return PullRequest(
            number=github_pr.number,
            title=github_pr.title,
            body=github_pr.body,
            head_sha=github_pr.head.sha,
            merge_commit_sha=github_pr.merge_commit_sha,
        )

    def get_repository(self, owner: str, repo: str) -> Repository:
        """Get repository object, cached per client."""
        full_name = f"{owner}/{repo}"
        if full_name not in self._repositories:
            try:
                self._repositories[full_name] = self.github.get_repo(full_name)
            except UnknownObjectException:
                raise ValueError(f"Repository {full_name} not found")
        return self._repositories[full_name]

    def list_pull_requests_for_commit(
        self, owner: str, repo: str, sha: str
    ) -> list[PullRequest]:
        """List pull requests associated with a commit.

        List responses are not guaranteed to carry the full body; callers that
        need it should follow up with ``get_pull_request``.

        Raises:
            GithubException: If the commit is unknown or the API call fails
        """
        repository = self.get_repository(owner, repo)
        commit = repository.get_commit(sha)
        return [self._convert_pull_request(pr) for pr in commit.get_pulls()]

    def get_pull_request(self, owner: str, repo: str, number: int) -> PullRequest:
        """Get a single pull request with all its details."""
        repository = self.get_repository(owner, repo)
        return self._convert_pull_request(repository.get_pull(number))

    def list_pull_requests(
        self,
        owner: str,
        repo: str,
        state: str = "all",
        sort: str = "updated",
        direction: str = "desc",
        limit: int = 100,
    ) -> list[PullRequest]:
        """List pull requests in a repository.

        Args:
            owner: Repository owner
            repo: Repository name
            state: Pull request state (open, closed, all)
            sort: Sort field (created, updated, popularity, long-running)
            direction: Sort direction (asc, desc)
            limit: Maximum number of pull requests to return

        Returns:
            List of PullRequest objects
        """
        repository = self.get_repository(owner, repo)
        pulls = repository.get_pulls(state=state, sort=sort, direction=direction)

        result: list[PullRequest] = []
        for i, github_pr in enumerate(pulls):
            if i >= limit:
                break
            result.append(self._convert_pull_request(github_pr))
        return result
