"""Pydantic models for GitHub data structures.

These models map to the subset of GitHub's REST API v3 pull request object
that the release notifier reads.
API Reference: https://docs.github.com/en/rest/pulls/pulls
"""

from pydantic import BaseModel, Field


class PullRequest(BaseModel):
    """GitHub pull request model.

    Maps to GitHub REST API Pull Request object. ``number`` is the identity
    key; everything else is read-only context for ticket extraction.
    """

    number: int = Field(..., description="Pull request number within the repository")
    title: str = Field(..., description="Title of the pull request (string)")
    body: str | None = Field(
        None, description="Description of the pull request in markdown (string)"
    )
    head_sha: str = Field(..., description="SHA of the head branch commit")
    merge_commit_sha: str | None = Field(
        None, description="SHA of the merge commit, once GitHub has computed one"
    )

    def matches_commit(self, sha: str) -> bool:
        """Check whether ``sha`` is this PR's head or merge commit.

        ``sha`` may be abbreviated, as produced by ``git log --oneline``.
        """
        if not sha:
            return False
        return any(
            candidate and candidate.startswith(sha)
            for candidate in (self.head_sha, self.merge_commit_sha)
        )

    def body_preview(self, length: int = 100) -> str:
        if not self.body:
            return "No body"
        return f"{self.body[:length]}..."
