"""GitHub client package for API interaction."""

from .client import GitHubClient
from .models import PullRequest
from .resolver import PullRequestResolver

__all__ = [
    "GitHubClient",
    "PullRequest",
    "PullRequestResolver",
]
