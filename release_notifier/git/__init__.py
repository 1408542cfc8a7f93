"""Git history helpers."""

from .commits import list_commits

__all__ = ["list_commits"]
