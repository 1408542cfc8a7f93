"""Exceptions raised by the release notifier.

Errors defined here are fatal to a run. Failures scoped to a single commit or
task are logged and never raised past the component that hit them.
"""

from typing import Any


class ReleaseNotifierError(Exception):
    """Base class for run-terminating errors."""


class ConfigurationError(ReleaseNotifierError):
    """A required input is missing or malformed."""


class RangeResolutionError(ReleaseNotifierError):
    """The commit range could not be resolved against the git history."""


class BoardResolutionError(ReleaseNotifierError):
    """The monday.com board owning the tasks could not be determined."""


class MondayAPIError(ReleaseNotifierError):
    """monday.com answered a GraphQL request with an ``errors`` list."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.errors = errors or []
