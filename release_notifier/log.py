"""Logging setup for the command line entry point."""

import logging
import sys
from typing import TextIO

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(message)s"


class GitHubActionsHandler(logging.Handler):
    """Emit warnings and errors as GitHub Actions workflow commands.

    Lines like ``::warning::message`` show up as annotations on the workflow
    run summary.
    """

    def __init__(self, stream: TextIO | None = None):
        super().__init__(level=logging.WARNING)
        self.stream = stream or sys.stdout

    def emit(self, record: logging.LogRecord) -> None:
        try:
            command = "error" if record.levelno >= logging.ERROR else "warning"
            message = escape_workflow_data(self.format(record))
            self.stream.write(f"::{command}::{message}\n")
            self.stream.flush()
        except Exception:
            self.handleError(record)


def escape_workflow_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def configure_logging(verbose: bool = False, github_actions: bool = False) -> None:
    """Route log records to stderr through rich, plus Actions annotations.

    Args:
        verbose: Log at DEBUG instead of INFO
        github_actions: Also emit workflow commands for warnings and errors
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, (RichHandler, GitHubActionsHandler)):
            root.removeHandler(handler)

    rich_handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    rich_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(rich_handler)

    if github_actions:
        actions_handler = GitHubActionsHandler()
        actions_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(actions_handler)

    root.setLevel(logging.DEBUG if verbose else logging.INFO)
    # Request-level logs from the HTTP stacks stay at WARNING
    for name in ("github", "httpx", "httpcore", "urllib3"):
        logging.getLogger(name).setLevel(logging.WARNING)
