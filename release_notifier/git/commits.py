"""List the commits contained in a git revision range."""

import logging
import subprocess
from pathlib import Path

from ..errors import RangeResolutionError

logger = logging.getLogger(__name__)


def list_commits(commit_range: str, cwd: Path | None = None) -> list[str]:
    """Return the short commit ids in ``commit_range``.

    Args:
        commit_range: Revision range understood by ``git log``, e.g. 'A..B'
        cwd: Repository checkout to run git in (defaults to the current directory)

    Returns:
        Commit ids in ``git log`` order

    Raises:
        RangeResolutionError: If git cannot resolve the range
    """
    if commit_range.startswith("-"):
        raise RangeResolutionError(
            f"Failed to get commits in range: '{commit_range}' is not a revision range"
        )

    try:
        result = subprocess.run(
            ["git", "log", "--oneline", commit_range],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=True,
        )
    except FileNotFoundError as e:
        raise RangeResolutionError(
            "Failed to get commits in range: git executable not found"
        ) from e
    except subprocess.CalledProcessError as e:
        detail = (e.stderr or "").strip() or f"git exited with status {e.returncode}"
        raise RangeResolutionError(
            f"Failed to get commits in range {commit_range}: {detail}"
        ) from e

    commits = [line.split()[0] for line in result.stdout.splitlines() if line.strip()]
    logger.debug("git log %s returned %d commits", commit_range, len(commits))
    return commits
