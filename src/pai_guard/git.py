"""
Git queries for the candidate file set.

Both listings are read-only and return repository-relative paths with
forward slashes, in the order git prints them.
"""
from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from .errors import GitError

logger = logging.getLogger(__name__)

STAGED_CMD = ["git", "-c", "core.quotepath=off", "diff", "--cached", "--name-only"]
TRACKED_CMD = ["git", "-c", "core.quotepath=off", "ls-files"]


def _git_lines(cmd: list[str], root: Path) -> list[str]:
    try:
        result = subprocess.run(
            cmd,
            capture_output=True, text=True, cwd=str(root),
        )
    except OSError as e:
        raise GitError(cmd, str(e)) from e

    if result.returncode != 0:
        raise GitError(cmd, result.stderr)

    return [line.strip() for line in result.stdout.splitlines() if line.strip()]


def list_tracked_files(root: Path) -> list[str]:
    """
    All files tracked by git under `root`.

    Raises:
        GitError: git is unavailable or `root` is not inside a work tree.
    """
    return _git_lines(TRACKED_CMD, root)


def list_staged_files(root: Path) -> list[str]:
    """
    Files staged for the next commit.

    A failed query yields an empty list; a pre-commit check has nothing
    to say outside a work tree.
    """
    try:
        return _git_lines(STAGED_CMD, root)
    except GitError as e:
        logger.debug(f"Staged listing unavailable, treating as empty: {e}")
        return []
