"""Exception types raised by pai-guard library code."""

from __future__ import annotations

from pathlib import Path


class GuardError(Exception):
    """Base class for fatal pai-guard errors."""


class ManifestError(GuardError):
    """The protected-content manifest is missing or unparsable."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{reason}: {path}")


class GitError(GuardError):
    """A git query failed or the directory is not a git work tree."""

    def __init__(self, command: list[str], stderr: str = "") -> None:
        self.command = command
        self.stderr = stderr.strip()
        detail = f": {self.stderr}" if self.stderr else ""
        super().__init__(f"`{' '.join(command)}` failed{detail}")
