"""
pai-guard — Configuration.

Runtime configuration and CLI-derived settings. Everything here is
computed once in main() and passed down; nothing reads module-level
paths at check time.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# Manifest location relative to the repo root
MANIFEST_REL_PATH = ".pai-protected.json"


@dataclass(frozen=True)
class GuardConfig:
    """Runtime configuration for one validator run."""

    root: Path
    manifest_path: Optional[Path] = None

    # File selection
    staged: bool = False

    # Worker pool size (1 = strictly sequential)
    jobs: int = 1

    @property
    def manifest(self) -> Path:
        """Absolute path of the manifest for this run."""
        if self.manifest_path is not None:
            return self.manifest_path
        return self.root / MANIFEST_REL_PATH


def find_repo_root(start: Path | None = None) -> Path:
    """Nearest ancestor of `start` holding a .git entry, else `start` itself."""
    current = (start or Path.cwd()).resolve()
    for parent in [current] + list(current.parents):
        if (parent / ".git").exists():
            return parent
    return current
