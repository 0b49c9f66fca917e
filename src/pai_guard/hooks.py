"""
Pre-commit hook management.

The hook runs `pai-guard --staged`, so a commit that would publish a
secret or personal data stops before it is recorded. Only hooks that
carry HOOK_MARKER are treated as ours; anything else in the hook slot
is left alone unless replacement is forced.
"""
from __future__ import annotations

import argparse
import os
import stat
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import find_repo_root
from .errors import GitError, GuardError

HOOK_MARKER = "# managed-by: pai-guard"

HOOK_SCRIPT = f"""#!/bin/sh
{HOOK_MARKER}
# Remove with: pai-guard-hooks uninstall

if ! pai-guard --staged; then
    echo "" >&2
    echo "pai-guard: protected content found in staged files, commit aborted." >&2
    echo "pai-guard: clean the files listed above and stage them again." >&2
    exit 1
fi
"""


def hook_path(root: Path) -> Path:
    """Location of the pre-commit hook for the repo at `root`."""
    git_dir = root / ".git"
    if not git_dir.is_dir():
        raise GitError(["git", "rev-parse", "--git-dir"], f"no .git directory under {root}")
    return git_dir / "hooks" / "pre-commit"


def _is_managed(path: Path) -> bool:
    return HOOK_MARKER in path.read_text(encoding="utf-8", errors="replace")


def install_pre_commit_hook(root: Path, force: bool = False) -> bool:
    """
    Write the pai-guard pre-commit hook into `root`.

    Returns:
        True if the hook file was (re)written. False when our hook is
        already present, or a foreign hook occupies the slot and
        `force` is not set.
    """
    path = hook_path(root)

    if path.exists():
        if _is_managed(path):
            print(f"pai-guard hook is already active: {path}")
            return False
        if not force:
            print(f"{path} belongs to another tool; leaving it in place.")
            print("Re-run with --force to replace it, or call `pai-guard --staged` from it.")
            return False

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(HOOK_SCRIPT, encoding="utf-8")
    if os.name != "nt":
        path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)

    print(f"pai-guard hook written to {path}")
    return True


def uninstall_pre_commit_hook(root: Path) -> bool:
    """
    Delete the pre-commit hook if pai-guard manages it.

    Returns:
        True if a hook was deleted.
    """
    path = hook_path(root)

    if not path.exists():
        print("No pre-commit hook to remove.")
        return False
    if not _is_managed(path):
        print(f"{path} is not managed by pai-guard; not touching it.")
        return False

    path.unlink()
    print(f"Removed pai-guard hook from {path}")
    return True


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pai-guard-hooks",
        description="Manage the pai-guard git pre-commit hook",
    )
    parser.add_argument("--root", metavar="PATH", help="Repository root (default: nearest .git ancestor)")
    commands = parser.add_subparsers(dest="command", required=True)

    install = commands.add_parser("install", help="Write the pre-commit hook")
    install.add_argument("--force", action="store_true", help="Replace a hook owned by another tool")
    commands.add_parser("uninstall", help="Remove the pre-commit hook")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    root = Path(args.root).resolve() if args.root else find_repo_root()

    try:
        if args.command == "install":
            install_pre_commit_hook(root, force=args.force)
        else:
            uninstall_pre_commit_hook(root)
    except GuardError as e:
        print(f"pai-guard-hooks: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
