"""
pai-guard — Main runner and CLI.

Resolves the candidate file set, checks each file against the manifest,
prints the report and returns the exit status.
"""

from __future__ import annotations

import argparse
import concurrent.futures
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from . import __version__
from .checker import FileResult, check_file
from .config import GuardConfig, find_repo_root
from .errors import GuardError
from .git import list_staged_files, list_tracked_files
from .manifest import Manifest, load_manifest
from .reporting import Reporter

logger = logging.getLogger(__name__)


def check_files(
    root: Path,
    files: Sequence[str],
    manifest: Manifest,
    jobs: int = 1,
) -> list[FileResult]:
    """Check `files` and return results in the same order as `files`."""
    if jobs <= 1 or len(files) <= 1:
        return [check_file(root, f, manifest) for f in files]

    with concurrent.futures.ThreadPoolExecutor(max_workers=jobs) as executor:
        return list(executor.map(lambda f: check_file(root, f, manifest), files))


def run(cfg: GuardConfig, reporter: Optional[Reporter] = None) -> int:
    """
    Run one validation pass.

    Returns:
        0 if every checked file passed, 1 otherwise.

    Raises:
        ManifestError: manifest missing or malformed
        GitError: tracked-file listing failed (default mode only)
    """
    reporter = reporter or Reporter()
    manifest = load_manifest(cfg.manifest)

    if cfg.staged:
        files = list_staged_files(cfg.root)
        if not files:
            reporter.notice("No staged files to check.")
            return 0
        mode = "staged"
    else:
        files = list_tracked_files(cfg.root)
        mode = "tracked"

    logger.debug(f"Checking {len(files)} {mode} file(s) under {cfg.root} with {cfg.jobs} worker(s)")

    for result in check_files(cfg.root, files, manifest, jobs=cfg.jobs):
        reporter.add(result)

    reporter.header(mode, len(files))
    reporter.render()
    return 0 if reporter.passed else 1


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pai-guard",
        description=f"pai-guard v{__version__} — protected-content validator",
    )
    parser.add_argument(
        "--staged",
        action="store_true",
        help="Check only files staged for commit (default: all tracked files)",
    )
    parser.add_argument(
        "--root",
        metavar="PATH",
        help="Repository root (default: nearest ancestor containing .git)",
    )
    parser.add_argument(
        "--manifest",
        metavar="PATH",
        help="Manifest file (default: <root>/.pai-protected.json)",
    )
    parser.add_argument(
        "--jobs",
        type=_positive_int,
        default=1,
        help="Number of files to check in parallel (default: 1)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log skipped files and patterns",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    root = Path(args.root).resolve() if args.root else find_repo_root()
    cfg = GuardConfig(
        root=root,
        manifest_path=Path(args.manifest).resolve() if args.manifest else None,
        staged=args.staged,
        jobs=args.jobs,
    )

    reporter = Reporter()
    try:
        return run(cfg, reporter)
    except GuardError as e:
        reporter.fatal(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
