"""
File content checker.

Produces one FileResult per candidate path. Absent and unreadable files
are vacuously valid; only readable content that breaks a manifest
category or rule yields violations.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Optional

from .globs import matches_glob
from .manifest import Manifest, PatternCategory, ValidationRule

logger = logging.getLogger(__name__)


@dataclass
class FileResult:
    """Outcome of checking a single file."""
    file: str
    violations: list[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.violations

    def to_dict(self) -> dict:
        return {
            "file": self.file,
            "valid": self.valid,
            "violations": list(self.violations),
        }


@lru_cache(maxsize=1024)
def _compile_pattern(pattern: str) -> Optional[re.Pattern[str]]:
    """Compile a manifest regex case-insensitively; None if malformed."""
    try:
        return re.compile(pattern, re.IGNORECASE)
    except re.error as e:
        logger.debug(f"Skipping malformed pattern {pattern!r}: {e}")
        return None


def check_category(rel_path: str, content: str, category: PatternCategory) -> list[str]:
    """Violations from one pattern category (empty if the file is exempt)."""
    if matches_glob(rel_path, category.exceptions):
        return []

    violations = []
    for pattern in category.patterns:
        regex = _compile_pattern(pattern)
        if regex is None:
            continue
        match = regex.search(content)
        if match:
            violations.append(f"[{category.name}] matched {match.group(0)!r}")
    return violations


def check_rule(rel_path: str, content: str, rule: ValidationRule) -> list[str]:
    """Violations from one validation rule (empty if the rule does not apply)."""
    if not matches_glob(rel_path, rule.files):
        return []

    violations = []
    for text in rule.must_contain:
        if text not in content:
            violations.append(f"[{rule.name}] missing required text {text!r}")
    for text in rule.must_not_contain:
        if text in content:
            violations.append(f"[{rule.name}] contains forbidden text {text!r}")
    return violations


def check_content(rel_path: str, content: str, manifest: Manifest) -> FileResult:
    """Check already-loaded text against every category and rule."""
    result = FileResult(file=rel_path)
    for category in manifest.patterns:
        result.violations.extend(check_category(rel_path, content, category))
    for rule in manifest.validation_rules:
        result.violations.extend(check_rule(rel_path, content, rule))
    return result


def check_file(root: Path, rel_path: str, manifest: Manifest) -> FileResult:
    """
    Check one repository-relative file.

    Args:
        root: Repository root the path is relative to
        rel_path: Path as listed by git (forward slashes)
        manifest: Loaded manifest

    Returns:
        FileResult; valid with no violations if the file is absent or
        cannot be read as UTF-8 text.
    """
    path = root / rel_path
    if not path.is_file():
        logger.debug(f"Skipping absent file: {rel_path}")
        return FileResult(file=rel_path)

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Skipping unreadable file {rel_path}: {e}")
        return FileResult(file=rel_path)

    return check_content(rel_path, content, manifest)
