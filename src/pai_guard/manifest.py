"""
Protected-content manifest.

The manifest is a JSON document declaring:

    patterns          category -> {description, patterns: [regex], exceptions: [glob]}
    validation_rules  rule -> {description, files: [glob],
                               must_contain: [text], must_not_contain: [text]}

It is loaded once per run and never mutated afterwards.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ManifestError

logger = logging.getLogger(__name__)


# =============================================================================
# MANIFEST ENTRIES
# =============================================================================

def _string_list(data: dict, key: str) -> tuple[str, ...]:
    """Read an optional list-of-strings field; anything else is a shape error."""
    value = data.get(key, [])
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise TypeError(f"'{key}' must be a list of strings, got {value!r}")
    return tuple(value)


@dataclass(frozen=True)
class PatternCategory:
    """A named group of regexes describing one class of disallowed content."""
    name: str
    description: str = ""
    patterns: tuple[str, ...] = ()
    exceptions: tuple[str, ...] = ()   # globs exempt from this category

    @classmethod
    def from_dict(cls, name: str, data: dict) -> "PatternCategory":
        return cls(
            name=name,
            description=data.get("description", ""),
            patterns=_string_list(data, "patterns"),
            exceptions=_string_list(data, "exceptions"),
        )


@dataclass(frozen=True)
class ValidationRule:
    """A glob-scoped check on literal text a file must or must not contain."""
    name: str
    description: str = ""
    files: tuple[str, ...] = ()
    must_contain: tuple[str, ...] = ()
    must_not_contain: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, name: str, data: dict) -> "ValidationRule":
        return cls(
            name=name,
            description=data.get("description", ""),
            files=_string_list(data, "files"),
            must_contain=_string_list(data, "must_contain"),
            must_not_contain=_string_list(data, "must_not_contain"),
        )


@dataclass(frozen=True)
class Manifest:
    """Parsed manifest. Category and rule order follows the JSON document."""
    version: str = ""
    description: str = ""
    patterns: tuple[PatternCategory, ...] = ()
    validation_rules: tuple[ValidationRule, ...] = field(default=())

    @classmethod
    def from_dict(cls, data: dict) -> "Manifest":
        return cls(
            version=str(data.get("version", "")),
            description=data.get("description", ""),
            patterns=tuple(
                PatternCategory.from_dict(name, entry)
                for name, entry in data.get("patterns", {}).items()
            ),
            validation_rules=tuple(
                ValidationRule.from_dict(name, entry)
                for name, entry in data.get("validation_rules", {}).items()
            ),
        )


# =============================================================================
# MANIFEST I/O
# =============================================================================

def load_manifest(path: Path) -> Manifest:
    """
    Load and parse the manifest at `path`.

    Raises:
        ManifestError: the file does not exist, is not valid JSON, or
            its top level is not a JSON object.
    """
    if not path.is_file():
        raise ManifestError(path, "Manifest not found")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ManifestError(path, f"Manifest is not valid JSON ({e})") from e

    if not isinstance(data, dict):
        raise ManifestError(path, "Manifest must be a JSON object")

    try:
        manifest = Manifest.from_dict(data)
    except (AttributeError, TypeError) as e:
        raise ManifestError(path, f"Manifest has an unexpected shape ({e})") from e

    logger.debug(
        f"Loaded manifest v{manifest.version or '?'}: "
        f"{len(manifest.patterns)} categories, {len(manifest.validation_rules)} rules"
    )
    return manifest
