"""
Glob matching for manifest exceptions and rule scopes.

One translation serves both roles ("is this file exempt from a category"
and "does this rule apply to this file") so they can never disagree.

Translation (anchored at both ends):
    .      literal dot
    **/    zero or more leading directories
    **     anything, separators included
    *      anything except '/'

Every other character passes through to the regex engine unchanged, so
character classes like `*.[jt]s` work. A glob that does not compile
simply never matches.
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import Iterable, Optional

logger = logging.getLogger(__name__)

_GLOB_TOKEN = re.compile(r"\*\*/|\*\*|\*|\.")

_REPLACEMENTS = {
    "**/": "(?:.*/)?",
    "**": ".*",
    "*": "[^/]*",
    ".": r"\.",
}


def glob_to_regex(pattern: str) -> str:
    """Translate a glob into an anchored regular expression string."""
    body = _GLOB_TOKEN.sub(lambda m: _REPLACEMENTS[m.group(0)], pattern)
    return f"^{body}$"


@lru_cache(maxsize=512)
def _compile_glob(pattern: str) -> Optional[re.Pattern[str]]:
    try:
        return re.compile(glob_to_regex(pattern))
    except re.error as e:
        logger.debug(f"Ignoring malformed glob {pattern!r}: {e}")
        return None


def matches_glob(path: str, patterns: Iterable[str]) -> bool:
    """True iff `path` matches at least one glob in `patterns`."""
    normalized = path.replace("\\", "/")
    for pattern in patterns:
        regex = _compile_glob(pattern)
        if regex is not None and regex.match(normalized):
            return True
    return False
