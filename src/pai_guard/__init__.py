"""
pai-guard — protected-content validator for PAI repositories.

Checks git-tracked (or git-staged) files against a declarative manifest:
- Pattern categories (regexes for secrets, personal data, ...)
- Validation rules (literal text a file must / must not contain)

Also ships the pre-commit hook installer and the session-start
context hook.

Usage:
    pai-guard
    pai-guard --staged
    python -m pai_guard --jobs 4
"""

__version__ = "1.0.0"
