"""
Session-start context hook.

Reads the CORE skill document, fills in identity placeholders from the
environment and prints it wrapped in a system-reminder envelope so the
assistant starts every session with it loaded. Subagent sessions are
skipped.
"""
from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

CORE_SKILL_REL_PATH = Path("skills") / "CORE" / "SKILL.md"

# (placeholder, identity attribute)
PLACEHOLDERS = (
    ("{{DA}}", "assistant_name"),
    ("{{ENGINEER_NAME}}", "engineer_name"),
)


def _first_set(env: Mapping[str, str], *names: str, default: str) -> str:
    """Value of the first non-empty variable in `names`, else `default`."""
    for name in names:
        value = env.get(name)
        if value:
            return value
    return default


@dataclass(frozen=True)
class Identity:
    assistant_name: str
    engineer_name: str

    @classmethod
    def from_env(cls, env: Mapping[str, str]) -> "Identity":
        return cls(
            assistant_name=_first_set(env, "DA", "PAI_ASSISTANT_NAME", default="PAI"),
            engineer_name=_first_set(env, "ENGINEER_NAME", "USER_NAME", default="Engineer"),
        )


def render_template(text: str, identity: Identity) -> str:
    for placeholder, attr in PLACEHOLDERS:
        text = text.replace(placeholder, getattr(identity, attr))
    return text


def is_subagent_session(env: Mapping[str, str]) -> bool:
    """Subagents get their context from the parent session."""
    project_dir = env.get("CLAUDE_PROJECT_DIR", "")
    return "/.claude/agents" in project_dir or bool(env.get("CLAUDE_AGENT_TYPE"))


def pai_dir(env: Mapping[str, str]) -> Path:
    return Path(env.get("PAI_DIR") or Path.home() / ".claude").expanduser()


def build_core_context(base_dir: Path, env: Mapping[str, str]) -> Optional[str]:
    """
    Render the CORE skill for injection.

    Returns:
        The wrapped context, or None if SKILL.md is missing or unreadable.
    """
    skill_path = base_dir / CORE_SKILL_REL_PATH
    try:
        text = skill_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"CORE context not loaded from {skill_path}: {e}")
        return None

    identity = Identity.from_env(env)
    body = render_template(text, identity)
    return (
        "<system-reminder>\n"
        f"PAI CORE CONTEXT (auto-loaded at session start for {identity.assistant_name})\n\n"
        f"{body.rstrip()}\n"
        "</system-reminder>"
    )


def main() -> int:
    """Hook entry point. Always exits 0 so a session is never blocked."""
    logging.basicConfig(level=logging.WARNING, format="[pai-session] %(message)s")
    env = os.environ

    if is_subagent_session(env):
        logger.debug("Subagent session, skipping CORE context")
        return 0

    context = build_core_context(pai_dir(env), env)
    if context is not None:
        print(context)
    return 0


if __name__ == "__main__":
    sys.exit(main())
