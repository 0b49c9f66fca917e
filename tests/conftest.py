"""
Pytest configuration and shared fixtures.
"""

import json
import shutil
import subprocess
import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from pai_guard.manifest import Manifest


requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")


# =============================================================================
# MANIFEST FIXTURES
# =============================================================================

SAMPLE_MANIFEST = {
    "version": "1.0",
    "description": "Test manifest",
    "patterns": {
        "api-keys": {
            "description": "AWS access keys",
            "patterns": ["AKIA[0-9A-Z]{16}"],
        },
        "secrets": {
            "description": "Live payment keys",
            "patterns": ["sk_live_[A-Za-z0-9]+"],
            "exceptions": ["**/*.example"],
        },
    },
    "validation_rules": {
        "claude-md-generated": {
            "description": "CLAUDE.md files are generated",
            "files": ["**/CLAUDE.md"],
            "must_contain": ["Generated"],
        },
        "core-files-deperesonalized": {
            "description": "No personal names in skills",
            "files": ["**/SKILL.md"],
            "must_not_contain": ["Ruslan Kurchenko"],
        },
    },
}


@pytest.fixture
def manifest_data() -> dict:
    """A fresh copy of the sample manifest document."""
    return json.loads(json.dumps(SAMPLE_MANIFEST))


@pytest.fixture
def manifest(manifest_data) -> Manifest:
    return Manifest.from_dict(manifest_data)


# =============================================================================
# REPO FIXTURES
# =============================================================================

def write_file(root: Path, rel_path: str, content: str) -> Path:
    """Create `rel_path` under `root` with `content`."""
    path = root / rel_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def git(root: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", *args], cwd=str(root), capture_output=True, text=True, check=True,
    )
    return result.stdout


@pytest.fixture
def repo(tmp_path: Path, manifest_data) -> Path:
    """An initialized git repo with the sample manifest committed."""
    root = tmp_path / "repo"
    root.mkdir()
    git(root, "init", "-q")
    git(root, "config", "user.email", "test@example.com")
    git(root, "config", "user.name", "Test")
    write_file(root, ".pai-protected.json", json.dumps(manifest_data, indent=2))
    git(root, "add", ".pai-protected.json")
    git(root, "commit", "-q", "-m", "manifest")
    return root
