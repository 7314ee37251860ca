"""
Pytest configuration and shared fixtures.

Every test runs with an isolated config environment: a temporary working
directory, a temporary XDG config home, no TALLY_* variables, and an empty
config cache.
"""

import json
from pathlib import Path

import pytest

from tally.core.config import clear_cache
from tally.core.digits import MAX_GROUPS, Counter, GroupDigit

# ==============================================================================
# Environment Isolation
# ==============================================================================


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user/project config and TALLY_* variables out of tests."""
    for name in ("TALLY_DEBUG", "TALLY_STEPS", "TALLY_STRICT"):
        monkeypatch.delenv(name, raising=False)
    xdg_home = tmp_path / "xdg"
    xdg_home.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(xdg_home))
    work_dir = tmp_path / "work"
    work_dir.mkdir()
    monkeypatch.chdir(work_dir)
    clear_cache()
    yield
    clear_cache()


# ==============================================================================
# Config Fixtures
# ==============================================================================


@pytest.fixture
def user_config_dir(tmp_path) -> Path:
    """Provide the tally directory under the temporary XDG config home."""
    path = tmp_path / "xdg" / "tally"
    path.mkdir(parents=True, exist_ok=True)
    return path


@pytest.fixture
def write_project_config():
    """Write a .tally.json into the current (temporary) working directory."""

    def _write(data: dict) -> Path:
        path = Path.cwd() / ".tally.json"
        path.write_text(json.dumps(data))
        return path

    return _write


# ==============================================================================
# Counter Fixtures
# ==============================================================================


@pytest.fixture
def max_counter() -> Counter:
    """A counter at its largest value: ten groups of Z9."""
    return Counter([GroupDigit.parse("Z9") for _ in range(MAX_GROUPS)])
