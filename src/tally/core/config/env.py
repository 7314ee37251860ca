"""Environment loading helpers.

Tally reads TALLY_* overrides from the environment. Those may also come from
.env files, in this order of precedence:

    OS environment > project .env / .env.local > user ~/.config/tally/.env

A .env file never overrides a variable already exported in the shell.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

from dotenv import dotenv_values

from .loader import get_xdg_config_home

ENV_PREFIX = "TALLY_"


def read_env_file(path: Path) -> dict[str, str]:
    """Read TALLY_* entries from a .env file, ignoring everything else."""
    if not path.exists():
        return {}
    return {
        str(key): str(value)
        for key, value in dotenv_values(path).items()
        if key is not None and value is not None and key.startswith(ENV_PREFIX)
    }


def load_layered_env(
    *,
    project_dir: Path | None = None,
    user_env_paths: Iterable[Path] | None = None,
    project_env_paths: Iterable[Path] | None = None,
) -> None:
    """Load TALLY_* variables from user + project .env files into os.environ.

    Args:
        project_dir: base directory for project env paths (defaults to cwd)
        user_env_paths: explicit user env file paths
        project_env_paths: explicit project env file paths
    """
    project_dir = project_dir or Path.cwd()
    if user_env_paths is None:
        user_env_paths = [get_xdg_config_home() / "tally" / ".env"]
    if project_env_paths is None:
        project_env_paths = [project_dir / ".env", project_dir / ".env.local"]

    from_user: set[str] = set()
    for path in user_env_paths:
        for key, value in read_env_file(Path(path)).items():
            if key not in os.environ:
                os.environ[key] = value
                from_user.add(key)

    # Project files may replace user values, never the shell's
    for path in project_env_paths:
        for key, value in read_env_file(Path(path)).items():
            if key not in os.environ or key in from_user:
                os.environ[key] = value
