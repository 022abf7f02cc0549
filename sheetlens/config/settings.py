from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

"""Runtime settings resolved from the environment.

Resolution order:
    1. `.env` in the working directory (loaded with override=True)
    2. variables already present in the process environment
    3. built-in defaults
"""

__all__ = [
    "DEFAULT_WORKSPACE",
    "DEFAULT_EXPORT_DIR",
    "Settings",
    "load_env_file",
    "resolve_settings",
]

DEFAULT_WORKSPACE = "config/workspace.yml"
DEFAULT_EXPORT_DIR = "./exports"


@dataclass(frozen=True)
class Settings:
    workspace_path: Path
    export_dir: Path


def load_env_file(path: Path, override: bool = True) -> bool:
    """Load a .env file; returns False when there is none."""
    if not path.exists():
        return False
    return load_dotenv(dotenv_path=path, override=override)


def resolve_settings(workspace: str | None = None, export_dir: str | None = None) -> Settings:
    """Explicit arguments win over SHEETLENS_* variables, which win over defaults."""
    return Settings(
        workspace_path=Path(workspace or os.getenv("SHEETLENS_WORKSPACE") or DEFAULT_WORKSPACE),
        export_dir=Path(export_dir or os.getenv("SHEETLENS_EXPORT_DIR") or DEFAULT_EXPORT_DIR),
    )
