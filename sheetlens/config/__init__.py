"""Workspace loading and runtime settings."""

from .loader import WorkspaceError, dump_workspace, load_workspace, workspace_from_dict
from .settings import Settings, load_env_file, resolve_settings

__all__ = [
    "Settings",
    "WorkspaceError",
    "dump_workspace",
    "load_env_file",
    "load_workspace",
    "resolve_settings",
    "workspace_from_dict",
]
