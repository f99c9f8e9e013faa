"""Shared filesystem path helpers for utf8text."""
from __future__ import annotations

from pathlib import Path

from platformdirs import PlatformDirs

_APP_NAME = "utf8text"


def runtime_config_dir() -> Path:
    """Return the per-user configuration directory."""
    dirs = PlatformDirs(appname=_APP_NAME, appauthor=None, roaming=True)
    return Path(dirs.user_config_path)


def local_config_path(root: Path | None = None) -> Path:
    """Return the project-local configuration file below ``root`` (default: cwd)."""
    return (root or Path.cwd()) / ".utf8text" / "config.yaml"
