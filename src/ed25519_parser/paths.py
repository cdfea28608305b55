"""Filesystem locations used by the command line interface."""
from __future__ import annotations

from pathlib import Path

from platformdirs import PlatformDirs

_APP_NAME = "ed25519-parser"
PROJECT_CONFIG_DIR = ".ed25519-parser"
CONFIG_FILENAME = "config.yaml"


def runtime_config_dir() -> Path:
    """Return the per-user configuration directory."""
    dirs = PlatformDirs(appname=_APP_NAME, appauthor=False, roaming=True)
    return Path(dirs.user_config_path)


def project_config_path(root: Path | None = None) -> Path:
    return (root or Path.cwd()) / PROJECT_CONFIG_DIR / CONFIG_FILENAME
