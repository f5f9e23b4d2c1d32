"""Where comments2csv keeps its own files.

Everything lives under one base folder, ~/Documents/comments2csv by default (platformdirs
picks the right Documents folder per OS), or wherever COMMENTS2CSV_HOME points:

    logs/       comments2csv.log and its rotated backups
    output/     default destination for CSV files
    configs/    saved TOML settings, including a sample
    manifests/  one JSON record per extraction run

Each accessor creates its folder on first use.
"""

import os
from pathlib import Path

from platformdirs import user_documents_dir

PACKAGE_NAME = "comments2csv"
HOME_ENV_VAR = "COMMENTS2CSV_HOME"


def resolve_path(raw: str | Path) -> Path:
    """Absolute path with ~ and $VARS expanded; relative paths are taken from the cwd."""
    return Path(os.path.expandvars(str(raw))).expanduser().resolve()


def user_base_dir() -> Path:
    override = os.environ.get(HOME_ENV_VAR)
    base = resolve_path(override) if override else Path(user_documents_dir()) / PACKAGE_NAME
    base.mkdir(parents=True, exist_ok=True)
    return base


def _user_subdir(name: str) -> Path:
    folder = user_base_dir() / name
    folder.mkdir(exist_ok=True)
    return folder


def user_log_dir_path() -> Path:
    return _user_subdir("logs")


def user_output_dir() -> Path:
    return _user_subdir("output")


def user_configs_dir() -> Path:
    return _user_subdir("configs")


def user_manifests_dir() -> Path:
    return _user_subdir("manifests")
