"""Per-run JSON manifests.

Each extraction run leaves manifests/run_<run_id>_manifest.json behind: what was asked
for, on which machine, and how it ended. The file is written once when the run starts
(status "running") and rewritten when it finishes ("success" or "fail"). A manifest that
can't be written is logged and otherwise ignored; it must never fail the extraction.
"""

from __future__ import annotations

import json
import logging
import platform
import sys
from datetime import datetime
from pathlib import Path
from typing import Any

from comments2csv import __version__
from comments2csv.internals.config.define_config import UserConfig
from comments2csv.internals.paths import user_log_dir_path, user_manifests_dir
from comments2csv.internals.run_context import get_session_id

log = logging.getLogger("comments2csv")

MANIFEST_VERSION = "1.0"


def _family_name(cfg: UserConfig) -> str:
    # A mixed batch has no family; it is about to be rejected, but still gets a record
    try:
        return cfg.family.value
    except ValueError:
        return "invalid"


def _environment() -> dict[str, str]:
    return {
        "python_version": platform.python_version(),
        "platform": platform.system(),
        "platform_release": platform.release(),
        "executable": sys.executable,
        "app_version": __version__,
    }


# region RunManifest
class RunManifest:
    """In-memory manifest for one run plus the path it is saved to. Nothing is written until start()."""

    def __init__(self, cfg: UserConfig, run_id: str) -> None:
        self.run_id = run_id
        self.started_at = datetime.now()
        self.manifest_path = user_manifests_dir() / f"run_{run_id}_manifest.json"
        self.manifest: dict[str, Any] = {
            "manifest_version": MANIFEST_VERSION,
            "run_id": run_id,
            "session_id": get_session_id(),
            "status": None,
            "environment": _environment(),
            "start_time": self.started_at.isoformat(),
            "end_time": None,
            "duration_seconds": None,
            "family": _family_name(cfg),
            "input_files": [str(p) for p in cfg.get_input_files()],
            "output_path": None,
            "comment_count": None,
            "log_path": str(user_log_dir_path()),
            "config": cfg.config_to_dict(),
            "error": None,
            "error_type": None,
        }

    def start(self) -> None:
        self.manifest["status"] = "running"
        self._save()
        log.debug(f"Run manifest started at {self.manifest_path}")

    def complete(self, output_path: Path, comment_count: int) -> None:
        self._finish("success", output_path=str(output_path), comment_count=comment_count)
        log.info(f"Run manifest saved: success ({self.manifest_path})")

    def fail(self, error: Exception) -> None:
        self._finish("fail", error=str(error), error_type=type(error).__name__)
        log.error(f"Run manifest saved: failed - {error} ({self.manifest_path})")

    def _finish(self, status: str, **fields: Any) -> None:
        ended_at = datetime.now()
        self.manifest.update(
            status=status,
            end_time=ended_at.isoformat(),
            duration_seconds=(ended_at - self.started_at).total_seconds(),
            **fields,
        )
        self._save()

    def _save(self) -> None:
        try:
            self.manifest_path.write_text(
                json.dumps(self.manifest, indent=2, ensure_ascii=False) + "\n",
                encoding="utf-8",
            )
        except OSError as e:
            log.error(f"Failed to write manifest to {self.manifest_path}: {e}")


# endregion
