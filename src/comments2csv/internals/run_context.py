"""Ids that tie log lines, temp folders and manifests to one invocation and one job.

session id:  one per process; COMMENTS2CSV_SESSION_ID pins it (CI, tests).
run id:      one per extraction job; "Unknown" until the first job starts.

The logging filter reads both on every record, so nothing here may log.
"""

from __future__ import annotations

import os
import threading
import uuid

SESSION_ENV_VAR = "COMMENTS2CSV_SESSION_ID"
NO_RUN_ID = "Unknown"

_lock = threading.Lock()
_ids: dict[str, str] = {}


def _short_id() -> str:
    return uuid.uuid4().hex[:8]


def seed_session_id(value: str) -> None:
    """Pin the session id. Ignored once one exists."""
    with _lock:
        _ids.setdefault("session", value)


def get_session_id() -> str:
    with _lock:
        if "session" not in _ids:
            _ids["session"] = os.environ.get(SESSION_ENV_VAR) or _short_id()
        return _ids["session"]


def start_extraction_run() -> str:
    """Begin a new job with a fresh run id, replacing the previous one."""
    with _lock:
        _ids["run"] = _short_id()
        return _ids["run"]


def seed_extraction_run_id(value: str) -> None:
    with _lock:
        _ids["run"] = value


def get_extraction_run_id() -> str:
    return _ids.get("run", NO_RUN_ID)
