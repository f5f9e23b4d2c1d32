"""Startup logic needed before anything else happens.

Handles:
- Console encoding setup (Windows)
- Logging configuration, with a debug switch for the console
- User directory scaffolding (README, sample config, output folders)
"""

import logging
import os
import platform
import sys

from comments2csv.internals.logger import setup_logger
from comments2csv.internals.scaffold import ensure_user_scaffold

# Set to 1/true/yes/on to echo DEBUG lines on the console too
DEBUG_ENV_VAR = "COMMENTS2CSV_DEBUG"
_TRUTHY = {"1", "true", "yes", "on"}


# region initialize_application
def initialize_application() -> logging.Logger:
    """Common startup tasks. Exits with status 1 if the log files can't be created."""

    # Must happen before the logger's console handler grabs the stream
    _setup_console_encoding()

    try:
        log = setup_logger(console_level=_console_level())
    except PermissionError as e:
        print(
            f"Cannot create log files: {e}. Check permissions on your Documents folder "
            "or set COMMENTS2CSV_HOME to a writable location.",
            file=sys.stderr,
        )
        sys.exit(1)
    except OSError as e:
        print(
            f"Cannot start comments2csv (disk full or I/O error): {e}",
            file=sys.stderr,
        )
        sys.exit(1)

    log.info("Starting comments2csv Log.")

    log.debug("Checking for existing comments2csv user folders and scaffolding if needed.")
    ensure_user_scaffold()

    return log


# endregion


# region helpers
def _setup_console_encoding() -> None:
    """Reviewer and file names are often non-ASCII; Windows consoles default to a code page."""
    if platform.system() != "Windows":
        return
    for stream in (sys.stdout, sys.stderr):
        stream.reconfigure(encoding="utf-8")


def _console_level() -> int:
    """DEBUG when the debug env var is truthy, INFO otherwise. The log file always gets DEBUG."""
    raw = os.environ.get(DEBUG_ENV_VAR, "")
    if raw.strip().lower() in _TRUTHY:
        return logging.DEBUG
    return logging.INFO


# endregion
