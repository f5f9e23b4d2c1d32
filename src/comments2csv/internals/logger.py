"""
Logging for comments2csv.

One logger, two handlers: the console shows INFO and up, and a rotating file under the
user's logs folder keeps everything. Every line ends with the session and extraction run
ids, which a filter stamps onto each record at emit time, so call sites never format
them by hand.
"""

import logging
from logging.handlers import RotatingFileHandler

from comments2csv.internals.paths import user_log_dir_path
from comments2csv.internals.run_context import get_extraction_run_id, get_session_id

LOG_FILE_NAME = "comments2csv.log"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s [session:%(session_id)s] [run:%(run_id)s]"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Roughly 1 MB per file, five old files kept
MAX_LOG_BYTES = 1_000_000
LOG_BACKUP_COUNT = 5


class RunContextFilter(logging.Filter):
    """Stamp the current session and extraction run ids onto every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.session_id = get_session_id()
        # Read per record: the run id changes between jobs in one process
        record.run_id = get_extraction_run_id()
        return True


def setup_logger(
    name: str = "comments2csv",
    level: int = logging.DEBUG,
    console_level: int = logging.INFO,
) -> logging.Logger:
    """
    Attach the console and file handlers to the named logger.

    Calling it again for a logger that already has handlers returns it unchanged.

    Args:
        name: Logger name (default: "comments2csv")
        level: Minimum level the logger passes to its handlers
        console_level: Minimum level shown on the console; the file always gets DEBUG

    Example:
        >>> log = setup_logger()
        >>> log.info("Starting extraction")
        2025-01-09 14:23:45 [INFO] Starting extraction [session:a1b2c3d4] [run:5e6f7a8b]
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(level)
    # Keep our lines out of the root logger (and theirs out of ours).
    logger.propagate = False

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    run_context = RunContextFilter()

    log_file = user_log_dir_path() / LOG_FILE_NAME
    file_handler = RotatingFileHandler(
        log_file, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUP_COUNT, encoding="utf-8"
    )
    file_handler.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level)

    for handler in (console_handler, file_handler):
        handler.setFormatter(formatter)
        handler.addFilter(run_context)
        logger.addHandler(handler)

    logger.debug(f"Logger initialized. Writing to {log_file}")
    return logger
