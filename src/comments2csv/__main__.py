"""Entry point for comments2csv."""

from __future__ import annotations

import logging
import sys

from comments2csv import startup
from comments2csv.cli import run as run_cli


def main() -> None:
    """Application entry point - handles initialization and runs the CLI.

    Call like:
    ```
    python -m comments2csv review.docx -o comments.csv
    comments2csv deck.pptx -o deck_comments.csv
    ```
    """

    # Set up logging and user folder scaffold.
    log: logging.Logger = startup.initialize_application()

    try:
        exit_code = run_cli()
    except Exception:
        log.exception("Unhandled exception - program crashed.")  # Logs full traceback
        raise

    sys.exit(exit_code)


if __name__ == "__main__":

    main()
