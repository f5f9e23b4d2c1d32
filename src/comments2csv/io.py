"""File I/O for the output CSV: naming, field escaping and writing to disk."""

import logging
from datetime import datetime
from pathlib import Path

from comments2csv.errors import DestinationInUseError
from comments2csv.internals import constants
from comments2csv.internals.config.define_config import UserConfig
from comments2csv.models import CommentTable

log = logging.getLogger("comments2csv")

# Typographic quotes Word and PowerPoint substitute while typing
_QUOTE_TRANSLATION = str.maketrans(
    {
        "“": '"',  # left double
        "”": '"',  # right double
        "‘": "'",  # left single
        "’": "'",  # right single
    }
)
_CHARS_REQUIRING_QUOTES = (",", '"', "'", "\n", "\r")

CSV_LINE_TERMINATOR = "\r\n"
CSV_ENCODING = "utf-8-sig"  # UTF-8 with BOM so spreadsheet apps detect the encoding


# region Field escaping
def format_csv_field(value: object) -> str:
    """
    Render one value as a CSV field.

    Curly quotes are straightened first. The field is then wrapped in double quotes,
    with inner double quotes doubled, if it contains a comma, either quote character
    or a line break.
    """
    text = "" if value is None else str(value)
    text = text.translate(_QUOTE_TRANSLATION)

    if any(ch in text for ch in _CHARS_REQUIRING_QUOTES):
        text = '"' + text.replace('"', '""') + '"'

    return text


def render_csv(table: CommentTable) -> str:
    """Header plus one line per record, every line ending in CRLF."""
    lines = [",".join(table.columns)]
    for record in table.records:
        lines.append(",".join(format_csv_field(v) for v in record.to_row()))
    return CSV_LINE_TERMINATOR.join(lines) + CSV_LINE_TERMINATOR


# endregion


# region Path Helpers
def _build_timestamped_output_filename() -> str:
    """Apply a per-run timestamp to the output's base filename."""
    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    name, ext = constants.OUTPUT_CSV_FILENAME.rsplit(".", 1)
    return f"{name}_{timestamp}.{ext}"


def resolve_output_path(cfg: UserConfig) -> Path:
    """The user's chosen CSV path, or a timestamped file in the output folder."""
    explicit = cfg.get_output_csv()
    if explicit is not None:
        return explicit
    return cfg.get_output_folder() / _build_timestamped_output_filename()


# endregion


# region Disk I/O - Write
def save_output(table: CommentTable, output_path: Path) -> Path:
    """Write the table to output_path, replacing any existing file."""

    content = render_csv(table)

    output_path.parent.mkdir(parents=True, exist_ok=True)

    # Attempt to save
    try:
        with open(output_path, "w", encoding=CSV_ENCODING, newline="") as f:
            f.write(content)
    except PermissionError as e:
        log.error(f"Save failed due to permission error: {e}")
        raise DestinationInUseError(
            f"{output_path.name} is currently in use and cannot be overwritten. "
            "Please close the file and try again."
        ) from e
    except OSError as e:
        log.error(f"Save failed: {e}")
        raise OSError(f"Save failed (disk space or IO issue): {e}") from e

    log.info(f"Successfully saved {len(table)} comment(s) to {output_path}.")
    return output_path


# endregion
