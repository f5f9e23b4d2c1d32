"""Turn raw comment records into the final ordered, numbered table."""

import logging
from dataclasses import replace
from datetime import datetime

from dateutil import parser as date_parser

from comments2csv.internals import constants
from comments2csv.models import CommentRecord, PackageFamily

log = logging.getLogger("comments2csv")

# Two fill-ins for missing fields. A year that differs between them was not in the text.
_DATE_ANCHORS = (datetime(1900, 1, 1), datetime(1904, 2, 2))


# region normalize_date
def normalize_date(
    raw: str | None, date_format: str = constants.DEFAULT_DATE_FORMAT
) -> str:
    """
    Reformat a timestamp string, or return it untouched if it can't be parsed
    or has no year of its own.

    Parsing is month-first and ignores the machine's locale. The time zone is not
    applied, so the calendar date written in the file is the one reported.

    >>> normalize_date("2023-03-05T10:00:00Z")
    '03/05/2023'
    >>> normalize_date("N/A")
    'N/A'
    >>> normalize_date("10:00")
    '10:00'
    """
    if raw is None:
        return ""
    if not raw.strip():
        return raw

    try:
        parsed, check = [date_parser.parse(raw, default=anchor) for anchor in _DATE_ANCHORS]
    except (ValueError, OverflowError) as e:
        log.debug(f"Keeping unparseable date {raw!r} as-is: {e}")
        return raw

    # "10:00" or "Mon" parse fine but carry no calendar date of their own
    if parsed.year != check.year:
        log.debug(f"Keeping date {raw!r} as-is: no year in the text")
        return raw

    return parsed.strftime(date_format)


# endregion


# region normalize_records
def normalize_records(
    records: list[CommentRecord],
    family: PackageFamily,
    normalize_dates: bool = True,
    date_format: str = constants.DEFAULT_DATE_FORMAT,
) -> list[CommentRecord]:
    """
    Produce the final rows for a job from its raw records.

    Presentation rows without a slide are dropped, and the rest are stable-sorted by
    slide. Word rows keep their file-then-document order. Either way the result is
    numbered 1..N, and no row keeps its correlation key.
    """

    if family is PackageFamily.PRESENTATION:
        placed = [r for r in records if r.location is not None]
        dropped = len(records) - len(placed)
        if dropped:
            log.warning(
                f"Dropped {dropped} comment(s) that could not be matched to a slide."
            )
        # sorted() is stable, so comments on the same slide keep their part order
        ordered = sorted(placed, key=lambda r: r.location)  # type: ignore[arg-type, return-value]
    else:
        ordered = list(records)

    normalized: list[CommentRecord] = []
    for ordinal_id, record in enumerate(ordered, start=1):
        normalized.append(
            replace(
                record,
                ordinal_id=ordinal_id,
                location=record.location if family is PackageFamily.PRESENTATION else None,
                date=(
                    normalize_date(record.date, date_format)
                    if normalize_dates
                    else record.date
                ),
                correlation_key=None,
            )
        )

    return normalized


# endregion
