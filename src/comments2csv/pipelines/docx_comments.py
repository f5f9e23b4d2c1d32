"""Word comments pipeline: one or more .docx files merged into one table."""

import logging
from pathlib import Path

from comments2csv.annotations.extract import extract_docx_comments
from comments2csv.internals.config.define_config import UserConfig
from comments2csv.models import CommentRecord, CommentTable, PackageFamily
from comments2csv.processing.normalize import normalize_records
from comments2csv.processing.package_loader import open_package

log = logging.getLogger("comments2csv")


def run_docx_comments_pipeline(cfg: UserConfig) -> CommentTable:
    """Extract comments from every input .docx, in selection order, into one numbered table."""

    log.info(f"Starting docx comments pipeline.")

    input_paths: list[Path] = cfg.get_input_files()

    raw_records: list[CommentRecord] = []
    for input_path in input_paths:
        log.info(f"Reading {input_path}")
        # The expanded copy is removed as soon as this file is done, even on error.
        with open_package(input_path) as package:
            raw_records.extend(extract_docx_comments(package))

    table = CommentTable(family=PackageFamily.WORDPROCESSING)
    table.extend(
        normalize_records(
            raw_records,
            PackageFamily.WORDPROCESSING,
            normalize_dates=cfg.normalize_dates,
            date_format=cfg.date_format,
        )
    )

    log.info(
        f"docx comments pipeline complete: {len(table)} comment(s) from {len(input_paths)} file(s)."
    )
    return table
