"""PowerPoint comments pipeline: a single .pptx, rows placed on and sorted by slide."""

import logging

from comments2csv.annotations.authors import load_authors
from comments2csv.annotations.extract import extract_pptx_comments
from comments2csv.annotations.locate import assign_locations, build_location_map
from comments2csv.internals.config.define_config import UserConfig
from comments2csv.models import CommentTable, PackageFamily
from comments2csv.processing.format_detector import detect_presentation_schema
from comments2csv.processing.normalize import normalize_records
from comments2csv.processing.package_loader import open_package

log = logging.getLogger("comments2csv")


def run_pptx_comments_pipeline(cfg: UserConfig) -> CommentTable:
    """Orchestrates the pptx comments pipeline."""

    log.info(f"Starting pptx comments pipeline.")

    input_paths = cfg.get_input_files()

    # Safety check; validate_batch() already enforces this
    if len(input_paths) != 1:
        raise ValueError(
            f"The pptx comments pipeline takes exactly one file, got {len(input_paths)}."
        )
    input_path = input_paths[0]

    with open_package(input_path) as package:
        schema = detect_presentation_schema(package.root)
        log.info(f"Using {schema.name} comment schema for {package.source_name}.")

        authors = load_authors(schema)
        raw_records = extract_pptx_comments(package, schema, authors)

        location_map = build_location_map(package)
        placed = assign_locations(raw_records, location_map)
        log.debug(f"Placed {placed} of {len(raw_records)} comment(s) on slides.")

    table = CommentTable(family=PackageFamily.PRESENTATION)
    table.extend(
        normalize_records(
            raw_records,
            PackageFamily.PRESENTATION,
            normalize_dates=cfg.normalize_dates,
            date_format=cfg.date_format,
        )
    )

    log.info(f"pptx comments pipeline complete: {len(table)} comment(s).")
    return table
