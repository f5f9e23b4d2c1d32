"""Route an extraction job to the right pipeline and write its CSV."""

import logging
from pathlib import Path

from comments2csv import io
from comments2csv.internals.config.define_config import UserConfig
from comments2csv.internals.manifest import RunManifest
from comments2csv.internals.run_context import (
    get_extraction_run_id,
    get_session_id,
    start_extraction_run,
)
from comments2csv.models import CommentTable, PackageFamily
from comments2csv.pipelines import docx_comments, pptx_comments

log = logging.getLogger("comments2csv")


# region run_extraction
def run_extraction(cfg: UserConfig) -> Path:
    """
    Validate the job, extract its comments and save them as CSV.

    The batch rule and input checks run before any file is opened, so an invalid
    selection fails without touching the inputs or the destination.

    Returns:
        Path of the written CSV.
    """

    cfg.pre_run_check()

    run_id = start_extraction_run()
    log.info(f"Initializing extraction run.")

    run_manifest = RunManifest(cfg, run_id=run_id)
    run_manifest.start()

    log_run_info(cfg)

    try:
        table = extract_comment_table(cfg)
        output_path = io.save_output(table, io.resolve_output_path(cfg))

        run_manifest.complete(output_path, comment_count=len(table))
        return output_path

    except Exception as e:
        run_manifest.fail(e)
        raise  # Re-raise so the CLI still sees the error


# endregion


# region extract_comment_table
def extract_comment_table(cfg: UserConfig) -> CommentTable:
    """Run the pipeline matching the batch's family and return its table without saving."""
    family = cfg.family

    if family == PackageFamily.WORDPROCESSING:
        return docx_comments.run_docx_comments_pipeline(cfg)
    elif family == PackageFamily.PRESENTATION:
        return pptx_comments.run_pptx_comments_pipeline(cfg)
    else:
        raise ValueError(f"Unknown package family: {family}")


# endregion


# region log_run_info
def log_run_info(cfg: UserConfig) -> None:
    """Write this run's IDs, inputs and config to the log."""
    log.info("=== Extraction Run Started ===")
    log.info(f"Run ID: {get_extraction_run_id()}")
    log.info(f"Session ID: {get_session_id()}")
    log.info(f"Family: {cfg.family.value}")
    for input_path in cfg.get_input_files():
        log.info(f"Input: {input_path}")
    log.info(f"Configuration: {cfg}")


# endregion
