"""Classify inputs by package family and pick the presentation comment schema."""

import logging
from collections.abc import Iterable
from pathlib import Path

from comments2csv.errors import InvalidBatchError
from comments2csv.internals import constants
from comments2csv.models import (
    LEGACY_SCHEMA,
    MODERN_SCHEMA,
    PackageFamily,
    SchemaDescriptor,
)

log = logging.getLogger("comments2csv")


# region detect_family
def detect_family(path: str | Path) -> PackageFamily:
    """Classify a single input by its extension (case-insensitive)."""
    suffix = Path(path).suffix.lower()

    if suffix == ".docx":
        return PackageFamily.WORDPROCESSING
    if suffix == ".pptx":
        return PackageFamily.PRESENTATION

    if suffix == ".doc":
        log.error(f"Unsupported .doc file: {path}")
        raise ValueError(
            "This tool only supports .docx files. Please convert your .doc file to .docx format first."
        )
    if suffix == ".ppt":
        log.error(f"Unsupported .ppt file: {path}")
        raise ValueError(
            "This tool only supports .pptx files. Please convert your .ppt file to .pptx format first."
        )

    log.error(f"Wrong file extension: expected .docx or .pptx, got '{suffix}' ({path})")
    raise ValueError(f"Expected a .docx or .pptx file, but got: {Path(path).name}")


# endregion


# region validate_batch
def validate_batch(paths: Iterable[str | Path]) -> PackageFamily:
    """
    Check the batch rule before any file is opened and return the batch's family.

    A batch is either one or more Word documents, or exactly one presentation.
    Mixing the two, or selecting several presentations, raises InvalidBatchError.
    """
    families = [detect_family(p) for p in paths]

    if not families:
        log.error("No input files were provided.")
        raise InvalidBatchError("No input files provided: select at least one .docx or .pptx file.")

    pptx_count = families.count(PackageFamily.PRESENTATION)
    docx_count = families.count(PackageFamily.WORDPROCESSING)

    if pptx_count and docx_count:
        log.error(
            f"Rejected batch mixing {docx_count} .docx and {pptx_count} .pptx file(s)."
        )
        raise InvalidBatchError(
            "Please select either all DOCX files or a single PPTX file, not a combination of both."
        )
    if pptx_count > 1:
        log.error(f"Rejected batch with {pptx_count} .pptx files.")
        raise InvalidBatchError(
            "Please select a single PPTX file; multiple presentations cannot be combined."
        )

    return families[0]


# endregion


# region detect_presentation_schema
def detect_presentation_schema(package_root: Path) -> SchemaDescriptor:
    """
    Decide which author/comment terminology an expanded presentation uses.

    commentAuthors.xml wins over authors.xml. When neither is present the package has
    no author registry; comments are still read, with modern element names.
    """
    modern_part = package_root / constants.PPTX_MODERN_AUTHORS_PART
    if modern_part.is_file():
        log.debug(f"Found {constants.PPTX_MODERN_AUTHORS_PART}; using modern comment schema.")
        return MODERN_SCHEMA.with_author_part(modern_part)

    legacy_part = package_root / constants.PPTX_LEGACY_AUTHORS_PART
    if legacy_part.is_file():
        log.debug(f"Found {constants.PPTX_LEGACY_AUTHORS_PART}; using legacy comment schema.")
        return LEGACY_SCHEMA.with_author_part(legacy_part)

    log.info("No comment author registry in this presentation; reviewers will show as Unknown.")
    return MODERN_SCHEMA


# endregion
