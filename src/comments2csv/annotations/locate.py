"""Work out which slide each presentation comment belongs to."""

import logging
import re
from pathlib import Path, PurePosixPath

from pptx.opc.constants import RELATIONSHIP_TYPE as RT

from comments2csv.internals import constants
from comments2csv.models import CommentRecord, RelationshipEntry
from comments2csv.processing.ooxml_xml import iter_by_local_name, parse_xml_part
from comments2csv.processing.package_loader import ExpandedPackage

log = logging.getLogger("comments2csv")

# PowerPoint 365 threaded comments use a Microsoft-namespaced relationship type
# that also ends in "/comments".
MODERN_COMMENTS_RELATIONSHIP = (
    "http://schemas.microsoft.com/office/2018/10/relationships/comments"
)

_SLIDE_RELS_NAME = re.compile(r"^slide(\d+)\.xml\.rels$", re.IGNORECASE)
_DIGITS = re.compile(r"\d+")


# region is_comments_relationship
def is_comments_relationship(rel_type: str | None) -> bool:
    """True if a Relationship Type attribute links a slide to a comment part."""
    if not rel_type:
        return False
    return rel_type in (RT.COMMENTS, MODERN_COMMENTS_RELATIONSHIP) or rel_type.endswith(
        "/comments"
    )


# endregion


# region slide_ordinal_from_rels_name
def slide_ordinal_from_rels_name(file_name: str) -> int | None:
    """'slide12.xml.rels' -> 12. Falls back to the first run of digits; None if there are none."""
    match = _SLIDE_RELS_NAME.match(file_name)
    if match:
        return int(match.group(1))

    digits = _DIGITS.search(file_name.removesuffix(".rels").removesuffix(".xml"))
    if digits:
        return int(digits.group(0))
    return None


# endregion


# region read_relationship_entries
def read_relationship_entries(rels_path: Path) -> list[RelationshipEntry]:
    """Comment links declared in one slide relationship part."""
    root = parse_xml_part(rels_path)

    targets = [
        PurePosixPath(rel.get("Target", "")).name
        for rel in iter_by_local_name(root, "Relationship")
        if is_comments_relationship(rel.get("Type"))
    ]
    targets = [t for t in targets if t]
    if not targets:
        return []

    slide_ordinal = slide_ordinal_from_rels_name(rels_path.name)
    if slide_ordinal is None:
        log.warning(
            f"Could not read a slide number from {rels_path.name}; its comments will be skipped."
        )
        return []

    return [RelationshipEntry(slide_ordinal, target) for target in targets]


# endregion


# region build_location_map
def build_location_map(package: ExpandedPackage) -> dict[str, int]:
    """
    Map comment part file name -> slide number across all slide relationship parts.

    Parts are read in name order. If two slides reference the same comment part the
    later one wins; PowerPoint never writes that, so which slide is kept is not defined.
    """
    rels_dir = package.part(constants.PPTX_SLIDE_RELS_DIR)

    if not rels_dir.is_dir():
        log.info(
            f"No slide relationship folder in {package.source_name}; no comment can be placed on a slide."
        )
        return {}

    location_map: dict[str, int] = {}
    for rels_path in sorted(p for p in rels_dir.iterdir() if p.is_file()):
        for entry in read_relationship_entries(rels_path):
            previous = location_map.get(entry.comment_target_name)
            if previous is not None and previous != entry.slide_ordinal:
                log.warning(
                    f"{entry.comment_target_name} is referenced by slides {previous} and {entry.slide_ordinal}; using slide {entry.slide_ordinal}."
                )
            location_map[entry.comment_target_name] = entry.slide_ordinal

    return location_map


# endregion


# region assign_locations
def assign_locations(
    records: list[CommentRecord], location_map: dict[str, int]
) -> int:
    """Set each record's slide from its correlation key in one pass. Returns how many were placed."""
    placed = 0
    for record in records:
        if record.correlation_key is None:
            continue
        slide = location_map.get(record.correlation_key)
        if slide is not None:
            record.location = slide
            placed += 1
    return placed


# endregion
