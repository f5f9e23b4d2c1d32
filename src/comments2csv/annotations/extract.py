"""Extract raw comment records from Word and PowerPoint comment parts."""

import logging

from docx.oxml.ns import qn

from comments2csv.annotations.authors import resolve_reviewer
from comments2csv.internals import constants
from comments2csv.models import Author, CommentRecord, SchemaDescriptor
from comments2csv.processing.ooxml_xml import (
    element_text,
    find_first_by_local_name,
    iter_by_local_name,
    parse_xml_part,
)
from comments2csv.processing.package_loader import ExpandedPackage

log = logging.getLogger("comments2csv")


# region extract_docx_comments
def extract_docx_comments(package: ExpandedPackage) -> list[CommentRecord]:
    """
    Read every <w:comment> in word/comments.xml, in document order.

    Records come back with ordinal_id 0 and the raw w:date value; the normalizer
    numbers them and formats dates. A document without a comments part has no comments.
    """
    comments_part = package.part(constants.DOCX_COMMENTS_PART)

    if not comments_part.is_file():
        log.info(f"No comments found in {package.source_name}.")
        return []

    root = parse_xml_part(comments_part)

    records: list[CommentRecord] = []
    for comment in root.iter(qn("w:comment")):
        # Formatting changes split a comment's text across runs; join them back as-is.
        text = "".join(t.text or "" for t in comment.iter(qn("w:t")))
        if not text:
            # w:id is only used for the log; output IDs are renumbered per job
            log.debug(
                f"Comment w:id={comment.get(qn('w:id'))} in {package.source_name} has no text."
            )

        records.append(
            CommentRecord(
                ordinal_id=0,
                text=text,
                reviewer_name=comment.get(qn("w:author")) or "",
                date=comment.get(qn("w:date")) or "",
                source_file_name=package.source_name,
            )
        )

    log.info(f"Found {len(records)} comment(s) in {package.source_name}.")
    return records


# endregion


# region extract_pptx_comments
def extract_pptx_comments(
    package: ExpandedPackage,
    schema: SchemaDescriptor,
    authors: dict[str, Author],
) -> list[CommentRecord]:
    """
    Read every comment element in every file under ppt/comments/.

    Each record keeps its comment part's file name as correlation_key so the location
    resolver can find the slide that references that part. Reviewer names are resolved
    against the author map; unknown ids show as "Unknown".
    """
    comments_dir = package.part(constants.PPTX_COMMENTS_DIR)

    if not comments_dir.is_dir():
        log.info(f"No comments folder in {package.source_name}.")
        return []

    records: list[CommentRecord] = []
    for comment_part in sorted(p for p in comments_dir.iterdir() if p.is_file()):
        root = parse_xml_part(comment_part)

        part_count = 0
        for comment in iter_by_local_name(root, schema.comment_element):
            text_element = find_first_by_local_name(comment, schema.text_element)

            records.append(
                CommentRecord(
                    ordinal_id=0,
                    text=element_text(text_element),
                    reviewer_name=resolve_reviewer(
                        authors, comment.get("authorId"), constants.UNKNOWN_REVIEWER
                    ),
                    date=_read_timestamp(comment.attrib, schema),
                    source_file_name=package.source_name,
                    correlation_key=comment_part.name,
                )
            )
            part_count += 1

        log.debug(f"{comment_part.name}: {part_count} comment(s)")

    log.info(f"Found {len(records)} comment(s) in {package.source_name}.")
    return records


def _read_timestamp(attributes: dict[str, str], schema: SchemaDescriptor) -> str:
    """First present timestamp attribute in the schema's preference order."""
    for attribute in schema.timestamp_attributes:
        value = attributes.get(attribute)
        if value is not None:
            return value
    return ""


# endregion
