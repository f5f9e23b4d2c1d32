"""Data models for extracted comments and the package metadata used to place them."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path

from comments2csv.internals import constants


# region PackageFamily
class PackageFamily(Enum):
    """Which OOXML family an input belongs to; the value is the file extension without the dot."""

    WORDPROCESSING = "docx"
    PRESENTATION = "pptx"

    @property
    def columns(self) -> tuple[str, ...]:
        """CSV header for this family."""
        if self is PackageFamily.PRESENTATION:
            return constants.PPTX_COLUMNS
        return constants.DOCX_COLUMNS


# endregion


# region SchemaDescriptor
@dataclass(frozen=True)
class SchemaDescriptor:
    """
    Element and attribute names to use when reading a presentation's author registry and comment parts.

    PowerPoint has shipped two comment schemas. The one keyed off commentAuthors.xml uses
    <p:cmAuthor>, a `dt` timestamp and a <p:text> body; the one keyed off authors.xml uses
    <p188:author>, a `created` timestamp and <a:t> runs. Decided once per package by the
    format detector.
    """

    name: str
    author_element: str
    comment_element: str
    timestamp_attributes: tuple[str, ...]
    text_element: str
    author_part: Path | None = None

    def with_author_part(self, author_part: Path | None) -> SchemaDescriptor:
        """Return a copy of this descriptor pointing at a concrete author registry file."""
        return replace(self, author_part=author_part)


MODERN_SCHEMA = SchemaDescriptor(
    name="modern",
    author_element="cmAuthor",
    comment_element="cm",
    timestamp_attributes=("dt", "created"),
    text_element="text",
)

LEGACY_SCHEMA = SchemaDescriptor(
    name="legacy",
    author_element="author",
    comment_element="cm",
    timestamp_attributes=("created", "dt"),
    text_element="t",
)

# endregion


# region Author
@dataclass(frozen=True)
class Author:
    """A reviewer identity from a presentation's author registry."""

    author_id: str
    name: str = ""


# endregion


# region RelationshipEntry
@dataclass(frozen=True)
class RelationshipEntry:
    """A slide -> comment part link read from one slide relationship file."""

    slide_ordinal: int
    comment_target_name: str


# endregion


# region CommentRecord
@dataclass
class CommentRecord:
    """
    One row of the output table.

    `location` is the slide number for presentations and stays None for Word documents.
    `correlation_key` holds the comment part file name a presentation comment came from;
    it is only used to look up the slide and is cleared before serialization.
    """

    ordinal_id: int
    text: str
    reviewer_name: str
    date: str
    source_file_name: str
    location: int | None = None
    correlation_key: str | None = field(default=None, repr=False)

    def to_row(self) -> list[str]:
        """Render the record as CSV field values in column order."""
        location = "" if self.location is None else str(self.location)
        return [
            str(self.ordinal_id),
            location,
            self.text,
            self.reviewer_name,
            self.date,
            self.source_file_name,
        ]


# endregion


# region CommentTable
@dataclass
class CommentTable:
    """Ordered comment records for one extraction job, plus the family that fixes the column set."""

    family: PackageFamily
    records: list[CommentRecord] = field(default_factory=list)

    @property
    def columns(self) -> tuple[str, ...]:
        return self.family.columns

    def extend(self, new_records: list[CommentRecord]) -> None:
        """Append a batch of records, keeping their order."""
        self.records.extend(new_records)

    def __len__(self) -> int:
        return len(self.records)


# endregion
