"""Read a presentation's comment author registry."""

import logging

from comments2csv.models import Author, SchemaDescriptor
from comments2csv.processing.ooxml_xml import iter_by_local_name, parse_xml_part

log = logging.getLogger("comments2csv")


# region load_authors
def load_authors(schema: SchemaDescriptor) -> dict[str, Author]:
    """
    Build an id -> Author map from the registry part named by the schema descriptor.

    A missing `name` attribute gives an empty name. When an id repeats, the last
    occurrence wins. A descriptor without an author part yields an empty map.
    """

    if schema.author_part is None:
        return {}

    root = parse_xml_part(schema.author_part)

    authors: dict[str, Author] = {}
    for element in iter_by_local_name(root, schema.author_element):
        author_id = element.get("id")
        if author_id is None:
            log.debug(f"Skipping <{schema.author_element}> without an id attribute")
            continue
        authors[author_id] = Author(author_id=author_id, name=element.get("name") or "")

    log.debug(f"Loaded {len(authors)} author(s) from {schema.author_part.name}")
    return authors


# endregion


# region resolve_reviewer
def resolve_reviewer(authors: dict[str, Author], author_id: str | None, fallback: str) -> str:
    """Name for an authorId, or the fallback when the id is missing or unregistered."""
    if author_id is None or author_id not in authors:
        return fallback
    return authors[author_id].name


# endregion
