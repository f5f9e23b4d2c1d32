"""XML parsing utilities for reading parts out of an expanded OOXML package."""

import logging
import xml.etree.ElementTree as ET
from collections.abc import Iterator
from pathlib import Path

from comments2csv.errors import MalformedPartError

log = logging.getLogger("comments2csv")


# region parse_xml_part
def parse_xml_part(part_path: Path) -> ET.Element:
    """Parse one XML part from disk and return its root element."""

    try:
        with open(part_path, "rb") as f:
            tree = ET.parse(f)
    except ET.ParseError as e:
        log.error(f"Malformed XML in {part_path.name}: {e}")
        raise MalformedPartError(
            f"Package part {part_path.name} is not well-formed XML: {e}"
        ) from e

    return tree.getroot()


# endregion


# region local_name
def local_name(tag: str) -> str:
    """Strip the namespace from an ElementTree tag: '{http://...}cm' -> 'cm'."""
    return tag.rsplit("}", 1)[-1]


# endregion


# region iter_by_local_name
def iter_by_local_name(root: ET.Element, name: str) -> Iterator[ET.Element]:
    """
    Yield every element under (and including) root whose local name matches, in document order.

    PowerPoint uses different namespace URIs for the same element across versions,
    so presentation parts are matched on local name only.
    """
    for element in root.iter():
        # Comments and processing instructions have non-string tags
        if isinstance(element.tag, str) and local_name(element.tag) == name:
            yield element


# endregion


# region find_first_by_local_name
def find_first_by_local_name(root: ET.Element, name: str) -> ET.Element | None:
    """First descendant of root (excluding root itself) with a matching local name, or None."""
    for element in root.iter():
        if element is root:
            continue
        if isinstance(element.tag, str) and local_name(element.tag) == name:
            return element
    return None


# endregion


# region element_text
def element_text(element: ET.Element | None) -> str:
    """All text inside an element, concatenated with no separators."""
    if element is None:
        return ""
    return "".join(element.itertext())


# endregion
