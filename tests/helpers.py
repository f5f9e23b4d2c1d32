"""Shared test helper functions for assembling OOXML packages by hand."""

import csv
import zipfile
from pathlib import Path
from xml.sax.saxutils import escape, quoteattr

NS_W = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"
NS_P = "http://schemas.openxmlformats.org/presentationml/2006/main"
NS_A = "http://schemas.openxmlformats.org/drawingml/2006/main"
NS_P188 = "http://schemas.microsoft.com/office/powerpoint/2018/8/main"
NS_PKG_RELS = "http://schemas.openxmlformats.org/package/2006/relationships"

RT_COMMENTS = (
    "http://schemas.openxmlformats.org/officeDocument/2006/relationships/comments"
)
RT_SLIDE_LAYOUT = (
    "http://schemas.openxmlformats.org/officeDocument/2006/relationships/slideLayout"
)

XML_DECL = '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>\n'


# region zip packages
def write_package(path: Path, parts: dict[str, str | bytes]) -> Path:
    """Write a zip container with the given member name -> content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(path, "w", zipfile.ZIP_DEFLATED) as zf:
        for name, content in parts.items():
            zf.writestr(name, content)
    return path


def rewrite_package(
    source: Path, dest: Path, replacements: dict[str, str | bytes]
) -> Path:
    """Copy a zip container member by member, replacing or adding the given members."""
    dest.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(source) as src, zipfile.ZipFile(
        dest, "w", zipfile.ZIP_DEFLATED
    ) as out:
        for item in src.infolist():
            if item.filename in replacements:
                continue
            out.writestr(item, src.read(item.filename))
        for name, content in replacements.items():
            out.writestr(name, content)
    return dest


def read_member(path: Path, member: str) -> str:
    with zipfile.ZipFile(path) as zf:
        return zf.read(member).decode("utf-8")


# endregion


# region word parts
def docx_comments_xml(comments: list[tuple[str, str | None, list[str]]]) -> str:
    """word/comments.xml for (author, date, text runs) tuples. A None date omits w:date."""
    body = []
    for idx, (author, date, runs) in enumerate(comments):
        date_attr = f" w:date={quoteattr(date)}" if date is not None else ""
        run_xml = "".join(f"<w:r><w:t xml:space=\"preserve\">{escape(r)}</w:t></w:r>" for r in runs)
        body.append(
            f'<w:comment w:id="{idx}" w:author={quoteattr(author)}{date_attr} w:initials="X">'
            f"<w:p>{run_xml}</w:p></w:comment>"
        )
    return f'{XML_DECL}<w:comments xmlns:w="{NS_W}">{"".join(body)}</w:comments>'


def minimal_docx_parts(comments_xml: str | None = None) -> dict[str, str | bytes]:
    """Just enough of a word-processing package for the extractor."""
    parts: dict[str, str | bytes] = {
        "[Content_Types].xml": f"{XML_DECL}<Types/>",
        "word/document.xml": (
            f'{XML_DECL}<w:document xmlns:w="{NS_W}"><w:body><w:p><w:r><w:t>Body</w:t></w:r></w:p></w:body></w:document>'
        ),
    }
    if comments_xml is not None:
        parts["word/comments.xml"] = comments_xml
    return parts


# endregion


# region presentation parts
def modern_authors_xml(authors: list[tuple[str, str | None]]) -> str:
    """ppt/commentAuthors.xml for (id, name) pairs. A None name omits the attribute."""
    items = []
    for author_id, name in authors:
        name_attr = f" name={quoteattr(name)}" if name is not None else ""
        items.append(
            f'<p:cmAuthor id={quoteattr(author_id)}{name_attr} initials="X" lastIdx="1" clrIdx="0"/>'
        )
    return f'{XML_DECL}<p:cmAuthorLst xmlns:a="{NS_A}" xmlns:p="{NS_P}">{"".join(items)}</p:cmAuthorLst>'


def legacy_authors_xml(authors: list[tuple[str, str | None]]) -> str:
    """ppt/authors.xml for (id, name) pairs."""
    items = []
    for author_id, name in authors:
        name_attr = f" name={quoteattr(name)}" if name is not None else ""
        items.append(
            f'<p188:author id={quoteattr(author_id)}{name_attr} initials="X" userId="x" providerId="None"/>'
        )
    return f'{XML_DECL}<p188:authorLst xmlns:a="{NS_A}" xmlns:p188="{NS_P188}">{"".join(items)}</p188:authorLst>'


def modern_comments_xml(comments: list[tuple[str | None, str | None, str]]) -> str:
    """One ppt/comments part for (authorId, dt, text) tuples."""
    items = []
    for idx, (author_id, dt, text) in enumerate(comments, start=1):
        author_attr = f" authorId={quoteattr(author_id)}" if author_id is not None else ""
        dt_attr = f" dt={quoteattr(dt)}" if dt is not None else ""
        items.append(
            f'<p:cm{author_attr}{dt_attr} idx="{idx}"><p:pos x="10" y="10"/>'
            f"<p:text>{escape(text)}</p:text></p:cm>"
        )
    return f'{XML_DECL}<p:cmLst xmlns:a="{NS_A}" xmlns:p="{NS_P}">{"".join(items)}</p:cmLst>'


def legacy_comments_xml(comments: list[tuple[str | None, str | None, str]]) -> str:
    """One ppt/comments part for (authorId, created, text) tuples, using txBody runs."""
    items = []
    for idx, (author_id, created, text) in enumerate(comments, start=1):
        author_attr = f" authorId={quoteattr(author_id)}" if author_id is not None else ""
        created_attr = f" created={quoteattr(created)}" if created is not None else ""
        items.append(
            f'<p188:cm id="{{00000000-0000-0000-0000-00000000000{idx}}}"{author_attr}{created_attr}>'
            f"<p188:txBody><a:bodyPr/><a:lstStyle/><a:p><a:r><a:t>{escape(text)}</a:t></a:r></a:p></p188:txBody>"
            f"</p188:cm>"
        )
    return f'{XML_DECL}<p188:cmLst xmlns:a="{NS_A}" xmlns:p188="{NS_P188}">{"".join(items)}</p188:cmLst>'


def slide_rels_xml(relationships: list[tuple[str, str]]) -> str:
    """A slide .rels part for (Type, Target) pairs."""
    items = "".join(
        f'<Relationship Id="rId{i}" Type={quoteattr(rel_type)} Target={quoteattr(target)}/>'
        for i, (rel_type, target) in enumerate(relationships, start=1)
    )
    return f'{XML_DECL}<Relationships xmlns="{NS_PKG_RELS}">{items}</Relationships>'


def add_relationship(rels_xml: str, rel_id: str, rel_type: str, target: str) -> str:
    """Append one Relationship to an existing .rels part."""
    new_rel = f'<Relationship Id="{rel_id}" Type="{rel_type}" Target="{target}"/>'
    return rels_xml.replace("</Relationships>", f"{new_rel}</Relationships>")


# endregion


# region csv
def read_csv_rows(path: Path) -> list[list[str]]:
    """Parse a written CSV (BOM stripped) into rows, header included."""
    with open(path, "r", encoding="utf-8-sig", newline="") as f:
        return list(csv.reader(f))


# endregion
