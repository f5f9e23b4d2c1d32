"""Shared fixtures"""

# tests/conftest.py
from pathlib import Path

import pytest
from docx import Document
from pptx import Presentation

from comments2csv.internals.config.define_config import UserConfig
from comments2csv.internals.run_context import seed_extraction_run_id
from tests.helpers import (
    RT_COMMENTS,
    add_relationship,
    docx_comments_xml,
    legacy_authors_xml,
    legacy_comments_xml,
    minimal_docx_parts,
    modern_authors_xml,
    modern_comments_xml,
    read_member,
    rewrite_package,
    slide_rels_xml,
    write_package,
)


# region environment
@pytest.fixture(autouse=True)
def isolated_user_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the user folder tree (logs, output, manifests) at a temp dir for every test."""
    home = tmp_path / "user_home"
    monkeypatch.setenv("COMMENTS2CSV_HOME", str(home))
    seed_extraction_run_id("testrun0")
    return home


@pytest.fixture
def clean_debug_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Ensure debug env var is not set before test.
    Used by test_startup."""
    monkeypatch.delenv("COMMENTS2CSV_DEBUG", raising=False)
    return monkeypatch


@pytest.fixture
def temp_output_dir(tmp_path: Path) -> Path:
    """Temporary directory for test output files"""
    output = tmp_path / "output"
    output.mkdir()
    return output


# endregion


# region word packages
@pytest.fixture
def docx_with_two_comments(tmp_path: Path) -> Path:
    """Hand-assembled .docx with two comments; the second's text is split across runs."""
    comments = docx_comments_xml(
        [
            ("Ana Reviewer", "2023-03-05T10:00:00Z", ["Tighten this, please."]),
            ("Ben Editor", "2023-04-01T08:30:00Z", ["Split ", "across ", "runs"]),
        ]
    )
    return write_package(tmp_path / "inputs" / "chapter1.docx", minimal_docx_parts(comments))


@pytest.fixture
def docx_with_one_comment(tmp_path: Path) -> Path:
    """Hand-assembled .docx with a single comment."""
    comments = docx_comments_xml(
        [("Cy Author", "2023-05-10T12:00:00Z", ["Second file note"])]
    )
    return write_package(tmp_path / "inputs" / "chapter2.docx", minimal_docx_parts(comments))


@pytest.fixture
def docx_without_comments(tmp_path: Path) -> Path:
    """A .docx with no word/comments.xml part at all."""
    return write_package(tmp_path / "inputs" / "clean.docx", minimal_docx_parts())


@pytest.fixture
def real_docx_with_comments(tmp_path: Path) -> Path:
    """A genuine Word document with comments, built by python-docx."""
    doc = Document()
    first = doc.add_paragraph("The opening line of the manuscript.")
    second = doc.add_paragraph("A second paragraph, with a comma.")
    doc.add_comment(first.runs[0], text="Strong opening", author="Ana Reviewer", initials="AR")
    doc.add_comment(
        second.runs[0], text='Say "why", not just what', author="Ben Editor", initials="BE"
    )

    path = tmp_path / "inputs" / "real_manuscript.docx"
    path.parent.mkdir(parents=True, exist_ok=True)
    doc.save(str(path))
    return path


# endregion


# region presentation packages
@pytest.fixture
def blank_three_slide_pptx(tmp_path: Path) -> Path:
    """A genuine three-slide deck with no comments, built by python-pptx."""
    prs = Presentation()
    blank_layout = prs.slide_layouts[6]
    for _ in range(3):
        prs.slides.add_slide(blank_layout)

    path = tmp_path / "build" / "blank_deck.pptx"
    path.parent.mkdir(parents=True, exist_ok=True)
    prs.save(str(path))
    return path


@pytest.fixture
def modern_pptx(tmp_path: Path, blank_three_slide_pptx: Path) -> Path:
    """
    The python-pptx deck with commentAuthors.xml comments added.

    comment1.xml (two comments) hangs off slide 3 and comment2.xml (one comment) off
    slide 1, so part order and slide order disagree.
    """
    rels = {
        n: read_member(blank_three_slide_pptx, f"ppt/slides/_rels/slide{n}.xml.rels")
        for n in (1, 3)
    }
    replacements: dict[str, str | bytes] = {
        "ppt/commentAuthors.xml": modern_authors_xml([("0", "Ana Reviewer"), ("1", "Ben Editor")]),
        "ppt/comments/comment1.xml": modern_comments_xml(
            [
                ("0", "2023-03-05T10:00:00.000", "Slide three, first"),
                ("1", "2023-03-06T11:00:00.000", "Slide three, second"),
            ]
        ),
        "ppt/comments/comment2.xml": modern_comments_xml(
            [("1", "2023-01-15T09:00:00.000", "Slide one note")]
        ),
        "ppt/slides/_rels/slide3.xml.rels": add_relationship(
            rels[3], "rId99", RT_COMMENTS, "../comments/comment1.xml"
        ),
        "ppt/slides/_rels/slide1.xml.rels": add_relationship(
            rels[1], "rId99", RT_COMMENTS, "../comments/comment2.xml"
        ),
    }
    return rewrite_package(blank_three_slide_pptx, tmp_path / "inputs" / "modern_deck.pptx", replacements)


@pytest.fixture
def legacy_pptx(tmp_path: Path) -> Path:
    """Hand-assembled deck using authors.xml, `created` timestamps and <a:t> text."""
    ana = "{11111111-1111-1111-1111-111111111111}"
    ben = "{22222222-2222-2222-2222-222222222222}"
    parts: dict[str, str | bytes] = {
        "[Content_Types].xml": "<Types/>",
        "ppt/authors.xml": legacy_authors_xml([(ana, "Ana Reviewer"), (ben, "Ben Editor")]),
        "ppt/comments/modernComment_101_A.xml": legacy_comments_xml(
            [(ana, "2024-02-10T14:00:00.000", "Legacy on slide two")]
        ),
        "ppt/comments/modernComment_102_B.xml": legacy_comments_xml(
            [(ben, "2024-02-09T14:00:00.000", "Legacy on slide one")]
        ),
        "ppt/slides/_rels/slide1.xml.rels": slide_rels_xml(
            [
                (
                    "http://schemas.microsoft.com/office/2018/10/relationships/comments",
                    "../comments/modernComment_102_B.xml",
                )
            ]
        ),
        "ppt/slides/_rels/slide2.xml.rels": slide_rels_xml(
            [
                (
                    "http://schemas.microsoft.com/office/2018/10/relationships/comments",
                    "../comments/modernComment_101_A.xml",
                )
            ]
        ),
    }
    return write_package(tmp_path / "inputs" / "legacy_deck.pptx", parts)


@pytest.fixture
def pptx_without_authors(tmp_path: Path) -> Path:
    """A deck whose comments reference authors that no registry part defines."""
    parts: dict[str, str | bytes] = {
        "[Content_Types].xml": "<Types/>",
        "ppt/comments/comment1.xml": modern_comments_xml(
            [("5", "2023-03-05T10:00:00.000", "Orphan author")]
        ),
        "ppt/slides/_rels/slide2.xml.rels": slide_rels_xml(
            [(RT_COMMENTS, "../comments/comment1.xml")]
        ),
    }
    return write_package(tmp_path / "inputs" / "no_authors.pptx", parts)


# endregion


# region configs
@pytest.fixture
def docx_batch_cfg(
    docx_with_two_comments: Path, docx_with_one_comment: Path, temp_output_dir: Path
) -> UserConfig:
    """Config for a two-file Word batch writing to an explicit CSV."""
    return UserConfig(
        input_files=[docx_with_two_comments, docx_with_one_comment],
        output_csv=temp_output_dir / "comments.csv",
    )


@pytest.fixture
def modern_pptx_cfg(modern_pptx: Path, temp_output_dir: Path) -> UserConfig:
    """Config for the modern-schema deck writing to an explicit CSV."""
    return UserConfig(
        input_files=[modern_pptx],
        output_csv=temp_output_dir / "deck_comments.csv",
    )


# endregion
