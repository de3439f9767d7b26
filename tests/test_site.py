"""End-to-end tests for ``portfolio_site.site.generate``.

The tests drive the full read, decode, render, and write pipeline against the
fixture document and template set from ``conftest.py`` and assert on the files
left in the build directory, including the fail-fast partial-output case where
``index.html`` is written before ``404.html`` fails to render.
"""

from __future__ import annotations

import os
import stat
import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from portfolio_site.errors import (
    DecodeError,
    ReadError,
    RenderError,
    TemplateInitError,
    WriteError,
)
from portfolio_site.site import PAGES, generate

if typ.TYPE_CHECKING:
    import collections.abc as cabc

REPO_ROOT = Path(__file__).resolve().parents[1]


def test_pages_are_fixed_and_ordered() -> None:
    """The index page should be produced before the not-found page."""
    assert [(page.template_name, page.output_file) for page in PAGES] == [
        ("main.html", "index.html"),
        ("404.html", "404.html"),
    ]


def test_generate_writes_both_pages(
    document_path: Path, templates_dir: Path, output_dir: Path
) -> None:
    """A valid run should write exactly index.html and 404.html."""
    written = generate(document_path, templates_dir, output_dir)

    assert written == [output_dir / "index.html", output_dir / "404.html"]
    assert sorted(path.name for path in output_dir.iterdir()) == [
        "404.html",
        "index.html",
    ]
    for path in written:
        html = path.read_text(encoding="utf-8")
        assert html.strip(), f"expected {path.name} to be non-empty"
        assert html.endswith("\n")

    index = BeautifulSoup(written[0].read_text(encoding="utf-8"), "html.parser")
    project = index.select_one("article.project")
    assert project is not None
    assert project.get("data-tags") == "python,sqlite"
    not_found = BeautifulSoup(written[1].read_text(encoding="utf-8"), "html.parser")
    assert not_found.body is not None
    assert not_found.body.get("data-page") == "404.html"


def test_output_files_use_fixed_mode(
    document_path: Path, templates_dir: Path, output_dir: Path
) -> None:
    """Pages should be created owner read-write, group and other read."""
    previous = os.umask(0o022)
    try:
        written = generate(document_path, templates_dir, output_dir)
    finally:
        os.umask(previous)
    for path in written:
        assert stat.S_IMODE(path.stat().st_mode) == 0o644


def test_existing_output_is_truncated(
    document_path: Path, templates_dir: Path, output_dir: Path
) -> None:
    """Stale content should be fully replaced, not appended to."""
    stale = output_dir / "404.html"
    stale.write_text("stale " * 10_000, encoding="utf-8")
    generate(document_path, templates_dir, output_dir)
    assert "stale" not in stale.read_text(encoding="utf-8")


def test_repeated_runs_are_byte_identical(
    document_path: Path, templates_dir: Path, output_dir: Path
) -> None:
    """Generating twice from the same inputs should give identical bytes."""
    first = [path.read_bytes() for path in generate(document_path, templates_dir, output_dir)]
    second = [path.read_bytes() for path in generate(document_path, templates_dir, output_dir)]
    assert first == second


def test_missing_document_raises_read_error(
    tmp_path: Path, templates_dir: Path, output_dir: Path
) -> None:
    """A missing document should fail before any file is written."""
    with pytest.raises(ReadError):
        generate(tmp_path / "missing.yml", templates_dir, output_dir)
    assert list(output_dir.iterdir()) == []


def test_malformed_document_raises_decode_error(
    tmp_path: Path, templates_dir: Path, output_dir: Path
) -> None:
    """A type-mismatched document should fail with DecodeError."""
    document = tmp_path / "config.yml"
    document.write_text("header:\n  cta: not a list\n", encoding="utf-8")
    with pytest.raises(DecodeError, match=r"header\.cta"):
        generate(document, templates_dir, output_dir)
    assert list(output_dir.iterdir()) == []


def test_missing_templates_dir_raises_template_init_error(
    tmp_path: Path, document_path: Path, output_dir: Path
) -> None:
    """A missing template directory should fail before rendering."""
    with pytest.raises(TemplateInitError):
        generate(document_path, tmp_path / "no-templates", output_dir)
    assert list(output_dir.iterdir()) == []


@pytest.mark.parametrize("body", [None, "{% endfor %}"], ids=["missing", "invalid"])
def test_broken_not_found_page_leaves_index_on_disk(
    make_templates: cabc.Callable[..., Path],
    document_path: Path,
    output_dir: Path,
    body: str | None,
) -> None:
    """A failing 404.html should abort after index.html was already written."""
    templates_dir = make_templates({"404.html": body})

    with pytest.raises(RenderError) as excinfo:
        generate(document_path, templates_dir, output_dir)

    assert excinfo.value.template == "404.html"
    assert "404.html" in str(excinfo.value)
    assert (output_dir / "index.html").is_file(), (
        "expected index.html to remain from the successful first page"
    )
    assert not (output_dir / "404.html").exists()


def test_broken_main_page_writes_nothing(
    make_templates: cabc.Callable[..., Path], document_path: Path, output_dir: Path
) -> None:
    """A failing first page should stop the run before any write."""
    templates_dir = make_templates({"main.html": "{{ nowhere.title }}"})
    with pytest.raises(RenderError, match="main.html"):
        generate(document_path, templates_dir, output_dir)
    assert list(output_dir.iterdir()) == []


def test_missing_output_dir_raises_write_error(
    tmp_path: Path, document_path: Path, templates_dir: Path
) -> None:
    """The build directory must pre-exist; it is never created."""
    output_dir = tmp_path / "build"
    with pytest.raises(WriteError, match="error writing index.html") as excinfo:
        generate(document_path, templates_dir, output_dir)
    assert excinfo.value.path == output_dir / "index.html"
    assert not output_dir.exists()


def test_shipped_sample_renders(tmp_path: Path) -> None:
    """The repository's own config.yml and templates should build cleanly."""
    output_dir = tmp_path / "build"
    output_dir.mkdir()

    written = generate(REPO_ROOT / "config.yml", REPO_ROOT / "templates", output_dir)

    assert [path.name for path in written] == ["index.html", "404.html"]
    index = BeautifulSoup(written[0].read_text(encoding="utf-8"), "html.parser")
    ctas = [link.get_text(strip=True) for link in index.select("[data-test='cta']")]
    assert ctas == ["See my work", "Get in touch"], f"unexpected CTAs: {ctas!r}"
    assert index.select_one("[data-test='footer-license']") is not None
    titles = [heading.get_text() for heading in index.select(".project-card h3")]
    assert titles == ["queue-lite", "schema-diff"]
