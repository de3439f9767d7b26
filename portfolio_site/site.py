"""Portfolio site generation pipeline.

This module turns ``config.yml`` into the two static pages of the portfolio:
``index.html`` rendered from ``main.html`` and ``404.html`` rendered from
``404.html``, both wrapped in ``layout.html``. The run is strictly sequential
and fail-fast: read the document, decode it, initialise the renderer, then
render and write each page in a fixed order. The first error aborts the run,
leaving any page already written on disk.

Typical usage mirrors the CLI:

>>> from pathlib import Path
>>> from portfolio_site.site import generate
>>> written = generate(
...     Path("config.yml"), Path("templates"), Path("build")
... )  # doctest: +SKIP
>>> [path.name for path in written]  # doctest: +SKIP
['index.html', '404.html']

The output directory must already exist; it is never created here.
"""

from __future__ import annotations

import dataclasses as dc
import os
import typing as typ

from ._constants import OUTPUT_FILE_MODE
from .config import load_config
from .errors import WriteError
from .renderer import TemplateRenderer

if typ.TYPE_CHECKING:
    from pathlib import Path


@dc.dataclass(frozen=True, slots=True)
class PageSpec:
    """Pair a page template with the file it is written to."""

    template_name: str
    output_file: str


PAGES: tuple[PageSpec, ...] = (
    PageSpec(template_name="main.html", output_file="index.html"),
    PageSpec(template_name="404.html", output_file="404.html"),
)


def _write_page(path: Path, html: str) -> None:
    """Create or truncate ``path`` with a fixed mode and write ``html``."""
    if not html.endswith("\n"):
        html += "\n"
    flags = os.O_WRONLY | os.O_CREAT | os.O_TRUNC
    try:
        with open(
            path,
            "w",
            encoding="utf-8",
            newline="",
            opener=lambda name, _: os.open(name, flags, OUTPUT_FILE_MODE),
        ) as handle:
            handle.write(html)
    except OSError as exc:
        msg = f"error writing {path.name}: {exc}"
        raise WriteError(path, msg) from exc


def generate(document_path: Path, templates_dir: Path, output_dir: Path) -> list[Path]:
    """Render every page in :data:`PAGES` and write it under ``output_dir``.

    Parameters
    ----------
    document_path : Path
        YAML configuration document, usually ``config.yml``.
    templates_dir : Path
        Directory containing ``layout.html``, ``main.html``, and ``404.html``.
    output_dir : Path
        Existing directory that receives the rendered pages.

    Returns
    -------
    list[Path]
        Written file paths in page order.

    Raises
    ------
    ReadError
        If the document cannot be read.
    DecodeError
        If the document is malformed.
    TemplateInitError
        If the templates directory or layout cannot be loaded.
    RenderError
        If a page template fails to render; ``template`` names it.
    WriteError
        If a page cannot be written, for example because ``output_dir`` is
        missing.
    """
    config = load_config(document_path)
    renderer = TemplateRenderer(templates_dir)
    written: list[Path] = []
    for page in PAGES:
        html = renderer.render(page.template_name, config)
        output_path = output_dir / page.output_file
        _write_page(output_path, html)
        written.append(output_path)
    return written


__all__ = ["PAGES", "PageSpec", "generate"]
