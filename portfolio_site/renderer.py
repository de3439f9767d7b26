"""Jinja rendering of page templates inside the shared layout.

:class:`TemplateRenderer` binds a Jinja2 environment to a template directory,
eagerly compiles the shared layout, and renders each page in two passes: the
page template first, then the layout with the page output injected as
``content``. The render context is the decoded :class:`Config` plus each of
its sections under its own name, so templates can write either
``{{ config.site.title }}`` or ``{{ site.title }}``.

Undefined names fail loudly (``StrictUndefined``) so a typo in a template is a
:class:`~portfolio_site.errors.RenderError` rather than silently blank output.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
    select_autoescape,
)
from markupsafe import Markup

from ._constants import LAYOUT_TEMPLATE
from .errors import RenderError, TemplateInitError

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .config import Config


def _build_context(config: Config) -> dict[str, typ.Any]:
    """Expose the whole config and each top-level section to templates."""
    context: dict[str, typ.Any] = {
        field.name: getattr(config, field.name) for field in dc.fields(config)
    }
    context["config"] = config
    return context


class TemplateRenderer:
    """Render named page templates wrapped in a shared layout."""

    def __init__(self, templates_dir: Path, *, layout: str = LAYOUT_TEMPLATE) -> None:
        """Create the Jinja environment and compile the layout.

        Parameters
        ----------
        templates_dir : Path
            Directory holding ``layout.html`` and the page templates.
        layout : str, optional
            Name of the wrapping template, ``layout.html`` by default.

        Raises
        ------
        TemplateInitError
            If ``templates_dir`` is not a directory or the layout cannot be
            read, decoded as UTF-8, or compiled.
        """
        if not templates_dir.is_dir():
            msg = (
                "error initializing template engine: "
                f"template directory '{templates_dir}' not found"
            )
            raise TemplateInitError(msg)
        self.templates_dir = templates_dir
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        try:
            self.layout = self.env.get_template(layout)
        except (TemplateError, UnicodeDecodeError, OSError) as exc:
            msg = f"error initializing template engine: {layout}: {exc}"
            raise TemplateInitError(msg) from exc

    def render(self, template_name: str, config: Config) -> str:
        """Render ``template_name`` inside the layout and return the HTML.

        Raises
        ------
        RenderError
            If the page template is missing, unreadable, or fails to compile,
            or if either pass references an undefined name or raises while
            evaluating an expression.
        """
        context = _build_context(config)
        try:
            template = self.env.get_template(template_name)
            body = template.render(**context)
            return self.layout.render(
                **context, content=Markup(body), page=template_name
            )
        except Exception as exc:  # noqa: BLE001 - any template failure is fatal
            msg = f"error rendering {template_name}: {exc}"
            raise RenderError(template_name, msg) from exc


__all__ = ["TemplateRenderer"]
