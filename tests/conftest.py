"""Shared fixtures: a minimal document, template set, and build directory."""

from __future__ import annotations

import typing as typ
from pathlib import Path
from textwrap import dedent

import pytest

DOCUMENT = dedent(
    """
    site:
      title: Jordan Doe
      author: Jordan
      rel_path: ./
    social:
      github: https://github.com/example
    header:
      title: [Hello, I build backends]
      cta:
        - label: Projects
          url: "#projects"
          icon: code
        - label: Contact
          url: mailto:hello@example.com
          icon: mail
    projects:
      title: Projects
      items:
        - title: queue-lite
          url: https://github.com/example/queue-lite
          tags: [python, sqlite]
    footer:
      copyright: "(c) 2026 Jordan"
    """
)

TEMPLATES = {
    "layout.html": dedent(
        """\
        <!DOCTYPE html>
        <html>
        <head><title>{{ site.title }}</title></head>
        <body data-page="{{ page }}">
        {{ content }}
        <footer>{{ footer.copyright }}</footer>
        </body>
        </html>
        """
    ),
    "main.html": dedent(
        """\
        <h1>{{ header.title | join(" ") }}</h1>
        {% for cta in header.cta %}
        <a class="cta" href="{{ cta.url }}">{{ cta.label }}</a>
        {% endfor %}
        {% for project in projects.items %}
        <article class="project" data-tags="{{ project.tags | join(',') }}">{{ project.title }}</article>
        {% endfor %}
        """
    ),
    "404.html": dedent(
        """\
        <h1>Not found</h1>
        <a class="home" href="{{ config.site.rel_path }}index.html">Home</a>
        """
    ),
}


def write_templates(root: Path, overrides: dict[str, str | None] | None = None) -> Path:
    """Write the template set under ``root/templates``.

    ``overrides`` replaces individual templates; a ``None`` value omits the
    template entirely.
    """
    templates_dir = root / "templates"
    templates_dir.mkdir(parents=True, exist_ok=True)
    templates: dict[str, str | None] = dict(TEMPLATES)
    templates.update(overrides or {})
    for name, body in templates.items():
        if body is not None:
            (templates_dir / name).write_text(body, encoding="utf-8")
    return templates_dir


@pytest.fixture
def make_templates(tmp_path: Path) -> typ.Callable[..., Path]:
    """Return a factory writing the template set with optional overrides."""

    def _make(overrides: dict[str, str | None] | None = None) -> Path:
        return write_templates(tmp_path, overrides)

    return _make


@pytest.fixture
def templates_dir(tmp_path: Path) -> Path:
    """Return a directory holding the default template set."""
    return write_templates(tmp_path)


@pytest.fixture
def document_path(tmp_path: Path) -> Path:
    """Return the path of a valid ``config.yml``."""
    path = tmp_path / "config.yml"
    path.write_text(DOCUMENT, encoding="utf-8")
    return path


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Return an existing, empty build directory."""
    path = tmp_path / "build"
    path.mkdir()
    return path
