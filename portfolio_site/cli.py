"""Cyclopts CLI entrypoint for building the portfolio site.

The ``portfolio-site`` console script reads ``config.yml`` from the working
directory, renders ``templates/main.html`` and ``templates/404.html`` through
``templates/layout.html``, and writes ``build/index.html`` and
``build/404.html``. It takes no flags; the paths are fixed relative to the
working directory.

Examples
--------
>>> from portfolio_site.cli import main
>>> main()  # doctest: +SKIP
wrote build/index.html
wrote build/404.html
Static site generated successfully!
"""

from __future__ import annotations

import sys
from pathlib import Path

from cyclopts import App

from ._constants import DEFAULT_CONFIG_PATH, DEFAULT_OUTPUT_DIR, DEFAULT_TEMPLATES_DIR
from .errors import GenerationError
from .site import generate

app = App(name="portfolio-site", help="Render the portfolio site into build/.")


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.default
def build() -> None:
    """Generate ``index.html`` and ``404.html`` from ``config.yml``.

    Any :class:`~portfolio_site.errors.GenerationError` is reported on stderr
    and terminates the process with exit status 1.
    """
    try:
        written = generate(
            Path(DEFAULT_CONFIG_PATH),
            Path(DEFAULT_TEMPLATES_DIR),
            Path(DEFAULT_OUTPUT_DIR),
        )
    except GenerationError as exc:
        print(exc, file=sys.stderr)
        raise SystemExit(1) from exc
    for path in written:
        print(f"wrote {_format_path(path)}")
    print("Static site generated successfully!")


def main() -> None:
    """Invoke the Cyclopts application behind the ``portfolio-site`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
