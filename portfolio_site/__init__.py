"""Static generator for a personal portfolio website.

The package decodes ``config.yml`` into typed dataclasses and renders the
site's index and not-found pages through a shared Jinja layout.

Exports
-------
- ``app``: Cyclopts application behind the ``portfolio-site`` command.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``generate``: Library entry point running one generation pass.

Examples
--------
>>> from portfolio_site import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main
from .site import generate

__all__ = ["app", "generate", "main"]
