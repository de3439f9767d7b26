"""Error taxonomy for a site generation run.

Every failure is terminal: the generator raises one of these from the
underlying exception and the CLI maps it to a non-zero exit status.
"""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    from pathlib import Path


class GenerationError(RuntimeError):
    """Base class for failures that abort a generation run."""


class ReadError(GenerationError):
    """Raised when the configuration document cannot be read."""


class DecodeError(GenerationError):
    """Raised when the document is malformed or a field has the wrong type."""


class TemplateInitError(GenerationError):
    """Raised when the template directory or shared layout cannot be loaded."""


class RenderError(GenerationError):
    """Raised when a named page template fails to render."""

    def __init__(self, template: str, message: str) -> None:
        super().__init__(message)
        self.template = template


class WriteError(GenerationError):
    """Raised when a rendered page cannot be written to disk."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path


__all__ = [
    "DecodeError",
    "GenerationError",
    "ReadError",
    "RenderError",
    "TemplateInitError",
    "WriteError",
]
