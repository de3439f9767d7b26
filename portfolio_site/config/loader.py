"""Decode the portfolio YAML document into typed dataclasses."""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ..errors import DecodeError, ReadError
from .helpers import _plain
from .sections import _build_config

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .models import Config


def decode_config(data: bytes) -> Config:
    """Decode raw document bytes into a :class:`Config`.

    Parameters
    ----------
    data : bytes
        UTF-8 encoded YAML document, typically the contents of ``config.yml``.

    Returns
    -------
    Config
        Fully populated configuration. Absent or null keys take the zero value
        of their field (empty string, empty tuple, or an empty section). Text
        fields hold the scalar exactly as written, so ``build: 1.10`` decodes
        to ``"1.10"``.

    Raises
    ------
    DecodeError
        If ``data`` is not UTF-8, is not well-formed YAML, has a non-mapping
        top level, or holds a value whose shape does not match its field.

    Examples
    --------
    >>> config = decode_config(b"site:\\n  title: Portfolio\\n")
    >>> config.site.title
    'Portfolio'
    >>> config.header.cta
    ()
    """
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        msg = f"error parsing config: document is not valid UTF-8: {exc}"
        raise DecodeError(msg) from exc

    loader = YAML(typ="safe", pure=True)
    loader.version = (1, 2)
    try:
        root = loader.compose(text)
    except YAMLError as exc:
        msg = f"error parsing config: {exc}"
        raise DecodeError(msg) from exc

    try:
        match _plain(root) if root is not None else None:
            case None:
                payload: dict[str, typ.Any] = {}
            case dict() as mapping:
                payload = mapping
            case _:
                msg = "top-level YAML structure must be a mapping."
                raise DecodeError(msg)
        return _build_config(payload)
    except DecodeError as exc:
        msg = f"error parsing config: {exc}"
        raise DecodeError(msg) from exc


def load_config(path: Path) -> Config:
    """Read ``path`` and decode it with :func:`decode_config`.

    Raises
    ------
    ReadError
        If the file does not exist or cannot be read.
    DecodeError
        If the contents cannot be decoded.
    """
    try:
        data = path.read_bytes()
    except OSError as exc:
        msg = f"error reading config file: {exc}"
        raise ReadError(msg) from exc
    return decode_config(data)


__all__ = ["decode_config", "load_config"]
