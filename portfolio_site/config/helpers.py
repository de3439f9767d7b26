"""Coercion helpers shared by the configuration decoder.

The document is composed rather than loaded, and :func:`_plain` flattens the
node tree into dicts, lists, and the literal text of each scalar, so ``1.10``
stays ``"1.10"`` and ``0x1F`` stays ``"0x1F"``. The remaining helpers take a
flattened value together with its dotted document path, return the zero value
when the key was absent or null, and raise
:class:`~portfolio_site.errors.DecodeError` naming the path when the value has
the wrong shape.
"""

from __future__ import annotations

import typing as typ

from ruamel.yaml.nodes import MappingNode, ScalarNode, SequenceNode

from ..errors import DecodeError

if typ.TYPE_CHECKING:
    from ruamel.yaml.nodes import Node

T = typ.TypeVar("T")

NULL_TAG = "tag:yaml.org,2002:null"
MERGE_TAG = "tag:yaml.org,2002:merge"


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def _plain(node: Node, path: str = "") -> typ.Any:
    """Flatten a composed node into dicts, lists, literal text, and ``None``."""
    match node:
        case ScalarNode():
            return None if node.tag == NULL_TAG else node.value
        case SequenceNode():
            return [
                _plain(item, f"{path}[{index}]") for index, item in enumerate(node.value)
            ]
        case MappingNode():
            return _plain_mapping(node, path)
        case _:  # pragma: no cover - the composer only emits the three kinds
            msg = f"{path or '<document>'}: unsupported YAML node"
            raise DecodeError(msg)


def _plain_mapping(node: MappingNode, path: str) -> dict[str, typ.Any]:
    """Flatten a mapping node, applying ``<<`` merge keys and rejecting duplicates."""
    entries: dict[str, typ.Any] = {}
    merged: dict[str, typ.Any] = {}
    for key_node, value_node in node.value:
        if key_node.tag == MERGE_TAG:
            sources = (
                value_node.value if isinstance(value_node, SequenceNode) else [value_node]
            )
            for source in sources:
                if isinstance(source, MappingNode):
                    for key, value in _plain_mapping(source, path).items():
                        merged.setdefault(key, value)
            continue
        if not isinstance(key_node, ScalarNode):
            continue
        key = key_node.value
        if key in entries:
            msg = f"{_join(path, key)}: duplicate key"
            raise DecodeError(msg)
        entries[key] = _plain(value_node, _join(path, key))
    return {**merged, **entries}


def _describe(value: object) -> str:
    """Return the YAML-facing name of ``value``'s node kind."""
    match value:
        case dict():
            return "a mapping"
        case list():
            return "a sequence"
        case _:
            return type(value).__name__


def _mismatch(path: str, expected: str, value: object) -> DecodeError:
    msg = f"{path}: expected {expected}, got {_describe(value)}"
    return DecodeError(msg)


def _text(value: object, path: str) -> str:
    """Return a scalar's literal text; ``None`` becomes the empty string."""
    match value:
        case None:
            return ""
        case str():
            return value
        case _:
            raise _mismatch(path, "a string", value)


def _mapping(value: object, path: str) -> typ.Mapping[str, typ.Any]:
    """Return ``value`` as a mapping, treating ``None`` as empty."""
    match value:
        case None:
            return {}
        case dict():
            return value
        case _:
            raise _mismatch(path, "a mapping", value)


def _sequence(value: object, path: str) -> list[typ.Any]:
    """Return ``value`` as a list, treating ``None`` as empty."""
    match value:
        case None:
            return []
        case list():
            return value
        case _:
            raise _mismatch(path, "a sequence", value)


def _text_list(value: object, path: str) -> tuple[str, ...]:
    """Coerce a sequence of scalars into a tuple of strings, keeping order."""
    return tuple(
        _text(item, f"{path}[{index}]")
        for index, item in enumerate(_sequence(value, path))
    )


def _records(
    value: object,
    path: str,
    build: typ.Callable[[typ.Mapping[str, typ.Any], str], T],
) -> tuple[T, ...]:
    """Build one record per mapping entry in a sequence, keeping order."""
    records: list[T] = []
    for index, item in enumerate(_sequence(value, path)):
        item_path = f"{path}[{index}]"
        records.append(build(_mapping(item, item_path), item_path))
    return tuple(records)


__all__ = ["_mapping", "_plain", "_records", "_sequence", "_text", "_text_list"]
