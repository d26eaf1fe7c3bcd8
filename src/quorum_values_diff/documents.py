"""Document loading and dumping for YAML and JSON configuration files.

The format is chosen from the file suffix: ``.json`` is JSON, everything
else (``.yaml``, ``.yml``, no suffix) is YAML.  YAML is handled by
ruamel.yaml's safe loader and dumper, so documents are plain dicts, lists
and scalars with no round-trip metadata.
"""

from __future__ import annotations

import io
import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.constructor import SafeConstructor
from ruamel.yaml.error import YAMLError

from quorum_values_diff.errors import DocumentLoadError
from quorum_values_diff.tree.classifier import classify
from quorum_values_diff.tree.nodes import ABSENT, ValueType

__all__ = ["dump_document", "dumps_yaml", "load_document"]

_JSON_SUFFIXES = frozenset({".json"})


class _ValuesConstructor(SafeConstructor):
    """Safe constructor that keeps unquoted dates and times as strings."""


_ValuesConstructor.add_constructor(
    "tag:yaml.org,2002:timestamp", SafeConstructor.construct_yaml_str
)


def _yaml() -> YAML:
    """Return a fresh safe YAML instance configured for block output."""
    yaml = YAML(typ="safe", pure=True)
    yaml.Constructor = _ValuesConstructor
    yaml.default_flow_style = False
    return yaml


def _is_blank(text: str) -> bool:
    """True if a YAML text holds nothing but whitespace and comments."""
    return all(
        not line.strip() or line.lstrip().startswith("#")
        for line in text.splitlines()
    )


def load_document(path: Path | str) -> Any:
    """Load one configuration document.

    Args:
        path: File to read.  ``.json`` files are parsed as JSON, all others
            as YAML.

    Returns:
        The document as plain Python data.  A YAML file holding only
        whitespace and comments loads as an empty dict; an explicit
        top-level ``null`` loads as ``None``.  Unquoted YAML dates load as
        strings.

    Raises:
        DocumentLoadError: If the file cannot be read, cannot be parsed, or
            holds values that are not configuration values (e.g. ``!!binary``).
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DocumentLoadError(path, exc.strerror or str(exc)) from exc

    is_json = path.suffix.lower() in _JSON_SUFFIXES
    if not is_json and _is_blank(text):
        return {}

    try:
        document = json.loads(text) if is_json else _yaml().load(text)
    except (json.JSONDecodeError, YAMLError) as exc:
        raise DocumentLoadError(path, str(exc)) from exc

    try:
        _check_tree(document)
    except TypeError as exc:
        raise DocumentLoadError(path, str(exc)) from exc
    return document


def dump_document(value: Any, path: Path | str) -> None:
    """Write a value (diff, base, or document) to ``path``.

    ``ABSENT`` is written as an empty mapping so every output file exists
    and parses.  Parent directories are created as needed.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = _plain({} if value is ABSENT else value)
    if path.suffix.lower() in _JSON_SUFFIXES:
        path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    else:
        with path.open("w", encoding="utf-8") as fh:
            _yaml().dump(data, fh)


def dumps_yaml(value: Any) -> str:
    """Render a value as block-style YAML text (``ABSENT`` renders as ``{}``)."""
    stream = io.StringIO()
    _yaml().dump(_plain({} if value is ABSENT else value), stream)
    return stream.getvalue()


def _plain(value: Any) -> Any:
    """Copy a tree into dicts and lists the safe dumper can represent."""
    if isinstance(value, Mapping):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


def _check_tree(value: Any) -> None:
    """Raise TypeError if any node is not a configuration value."""
    stack = [value]
    while stack:
        node = stack.pop()
        value_type = classify(node)
        if value_type == ValueType.MAP:
            stack.extend(node.values())
        elif value_type == ValueType.ARRAY:
            stack.extend(node)
