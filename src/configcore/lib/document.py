"""document — the YAML document behind a config store.

``YamlDocument`` holds one key/value tree addressed by dotted paths and bound
to a single backing file.  It offers per-type presence probes (``is_string``,
``is_int`` ...), raw reads, in-place writes and a whole-document save.  It
knows nothing about keys, defaults or caching; that belongs to
``configcore.store``.

Design notes:
    Type probes follow YAML's scalar types strictly.  ``bool`` is a subclass
    of ``int`` in Python, so every numeric probe rules it out explicitly, and
    an integral scalar such as ``3`` is an int, never a double.
"""

from __future__ import annotations

import copy
import math
from pathlib import Path
from typing import Any, Union

import yaml

from configcore.exceptions import DocumentError, PersistError
from configcore.lib import config
from configcore.lib.yaml_loader import (
    atomic_write_yaml,
    dump_yaml_string,
    load_yaml,
    load_yaml_string,
)

_MISSING = object()


def _is_number(value: Any) -> bool:
    """True for ints and floats, never for bools."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _plain(value: Any) -> Any:
    """Convert tuples and sets (nested too) to lists for the safe dumper."""
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_plain(item) for item in value]
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    return value


def _stringify(value: Any) -> Any:
    """Render a list element as a string, or ``_MISSING`` if it has no string form."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if _is_number(value):
        return str(value)
    return _MISSING


class YamlDocument:
    """A mutable YAML mapping bound to one backing file.

    Attributes:
        path: The backing file.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        """Bind to ``path`` without reading it; call ``load`` for that."""
        self.path = Path(path)
        self._root: dict[str, Any] = {}

    # -- loading -----------------------------------------------------------

    def load(self) -> None:
        """Replace the tree with the contents of the backing file.

        A missing or empty file yields an empty document.

        Raises:
            DocumentError: If the file cannot be read or decoded, is not valid
                YAML, or is not a mapping.
        """
        if not self.path.is_file():
            self._root = {}
            return
        try:
            data = load_yaml(self.path)
        except (yaml.YAMLError, OSError, UnicodeDecodeError) as exc:
            raise DocumentError(str(self.path), exc) from exc
        self._root = self._as_root(data, str(self.path))

    def load_string(self, text: str) -> None:
        """Replace the tree with the parsed contents of ``text``.

        Raises:
            DocumentError: If the text is not valid YAML or not a mapping.
        """
        try:
            data = load_yaml_string(text)
        except yaml.YAMLError as exc:
            raise DocumentError("<string>", exc) from exc
        self._root = self._as_root(data, "<string>")

    @staticmethod
    def _as_root(data: Any, origin: str) -> dict[str, Any]:
        if data is None:
            return {}
        if not isinstance(data, dict):
            detail = config.message("not_a_mapping", path=origin, kind=type(data).__name__)
            raise DocumentError(origin, detail=detail)
        return data

    def save(self) -> None:
        """Write the whole tree to the backing file.

        Raises:
            PersistError: If the file cannot be written or the tree holds
                values the safe dumper cannot represent.
        """
        try:
            atomic_write_yaml(self.path, self._root)
        except (OSError, yaml.YAMLError) as exc:
            raise PersistError(str(self.path), exc) from exc

    # -- raw access --------------------------------------------------------

    def _lookup(self, path: str) -> Any:
        if path == "":
            return self._root
        node: Any = self._root
        for part in path.split("."):
            if not isinstance(node, dict) or part not in node:
                return _MISSING
            node = node[part]
        return node

    def contains(self, path: str) -> bool:
        return self._lookup(path) is not _MISSING

    def get(self, path: str, default: Any = None) -> Any:
        """Return the raw value at ``path``, or ``default`` when absent."""
        value = self._lookup(path)
        return default if value is _MISSING else value

    def has_section(self, path: str) -> bool:
        """True when ``path`` names a mapping; the empty path is the root."""
        return isinstance(self._lookup(path), dict)

    # -- type probes -------------------------------------------------------

    def is_string(self, path: str) -> bool:
        return isinstance(self._lookup(path), str)

    def is_int(self, path: str) -> bool:
        value = self._lookup(path)
        return isinstance(value, int) and not isinstance(value, bool)

    def is_boolean(self, path: str) -> bool:
        return isinstance(self._lookup(path), bool)

    def is_double(self, path: str) -> bool:
        return isinstance(self._lookup(path), float)

    def is_list(self, path: str) -> bool:
        return isinstance(self._lookup(path), list)

    # -- typed reads -------------------------------------------------------

    def get_list(self, path: str) -> list[Any]:
        """Return the list at ``path``, or an empty list."""
        value = self._lookup(path)
        return list(value) if isinstance(value, list) else []

    def get_string_list(self, path: str) -> list[str]:
        """Return the list at ``path`` as strings.

        Scalars are stringified; nested lists, mappings and nulls are dropped.
        """
        result: list[str] = []
        for item in self.get_list(path):
            text = _stringify(item)
            if text is not _MISSING:
                result.append(text)
        return result

    def get_number_list(self, path: str) -> list[int]:
        """Return the numeric elements of the list at ``path`` as ints, in order.

        Floats are truncated toward zero; non-finite floats are dropped.
        """
        result: list[int] = []
        for item in self.get_list(path):
            if not _is_number(item):
                continue
            if isinstance(item, float) and not math.isfinite(item):
                continue
            result.append(int(item))
        return result

    # -- writes ------------------------------------------------------------

    def set(self, path: str, value: Any) -> None:
        """Write ``value`` at ``path``; ``None`` removes the key.

        Missing intermediate sections are created, and a non-mapping value in
        the way of the path is replaced by a section.

        Raises:
            ValueError: If ``path`` is empty.
            DocumentError: If the safe dumper cannot represent ``value``; the
                tree is left unchanged.
        """
        if not path:
            raise ValueError("path must be a non-empty dotted string")
        *parents, leaf = path.split(".")
        if value is not None:
            value = _plain(value)
            try:
                dump_yaml_string({leaf: value})
            except yaml.YAMLError as exc:
                detail = config.message(
                    "unrepresentable_value", path=path, kind=type(value).__name__, error=exc
                )
                raise DocumentError(str(self.path), exc, detail=detail) from exc
        node = self._root
        for part in parents:
            child = node.get(part)
            if not isinstance(child, dict):
                if value is None:
                    return
                child = {}
                node[part] = child
            node = child
        if value is None:
            node.pop(leaf, None)
        else:
            node[leaf] = value

    def to_dict(self) -> dict[str, Any]:
        """Return a deep copy of the tree."""
        return copy.deepcopy(self._root)
