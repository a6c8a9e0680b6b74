"""Config store — load, validate, cache and persist typed settings.

``ConfigStore`` owns one ``YamlDocument`` and one in-memory cache keyed by
shape member.  ``load_values`` validates every key of a shape against the
document and caches either the processed value or the declared default;
reads are served from the cache; ``set_value`` writes through to the
document and persists it synchronously.

Design notes:
    Loading never raises.  A missing section leaves the cache empty, and a
    missing or mistyped key falls back to its default; both are logged at
    warning level through the injected logger.  A failed persist is reported
    by ``set_value`` returning False and is not rolled back: the document and
    the cache keep the new value until the next successful save or reload.
    A store assumes exclusive ownership of its backing file.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional, Union

from configcore.exceptions import DocumentError, PersistError, TypeMismatchError
from configcore.lib import config
from configcore.lib.document import YamlDocument
from configcore.lib.keys import ConfigKey, ConfigShape, ValueType
from configcore.lib.transform import MessageTransform, legacy_colors

_INVALID = object()


class ConfigStore(ABC):
    """Abstract base for a typed view over one YAML file.

    Subclasses supply the two resolution hooks that recover shape metadata
    from an opaque key; see ``ShapeConfig`` for the table-driven version.

    Attributes:
        path: The backing file.
        document: The structured document read from ``path``.
        transform: Function applied to every string value on load.
    """

    def __init__(
        self,
        path: Union[str, Path],
        *,
        transform: MessageTransform = legacy_colors,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """Bind to ``path`` and read the document.

        Args:
            path: The YAML file backing this store. Its parent directory is
                created if needed; the file itself may be absent.
            transform: String transform applied to string settings on load.
            logger: Destination for warnings. Defaults to the module logger.
        """
        self.path = Path(path)
        self.transform = transform
        self.log = logger if logger is not None else logging.getLogger(__name__)
        self.document = YamlDocument(self.path)
        self._values: dict[Any, Any] = {}
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.reload()

    # ------------------------------------------------------------------
    # Document lifecycle
    # ------------------------------------------------------------------

    def reload(self) -> None:
        """Re-read the backing file into the document.

        An unreadable file is logged and treated as an empty document. The
        cache is left alone; call ``load_values`` to refresh it.
        """
        try:
            self.document.load()
        except DocumentError as exc:
            self.log.warning(
                config.message("unreadable_document", filename=self.path.name, error=exc)
            )
            self.document.load_string("")

    def save_config(self) -> None:
        """Write the document to the backing file.

        Raises:
            PersistError: If the file cannot be written.
        """
        self.document.save()

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def process_message(self, raw: Optional[str]) -> str:
        """Apply the transform to ``raw``; blank or missing text becomes ``""``."""
        if raw is None or not raw.strip():
            return ""
        return self.transform(raw)

    def load_values(
        self, shape: Union[type[ConfigShape], Iterable[ConfigShape]], section: str
    ) -> None:
        """Replace the cache with validated values for every key in ``shape``.

        Args:
            shape: A ``ConfigShape`` subclass, or any iterable of its members.
            section: Dotted path that must name a mapping in the document.
        """
        self._values.clear()
        if not self.document.has_section(section):
            self.log.warning(
                config.message("missing_section", section=section, filename=self.path.name)
            )
            return

        for member in shape:
            value = self._read(member.key)
            if value is _INVALID:
                value = member.default
                self.log.warning(
                    config.message("invalid_value", path=member.path, default=value)
                )
            self._values[member] = value

    def _read(self, key: ConfigKey) -> Any:
        """Read and post-process ``key`` from the document, or return ``_INVALID``."""
        doc = self.document
        path = key.path
        kind = key.type

        if kind is ValueType.STRING:
            if doc.is_string(path):
                return self.process_message(doc.get(path))
        elif kind is ValueType.STRING_LIST:
            if doc.is_list(path):
                return tuple(self.process_message(s) for s in doc.get_string_list(path))
        elif kind is ValueType.INT:
            if doc.is_int(path):
                return doc.get(path)
        elif kind is ValueType.INT_LIST:
            if doc.is_list(path):
                numbers = doc.get_number_list(path)
                if numbers:
                    return tuple(numbers)
        elif kind is ValueType.BOOLEAN:
            if doc.is_boolean(path):
                return doc.get(path)
        elif kind is ValueType.DOUBLE:
            if doc.is_double(path):
                return doc.get(path)
        return _INVALID

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    @property
    def values(self) -> Mapping[Any, Any]:
        """Read-only view of the cache."""
        return MappingProxyType(self._values)

    def get_value(self, key: Any) -> Any:
        """Return the cached value for ``key`` without any type check.

        Falls back to ``resolve_default`` when the key is not cached. Prefer
        the typed accessors; this exists for callers that only hold an
        opaque key.
        """
        if key in self._values:
            return self._values[key]
        return self.resolve_default(key)

    def get_typed(self, key: ConfigShape, value_type: ValueType) -> Any:
        """Return the cached value for ``key``, or its default.

        Raises:
            TypeMismatchError: If ``key`` is not declared as ``value_type``.
        """
        if key.type is not value_type:
            raise TypeMismatchError(key, key.type, value_type)
        if key in self._values:
            return self._values[key]
        return key.default

    def get_string(self, key: ConfigShape) -> str:
        return self.get_typed(key, ValueType.STRING)

    def get_string_list(self, key: ConfigShape) -> tuple[str, ...]:
        return self.get_typed(key, ValueType.STRING_LIST)

    def get_int(self, key: ConfigShape) -> int:
        return self.get_typed(key, ValueType.INT)

    def get_int_list(self, key: ConfigShape) -> tuple[int, ...]:
        return self.get_typed(key, ValueType.INT_LIST)

    def get_boolean(self, key: ConfigShape) -> bool:
        return self.get_typed(key, ValueType.BOOLEAN)

    def get_double(self, key: ConfigShape) -> float:
        return self.get_typed(key, ValueType.DOUBLE)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def set_value(self, key: Any, value: Any) -> bool:
        """Write ``value`` for ``key`` to the document and cache, then persist.

        The value is not checked against the declared type. A value the YAML
        dumper cannot represent is refused before anything changes; once the
        document accepts the value, the in-memory change stands even when the
        write to disk fails.

        Returns:
            True if the document was saved, False if the value was refused or
            saving failed.
        """
        descriptor = self.resolve_descriptor(key)
        try:
            self.document.set(descriptor.path, value)
        except DocumentError as exc:
            self.log.warning(
                config.message("persist_failed", filename=self.path.name, error=exc)
            )
            return False
        self._values[key] = value
        try:
            self.save_config()
        except PersistError as exc:
            self.log.warning(
                config.message("persist_failed", filename=self.path.name, error=exc.original_error)
            )
            return False
        return True

    # ------------------------------------------------------------------
    # Resolution hooks
    # ------------------------------------------------------------------

    @abstractmethod
    def resolve_default(self, key: Any) -> Any:
        """Return the declared default for ``key``."""

    @abstractmethod
    def resolve_descriptor(self, key: Any) -> ConfigKey:
        """Return the descriptor for ``key``."""


class ShapeConfig(ConfigStore):
    """A config store bound to one shape and one section.

    Subclasses set ``shape`` and ``section`` as class attributes::

        class MessagesConfig(ShapeConfig):
            shape = Messages
            section = "messages"

    The resolution hooks are answered from the shape's lookup table, and the
    values are loaded at construction unless ``auto_load`` is False.
    """

    shape: type[ConfigShape]
    section: str = ""

    def __init__(
        self,
        path: Union[str, Path],
        *,
        transform: MessageTransform = legacy_colors,
        logger: Optional[logging.Logger] = None,
        auto_load: bool = True,
    ) -> None:
        super().__init__(path, transform=transform, logger=logger)
        self._table = self.shape.keys()
        if auto_load:
            self.load()

    def load(self) -> None:
        """Reload the cache from the document for this store's shape."""
        self.load_values(self.shape, self.section)

    def resolve_descriptor(self, key: Any) -> ConfigKey:
        try:
            return self._table[key]
        except KeyError:
            msg = f"{key!r} is not a key of {self.shape.__name__}"
            raise KeyError(msg) from None

    def resolve_default(self, key: Any) -> Any:
        return self.resolve_descriptor(key).default
