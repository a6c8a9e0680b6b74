"""Key descriptors: the typed contract between a config file and its readers.

A *shape* is an ``Enum`` subclass of ``ConfigShape`` with one member per
setting.  Each member's value is a frozen ``ConfigKey`` carrying the dotted
storage path, the declared ``ValueType`` and the default.  The member itself
is the cache key, and ``keys()`` exposes the shape as a lookup table.

Example::

    class Messages(ConfigShape):
        PREFIX = ConfigKey("messages.prefix", ValueType.STRING, "&7[Wed] ")
        COOLDOWN = ConfigKey("messages.cooldown", ValueType.INT, 30)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ValueType(Enum):
    """The value types a setting can declare."""

    STRING = "string"
    STRING_LIST = "string_list"
    INT = "int"
    INT_LIST = "int_list"
    BOOLEAN = "boolean"
    DOUBLE = "double"

    def accepts(self, value: Any) -> bool:
        """Return True when ``value`` is a well-formed value of this type."""
        if self is ValueType.STRING:
            return isinstance(value, str)
        if self is ValueType.STRING_LIST:
            return isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value)
        if self is ValueType.INT:
            return _is_int(value)
        if self is ValueType.INT_LIST:
            return isinstance(value, (list, tuple)) and all(_is_int(v) for v in value)
        if self is ValueType.BOOLEAN:
            return isinstance(value, bool)
        return isinstance(value, float)

    @property
    def is_list(self) -> bool:
        return self in (ValueType.STRING_LIST, ValueType.INT_LIST)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class ConfigKey:
    """Static metadata for one setting.

    Attributes:
        path: Dotted location of the value in the document.
        type: Declared value type.
        default: Value used when the document has no valid value.
            List defaults are stored as tuples; an int default for a
            ``DOUBLE`` key is stored as a float.
    """

    path: str
    type: ValueType
    default: Any

    def __post_init__(self) -> None:
        """Normalize the default and check it against the declared type."""
        if not self.path:
            raise ValueError("ConfigKey path must be a non-empty dotted string")
        if not isinstance(self.type, ValueType):
            msg = f"ConfigKey type must be a ValueType, got {type(self.type).__name__}"
            raise TypeError(msg)
        default = self.default
        if self.type.is_list and isinstance(default, list):
            default = tuple(default)
        elif self.type is ValueType.DOUBLE and _is_int(default):
            default = float(default)
        if not self.type.accepts(default):
            msg = (
                f"Default for {self.path!r} must be {self.type}, "
                f"got {type(self.default).__name__}"
            )
            raise TypeError(msg)
        object.__setattr__(self, "default", default)


class ConfigShape(Enum):
    """Base class for a closed set of keys belonging to one config file.

    Subclass with members whose values are ``ConfigKey`` instances.
    """

    def __init__(self, key: Any) -> None:
        if not isinstance(key, ConfigKey):
            msg = f"{type(self).__name__}.{self.name} must be a ConfigKey, got {type(key).__name__}"
            raise TypeError(msg)

    @property
    def key(self) -> ConfigKey:
        return self.value

    @property
    def path(self) -> str:
        return self.value.path

    @property
    def type(self) -> ValueType:
        return self.value.type

    @property
    def default(self) -> Any:
        return self.value.default

    @classmethod
    def keys(cls) -> dict[ConfigShape, ConfigKey]:
        """Return the shape as a lookup table from member to descriptor."""
        return {member: member.value for member in cls}

    def __str__(self) -> str:
        return f"{type(self).__name__}.{self.name}"
