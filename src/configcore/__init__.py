"""configcore — typed, cached access to YAML configuration files.

Stable public API:
    ConfigStore: Abstract base; load, validate, cache and persist settings.
    ShapeConfig: ConfigStore bound to one shape and section.
    ConfigShape: Enum base for a closed set of keys.
    ConfigKey: Path, declared type and default of one setting.
    ValueType: The supported value types.
    YamlDocument: The YAML document behind a store.
    legacy_colors: Default message transform.
    TypeMismatchError, PersistError, DocumentError, ConfigCoreError: Errors.
"""

__version__ = "0.1.0"

from configcore.exceptions import (
    ConfigCoreError,
    DocumentError,
    PersistError,
    TypeMismatchError,
)
from configcore.lib.document import YamlDocument
from configcore.lib.keys import ConfigKey, ConfigShape, ValueType
from configcore.lib.transform import identity, legacy_colors, make_color_transform
from configcore.store import ConfigStore, ShapeConfig

__all__ = [
    "__version__",
    "ConfigStore",
    "ShapeConfig",
    "ConfigShape",
    "ConfigKey",
    "ValueType",
    "YamlDocument",
    "legacy_colors",
    "make_color_transform",
    "identity",
    "ConfigCoreError",
    "DocumentError",
    "PersistError",
    "TypeMismatchError",
]
