"""Custom exceptions for configcore.

Defines the exception hierarchy used across the document adapter and the
config store.  All exceptions are importable from the top-level
``configcore`` package.

Missing sections and invalid keys are not exceptions: the store absorbs
them into a log record plus the declared default.

Exceptions:
    ConfigCoreError — Base class for every configcore error.
    TypeMismatchError — Raised by a type-checked accessor when the key's
        declared type differs from the expected one. Subclasses TypeError.
    PersistError — Raised when the backing file cannot be written.
        Subclasses OSError.
    DocumentError — Raised when the backing file cannot be read as a
        YAML mapping. Subclasses ValueError.
"""

from __future__ import annotations

from typing import Any, Optional

from configcore.lib import config


class ConfigCoreError(Exception):
    """Base class for configcore errors."""


class TypeMismatchError(ConfigCoreError, TypeError):
    """Raised when a key is read through an accessor for another type.

    This is a programming error at the call site, never a data error, so
    it is never absorbed into a default.
    """

    def __init__(self, key: Any, declared: Any, expected: Any) -> None:
        """Initialize with the offending key and both types.

        Args:
            key: The key that was requested.
            declared: The type the key was declared with.
            expected: The type the caller asked for.
        """
        self.key = key
        self.declared = declared
        self.expected = expected
        super().__init__(
            config.message("type_mismatch", key=key, declared=declared, expected=expected)
        )


class PersistError(ConfigCoreError, OSError):
    """Raised when a document cannot be written to its backing file."""

    def __init__(self, path: str, original_error: Exception) -> None:
        """Initialize with persist failure details.

        Args:
            path: The backing file that could not be written.
            original_error: The underlying I/O or representer error.
        """
        self.path = path
        self.original_error = original_error
        super().__init__(config.message("persist_error", path=path, error=original_error))


class DocumentError(ConfigCoreError, ValueError):
    """Raised when a backing file is not a readable YAML mapping."""

    def __init__(
        self, path: str, original_error: Optional[Exception] = None, *, detail: str = ""
    ) -> None:
        """Initialize with parse failure details.

        Args:
            path: The backing file (or ``<string>``) that failed to parse.
            original_error: The underlying ``yaml.YAMLError``, if any.
            detail: Pre-rendered message used when there is no original error.
        """
        self.path = path
        self.original_error = original_error
        msg = detail or config.message("document_error", path=path, error=original_error)
        super().__init__(msg)
