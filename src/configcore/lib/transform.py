"""transform — message transforms applied to string settings on load.

A message transform is any ``Callable[[str], str]``.  The default rewrites the
legacy colour marker (``&``) to the native formatting sigil (``§``) and does
nothing else; richer formatting such as gradients is supplied by the caller.
The markers are read from ``config/defaults.yaml``.
"""

from __future__ import annotations

from typing import Callable, Optional

from configcore.lib import config

MessageTransform = Callable[[str], str]

_LEGACY: Optional[MessageTransform] = None


def make_color_transform(
    marker: Optional[str] = None, sigil: Optional[str] = None
) -> MessageTransform:
    """Build a transform that replaces every ``marker`` with ``sigil``.

    Args:
        marker: Legacy marker to replace. Defaults to ``colors.legacy_marker``.
        sigil: Replacement sigil. Defaults to ``colors.native_sigil``.

    Returns:
        A pure string-to-string function.
    """
    src = marker if marker is not None else config.get_str("colors.legacy_marker")
    dst = sigil if sigil is not None else config.get_str("colors.native_sigil")
    if not src:
        raise ValueError("marker must be a non-empty string")

    def _transform(text: str) -> str:
        return text.replace(src, dst)

    return _transform


def legacy_colors(text: str) -> str:
    """Replace legacy colour markers with the native sigil.

    The transform is built from the configured markers on first use.
    """
    global _LEGACY  # noqa: PLW0603
    if _LEGACY is None:
        _LEGACY = make_color_transform()
    return _LEGACY(text)


def identity(text: str) -> str:
    return text
