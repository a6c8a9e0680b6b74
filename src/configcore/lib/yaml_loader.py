"""yaml_loader — unified YAML reading and writing for configcore documents.

Wraps PyYAML's ``safe_load`` and ``safe_dump`` behind a small set of entry
points shared by the document adapter and the tests.  Encoding, dump options
and the atomic-replace write are defined in one place rather than scattered
across callers.  PyYAML is a required dependency — no fallback parser is
provided.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Union

import yaml

from configcore.lib import config


def load_yaml(path: Union[str, Path]) -> Optional[Any]:
    """Load a YAML file and return its contents.

    Args:
        path: Path to the YAML file.

    Returns:
        Parsed YAML contents, or None if the file is empty.

    Raises:
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If the file contains invalid YAML.
    """
    with open(path, "r", encoding="utf-8") as fh:
        return yaml.safe_load(fh)


def load_yaml_string(text: str) -> Optional[Any]:
    """Parse a YAML string and return its contents.

    Raises:
        yaml.YAMLError: If the string contains invalid YAML.
    """
    return yaml.safe_load(text)


def dump_yaml_string(data: dict[str, Any]) -> str:
    """Serialize a mapping to block-style YAML using the package dump options.

    Raises:
        yaml.YAMLError: If the data holds objects the safe dumper cannot represent.
    """
    return yaml.safe_dump(
        data,
        indent=config.get_int("dump.indent"),
        default_flow_style=config.get_bool("dump.default_flow_style"),
        sort_keys=config.get_bool("dump.sort_keys"),
        allow_unicode=config.get_bool("dump.allow_unicode"),
    )


def atomic_write_yaml(path: Union[str, Path], data: dict[str, Any]) -> None:
    """Atomically write a mapping as YAML by writing a temp file then replacing.

    The text is rendered before anything touches the disk, so a representer
    failure leaves the existing file untouched.  A failed write or replace
    removes the temp file before the error propagates.

    Raises:
        OSError: If the directory or file cannot be written.
        yaml.YAMLError: If the data cannot be represented.
    """
    target = Path(path)
    text = dump_yaml_string(data)
    target.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = target.with_suffix(target.suffix + config.get_str("dump.temp_suffix"))
    try:
        with tmp_path.open("w", encoding="utf-8") as fh:
            fh.write(text)
        tmp_path.replace(target)
    except OSError:
        tmp_path.unlink(missing_ok=True)
        raise
