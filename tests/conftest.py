"""Shared fixtures for the configcore test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Union

import pytest
import yaml

from configcore import ConfigKey, ConfigShape, ShapeConfig, ValueType


class Sample(ConfigShape):
    """A shape covering every value type."""

    PREFIX = ConfigKey("settings.prefix", ValueType.STRING, "&7[Core] ")
    MOTD = ConfigKey("settings.motd", ValueType.STRING_LIST, ["&aWelcome"])
    COOLDOWN = ConfigKey("settings.cooldown", ValueType.INT, 30)
    SLOTS = ConfigKey("settings.slots", ValueType.INT_LIST, [1, 2, 3])
    ENABLED = ConfigKey("settings.enabled", ValueType.BOOLEAN, True)
    RATIO = ConfigKey("settings.ratio", ValueType.DOUBLE, 0.5)


class SampleConfig(ShapeConfig):
    """Store bound to the ``settings`` section of a sample file."""

    shape = Sample
    section = "settings"


VALID_SETTINGS: dict[str, Any] = {
    "settings": {
        "prefix": "&6[Shop] ",
        "motd": ["&aHello", "plain"],
        "cooldown": 5,
        "slots": [4, 5],
        "enabled": False,
        "ratio": 1.25,
    }
}


@pytest.fixture()
def shape() -> type[Sample]:
    """Return the sample shape."""
    return Sample


@pytest.fixture()
def config_cls() -> type[SampleConfig]:
    """Return the ShapeConfig subclass for the sample shape."""
    return SampleConfig


@pytest.fixture()
def write_yaml(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes a mapping or raw text to a YAML file."""

    def _write(data: Union[dict[str, Any], str], name: str = "config.yml") -> Path:
        target = tmp_path / name
        if isinstance(data, str):
            target.write_text(data, encoding="utf-8")
        else:
            with open(target, "w", encoding="utf-8") as fh:
                yaml.safe_dump(data, fh, default_flow_style=False)
        return target

    return _write


@pytest.fixture()
def valid_file(write_yaml: Callable[..., Path]) -> Path:
    """Return a config file where every sample key is valid."""
    return write_yaml(VALID_SETTINGS)
