"""Configuration for the ``tree_balance`` demonstration driver.

Configuration files may be JSON (``.json``) or YAML (``.yml``/``.yaml``) and
contain a single mapping whose keys match the :class:`DemoConfig` fields.
Omitted keys fall back to the defaults, unknown keys are rejected::

    size: 15
    max_value: 500
    seed: 7
    unbalance_values: [900, 901, 902]
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
import json
import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Tuple, Union

import yaml

logger = logging.getLogger(__name__)

__all__ = [
    "ConfigError",
    "DemoConfig",
    "load_demo_config",
]


class ConfigError(ValueError):
    """Raised when a demo configuration is malformed."""


@dataclass(frozen=True)
class DemoConfig:
    """Parameters controlling the random tree demonstration."""

    size: int = 10
    max_value: int = 100
    seed: Optional[int] = None
    unbalance_values: Tuple[int, ...] = (199, 200, 201)

    def __post_init__(self) -> None:
        for name in ("size", "max_value"):
            _require_int(name, getattr(self, name))
        if self.seed is not None:
            _require_int("seed", self.seed)
        if self.size < 0:
            raise ConfigError("size must be non-negative")
        if self.max_value <= 0:
            raise ConfigError("max_value must be positive")
        for value in self.unbalance_values:
            _require_int("unbalance_values", value)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "DemoConfig":
        """Validate *mapping* and return a populated configuration."""

        known = {field.name for field in fields(cls)}
        unknown = sorted(set(mapping) - known)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

        payload = dict(mapping)
        if "unbalance_values" in payload:
            raw = payload["unbalance_values"]
            if not isinstance(raw, (list, tuple)):
                raise ConfigError("unbalance_values must be a list of integers")
            payload["unbalance_values"] = tuple(raw)
        return replace(cls(), **payload)


def _require_int(name: str, value: object) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise ConfigError(f"{name} must be an integer, got {value!r}")


def _parse(path: Path, text: str) -> Any:
    suffix = path.suffix.lower()
    if suffix == ".json":
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Configuration file '{path}' contains invalid JSON") from exc
    if suffix in {".yml", ".yaml"}:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Configuration file '{path}' contains invalid YAML") from exc
    raise ConfigError(f"Unsupported configuration format: '{path.suffix}'")


def load_demo_config(path: Union[str, Path, None]) -> DemoConfig:
    """Load a :class:`DemoConfig` from *path*, or return defaults for ``None``."""

    if path is None:
        return DemoConfig()

    config_path = Path(path)
    try:
        text = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Unable to read configuration file '{config_path}'") from exc

    data = _parse(config_path, text)
    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ConfigError("Configuration file must contain a mapping")

    config = DemoConfig.from_mapping(data)
    logger.debug("Loaded demo configuration from %s: %s", config_path, config)
    return config
