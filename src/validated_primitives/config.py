"""Configuration for validated-primitives.

The library is configured through one immutable ``ValidatorConfig``. The
active instance is process-wide and can be replaced at any time; validators
read it on every call, so replacing it takes effect immediately.

Sources are merged by priority (higher wins):

    defaults  <  FileConfigSource (YAML, JSON, TOML)  <  EnvConfigSource

Usage:
    >>> from validated_primitives.config import configure, load_config
    >>> configure(max_input_length=4096)
    >>> config = load_config("primitives.yaml")
"""

from __future__ import annotations

import json
import logging
import os
import threading
import tomllib
from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from validated_primitives.exceptions import ConfigSourceError, ConfigValidationError

logger = logging.getLogger("validated_primitives.config")

ENV_PREFIX = "VALIDATED_PRIMITIVES"


# =============================================================================
# Validator Configuration
# =============================================================================


@dataclass(frozen=True)
class ValidatorConfig:
    """Immutable configuration shared by every validator.

    Attributes:
        max_input_length: Inputs longer than this are never matched against a
            regex; the validator reports them as non-matching instead.
        log_failures: Log every failed ``try_create`` at DEBUG level.
        strict_ip_v4: Reject IPv4 text that is not in canonical dotted-quad form.
    """

    max_input_length: int = 1024
    log_failures: bool = False
    strict_ip_v4: bool = True

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.max_input_length <= 0:
            raise ValueError(f"max_input_length must be > 0, got {self.max_input_length}")

    def replace(self, **kwargs: Any) -> "ValidatorConfig":
        """Create a new config with updated values."""
        current = asdict(self)
        current.update(kwargs)
        return ValidatorConfig(**current)

    @classmethod
    def from_kwargs(cls, **kwargs: Any) -> "ValidatorConfig":
        """Create config from kwargs, ignoring unknown keys."""
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in kwargs.items() if k in valid_fields}
        return cls(**filtered)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


# =============================================================================
# Configuration Sources
# =============================================================================


class ConfigSource(ABC):
    """Abstract base class for configuration sources."""

    def __init__(self, priority: int = 0) -> None:
        self._priority = priority

    @property
    def priority(self) -> int:
        """Source priority (higher overrides lower)."""
        return self._priority

    @abstractmethod
    def load(self) -> dict[str, Any]:
        """Load configuration values."""
        pass


class EnvConfigSource(ConfigSource):
    """Environment variable configuration source.

    Example:
        VALIDATED_PRIMITIVES_MAX_INPUT_LENGTH=2048

        Will produce:
        {"max_input_length": 2048}
    """

    def __init__(self, prefix: str = ENV_PREFIX, priority: int = 100) -> None:
        super().__init__(priority)
        self._prefix = f"{prefix}_"

    def load(self) -> dict[str, Any]:
        """Load configuration from environment."""
        result: dict[str, Any] = {}
        for key, value in os.environ.items():
            if key.startswith(self._prefix):
                result[key[len(self._prefix):].lower()] = self._parse_value(value)
        return result

    def _parse_value(self, value: str) -> Any:
        """Parse string value to appropriate type."""
        if value.lower() in ("true", "yes", "on"):
            return True
        if value.lower() in ("false", "no", "off"):
            return False
        try:
            return int(value)
        except ValueError:
            return value


class FileConfigSource(ConfigSource):
    """File-based configuration source.

    Supports YAML, JSON and TOML, detected from the file extension. Values
    may sit at the top level or under a ``validated_primitives`` section.
    """

    SECTION = "validated_primitives"

    def __init__(self, path: str | Path, *, required: bool = False, priority: int = 50) -> None:
        super().__init__(priority)
        self._path = Path(path)
        self._required = required

    def load(self) -> dict[str, Any]:
        """Load configuration from file."""
        if not self._path.exists():
            if self._required:
                raise ConfigSourceError(f"Configuration file not found: {self._path}")
            return {}

        suffix = self._path.suffix.lower()
        try:
            content = self._path.read_text(encoding="utf-8")
            if suffix in (".yaml", ".yml"):
                data = yaml.safe_load(content) or {}
            elif suffix == ".json":
                data = json.loads(content)
            elif suffix == ".toml":
                data = tomllib.loads(content)
            else:
                raise ConfigSourceError(f"Unsupported file format: {suffix}")
        except ConfigSourceError:
            raise
        except (OSError, ValueError, yaml.YAMLError) as e:
            if self._required:
                raise ConfigSourceError(f"Failed to load config: {e}") from e
            logger.warning(f"Ignoring unreadable config file {self._path}: {e}")
            return {}

        if not isinstance(data, dict):
            raise ConfigSourceError(f"Configuration root must be a mapping: {self._path}")
        section = data.get(self.SECTION)
        return dict(section) if isinstance(section, dict) else data


# =============================================================================
# Loading
# =============================================================================


def _check_types(values: dict[str, Any]) -> list[str]:
    errors: list[str] = []
    for f in fields(ValidatorConfig):
        if f.name not in values:
            continue
        value = values[f.name]
        expected = bool if f.type in (bool, "bool") else int
        if expected is int and (isinstance(value, bool) or not isinstance(value, int)):
            errors.append(f"{f.name} must be an integer, got {value!r}")
        elif expected is bool and not isinstance(value, bool):
            errors.append(f"{f.name} must be a boolean, got {value!r}")
    return errors


def load_config(
    path: str | Path | None = None,
    *,
    env_prefix: str = ENV_PREFIX,
    sources: list[ConfigSource] | None = None,
) -> ValidatorConfig:
    """Build a configuration from file and environment sources.

    Args:
        path: Optional YAML/JSON/TOML file.
        env_prefix: Prefix of the environment variables to read.
        sources: Extra sources merged by priority with the default ones.

    Returns:
        The merged ``ValidatorConfig``. It is not activated; pass it to
        ``set_config`` for that.

    Raises:
        ConfigValidationError: If a value has the wrong type or is out of range.
    """
    all_sources: list[ConfigSource] = [EnvConfigSource(prefix=env_prefix)]
    if path is not None:
        all_sources.append(FileConfigSource(path, required=True))
    all_sources.extend(sources or [])

    merged: dict[str, Any] = {}
    for source in sorted(all_sources, key=lambda s: s.priority):
        merged.update(source.load())

    errors = _check_types(merged)
    if errors:
        raise ConfigValidationError(errors)
    try:
        return ValidatorConfig.from_kwargs(**merged)
    except ValueError as e:
        raise ConfigValidationError([str(e)]) from e


_config = ValidatorConfig()
_config_lock = threading.Lock()


def get_config() -> ValidatorConfig:
    """Get the active configuration."""
    return _config


def set_config(config: ValidatorConfig) -> ValidatorConfig:
    """Activate ``config`` and return the previously active one."""
    global _config
    with _config_lock:
        previous, _config = _config, config
    return previous


def configure(**kwargs: Any) -> ValidatorConfig:
    """Replace fields of the active configuration.

    Returns:
        The new active configuration.
    """
    global _config
    with _config_lock:
        _config = _config.replace(**kwargs)
        return _config


def reset_config() -> None:
    """Restore the default configuration."""
    set_config(ValidatorConfig())
