"""
Configuration loading for the dewdrop CLI.

Config reads a YAML file, resolves ${path.to.key} substitutions and applies
DEWDROP_* environment variable overrides:

    DEWDROP_LOGGING_LEVEL=debug   ->  logging.level = "debug"
    DEWDROP_CLI_RENDERER=mono     ->  cli.renderer = "mono"
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any

import yaml

from .exceptions import ConfigError

# Maximum config file size (1MB)
MAX_CONFIG_SIZE_BYTES = 1024 * 1024

DEFAULT_CONFIG_FILENAME = "dewdrop.yaml"
CONFIG_PATH_ENV = "DEWDROP_CONFIG"
ENV_PREFIX = "DEWDROP_"

_MISSING = object()
_VAR_PATTERN = re.compile(r"\$\{([a-zA-Z0-9_.]+)\}")


def _check_file_size(path: Path) -> None:
    """Refuse oversized configuration files."""
    size = path.stat().st_size
    if size > MAX_CONFIG_SIZE_BYTES:
        raise ConfigError(
            f"Configuration file '{path}' exceeds maximum size",
            size=size,
            limit=MAX_CONFIG_SIZE_BYTES,
        )


def _convert_env_value(value: str) -> Any:
    """Convert an environment variable string to an appropriate type."""
    if value.lower() in ("null", "none", ""):
        return None

    if value.lower() in ("true", "false"):
        return value.lower() == "true"

    if "," in value:
        return [_convert_env_value(v.strip()) for v in value.split(",")]

    try:
        if "." in value:
            return float(value)
        return int(value)
    except ValueError:
        pass

    return value


def _set_nested_value(data: dict, path: list[str], value: Any) -> None:
    """Set a nested value, creating intermediate sections as needed."""
    current = data
    for part in path[:-1]:
        if not isinstance(current.get(part), dict):
            current[part] = {}
        current = current[part]
    current[path[-1]] = value


class Config:
    """
    Configuration loaded from YAML with env overrides and substitutions.

    Example:
        config = Config("dewdrop.yaml")
        level = config.get("logging.level", "info")
    """

    def __init__(
        self,
        fname: str | Path | None = None,
        enable_env_overrides: bool = True,
        env_prefix: str = ENV_PREFIX,
    ):
        """
        Initialize configuration, optionally from a YAML file.

        Args:
            fname: Path to the YAML configuration file (None for defaults only)
            enable_env_overrides: Whether to apply environment variable overrides
            env_prefix: Prefix for environment variables (default: 'DEWDROP_')

        Raises:
            ConfigError: If the file is missing, too large or not valid YAML
        """
        self._enable_env_overrides = enable_env_overrides
        self._env_prefix = env_prefix
        self._path: Path | None = None
        self._data: dict[str, Any] = {}
        self._load(fname)

    @classmethod
    def empty(cls, enable_env_overrides: bool = True) -> Config:
        """Create a config without a backing file."""
        return cls(None, enable_env_overrides=enable_env_overrides)

    @classmethod
    def default(cls) -> Config:
        """
        Load the default configuration.

        Uses $DEWDROP_CONFIG if set, then ./dewdrop.yaml if present, and
        falls back to an empty configuration.
        """
        env_path = os.environ.get(CONFIG_PATH_ENV)
        if env_path:
            return cls(env_path)

        local = Path.cwd() / DEFAULT_CONFIG_FILENAME
        if local.is_file():
            return cls(local)

        return cls.empty()

    @property
    def path(self) -> Path | None:
        """Path of the loaded file, None for an empty config."""
        return self._path

    def _read_file(self, fname: str | Path) -> dict[str, Any]:
        """Read and parse the YAML file."""
        path = Path(fname).expanduser().resolve()
        if not path.is_file():
            raise ConfigError("Configuration file not found", path=str(path))

        _check_file_size(path)
        self._path = path

        with open(path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in '{path}': {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(
                "Configuration root must be a mapping", path=str(path)
            )
        return data

    def _load(self, fname: str | Path | None) -> None:
        """Load file contents, apply overrides and resolve substitutions."""
        data = self._read_file(fname) if fname is not None else {}

        if self._enable_env_overrides:
            data = self._apply_env_overrides(data)

        self._data = data
        self._data = self._resolve(self._data)

    def _collect_env_vars(self) -> dict[str, str]:
        """Collect environment variables carrying the configured prefix."""
        return {
            key: value
            for key, value in os.environ.items()
            if key.startswith(self._env_prefix) and key != CONFIG_PATH_ENV
        }

    def _env_key_to_path(self, env_key: str) -> list[str]:
        """Convert DEWDROP_LOGGING_LEVEL to ['logging', 'level']."""
        return env_key[len(self._env_prefix) :].lower().split("_")

    def _apply_env_overrides(self, data: dict[str, Any]) -> dict[str, Any]:
        """Apply environment variable overrides to configuration data."""
        for env_key, env_value in sorted(self._collect_env_vars().items()):
            path = self._env_key_to_path(env_key)
            _set_nested_value(data, path, _convert_env_value(env_value))
        return data

    def get_env_overrides(self) -> dict[str, Any]:
        """Get all environment variable overrides that would be applied."""
        if not self._enable_env_overrides:
            return {}
        return {
            ".".join(self._env_key_to_path(key)): _convert_env_value(value)
            for key, value in self._collect_env_vars().items()
        }

    def _resolve(self, content: Any) -> Any:
        """Recursively resolve ${variable} substitutions."""
        if isinstance(content, dict):
            for key in list(content.keys()):
                content[key] = self._resolve(content[key])
        elif isinstance(content, list):
            return [self._resolve(item) for item in content]
        elif isinstance(content, str):
            return _VAR_PATTERN.sub(self._substitute_var, content)
        return content

    def _substitute_var(self, match: re.Match) -> str:
        """Substitute a variable reference with its value."""
        var_name = match.group(1)
        value = self._lookup(var_name)
        if value is _MISSING:
            raise ConfigError("Undefined configuration variable", variable=var_name)
        return str(value)

    def _lookup(self, path: str) -> Any:
        """Walk a dotted path, returning _MISSING when absent."""
        current: Any = self._data
        for part in path.split("."):
            if not isinstance(current, dict) or part not in current:
                return _MISSING
            current = current[part]
        return current

    def get(self, path: str, default: Any = None) -> Any:
        """
        Get a value by dotted path.

        Args:
            path: Dotted key path, e.g. "logging.level"
            default: Value returned when the path does not exist

        Returns:
            The configured value or default
        """
        value = self._lookup(path)
        return default if value is _MISSING else value

    def has(self, path: str) -> bool:
        """Check whether a dotted path exists."""
        return self._lookup(path) is not _MISSING

    def dict(self) -> dict[str, Any]:
        """Return the configuration as a plain dictionary."""
        return self._data

    def __repr__(self) -> str:
        return f"Config(path={self._path!r})"
