"""Configuration management for filescope."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .exceptions import ConfigError
from .models import FilescopeConfig
from .resolver import apply_overrides, env_key_to_dotted, flatten_for_env, resolve_with_precedence

DEFAULT_CONFIG_PATH = Path("~/.filescope/config.yaml")
_CONFIG_HEADER = "# filescope configuration file; manage via `filescope config set`.\n"


class ConfigManager:
    """Load and persist configuration data, applying precedence rules."""

    def __init__(
        self,
        config_path: Path | None = None,
        *,
        env: Mapping[str, str] | None = None,
    ) -> None:
        self._config_path = (config_path or DEFAULT_CONFIG_PATH).expanduser()
        self._env = env if env is not None else os.environ

    @property
    def config_path(self) -> Path:
        """Return the resolved configuration path."""
        return self._config_path

    def load(
        self,
        *,
        cli_overrides: Mapping[str, Any] | None = None,
        include_env: bool = True,
        ensure_file: bool = True,
        env_overrides: Mapping[str, str] | None = None,
    ) -> FilescopeConfig:
        """Load configuration data from disk, applying precedence rules."""
        if ensure_file:
            self.ensure_exists()

        env_data: dict[str, Any] | None = None
        if include_env:
            env_data = _extract_env(env_overrides if env_overrides is not None else self._env)

        return resolve_with_precedence(
            defaults=FilescopeConfig(),
            file_overrides=self._read_file(),
            env_overrides=env_data,
            cli_overrides=cli_overrides,
        )

    def set_value(self, key: str, value: Any) -> bool:
        """Validate and persist one dotted ``key``.

        Returns:
            bool: False when the file already held ``value``.

        Raises:
            ConfigError: If the resulting configuration is invalid.
        """
        current = self._read_file()
        updated = apply_overrides(current, {key: value})
        resolve_with_precedence(defaults=FilescopeConfig(), file_overrides=updated)
        if updated == current and self._config_path.exists():
            return False
        self.save(updated)
        return True

    def save(self, config: FilescopeConfig | Mapping[str, Any]) -> None:
        """Persist configuration data to disk."""
        if isinstance(config, FilescopeConfig):
            data = config.model_dump(mode="python")
        else:
            data = dict(config)
        self._config_path.parent.mkdir(parents=True, exist_ok=True)
        serialized = yaml.safe_dump(data, sort_keys=False)
        self._config_path.write_text(_CONFIG_HEADER + serialized, encoding="utf-8")

    def ensure_exists(self) -> Path:
        """Create a configuration file with defaults if one does not exist."""
        if not self._config_path.exists():
            self.save(FilescopeConfig())
        return self._config_path

    def _read_file(self) -> dict[str, Any]:
        if not self._config_path.exists():
            return {}

        try:
            raw = yaml.safe_load(self._config_path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Failed to parse configuration file: {exc}") from exc

        if not isinstance(raw, dict):
            raise ConfigError("Configuration file must contain a mapping at the top level.")

        return raw


def _extract_env(env: Mapping[str, str]) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for name, raw_value in env.items():
        dotted = env_key_to_dotted(name)
        if dotted is None:
            continue
        try:
            overrides[dotted] = yaml.safe_load(raw_value)
        except yaml.YAMLError:
            overrides[dotted] = raw_value
    return overrides


__all__ = [
    "ConfigManager",
    "DEFAULT_CONFIG_PATH",
    "FilescopeConfig",
    "resolve_with_precedence",
    "flatten_for_env",
    "ConfigError",
]
