"""Configuration resolution helpers."""

from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict, Mapping

from pydantic import ValidationError

from .exceptions import ConfigError
from .models import FilescopeConfig

ENV_PREFIX = "FILESCOPE__"


def resolve_with_precedence(
    *,
    defaults: FilescopeConfig,
    file_overrides: Mapping[str, Any] | None = None,
    env_overrides: Mapping[str, Any] | None = None,
    cli_overrides: Mapping[str, Any] | None = None,
) -> FilescopeConfig:
    """Merge configuration sources: defaults < file < environment < CLI."""
    merged = defaults.model_dump(mode="python")
    for source in (file_overrides, env_overrides, cli_overrides):
        if source:
            merged = apply_overrides(merged, source)

    try:
        return FilescopeConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration values: {exc}") from exc


def apply_overrides(base: Mapping[str, Any], overrides: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of ``base`` with ``overrides`` merged in.

    Override keys may be dotted paths (``inspection.chunk_size``) or nested
    mappings; both forms merge into the same place.
    """
    merged = deepcopy(dict(base))
    for key, value in overrides.items():
        if not isinstance(key, str) or not key.strip("."):
            raise ConfigError(f"Invalid configuration key: {key!r}")
        nested: Any = value
        for segment in reversed([part for part in key.split(".") if part]):
            nested = {segment: nested}
        merged = _deep_merge(merged, nested)
    return merged


def env_key_to_dotted(name: str) -> str | None:
    """Map ``FILESCOPE__SECTION__KEY`` to ``section.key``; None for other names."""
    if not name.startswith(ENV_PREFIX):
        return None
    segments = [segment.lower() for segment in name[len(ENV_PREFIX) :].split("__") if segment]
    return ".".join(segments) or None


def flatten_for_env(config: FilescopeConfig) -> Dict[str, str]:
    """Render the config as the ``FILESCOPE__SECTION__KEY`` variables that reproduce it."""
    flat: Dict[str, str] = {}
    for section, values in config.model_dump(mode="python").items():
        for key, value in values.items():
            rendered = ("true" if value else "false") if isinstance(value, bool) else str(value)
            flat[f"{ENV_PREFIX}{section.upper()}__{key.upper()}"] = rendered
    return flat


def _deep_merge(base: Mapping[str, Any], overrides: Mapping[str, Any]) -> dict[str, Any]:
    merged: dict[str, Any] = {key: deepcopy(value) for key, value in base.items()}
    for key, value in overrides.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), Mapping):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = deepcopy(value)
    return merged


__all__ = [
    "ENV_PREFIX",
    "apply_overrides",
    "env_key_to_dotted",
    "flatten_for_env",
    "resolve_with_precedence",
]
