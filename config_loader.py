"""Helpers for resolving migration configuration files and overrides."""

import json
import os
from dataclasses import fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

from astro_migration.models import (
    DEFAULT_CONFIG,
    MigrationConfig,
    SeoInfo,
)

DEFAULT_CONFIG_NAME = "migrate-astro.json"
CONFIG_ENV_VAR = "ASTRO_MIGRATION_CONFIG"
EXTRACTION_MODES = ("regex", "tree")


class ConfigError(Exception):
    """Raised when runtime configuration cannot be loaded."""


def _resolve_config_path(path: Optional[str]) -> Optional[str]:
    """Return the absolute config path, or None when no file is configured.

    Explicit and environment paths must exist. The default file name is
    optional and simply skipped when absent.
    """
    env_override = os.environ.get(CONFIG_ENV_VAR)
    candidate = path or env_override or DEFAULT_CONFIG_NAME
    expanded = os.path.expanduser(candidate)
    if os.path.isabs(expanded) and os.path.isfile(expanded):
        return expanded

    search_roots = [os.getcwd(), os.path.dirname(os.path.abspath(__file__))]
    for root in search_roots:
        resolved = os.path.abspath(os.path.join(root, expanded))
        if os.path.isfile(resolved):
            return resolved

    if path or env_override:
        raise ConfigError(f"Configuration file not found: {candidate}")
    return None


def _resolve_path(value: str, base_dir: str) -> str:
    """Resolve ``value`` into an absolute path relative to ``base_dir``."""
    expanded = os.path.expanduser(value)
    if os.path.isabs(expanded):
        return expanded
    return os.path.abspath(os.path.join(base_dir, expanded))


def _build_seo(data: Any) -> SeoInfo:
    if not isinstance(data, dict):
        raise ConfigError("default_seo must be a JSON object.")
    known = {field.name for field in fields(SeoInfo)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown default_seo keys: {', '.join(unknown)}")
    for key, value in data.items():
        if not isinstance(value, str):
            raise ConfigError(f"default_seo.{key} must be a string.")
    return replace(DEFAULT_CONFIG.default_seo, **data)


def config_from_mapping(
    data: Dict[str, Any], base_dir: Optional[str] = None
) -> MigrationConfig:
    """Build a MigrationConfig from ``data`` layered over the defaults."""
    base_dir = base_dir or os.getcwd()
    known = {field.name for field in fields(MigrationConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

    overrides: Dict[str, Any] = {}
    for key, value in data.items():
        if key.endswith("_dir"):
            if value is None and key == "layouts_dir":
                overrides[key] = None
                continue
            if not isinstance(value, str) or not value:
                raise ConfigError(f"{key} must be a non-empty path string.")
            overrides[key] = _resolve_path(value, base_dir)
        elif key == "layout_name":
            if not isinstance(value, str) or not value:
                raise ConfigError("layout_name must be a non-empty string.")
            overrides[key] = value
        elif key == "exclude_files":
            if not isinstance(value, list) or not all(
                isinstance(item, str) for item in value
            ):
                raise ConfigError("exclude_files must be a list of strings.")
            overrides[key] = tuple(value)
        elif key == "default_seo":
            overrides[key] = _build_seo(value)
        elif key == "extraction_mode":
            if value not in EXTRACTION_MODES:
                raise ConfigError(
                    "extraction_mode must be one of: "
                    + ", ".join(EXTRACTION_MODES)
                )
            overrides[key] = value

    return _with_paths(replace(DEFAULT_CONFIG, **overrides))


def _with_paths(config: MigrationConfig) -> MigrationConfig:
    """Coerce string directory values into Path objects."""
    return replace(
        config,
        source_dir=Path(config.source_dir),
        target_dir=Path(config.target_dir),
        layouts_dir=(
            Path(config.layouts_dir) if config.layouts_dir is not None else None
        ),
    )


def load_config(path: Optional[str] = None) -> MigrationConfig:
    """Load a JSON config file, or return the defaults when none exists."""
    config_path = _resolve_config_path(path)
    if config_path is None:
        return DEFAULT_CONFIG

    try:
        with open(config_path, "r", encoding="utf-8") as config_file:
            data = json.load(config_file)
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Unable to read {config_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a JSON object.")

    return config_from_mapping(data, os.path.dirname(config_path))


def resolve_runtime_config(
    *,
    config_path: Optional[str] = None,
    source_dir: Optional[str] = None,
    target_dir: Optional[str] = None,
    extraction_mode: Optional[str] = None,
) -> MigrationConfig:
    """Resolve the run configuration by layering CLI overrides on config."""
    config = load_config(config_path)

    overrides: Dict[str, Any] = {}
    if source_dir:
        overrides["source_dir"] = _resolve_path(source_dir, os.getcwd())
    if target_dir:
        overrides["target_dir"] = _resolve_path(target_dir, os.getcwd())
    if extraction_mode:
        if extraction_mode not in EXTRACTION_MODES:
            raise ConfigError(f"Unknown extraction mode: {extraction_mode}")
        overrides["extraction_mode"] = extraction_mode

    if not overrides:
        return config
    return _with_paths(replace(config, **overrides))
