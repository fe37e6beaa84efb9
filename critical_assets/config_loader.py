"""Configuration loader for critical-assets."""

import copy
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from dotenv import load_dotenv


DEFAULT_LOCATIONS = [
    "critical-assets.yaml",
    "critical-assets.yml",
    "config.yaml",
    "config.yml",
]

DEFAULT_ASSET_OPTIONS: Dict[str, Any] = {
    "category_sort_order": [],
    "dir": {
        "components": "components",
        "output": "/css",
    },
    "file_extensions": [".css"],
}

_ENV_PATTERN = re.compile(r"\$\{([^}]+)\}")


@dataclass
class AssetOptions:
    category_sort_order: List[str] = field(default_factory=list)
    components_dir: str = "components"
    output_dir: str = "/css"
    file_extensions: List[str] = field(default_factory=lambda: [".css"])


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from a YAML file.

    Args:
        config_path: Path to config file. If None, the default locations in
            the working directory are tried and an empty configuration is
            returned when none exists.

    Returns:
        Dictionary with configuration values.

    Raises:
        FileNotFoundError: If an explicit ``config_path`` does not exist.
    """
    # Load environment variables first
    load_dotenv()

    if config_path is None:
        for loc in DEFAULT_LOCATIONS:
            if Path(loc).exists():
                config_path = loc
                break
        else:
            return {}

    if not Path(config_path).exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    if not isinstance(config, dict):
        raise ValueError(f"Configuration root must be a mapping: {config_path}")

    return _substitute_env_vars(config)


def _substitute_env_vars(obj: Any) -> Any:
    """Recursively substitute environment variables in config.

    Supports syntax: ${VAR_NAME} or ${VAR_NAME:default_value}
    """
    if isinstance(obj, dict):
        return {k: _substitute_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_substitute_env_vars(item) for item in obj]
    elif isinstance(obj, str):
        return _substitute_env_string(obj)
    else:
        return obj


def _substitute_env_string(value: str) -> str:
    def replace(match):
        var_expr = match.group(1)
        if ':' in var_expr:
            var_name, default = var_expr.split(':', 1)
            return os.getenv(var_name, default)
        else:
            return os.getenv(var_expr, match.group(0))

    return _ENV_PATTERN.sub(replace, value)


def deep_merge(base: Any, override: Any) -> Any:
    """Merge ``override`` into a copy of ``base``.

    Mappings merge key by key and lists concatenate (base items first). Any
    other value in ``override`` replaces the one in ``base``.
    """
    if isinstance(base, dict) and isinstance(override, dict):
        merged = copy.deepcopy(base)
        for key, value in override.items():
            merged[key] = deep_merge(merged[key], value) if key in merged else copy.deepcopy(value)
        return merged
    if isinstance(base, list) and isinstance(override, list):
        return copy.deepcopy(base) + copy.deepcopy(override)
    return copy.deepcopy(override)


def get_assets_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """Get the asset section of a loaded configuration."""
    return config.get("assets", {}) or {}


def get_logging_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """Get logging configuration."""
    return config.get("logging", {}) or {}


def build_asset_options(overrides: Optional[Dict[str, Any]] = None) -> AssetOptions:
    """Merge user asset options over the defaults."""
    merged = deep_merge(DEFAULT_ASSET_OPTIONS, overrides or {})
    directories = merged.get("dir", {})
    return AssetOptions(
        category_sort_order=[str(v) for v in merged.get("category_sort_order") or []],
        components_dir=str(directories.get("components", "components")),
        output_dir=str(directories.get("output", "/css")),
        file_extensions=[_normalize_extension(v) for v in merged.get("file_extensions") or []],
    )


def _normalize_extension(value: Any) -> str:
    ext = str(value).strip()
    if ext and not ext.startswith("."):
        ext = f".{ext}"
    return ext
