#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the linemark CLI.

This module handles automatic discovery of configuration files, loading
configs from JSON, TOML or YAML, merging configurations with proper priority
handling, and checking the loaded values before the CLI applies them.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from linemark.constants import CONFIG_FILENAMES, CONFIG_KEYS, EMIT_FORMATS, PYPROJECT_TOOL_SECTION
from linemark.exceptions import ValidationError
from linemark.logging_utils import LOG_LEVEL_CHOICES

logger = logging.getLogger(__name__)


def _load_pyproject_linemark_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the [tool.linemark] section from a pyproject.toml file.

    Parameters
    ----------
    pyproject_path : Path
        Path to pyproject.toml file

    Returns
    -------
    dict
        Configuration dictionary from [tool.linemark], or empty dict if not found

    Raises
    ------
    argparse.ArgumentTypeError
        If pyproject.toml cannot be parsed

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in pyproject.toml {pyproject_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading pyproject.toml {pyproject_path}: {e}") from e

    config = data.get("tool", {}).get(PYPROJECT_TOOL_SECTION)
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"[tool.{PYPROJECT_TOOL_SECTION}] section in {pyproject_path} must be a table, "
            f"got {type(config).__name__}"
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Each directory from ``start_dir`` up to the filesystem root is checked
    for the dedicated config files in ``CONFIG_FILENAMES`` order, then for a
    pyproject.toml that carries a [tool.linemark] section.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_linemark_section(pyproject_path):
                    return pyproject_path
            except argparse.ArgumentTypeError as e:
                logger.debug(f"Skipping unreadable pyproject.toml: {e}")

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover a configuration file in the standard locations.

    The parent-directory search runs first; the user's home directory is the
    fallback and is only checked for the dedicated config files.

    Returns
    -------
    Path or None
        Path to discovered config file, or None if not found

    """
    found = find_config_in_parents(start_dir)
    if found:
        return found

    home = Path.home()
    for filename in CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a JSON, TOML, YAML, or pyproject.toml file.

    The format is chosen from the file name and extension.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary loaded from file

    Raises
    ------
    argparse.ArgumentTypeError
        If the file cannot be read, parsed, or has an unsupported format

    Examples
    --------
    >>> config = load_config_file(".linemark.toml")
    >>> config.get("emit")
    'html'

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")

    if not config_path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration path is not a file: {config_path}")

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == "pyproject.toml":
        config = _load_pyproject_linemark_section(config_path)
    elif ext == ".toml":
        config = _load_toml_config(config_path)
    elif ext in (".yaml", ".yml"):
        config = _load_yaml_config(config_path)
    elif ext == ".json":
        config = _load_json_config(config_path)
    else:
        raise argparse.ArgumentTypeError(f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml")

    logger.debug(f"Loaded configuration from {config_path}")
    return config


def _load_toml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading TOML config {config_path}: {e}") from e


def _load_json_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid JSON in config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading JSON config {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(f"JSON config file must contain an object, got {type(config).__name__}")
    return config


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise argparse.ArgumentTypeError(f"Invalid YAML in config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading YAML config {config_path}: {e}") from e

    # An empty YAML document loads as None
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(f"YAML config file must contain a mapping, got {type(config).__name__}")
    return config


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge two configuration dictionaries with deep merging.

    The override dictionary takes precedence over base for conflicting keys.
    Nested dictionaries are merged recursively, not replaced entirely.

    Examples
    --------
    >>> merge_configs({"emit": "html", "title": "A"}, {"title": "B"})
    {'emit': 'html', 'title': 'B'}

    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value

    return result


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load configuration with proper priority handling.

    Priority order (highest to lowest):
    1. Explicit config file path (--config flag)
    2. Environment variable config path (LINEMARK_CONFIG)
    3. Auto-discovered config file

    Returns
    -------
    dict
        Loaded configuration dictionary (empty dict if no config found)

    Raises
    ------
    argparse.ArgumentTypeError
        If a config file is specified but cannot be loaded

    """
    if explicit_path:
        return load_config_file(explicit_path)

    if env_var_path:
        return load_config_file(env_var_path)

    discovered_path = discover_config_file()
    if discovered_path:
        return load_config_file(discovered_path)

    return {}


def validate_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """Check loaded configuration values and drop keys the CLI does not know.

    Parameters
    ----------
    config : dict
        Raw configuration mapping

    Returns
    -------
    dict
        Configuration restricted to the supported keys

    Raises
    ------
    ValidationError
        If a supported key holds a value of the wrong type or outside its choices

    """
    checked: Dict[str, Any] = {}

    for key, value in config.items():
        if key not in CONFIG_KEYS:
            logger.warning(f"Ignoring unknown configuration key: {key}")
            continue

        if key == "emit":
            if value not in EMIT_FORMATS:
                raise ValidationError(
                    f"Invalid emit format {value!r}; expected one of {', '.join(EMIT_FORMATS)}",
                    parameter_name=key,
                    parameter_value=value,
                )
        elif key == "log_level":
            if not isinstance(value, str) or value.upper() not in LOG_LEVEL_CHOICES:
                raise ValidationError(
                    f"Invalid log level {value!r}; expected one of {', '.join(LOG_LEVEL_CHOICES)}",
                    parameter_name=key,
                    parameter_value=value,
                )
            value = value.upper()
        elif key in ("standalone", "trace"):
            if not isinstance(value, bool):
                raise ValidationError(
                    f"Configuration key {key!r} must be a boolean, got {type(value).__name__}",
                    parameter_name=key,
                    parameter_value=value,
                )
        elif not isinstance(value, str):
            raise ValidationError(
                f"Configuration key {key!r} must be a string, got {type(value).__name__}",
                parameter_name=key,
                parameter_value=value,
            )

        checked[key] = value

    return checked

