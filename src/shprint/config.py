#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for shprint.

This module finds configuration files, loads them from TOML, YAML or JSON
(or the ``[tool.shprint]`` table of a ``pyproject.toml``) and turns them into
``ShellRendererOptions``.

Example ``.shprint.toml``::

    indent = 4
    binary-next-line = true
    switch-case-indent = true
"""

import json
import logging
import os
import sys
from dataclasses import MISSING, fields
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Mapping, Optional

import yaml

from shprint.constants import CONFIG_ENV_VAR, DEDICATED_CONFIG_FILENAMES, PYPROJECT_TOOL_SECTION
from shprint.exceptions import FileNotFoundError, MalformedFileError, ValidationError
from shprint.options.shell import ShellRendererOptions

logger = logging.getLogger(__name__)


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.shprint]`` table from a pyproject.toml file.

    Parameters
    ----------
    pyproject_path : Path
        Path to pyproject.toml file

    Returns
    -------
    dict
        Contents of the table, or an empty dict if there is none

    Raises
    ------
    MalformedFileError
        If pyproject.toml cannot be parsed or the table is not a table

    """
    data = _load_toml_config(pyproject_path)
    tool = data.get("tool", {})
    if not isinstance(tool, dict) or PYPROJECT_TOOL_SECTION not in tool:
        return {}

    config = tool[PYPROJECT_TOOL_SECTION]
    if not isinstance(config, dict):
        raise MalformedFileError(
            f"[tool.{PYPROJECT_TOOL_SECTION}] section in {pyproject_path} must be a table, "
            f"got {type(config).__name__}",
            file_path=str(pyproject_path),
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Walks up from ``start_dir`` to the filesystem root, checking each
    directory for, in priority order:

    1. .shprint.toml
    2. .shprint.yaml
    3. .shprint.yml
    4. .shprint.json
    5. pyproject.toml (only if it has a ``[tool.shprint]`` table)

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

    current = Path(start_dir).resolve()

    while True:
        for filename in DEDICATED_CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except MalformedFileError as e:
                # an unrelated broken pyproject.toml must not stop the search
                logger.debug(f"Skipping {pyproject_path}: {e.message}")

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover a configuration file in standard locations.

    Searches the parent directories of ``start_dir`` first (see
    ``find_config_in_parents``), then the user's home directory for the
    dedicated ``.shprint.*`` files.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for the parent search, defaults to the current
        working directory

    Returns
    -------
    Path or None
        Path to discovered config file, or None if not found

    """
    config_in_parents = find_config_in_parents(start_dir)
    if config_in_parents:
        return config_in_parents

    home = Path.home()
    for filename in DEDICATED_CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a TOML, YAML, JSON or pyproject.toml file.

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
    FileNotFoundError
        If the file does not exist
    MalformedFileError
        If the file cannot be parsed, its top level is not a mapping or its
        extension is not supported

    Examples
    --------
    >>> config = load_config_file(".shprint.toml")
    >>> config.get("indent")
    4

    """
    config_path = Path(config_path)

    if not config_path.is_file():
        raise FileNotFoundError(str(config_path), message=f"Configuration file does not exist: {config_path}")

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == "pyproject.toml":
        config = _load_pyproject_section(config_path)
    elif ext == ".toml":
        config = _load_toml_config(config_path)
    elif ext in (".yaml", ".yml"):
        config = _load_yaml_config(config_path)
    elif ext == ".json":
        config = _load_json_config(config_path)
    else:
        raise MalformedFileError(
            f"Unsupported config file format: {ext}. Use .toml, .yaml, .yml or .json", file_path=str(config_path)
        )

    logger.debug(f"Loaded configuration from {config_path}")
    return config


def _load_toml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise MalformedFileError(
            f"Invalid TOML in config file {config_path}: {e}", file_path=str(config_path), original_error=e
        ) from e


def _load_json_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise MalformedFileError(
            f"Invalid JSON in config file {config_path}: {e}", file_path=str(config_path), original_error=e
        ) from e

    if not isinstance(config, dict):
        raise MalformedFileError(
            f"JSON config file must contain an object, got {type(config).__name__}", file_path=str(config_path)
        )
    return config


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise MalformedFileError(
            f"Invalid YAML in config file {config_path}: {e}", file_path=str(config_path), original_error=e
        ) from e

    # an empty YAML document loads as None
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise MalformedFileError(
            f"YAML config file must contain a mapping, got {type(config).__name__}", file_path=str(config_path)
        )
    return config


def options_from_config(
    config: Mapping[str, Any], base: Optional[ShellRendererOptions] = None
) -> ShellRendererOptions:
    """Build renderer options from a configuration mapping.

    Keys may be spelled with dashes or underscores (``binary-next-line`` or
    ``binary_next_line``).

    Parameters
    ----------
    config : Mapping
        Configuration values
    base : ShellRendererOptions, optional
        Options to start from; defaults to ``ShellRendererOptions()``

    Returns
    -------
    ShellRendererOptions
        ``base`` updated with the configured values

    Raises
    ------
    ValidationError
        If a key is unknown or a value has the wrong type or range

    """
    base = base or ShellRendererOptions()
    option_fields = {f.name: f for f in fields(ShellRendererOptions)}

    updates: Dict[str, Any] = {}
    for key, value in config.items():
        name = str(key).replace("-", "_")
        field_info = option_fields.get(name)
        if field_info is None:
            raise ValidationError(
                f"Unknown configuration option: {key}", parameter_name=str(key), parameter_value=value
            )

        expected = type(field_info.default) if field_info.default is not MISSING else object
        if isinstance(value, bool) != (expected is bool) or not isinstance(value, expected):
            raise ValidationError(
                f"Configuration option '{key}' must be of type {expected.__name__}, got {type(value).__name__}",
                parameter_name=name,
                parameter_value=value,
            )
        updates[name] = value

    try:
        return base.create_updated(**updates)
    except ValueError as e:
        raise ValidationError(str(e), original_error=e) from e


def load_options(
    config_path: Optional[Path | str] = None, start_dir: Optional[Path] = None
) -> ShellRendererOptions:
    """Load renderer options with proper priority handling.

    Priority order (highest to lowest):

    1. Explicit ``config_path``
    2. The file named by the ``SHPRINT_CONFIG`` environment variable
    3. An auto-discovered config file
    4. Default options

    Parameters
    ----------
    config_path : Path or str, optional
        Explicit config file path
    start_dir : Path, optional
        Where auto-discovery starts, defaults to the current working directory

    Returns
    -------
    ShellRendererOptions
        Options built from the selected file, or defaults

    """
    if config_path is None:
        config_path = os.environ.get(CONFIG_ENV_VAR) or discover_config_file(start_dir)
    if not config_path:
        return ShellRendererOptions()
    return options_from_config(load_config_file(config_path))
