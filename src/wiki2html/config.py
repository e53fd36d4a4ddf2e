#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for wiki2html.

This module loads configuration from JSON, TOML or YAML files, or from the
``[tool.wiki2html]`` table of a ``pyproject.toml``, and turns it into the
option dataclasses. A configuration has up to four sections:

.. code-block:: toml

    [html]
    generate_edit_links = false

    [shell]
    program_name = "My Wiki"
    stylesheets = ["/wiki.css"]

    [pipeline]
    startpage_path = "/Home"
    navigation_page_path = "/Navigation"

    [messages]
    "html.search" = "Find"

"""

import json
import logging
import sys
from dataclasses import dataclass, field, fields
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Mapping, Optional

import yaml

from wiki2html.exceptions import ConfigurationError
from wiki2html.messages import MessageCatalog
from wiki2html.options.html import HtmlRendererOptions, PageShellOptions
from wiki2html.options.pipeline import PipelineOptions

logger = logging.getLogger(__name__)

CONFIG_FILENAMES = [".wiki2html.toml", ".wiki2html.yaml", ".wiki2html.yml", ".wiki2html.json"]
CONFIG_ENV_VAR = "WIKI2HTML_CONFIG"

_SECTIONS: dict[str, type] = {
    "html": HtmlRendererOptions,
    "shell": PageShellOptions,
    "pipeline": PipelineOptions,
}


@dataclass(frozen=True)
class Wiki2HtmlConfig:
    """All options built from one configuration mapping."""

    html: HtmlRendererOptions = field(default_factory=HtmlRendererOptions)
    shell: PageShellOptions = field(default_factory=PageShellOptions)
    pipeline: PipelineOptions = field(default_factory=PipelineOptions)
    messages: MessageCatalog = field(default_factory=MessageCatalog)


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the [tool.wiki2html] table of a pyproject.toml file.

    Returns an empty dict when the table does not exist.
    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(
            f"Invalid TOML in pyproject.toml {pyproject_path}: {e}", config_path=str(pyproject_path), original_error=e
        ) from e
    except OSError as e:
        raise ConfigurationError(
            f"Error reading pyproject.toml {pyproject_path}: {e}", config_path=str(pyproject_path), original_error=e
        ) from e

    config = data.get("tool", {}).get("wiki2html", {})
    if not isinstance(config, dict):
        raise ConfigurationError(
            f"[tool.wiki2html] section in {pyproject_path} must be a table, got {type(config).__name__}",
            config_path=str(pyproject_path),
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file in ``start_dir`` or one of its parents.

    Dedicated ``.wiki2html.*`` files win over a ``pyproject.toml``, which
    only counts when it has a ``[tool.wiki2html]`` table.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except ConfigurationError:
                # Invalid pyproject.toml, keep searching
                logger.debug(f"Ignoring unreadable {pyproject_path}")

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a JSON, TOML, YAML or pyproject.toml file.

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
    ConfigurationError
        If the file cannot be read, parsed, or has invalid format

    Examples
    --------
    >>> config = load_config_file(".wiki2html.toml")
    >>> config["pipeline"]["startpage_path"]
    '/Home'

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigurationError(f"Configuration file does not exist: {config_path}", config_path=str(config_path))
    if not config_path.is_file():
        raise ConfigurationError(f"Configuration path is not a file: {config_path}", config_path=str(config_path))

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == "pyproject.toml":
        return _load_pyproject_section(config_path)
    if ext == ".toml":
        return _load_toml_config(config_path)
    if ext in (".yaml", ".yml"):
        return _load_yaml_config(config_path)
    if ext == ".json":
        return _load_json_config(config_path)
    raise ConfigurationError(
        f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml", config_path=str(config_path)
    )


def _load_toml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(
            f"Invalid TOML in config file {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e
    except OSError as e:
        raise ConfigurationError(
            f"Error reading TOML config {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e


def _load_json_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(
            f"Invalid JSON in config file {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e
    except OSError as e:
        raise ConfigurationError(
            f"Error reading JSON config {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e
    if not isinstance(config, dict):
        raise ConfigurationError(
            f"JSON config file must contain an object, got {type(config).__name__}", config_path=str(config_path)
        )
    return config


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML in config file {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e
    except OSError as e:
        raise ConfigurationError(
            f"Error reading YAML config {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigurationError(
            f"YAML config file must contain a mapping, got {type(config).__name__}", config_path=str(config_path)
        )
    return config


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge two configuration dictionaries with deep merging.

    The override dictionary takes precedence over base for conflicting keys.
    Nested dictionaries are merged recursively, not replaced entirely.

    Examples
    --------
    >>> merge_configs({"html": {"escape_html": True}}, {"html": {"generate_edit_links": False}})
    {'html': {'escape_html': True, 'generate_edit_links': False}}

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
    """Load configuration with priority handling.

    Priority order (highest to lowest):
    1. Explicit config file path
    2. Path from the ``WIKI2HTML_CONFIG`` environment variable (passed in)
    3. Auto-discovered config file

    Returns an empty dict when no configuration exists.
    """
    if explicit_path:
        return load_config_file(explicit_path)
    if env_var_path:
        return load_config_file(env_var_path)
    discovered_path = find_config_in_parents()
    if discovered_path:
        logger.debug(f"Using configuration file {discovered_path}")
        return load_config_file(discovered_path)
    return {}


def _build_section(name: str, options_class: type, values: Any) -> Any:
    if not isinstance(values, Mapping):
        raise ConfigurationError(f"Configuration section [{name}] must be a table, got {type(values).__name__}")
    known = {f.name for f in fields(options_class) if f.init}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ConfigurationError(f"Unknown keys in configuration section [{name}]: {', '.join(unknown)}")
    try:
        return options_class(**values)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid value in configuration section [{name}]: {e}", original_error=e) from e


def build_options(config: Mapping[str, Any]) -> Wiki2HtmlConfig:
    """Turn a configuration mapping into option objects.

    Parameters
    ----------
    config : Mapping
        Mapping with the optional sections ``html``, ``shell``, ``pipeline``
        and ``messages``

    Returns
    -------
    Wiki2HtmlConfig
        Options with defaults for every missing section

    Raises
    ------
    ConfigurationError
        For unknown sections or keys and for invalid values

    """
    unknown = sorted(set(config) - set(_SECTIONS) - {"messages"})
    if unknown:
        raise ConfigurationError(f"Unknown configuration sections: {', '.join(unknown)}")

    built = {name: _build_section(name, options_class, config.get(name, {})) for name, options_class in _SECTIONS.items()}

    messages = config.get("messages", {})
    if not isinstance(messages, Mapping):
        raise ConfigurationError(f"Configuration section [messages] must be a table, got {type(messages).__name__}")
    return Wiki2HtmlConfig(messages=MessageCatalog(messages), **built)
