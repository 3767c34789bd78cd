"""Configuration I/O utilities for reading and writing TOML config files.

This module handles serialization/deserialization of PathlangConfig to/from TOML format.
"""

import os
import platform
import tomllib  # Built-in Python 3.11+
from pathlib import Path
from typing import Any

import tomli_w

from pathlang.domain.config import PathlangConfig

LOCAL_CONFIG_DIR = ".pathlang"
CONFIG_FILENAME = "config.toml"


def get_global_config_path() -> Path:
    """Get the path to the global config file.

    The location is platform-dependent:
    - Linux/macOS: $XDG_CONFIG_HOME/pathlang/config.toml or ~/.config/pathlang/config.toml
    - Windows: %APPDATA%/pathlang/config.toml

    Returns:
        Path to the global config file (may not exist)
    """
    if platform.system() == "Windows":
        appdata = os.environ.get("APPDATA", "")
        if appdata:
            return Path(appdata) / "pathlang" / CONFIG_FILENAME
        return Path.home() / ".config" / "pathlang" / CONFIG_FILENAME
    else:
        xdg_config = os.environ.get("XDG_CONFIG_HOME", "")
        if xdg_config:
            return Path(xdg_config) / "pathlang" / CONFIG_FILENAME
        return Path.home() / ".config" / "pathlang" / CONFIG_FILENAME


def get_local_config_dir(root: Path) -> Path:
    """Get the local config directory for a project root."""
    return root / LOCAL_CONFIG_DIR


def load_config_data(path: Path) -> dict[str, Any]:
    """Load raw TOML data from a config file.

    Args:
        path: Path to config.toml file

    Returns:
        Dictionary with parsed TOML data

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config file is malformed
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in config file: {e}") from e


def config_data_to_pathlang_config(data: dict[str, Any]) -> PathlangConfig:
    """Convert raw config data dictionary to PathlangConfig.

    Raises:
        ValueError: If a section or value is invalid.
    """
    return PathlangConfig.from_partial(PathlangConfig.default(), data)


def load_config(path: Path) -> PathlangConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to config.toml file

    Returns:
        Parsed PathlangConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config file is malformed
    """
    return config_data_to_pathlang_config(load_config_data(path))


def save_config(config: PathlangConfig, path: Path) -> None:
    """Save configuration to a TOML file.

    Args:
        config: PathlangConfig to save
        path: Destination path for config.toml
    """
    data: dict[str, Any] = {
        "display": {
            "syntax_highlighting": config.display.syntax_highlighting,
            "color_scheme": config.display.color_scheme,
        },
        "output": {
            "format": config.output.format,
        },
    }

    path.parent.mkdir(parents=True, exist_ok=True)

    with path.open("wb") as f:
        tomli_w.dump(data, f)


def create_default_config_file(path: Path) -> None:
    """Create a default config.toml file with sensible defaults and comments.

    Args:
        path: Destination path for config.toml
    """
    # Template string keeps the comments
    template = """\
# pathlang configuration
# Created by: pathlang init

[display]
# Highlight file contents printed by 'pathlang cat'
syntax_highlighting = true

# Color output: "auto" (terminal only), "always", or "never"
color_scheme = "auto"

[output]
# Default output format for 'detect' and 'languages': "text" or "json"
format = "text"
"""

    path.parent.mkdir(parents=True, exist_ok=True)

    with path.open("w", encoding="utf-8") as f:
        f.write(template)
