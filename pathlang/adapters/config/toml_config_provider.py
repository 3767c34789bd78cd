"""TOML-based configuration provider.

Loads configuration from .pathlang/config.toml with global config fallback.

Config loading priority (highest to lowest):
1. Local: .pathlang/config.toml (project-specific)
2. Global: ~/.config/pathlang/config.toml (user defaults)
3. Built-in defaults
"""

import logging
from pathlib import Path

from pathlang.domain.config import PathlangConfig
from pathlang.shared.config_io import (
    CONFIG_FILENAME,
    get_global_config_path,
    load_config_data,
)

logger = logging.getLogger(__name__)


class TomlConfigProvider:
    """Configuration provider that loads from TOML files.

    Implements config cascade:
    1. Load global config (~/.config/pathlang/config.toml) if present
    2. Load local config (.pathlang/config.toml) if present
    3. Local values override global values (key-level merge per section)
    4. Missing values fall back to built-in defaults

    Gracefully handles missing or invalid configs with warnings.
    """

    def config_paths(self, config_dir: Path) -> list[tuple[str, Path]]:
        """Get candidate config files, lowest precedence first.

        Args:
            config_dir: Path to .pathlang directory containing config.toml

        Returns:
            (scope, path) pairs for the global and local config files.
        """
        return [
            ("global", get_global_config_path()),
            ("local", config_dir / CONFIG_FILENAME),
        ]

    def load(self, config_dir: Path) -> PathlangConfig:
        """Load configuration, layering each existing file over the defaults.

        A file that cannot be read or fails validation is skipped as a whole,
        so the result keeps whatever the earlier layers produced.

        Args:
            config_dir: Path to .pathlang directory containing config.toml

        Returns:
            PathlangConfig instance with merged global/local values or defaults
        """
        config = PathlangConfig.default()

        for scope, path in self.config_paths(config_dir):
            if not path.exists():
                continue
            try:
                config = PathlangConfig.from_partial(config, load_config_data(path))
            except (FileNotFoundError, ValueError, TypeError) as e:
                logger.warning(
                    "Failed to parse %s config at %s: %s. Ignoring %s config.",
                    scope,
                    path,
                    e,
                    scope,
                )
                continue
            logger.debug("Loaded %s config from %s", scope, path)

        return config
