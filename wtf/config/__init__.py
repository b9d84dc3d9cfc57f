"""Configuration management module.

Prepares and loads wtf's configuration.
Config is stored at ~/.config/wtf/config.yml, secrets at
~/.config/wtf/secrets.yml.

Usage:
    from wtf.config import initialize, load_config_file

    report = initialize()
    config = load_config_file(report.config_file)
"""

from pathlib import Path

import yaml

from .bootstrap import BootstrapReport, initialize
from .errors import (
    CleanupWarning,
    ConfigError,
    ConfigLoadError,
    HomeDirUnavailable,
    InvalidPathFormat,
    MigrationError,
    PathResolutionError,
    ProvisioningError,
)
from .paths import DEFAULT_LAYOUT, ConfigLayout, expand_home_dir
from .provision import create_file

# Re-export for convenience
__all__ = [
    "initialize",
    "config_dir",
    "create_file",
    "load_config_file",
    "load_secrets_file",
    "expand_home_dir",
    "BootstrapReport",
    "ConfigLayout",
    "DEFAULT_LAYOUT",
    "CleanupWarning",
    "ConfigError",
    "ConfigLoadError",
    "HomeDirUnavailable",
    "InvalidPathFormat",
    "MigrationError",
    "PathResolutionError",
    "ProvisioningError",
]


def config_dir(layout: ConfigLayout | None = None) -> Path:
    """Return the absolute path to the configuration directory.

    Raises:
        PathResolutionError: If the home directory can't be resolved.
    """
    return (layout or DEFAULT_LAYOUT).resolve_config_dir()


def load_config_file(file_path: str | Path, layout: ConfigLayout | None = None) -> dict:
    """Load the specified config file.

    Args:
        file_path: Path to a YAML file, "~" shorthand allowed.
        layout: Layout whose home directory lookup expands "~".

    Returns:
        The parsed document, or an empty dict for an empty file.

    Raises:
        PathResolutionError: If file_path can't be resolved.
        ConfigLoadError: If the file can't be read or isn't valid YAML.
    """
    abs_path = Path((layout or DEFAULT_LAYOUT).expand(str(file_path)))

    try:
        with open(abs_path, encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigLoadError(abs_path, e) from e


def load_secrets_file(file_path: str | Path, layout: ConfigLayout | None = None) -> dict:
    """Load the specified secrets file. Same contract as load_config_file."""
    return load_config_file(file_path, layout)
