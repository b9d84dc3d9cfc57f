"""Bring wtf's configuration state from absent to ready.

Usage:
    from wtf.config.bootstrap import initialize

    report = initialize(has_custom=False)
"""

from dataclasses import dataclass, field
from pathlib import Path

from .migration import MigrationResult, migrate_legacy_config
from .paths import DEFAULT_LAYOUT, ConfigLayout
from .provision import (
    PermissionResult,
    ensure_base_dir,
    ensure_config_dir,
    provision_default_file,
    restrict_permissions,
)
from .template import DEFAULT_CONFIG_TEMPLATE, DEFAULT_SECRETS_TEMPLATE


@dataclass
class BootstrapReport:
    """What initialize did.

    Attributes:
        config_dir: The config directory, which always exists afterwards.
        migration: Migration result, None when a custom config was given.
        config_file: Default config file, None when a custom config was given.
        secrets_file: Default secrets file, None when a custom config was given.
        permissions: Results of restricting the default files' modes.
    """

    config_dir: Path
    migration: MigrationResult | None = None
    config_file: Path | None = None
    secrets_file: Path | None = None
    permissions: list[PermissionResult] = field(default_factory=list)


def initialize(has_custom: bool = False, layout: ConfigLayout | None = None) -> BootstrapReport:
    """Set up the initial state of wtf's configuration.

    The config directories are always created because modules write data
    they persist between runs there. Migration and the default files are
    skipped when the caller supplies its own config file.

    Args:
        has_custom: True when a custom config file was given.
        layout: Config layout to use. Defaults to the standard locations.

    Returns:
        BootstrapReport describing the resulting state.

    Raises:
        PathResolutionError: If a config path can't be resolved.
        MigrationError: If the legacy config couldn't be copied.
        ProvisioningError: If a directory or default file couldn't be created.
    """
    layout = layout or DEFAULT_LAYOUT

    # Must run before the new directories exist, otherwise it always skips
    migration = None if has_custom else migrate_legacy_config(layout)

    ensure_base_dir(layout)
    report = BootstrapReport(config_dir=ensure_config_dir(layout), migration=migration)

    if has_custom:
        return report

    report.config_file = provision_default_file(
        layout.config_file, DEFAULT_CONFIG_TEMPLATE, layout
    )
    report.secrets_file = provision_default_file(
        layout.secrets_file, DEFAULT_SECRETS_TEMPLATE, layout
    )
    report.permissions = [
        restrict_permissions(layout.config_file, layout),
        restrict_permissions(layout.secrets_file, layout),
    ]

    return report
