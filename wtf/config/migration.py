"""One-time move of the legacy ~/.wtf/ directory to ~/.config/wtf/.

The legacy tree is copied into a staging directory beside the destination
and renamed into place only once the whole copy succeeded, so the new
config directory either holds the full legacy tree or doesn't exist.
The legacy directory is deleted afterwards; failing to delete it is not
an error, since the next run sees the new directory and skips migration.
"""

import logging
import shutil
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .errors import CleanupWarning, MigrationError
from .paths import ConfigLayout

logger = logging.getLogger(__name__)


class MigrationState(str, Enum):
    """Outcome of a migration attempt."""

    NOT_NEEDED = "not_needed"  # no legacy directory
    SKIPPED = "skipped"  # new directory already present
    MIGRATED = "migrated"


@dataclass(frozen=True)
class MigrationResult:
    """Result of migrate_legacy_config.

    Attributes:
        state: Which branch the migration took.
        source: Resolved legacy directory.
        destination: Resolved config directory.
        cleanup_error: Set when the legacy directory couldn't be removed
            after a successful copy.
    """

    state: MigrationState
    source: Path
    destination: Path
    cleanup_error: CleanupWarning | None = None


def staging_dir_for(destination: Path) -> Path:
    """Directory the legacy tree is copied into before the final rename."""
    return destination.with_name(f".{destination.name}.migrating")


def migrate_legacy_config(layout: ConfigLayout) -> MigrationResult:
    """Move an existing legacy config directory to the XDG location.

    Does nothing when the legacy directory is absent or when the new
    directory already exists.

    Args:
        layout: Config layout naming both directories.

    Returns:
        MigrationResult describing what happened.

    Raises:
        PathResolutionError: If either directory can't be resolved.
        MigrationError: If the legacy tree couldn't be copied. The legacy
            directory is left untouched and no config directory is created.
    """
    source = layout.resolve_legacy_dir()
    destination = layout.resolve_config_dir()

    if not source.exists():
        return MigrationResult(MigrationState.NOT_NEEDED, source, destination)

    if destination.exists():
        logger.debug("Config directory %s exists, not migrating %s", destination, source)
        return MigrationResult(MigrationState.SKIPPED, source, destination)

    _copy_tree(source, destination)
    logger.info("Migrated configuration from %s to %s", source, destination)

    cleanup_error = None
    if destination.is_dir():
        try:
            shutil.rmtree(source)
        except OSError as e:
            cleanup_error = CleanupWarning(source, e)
            logger.warning("Could not remove old config directory %s: %s", source, e)

    return MigrationResult(MigrationState.MIGRATED, source, destination, cleanup_error)


def _copy_tree(source: Path, destination: Path) -> None:
    staging = staging_dir_for(destination)

    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        if staging.exists():
            # Left behind by an interrupted run
            shutil.rmtree(staging)
        shutil.copytree(source, staging, symlinks=True)
        staging.rename(destination)
    except OSError as e:
        shutil.rmtree(staging, ignore_errors=True)
        raise MigrationError(source, destination, e) from e
