"""Create the config directories and files wtf needs at startup.

Every step is idempotent: existing directories are left alone and existing
files are never truncated.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .errors import PathResolutionError, ProvisioningError
from .paths import ConfigLayout

logger = logging.getLogger(__name__)

# Mode for new directories, before the umask
DIR_MODE = 0o777

# Owner read/write only
PRIVATE_FILE_MODE = 0o600


class PermissionOutcome(str, Enum):
    """What restrict_permissions did to a file."""

    APPLIED = "applied"
    SKIPPED = "skipped"
    IGNORED = "ignored"


@dataclass(frozen=True)
class PermissionResult:
    """Result of tightening one file's mode.

    Attributes:
        outcome: APPLIED when the mode was changed, SKIPPED when the file
            doesn't exist, IGNORED when the change failed.
        path: The file that was targeted, if it could be resolved.
        cause: The error behind an IGNORED outcome.
    """

    outcome: PermissionOutcome
    path: Path | None = None
    cause: Exception | None = None


def ensure_base_dir(layout: ConfigLayout) -> Path:
    """Create the XDG base directory (~/.config) if it's missing."""
    return _ensure_dir(layout.resolve_base_dir())


def ensure_config_dir(layout: ConfigLayout) -> Path:
    """Create the wtf config directory (~/.config/wtf) if it's missing.

    Modules persist their own data here as well, so it's created even
    when a custom config file is in use.
    """
    return _ensure_dir(layout.resolve_config_dir())


def _ensure_dir(path: Path) -> Path:
    if path.exists():
        if not path.is_dir():
            raise ProvisioningError(path, NotADirectoryError("not a directory"))
        return path

    try:
        path.mkdir(mode=DIR_MODE)
    except FileExistsError:
        # Created by someone else between the check and the mkdir
        if not path.is_dir():
            raise ProvisioningError(path, NotADirectoryError("not a directory"))
    except OSError as e:
        raise ProvisioningError(path, e) from e
    else:
        logger.debug("Created directory %s", path)

    return path


def create_file(file_name: str, layout: ConfigLayout) -> Path:
    """Create the named file in the config directory, if it doesn't exist.

    An existing file is left untouched.

    Args:
        file_name: Name of the file inside the config directory.
        layout: Config layout to resolve the directory from.

    Returns:
        Absolute path to the file.

    Raises:
        PathResolutionError: If the config directory can't be resolved.
        ProvisioningError: If the file can't be checked or created.
    """
    file_path = layout.resolve_file(file_name)

    try:
        file_path.stat()
    except FileNotFoundError:
        try:
            file_path.touch()
        except OSError as e:
            raise ProvisioningError(file_path, e) from e
        logger.debug("Created file %s", file_path)
    except OSError as e:
        raise ProvisioningError(file_path, e) from e

    return file_path


def provision_default_file(file_name: str, template: str, layout: ConfigLayout) -> Path:
    """Create a config file and fill it with a template if it's empty.

    Returns:
        Absolute path to the file.

    Raises:
        PathResolutionError: If the config directory can't be resolved.
        ProvisioningError: If the file can't be created or written.
    """
    file_path = create_file(file_name, layout)

    try:
        if file_path.stat().st_size == 0:
            file_path.write_text(template, encoding="utf-8")
            logger.info("Wrote default %s", file_path)
    except OSError as e:
        raise ProvisioningError(file_path, e) from e

    return file_path


def restrict_permissions(file_name: str, layout: ConfigLayout) -> PermissionResult:
    """Set a config file's mode to read/write for the owner only.

    Best effort: a missing file or a failed chmod (read-only mounts,
    filesystems without POSIX modes) is reported, never raised.

    Args:
        file_name: Name of the file inside the config directory.
        layout: Config layout to resolve the directory from.
    """
    try:
        file_path = layout.resolve_file(file_name)
    except PathResolutionError as e:
        logger.debug("Not restricting %s: %s", file_name, e)
        return PermissionResult(PermissionOutcome.IGNORED, cause=e)

    try:
        file_path.stat()
    except FileNotFoundError:
        return PermissionResult(PermissionOutcome.SKIPPED, file_path)
    except OSError as e:
        logger.debug("Could not check %s: %s", file_path, e)
        return PermissionResult(PermissionOutcome.IGNORED, file_path, e)

    try:
        file_path.chmod(PRIVATE_FILE_MODE)
    except OSError as e:
        logger.debug("Could not restrict %s: %s", file_path, e)
        return PermissionResult(PermissionOutcome.IGNORED, file_path, e)

    return PermissionResult(PermissionOutcome.APPLIED, file_path)
