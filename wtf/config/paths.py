"""Path constants and home-directory expansion for wtf config.

Follows the XDG Base Directory layout:
- Config: ~/.config/wtf/
- Legacy config (migrated on first run): ~/.wtf/

Paths are kept in their "~" shorthand form and resolved on every use, so
the result only depends on the user record at the time of the call.
"""

import os
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from .errors import HomeDirUnavailable, InvalidPathFormat

# Minimal XDG-compatible base directory
XDG_CONFIG_DIR = "~/.config/"

# First layout version. Only read when migrating.
LEGACY_CONFIG_DIR = "~/.wtf/"

APP_NAME = "wtf"
CONFIG_FILE_NAME = "config.yml"

# API keys and other values kept out of config.yml
SECRETS_FILE_NAME = "secrets.yml"

HOME_MARKER = "~"
_SEPARATORS = ("/", "\\")


def current_home_dir() -> str:
    """Return the home directory from the current user's record.

    Raises:
        HomeDirUnavailable: If the user record can't be read or has no home.
    """
    try:
        home = _user_record_home()
    except (KeyError, OSError) as e:
        raise HomeDirUnavailable(f"cannot read current user record: {e}") from e

    if not home:
        raise HomeDirUnavailable("cannot find user-specific home dir")

    return home


def _user_record_home() -> str:
    if os.name == "nt":
        home = os.path.expanduser(HOME_MARKER)
        # expanduser hands back the input untouched when it finds nothing
        return "" if home == HOME_MARKER else home

    import pwd

    return pwd.getpwuid(os.getuid()).pw_dir


def expand_home_dir(path: str, home: Callable[[], str] | None = None) -> str:
    """Expand a leading "~" into the current user's home directory.

    Paths that don't start with "~" (including the empty string) are
    returned as-is. A trailing separator on the input is kept.

    Args:
        path: Raw path, e.g. "~/.config/wtf/".
        home: Home directory lookup. Defaults to current_home_dir.

    Returns:
        The absolute path as a string.

    Raises:
        InvalidPathFormat: If "~" is followed by something other than a
            separator (e.g. "~alice/").
        HomeDirUnavailable: If the home directory can't be determined.
    """
    if not path:
        return path

    if not path.startswith(HOME_MARKER):
        return path

    if len(path) > 1 and path[1] not in _SEPARATORS:
        raise InvalidPathFormat(f"cannot expand user-specific home dir: {path!r}")

    home_dir = (home or current_home_dir)()
    if not home_dir:
        raise HomeDirUnavailable("cannot find user-specific home dir")

    # Extra leading separators would make the remainder absolute
    remainder = path[1:].lstrip("".join(_SEPARATORS))
    expanded = os.path.normpath(os.path.join(home_dir, remainder))
    if path.endswith(_SEPARATORS) and not expanded.endswith(os.sep):
        expanded += os.sep

    return expanded


@dataclass(frozen=True)
class ConfigLayout:
    """Where wtf keeps its configuration on disk.

    Passed to every provisioning step instead of module globals, so an
    alternate root only needs a different layout.

    Attributes:
        xdg_config_dir: Base directory the config dir nests under.
        app_name: Subdirectory of xdg_config_dir holding wtf's files.
        legacy_config_dir: Pre-XDG config directory, consulted for migration.
        config_file: Name of the main config file.
        secrets_file: Name of the secrets file.
        home: Home directory lookup; None means the current user's record.
    """

    xdg_config_dir: str = XDG_CONFIG_DIR
    app_name: str = APP_NAME
    legacy_config_dir: str = LEGACY_CONFIG_DIR
    config_file: str = CONFIG_FILE_NAME
    secrets_file: str = SECRETS_FILE_NAME
    home: Callable[[], str] | None = None

    @property
    def config_dir(self) -> str:
        """Raw path of the configuration directory, e.g. "~/.config/wtf/"."""
        base = self.xdg_config_dir
        if not base.endswith(_SEPARATORS):
            base += "/"
        return f"{base}{self.app_name}/"

    def expand(self, path: str) -> str:
        """Resolve a raw path against this layout's home directory."""
        return expand_home_dir(path, home=self.home)

    def resolve_base_dir(self) -> Path:
        return Path(self.expand(self.xdg_config_dir))

    def resolve_config_dir(self) -> Path:
        return Path(self.expand(self.config_dir))

    def resolve_legacy_dir(self) -> Path:
        return Path(self.expand(self.legacy_config_dir))

    def resolve_file(self, name: str) -> Path:
        """Absolute path of a file inside the configuration directory."""
        return self.resolve_config_dir() / name


DEFAULT_LAYOUT = ConfigLayout()
