"""Exceptions raised while preparing and loading wtf configuration."""

from pathlib import Path


class ConfigError(Exception):
    """Base class for configuration errors."""

    pass


class PathResolutionError(ConfigError):
    """A raw path could not be turned into an absolute path."""

    pass


class InvalidPathFormat(PathResolutionError):
    """The home shorthand was not used as a whole first path segment."""

    pass


class HomeDirUnavailable(PathResolutionError):
    """The current user's home directory could not be determined."""

    pass


class ProvisioningError(ConfigError):
    """A configuration directory or file could not be created."""

    def __init__(self, path: str | Path, cause: BaseException):
        self.path = str(path)
        self.cause = cause
        super().__init__(f"{self.path}: {cause}")


class MigrationError(ConfigError):
    """Copying the legacy configuration tree failed partway."""

    def __init__(self, source: str | Path, destination: str | Path, cause: BaseException):
        self.source = str(source)
        self.destination = str(destination)
        self.cause = cause
        super().__init__(f"{self.source} -> {self.destination}: {cause}")


class ConfigLoadError(ConfigError):
    """A configuration file could not be read or parsed."""

    def __init__(self, path: str | Path, cause: BaseException):
        self.path = str(path)
        self.cause = cause
        super().__init__(f"{self.path}: {cause}")


class CleanupWarning(UserWarning):
    """The legacy directory survived a successful migration.

    Recorded on the migration result and logged; never raised.
    """

    def __init__(self, path: str | Path, cause: BaseException):
        self.path = str(path)
        self.cause = cause
        super().__init__(f"could not remove {self.path}: {cause}")
