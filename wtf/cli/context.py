"""State shared between the CLI callback and its commands."""

from dataclasses import dataclass

from wtf.config import BootstrapReport, ConfigLayout


@dataclass
class CliState:
    """Stored on the Typer context object by the main callback.

    Attributes:
        layout: Config layout in use.
        config_file: Config file to load, "~" shorthand allowed.
        has_custom: True when config_file came from --config.
        report: Bootstrap report, None for commands that skip bootstrap.
    """

    layout: ConfigLayout
    config_file: str
    has_custom: bool = False
    report: BootstrapReport | None = None

    @property
    def secrets_file(self) -> str:
        return f"{self.layout.config_dir}{self.layout.secrets_file}"
