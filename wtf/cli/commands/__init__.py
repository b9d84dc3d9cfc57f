"""CLI commands module."""

from . import config, security

__all__ = ["config", "security"]
