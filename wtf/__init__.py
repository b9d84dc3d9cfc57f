"""wtf: personal terminal dashboard."""

__version__ = "0.1.0"
