"""Centralized logging for wtf."""

import logging
import sys

_handler: logging.StreamHandler | None = None


class _Formatter(logging.Formatter):
    """Format log records as ``[tag] message``, stripping the ``wtf.`` prefix."""

    def format(self, record: logging.LogRecord) -> str:
        name = record.name
        if name.startswith("wtf."):
            name = name[len("wtf.") :]
        return f"[{name}] {super().format(record)}"


def setup_logging(verbose: bool = False) -> None:
    """Configure the ``wtf`` logger.

    Attaches a single ``StreamHandler(sys.stderr)`` with level WARNING
    (or DEBUG when *verbose* is True). Sets ``propagate = False`` so
    messages don't bubble to the root logger. Later calls update the
    level and replace the handler with one on the current ``sys.stderr``.
    """
    global _handler
    logger = logging.getLogger("wtf")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if _handler is not None:
        logger.removeHandler(_handler)
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(_Formatter())
    logger.addHandler(_handler)
    logger.propagate = False
