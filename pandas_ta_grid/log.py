# -*- coding: utf-8 -*-
"""Logging for pandas-ta-grid, built on loguru.

The package disables its own records on import (the loguru convention
for libraries).  An application opts in with ``configure_logging``,
which also picks the transport: coloured text for a local console or
JSON lines for structured/cloud log collectors.
"""
from __future__ import annotations

import sys
from typing import Optional, TextIO

from loguru import logger

PACKAGE = "pandas_ta_grid"

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[component]}</cyan> | "
    "<level>{message}</level>"
)


def _console_format(record) -> str:
    record["extra"].setdefault("component", PACKAGE)
    return CONSOLE_FORMAT + "\n{exception}"


def get_logger(component: str):
    """Logger bound to *component*; every record carries it in ``extra``."""
    return logger.bind(component=component)


def configure_logging(
    level: str = "INFO",
    serialize: bool = False,
    sink: Optional[TextIO] = None,
    replace_default: bool = False,
) -> int:
    """Enable package logging and attach one sink.

    The global ``extra`` is left alone; console records without a
    ``component`` are shown under the package name.

    Args:
        level: Minimum level, e.g. ``"DEBUG"`` to see per-bar diagnostics.
        serialize: JSON lines instead of coloured text.
        sink: Stream to write to. Default: ``sys.stderr`` (text) or
            ``sys.stdout`` (JSON).
        replace_default: Remove loguru's default stderr handler (id 0)
            first.  Without it a stderr sink prints every record twice.

    Returns:
        The loguru handler id; pass it to ``logger.remove`` to detach.
    """
    if sink is None:
        sink = sys.stdout if serialize else sys.stderr

    if replace_default:
        try:
            logger.remove(0)
        except ValueError:
            pass  # already removed

    logger.enable(PACKAGE)
    if serialize:
        return logger.add(sink, level=level.upper(), serialize=True)
    return logger.add(
        sink,
        level=level.upper(),
        format=_console_format,
        colorize=hasattr(sink, "isatty") and sink.isatty(),
    )


def disable_logging() -> None:
    logger.disable(PACKAGE)
