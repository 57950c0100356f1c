# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console status lines and the package log handler, both rendered with Rich."""

from __future__ import annotations

import logging
import sys
from functools import lru_cache

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

PACKAGE_LOGGER = "protoforge"
OK_SYMBOL = "✅ "
FAIL_SYMBOL = "❌ "


def detect_tty() -> bool:
    """Return ``True`` when stdout is a terminal."""

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


@lru_cache(maxsize=8)
def get_console(*, color: bool, emoji: bool, stderr: bool = False) -> Console:
    """Return the shared console for one combination of presentation flags.

    The console looks up ``sys.stdout``/``sys.stderr`` on every write, so the
    cached instance follows stream redirection.
    """

    return Console(no_color=not color, emoji=emoji, highlight=False, stderr=stderr)


def emoji(symbol: str, enable: bool) -> str:
    """Return ``symbol`` when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def _status(msg: str, *, symbol: str, style: str, use_emoji: bool, use_color: bool | None, stderr: bool) -> None:
    color_enabled = detect_tty() if use_color is None else use_color
    text = Text(f"{emoji(symbol, use_emoji)}{msg}")
    if color_enabled:
        text.stylize(style)
    get_console(color=color_enabled, emoji=use_emoji, stderr=stderr).print(text)


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Report a completed action on stdout."""

    _status(msg, symbol=OK_SYMBOL, style="green", use_emoji=use_emoji, use_color=use_color, stderr=False)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Report a failed action on stderr."""

    _status(msg, symbol=FAIL_SYMBOL, style="red", use_emoji=use_emoji, use_color=use_color, stderr=True)


def configure_logging(*, verbose: bool) -> None:
    """Attach a Rich handler to the ``protoforge`` logger.

    Args:
        verbose: ``True`` to emit debug records, otherwise warnings and above.
    """

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        handler = RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)


__all__ = ["configure_logging", "detect_tty", "emoji", "fail", "get_console", "ok"]
