# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""State, status reporting and error handling shared by the CLI commands."""

from __future__ import annotations

import re
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final

import typer
from rich.console import Console
from rich.text import Text

from ..catalog.errors import CatalogIntegrityError, CatalogValidationError
from ..components import ComponentError
from ..config import ConfigError
from ..errors import PrototypeError
from ..logging import fail as core_fail
from ..logging import ok as core_ok

REPORTED_ERRORS: Final[tuple[type[Exception], ...]] = (
    PrototypeError,
    CatalogIntegrityError,
    CatalogValidationError,
    ComponentError,
    ConfigError,
    OSError,
)
_KEY_VALUE: Final[re.Pattern[str]] = re.compile(r"([\w-]+)=(\S+)")


class CLIError(RuntimeError):
    """Command-line usage error reported to the user before exiting."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLIState:
    """Options given to the top-level application, shared with every command."""

    root: Path = field(default_factory=Path.cwd)
    verbose: bool = False
    emoji: bool = True


@dataclass(slots=True)
class CLILogger:
    """Status output for one command invocation.

    Generated text goes to stdout through :meth:`echo` untouched; status and
    debug lines are rendered by Rich.
    """

    console: Console
    use_emoji: bool
    debug_enabled: bool = False

    def fail(self, message: str) -> None:
        core_fail(message, use_emoji=self.use_emoji)

    def ok(self, message: str) -> None:
        core_ok(message, use_emoji=self.use_emoji)

    def echo(self, message: str, *, nl: bool = True) -> None:
        """Write ``message`` to stdout exactly as given."""

        typer.echo(message, nl=nl)

    def debug(self, message: str) -> None:
        """Print ``message`` with its ``key=value`` pairs highlighted when debugging."""

        if not self.debug_enabled:
            return
        text = Text("[debug] ", style="bold cyan")
        text.append(message, style="dim")
        text.highlight_regex(_KEY_VALUE, style="bold magenta")
        self.console.print(text)


def build_cli_logger(*, emoji: bool, debug: bool = False) -> CLILogger:
    """Return a :class:`CLILogger` whose debug console writes to stderr."""

    console = Console(highlight=False, stderr=True)
    return CLILogger(console=console, use_emoji=emoji, debug_enabled=debug)


def state_from(ctx: typer.Context) -> CLIState:
    """Return the application state stored on ``ctx`` or a default one."""

    state = ctx.find_object(CLIState)
    return state if state is not None else CLIState()


@contextmanager
def reported_errors(logger: CLILogger) -> Iterator[None]:
    """Report expected failures through ``logger`` and exit with their status.

    Raises:
        typer.Exit: When a :class:`CLIError` or a library error escapes the block.
    """

    try:
        yield
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc
    except REPORTED_ERRORS as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=1) from exc


__all__ = [
    "CLIError",
    "CLILogger",
    "CLIState",
    "REPORTED_ERRORS",
    "build_cli_logger",
    "reported_errors",
    "state_from",
]
