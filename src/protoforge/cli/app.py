# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands and shared options."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .. import __version__
from ..logging import configure_logging
from .commands import register_commands
from .shared import CLIState
from .typer_ext import create_typer

app = create_typer(
    help="Expand parameterised prototypes into configuration components.",
    no_args_is_help=True,
)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    root: Annotated[
        Path,
        typer.Option("--root", file_okay=False, resolve_path=True, help="Project directory to operate in."),
    ] = Path("."),
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Emit debug logging.")] = False,
    no_emoji: Annotated[bool, typer.Option("--no-emoji", help="Disable emoji in status messages.")] = False,
    version: Annotated[
        bool,
        typer.Option("--version", callback=_print_version, is_eager=True, help="Show the version and exit."),
    ] = False,
) -> None:
    """Expand parameterised prototypes into configuration components."""

    configure_logging(verbose=verbose)
    ctx.obj = CLIState(root=root, verbose=verbose, emoji=not no_emoji)


register_commands(app)

__all__ = ["app"]
