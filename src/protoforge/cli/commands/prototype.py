# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI commands to inspect, search and instantiate prototypes."""

from __future__ import annotations

from typing import Annotated, Final

import typer

from ...catalog.index import SearchMode
from ...catalog.model_prototype import TemplateKind
from ...listing import format_listing
from ...operations import describe_prototype, expand_prototype, list_prototypes, search_prototypes
from ...resolver import resolve
from ..params import parameter_values, split_invocation
from ..services import prepare_context
from ..shared import CLIError, CLILogger, build_cli_logger, reported_errors, state_from
from ..typer_ext import create_typer

PREVIEW_TARGET: Final[str] = "preview"
DYNAMIC_FLAGS: Final[dict[str, bool]] = {"allow_extra_args": True, "ignore_unknown_options": True}

USE_HELP: Final[str] = """Expand a prototype and place it in the components directory.

The prototype is identified by a (possibly partial) PROTOTYPE-NAME, filled in
from parameter flags, and written to 'components/COMPONENT-NAME' with the
extension of the rendering TYPE (jsonnet by default). Its bound parameters are
recorded in 'components/params.json'.

PROTOTYPE-NAME need only contain enough of the end of a name to identify it
uniquely: 'simple-deployment' resolves to 'io.protoforge.pkg.simple-deployment',
while 'deployment' is ambiguous when several names end with it.

Example: protoforge prototype use simple-deployment nginx-depl --name=nginx --image=nginx
"""

prototype_app = create_typer(
    name="prototype",
    help="Instantiate, inspect, and search prototypes.",
    no_args_is_help=True,
)


def _logger_for(ctx: typer.Context) -> CLILogger:
    state = state_from(ctx)
    return build_cli_logger(emoji=state.emoji, debug=state.verbose)


def _kind_from(raw: str | None, default: TemplateKind) -> TemplateKind:
    return default if raw is None else TemplateKind.parse(raw)


@prototype_app.command("list")
def list_command(ctx: typer.Context) -> None:
    """List all known prototypes."""

    logger = _logger_for(ctx)
    with reported_errors(logger):
        context = prepare_context(state_from(ctx), logger=logger)
        logger.echo(format_listing(list_prototypes(context.index)), nl=False)


@prototype_app.command("describe")
def describe_command(
    ctx: typer.Context,
    query: Annotated[str, typer.Argument(metavar="PROTOTYPE-NAME", help="Full name or unique suffix.")],
) -> None:
    """Describe a prototype: its description, parameters and template types.

    PROTOTYPE-NAME need only contain enough of the end of a name to identify it
    uniquely among the known prototypes.
    """

    logger = _logger_for(ctx)
    with reported_errors(logger):
        context = prepare_context(state_from(ctx), logger=logger)
        logger.echo(describe_prototype(query, context.index).render())


@prototype_app.command("search")
def search_command(
    ctx: typer.Context,
    query: Annotated[str, typer.Argument(metavar="NAME-SUBSTRING", help="Text to look for in prototype names.")],
    mode: Annotated[
        SearchMode,
        typer.Option("--mode", case_sensitive=False, help="How the query is matched against names."),
    ] = SearchMode.SUBSTRING,
) -> None:
    """Search for prototypes whose names contain NAME-SUBSTRING."""

    logger = _logger_for(ctx)
    with reported_errors(logger):
        context = prepare_context(state_from(ctx), logger=logger)
        logger.echo(format_listing(search_prototypes(query, context.index, mode)), nl=False)


@prototype_app.command("preview", context_settings=DYNAMIC_FLAGS)
def preview_command(
    ctx: typer.Context,
    args: Annotated[
        list[str] | None,
        typer.Argument(metavar="PROTOTYPE-NAME [TYPE] [--PARAM=VALUE ...]", show_default=False),
    ] = None,
) -> None:
    """Expand a prototype and print the generated code to stdout.

    Parameters are filled in from flags named after the prototype's parameters,
    for example: protoforge prototype preview simple-deployment --name=nginx --image=nginx
    """

    logger = _logger_for(ctx)
    with reported_errors(logger):
        invocation = split_invocation(args or ())
        if not 1 <= len(invocation.positionals) <= 2:
            raise CLIError("Command 'prototype preview' takes a prototype name and an optional template type")
        context = prepare_context(state_from(ctx), logger=logger)
        query = invocation.positionals[0]
        kind = _kind_from(
            invocation.positionals[1] if len(invocation.positionals) == 2 else None,
            context.settings.default_kind,
        )
        spec = resolve(query, context.index)
        expansion = expand_prototype(spec, kind, parameter_values(spec, invocation.flags), PREVIEW_TARGET)
        logger.echo(expansion.text)


def use_command(
    ctx: typer.Context,
    args: Annotated[
        list[str] | None,
        typer.Argument(metavar="PROTOTYPE-NAME COMPONENT-NAME [TYPE] [--PARAM=VALUE ...]", show_default=False),
    ] = None,
) -> None:
    logger = _logger_for(ctx)
    with reported_errors(logger):
        invocation = split_invocation(args or ())
        positionals = invocation.positionals
        if len(positionals) < 2:
            raise CLIError("Command requires a prototype name and a component name")
        if len(positionals) > 3:
            raise CLIError("Command has too many arguments (takes a prototype name, a component name and a type)")
        context = prepare_context(state_from(ctx), logger=logger)
        query, component = positionals[0], positionals[1]
        kind = _kind_from(positionals[2] if len(positionals) == 3 else None, context.settings.default_kind)
        writer = context.component_writer()
        writer.component_path(component, kind)
        spec = resolve(query, context.index)
        expansion = expand_prototype(spec, kind, parameter_values(spec, invocation.flags), component)
        path = writer.create(component, expansion.text, expansion.param_values(), kind)
        logger.ok(f"Generated component '{component}' from {expansion.prototype.name} at {path}")


prototype_app.command("use", help=USE_HELP, context_settings=DYNAMIC_FLAGS)(use_command)


def register(app: typer.Typer) -> None:
    """Register the prototype command group and its ``generate`` alias on ``app``."""

    app.add_typer(prototype_app, name="prototype")
    app.command("generate", help=USE_HELP, context_settings=DYNAMIC_FLAGS)(use_command)


__all__ = ["prototype_app", "register"]
