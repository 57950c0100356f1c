# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Parse prototype parameter flags that are only known after resolution."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ..catalog.model_prototype import PrototypeSpecification
from .shared import CLIError


@dataclass(frozen=True, slots=True)
class Invocation:
    """Positional arguments and ``--flag`` values split from raw tokens."""

    positionals: tuple[str, ...]
    flags: tuple[tuple[str, str], ...]


def split_invocation(tokens: Sequence[str]) -> Invocation:
    """Split ``tokens`` into positionals and ``--name=value`` / ``--name value`` flags.

    Every flag takes a value. A bare ``--`` ends flag parsing.

    Raises:
        CLIError: If a flag lacks a value or a short flag is used.
    """

    positionals: list[str] = []
    flags: list[tuple[str, str]] = []
    index = 0
    while index < len(tokens):
        token = tokens[index]
        index += 1
        if token == "--":
            positionals.extend(tokens[index:])
            break
        if token.startswith("--"):
            name, sep, value = token[2:].partition("=")
            if not name:
                raise CLIError(f"Malformed flag '{token}'")
            if not sep:
                if index >= len(tokens):
                    raise CLIError(f"Flag '--{name}' needs an argument")
                value = tokens[index]
                index += 1
            flags.append((name, value))
        elif token.startswith("-") and token != "-":
            raise CLIError(f"Unknown shorthand flag '{token}'; parameters use the '--name=value' form")
        else:
            positionals.append(token)
    return Invocation(positionals=tuple(positionals), flags=tuple(flags))


def parameter_values(spec: PrototypeSpecification, flags: Sequence[tuple[str, str]]) -> dict[str, str]:
    """Map parsed flags to ``spec``'s parameter names, honouring aliases.

    Args:
        spec: Resolved prototype whose parameters define the accepted flags.
        flags: ``(name, value)`` pairs in command-line order.

    Returns:
        dict[str, str]: Raw values keyed by parameter name.

    Raises:
        CLIError: If a flag is unknown or a parameter is given more than once.
    """

    lookup: dict[str, str] = {}
    for param in spec.params:
        for flag_name in param.flag_names:
            lookup.setdefault(flag_name, param.name)

    values: dict[str, str] = {}
    for flag_name, value in flags:
        param_name = lookup.get(flag_name)
        if param_name is None:
            raise CLIError(f"Unknown flag '--{flag_name}' for prototype '{spec.name}'")
        if param_name in values:
            raise CLIError(f"Parameter '{param_name}' was supplied more than once")
        values[param_name] = value
    return values


__all__ = ["Invocation", "parameter_values", "split_invocation"]
