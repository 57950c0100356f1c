# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Plain-text listings of prototypes and their parameters."""

from __future__ import annotations

from collections.abc import Sequence

from .catalog.model_param import ParamSchema
from .catalog.model_prototype import PrototypeSpecification

NONE_MARKER = "[none]"


def param_flag(param: ParamSchema) -> str:
    """Return the command-line flag spelling for ``param``, including its alias."""

    return "/".join(f"--{name}" for name in param.flag_names)


def param_info(param: ParamSchema) -> str:
    """Return the bracketed default/type annotation shown after a parameter."""

    if param.default is not None:
        return f"[default: {param.default}, type: {param.param_type}]"
    return f"[type: {param.param_type}]"


def format_params(params: Sequence[ParamSchema], prefix: str = "  ") -> str:
    """Return an aligned listing of ``params`` with one parameter per line.

    Args:
        params: Parameters to describe.
        prefix: Text prepended to every line.

    Returns:
        str: Listing, or ``[none]`` when ``params`` is empty.
    """

    if not params:
        return f"{prefix}{NONE_MARKER}"
    flags = [param_flag(param) for param in params]
    width = max(len(flag) for flag in flags)
    lines = []
    for flag, param in zip(flags, params):
        description = f"{param.description} " if param.description else ""
        lines.append(f"{prefix}{flag.ljust(width)} {description}{param_info(param)}")
    return "\n".join(lines)


def format_listing(specs: Sequence[PrototypeSpecification]) -> str:
    """Return a two-column NAME/DESCRIPTION table of ``specs``."""

    rows = [("NAME", "DESCRIPTION"), ("====", "===========")]
    rows.extend((spec.name, spec.summary) for spec in specs)
    width = max(len(name) for name, _ in rows)
    return "\n".join(f"{name.ljust(width)}  {summary}".rstrip() for name, summary in rows) + "\n"


__all__ = ["NONE_MARKER", "format_listing", "format_params", "param_flag", "param_info"]
