# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Typed failures raised while resolving, binding and expanding prototypes.

Every error carries the structured data needed to act on it (candidate
names, missing parameters, available rendering kinds) in addition to a
human-readable message, so callers can render their own diagnostics.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .catalog.model_param import ParamSchema, ParamType
    from .catalog.model_prototype import TemplateKind


class PrototypeError(RuntimeError):
    """Base class for every prototype resolution, binding and expansion failure."""


class ResolutionError(PrototypeError):
    """Raised when a query does not resolve to exactly one prototype."""

    def __init__(self, message: str, *, query: str, candidates: Iterable[str] = ()) -> None:
        super().__init__(message)
        self.query = query
        self.candidates: tuple[str, ...] = tuple(candidates)


class AmbiguousMatchError(ResolutionError):
    """Several prototype names end with the query."""

    def __init__(self, query: str, candidates: Iterable[str]) -> None:
        names = tuple(candidates)
        listing = "\n".join(names)
        super().__init__(f"Ambiguous match for '{query}':\n{listing}", query=query, candidates=names)


class NoExactMatchError(ResolutionError):
    """No name ends with the query, but some names contain it."""

    def __init__(self, query: str, candidates: Iterable[str]) -> None:
        names = tuple(candidates)
        listing = "\n".join(names)
        super().__init__(
            f"No prototype names matched '{query}'; a list of partial matches:\n{listing}",
            query=query,
            candidates=names,
        )


class NoMatchError(ResolutionError):
    """No prototype name ends with or contains the query."""

    def __init__(self, query: str) -> None:
        super().__init__(f"No prototype names matched '{query}'", query=query)


class MissingRequiredParametersError(PrototypeError):
    """One or more required parameters were not supplied."""

    def __init__(self, prototype: str, missing: Iterable[ParamSchema]) -> None:
        self.prototype = prototype
        self.missing: tuple[ParamSchema, ...] = tuple(missing)
        listing = "\n".join(f"  --{param.name}  {param.description}".rstrip() for param in self.missing)
        super().__init__(
            f"Failed to instantiate prototype '{prototype}'. "
            f"The following required parameters are missing:\n{listing}",
        )

    @property
    def missing_names(self) -> tuple[str, ...]:
        """Return the names of the missing parameters in declaration order."""

        return tuple(param.name for param in self.missing)


class DuplicateParameterError(PrototypeError):
    """A prototype declares the same parameter name more than once."""

    def __init__(self, prototype: str, parameter: str) -> None:
        super().__init__(f"Prototype '{prototype}' has multiple parameters with name '{parameter}'")
        self.prototype = prototype
        self.parameter = parameter


class InvalidParameterValueError(PrototypeError):
    """A value cannot be represented for the parameter's declared type."""

    def __init__(self, parameter: str, value: str, param_type: ParamType, *, reason: str | None = None) -> None:
        detail = reason or f"expected a value of type '{param_type}'"
        super().__init__(f"Could not convert parameter '{parameter}' (value {value!r}): {detail}")
        self.parameter = parameter
        self.value = value
        self.param_type = param_type


class UnsupportedRenderingKindError(PrototypeError):
    """The prototype has no template body for the requested rendering kind."""

    def __init__(self, prototype: str, kind: TemplateKind, available: Iterable[TemplateKind]) -> None:
        self.prototype = prototype
        self.kind = kind
        self.available: tuple[TemplateKind, ...] = tuple(available)
        kinds = ", ".join(str(item) for item in self.available) or "none"
        super().__init__(
            f"Prototype '{prototype}' does not have a template for the type '{kind}'. Available types: {kinds}",
        )


class UnknownRenderingKindError(PrototypeError):
    """A rendering kind string does not name any known rendering kind."""

    def __init__(self, value: str, choices: Iterable[str]) -> None:
        super().__init__(f"Unrecognized template type '{value}'; expected one of: {', '.join(choices)}")
        self.value = value


class EmptyCatalogError(PrototypeError):
    """The catalog holds no prototypes at all."""

    def __init__(self) -> None:
        super().__init__("No prototypes found")


class NoResultsError(PrototypeError):
    """A catalog search produced no hits."""

    def __init__(self, query: str) -> None:
        super().__init__(f"Failed to find any search results for query '{query}'")
        self.query = query


class TemplateEvaluationError(PrototypeError):
    """A template evaluator rejected its input."""

    def __init__(self, message: str, *, source_name: str | None = None) -> None:
        prefix = f"{source_name}: " if source_name else ""
        super().__init__(f"{prefix}{message}")
        self.source_name = source_name


__all__ = [
    "AmbiguousMatchError",
    "DuplicateParameterError",
    "EmptyCatalogError",
    "InvalidParameterValueError",
    "MissingRequiredParametersError",
    "NoExactMatchError",
    "NoMatchError",
    "NoResultsError",
    "PrototypeError",
    "ResolutionError",
    "TemplateEvaluationError",
    "UnknownRenderingKindError",
    "UnsupportedRenderingKindError",
]
