# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Operations composed from the catalog, resolver, binder and expander.

These are the entry points used by the command layer. Each takes the catalog
index explicitly and raises the typed errors from :mod:`protoforge.errors`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from .binder import BoundParameters, bind
from .catalog.index import CatalogIndex, SearchMode
from .catalog.model_param import ParamSchema
from .catalog.model_prototype import PrototypeSpecification, TemplateKind
from .catalog.types import JSONValue
from .errors import EmptyCatalogError, NoResultsError
from .expander import TemplateExpander
from .listing import format_listing, format_params
from .resolver import resolve

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PrototypeDescription:
    """Details shown when describing a single prototype."""

    name: str
    description: str
    required_params: tuple[ParamSchema, ...]
    optional_params: tuple[ParamSchema, ...]
    available_kinds: tuple[TemplateKind, ...]

    def render(self) -> str:
        """Return the description as sectioned plain text."""

        kinds = ", ".join(str(kind) for kind in self.available_kinds)
        sections = (
            ("PROTOTYPE NAME:", self.name),
            ("DESCRIPTION:", self.description),
            ("REQUIRED PARAMETERS:", format_params(self.required_params)),
            ("OPTIONAL PARAMETERS:", format_params(self.optional_params)),
            ("TEMPLATE TYPES AVAILABLE:", f"  {kinds}"),
        )
        return "\n\n".join(f"{title}\n{body}" for title, body in sections)


@dataclass(frozen=True, slots=True)
class Expansion:
    """Result of resolving, binding and expanding a prototype."""

    prototype: PrototypeSpecification
    kind: TemplateKind
    params: BoundParameters
    text: str

    def param_values(self) -> dict[str, JSONValue]:
        """Return the bound parameters decoded to JSON values, for persisting."""

        return {param.name: param.json_value(self.params[param.name]) for param in self.prototype.params}


def list_prototypes(index: CatalogIndex) -> tuple[PrototypeSpecification, ...]:
    """Return every prototype in ``index``.

    Raises:
        EmptyCatalogError: If the catalog holds no prototypes.
    """

    specs = index.list()
    if not specs:
        raise EmptyCatalogError()
    return specs


def describe_prototype(query: str, index: CatalogIndex) -> PrototypeDescription:
    """Resolve ``query`` and return the prototype's details.

    Raises:
        ResolutionError: If ``query`` does not identify exactly one prototype.
    """

    spec = resolve(query, index)
    return PrototypeDescription(
        name=spec.name,
        description=spec.description,
        required_params=spec.required_params,
        optional_params=spec.optional_params,
        available_kinds=spec.available_kinds,
    )


def search_prototypes(
    query: str,
    index: CatalogIndex,
    mode: SearchMode = SearchMode.SUBSTRING,
) -> tuple[PrototypeSpecification, ...]:
    """Return prototypes whose names match ``query`` under ``mode``.

    Raises:
        NoResultsError: If nothing matches.
    """

    results = index.search(query, mode)
    if not results:
        raise NoResultsError(query)
    return results


def resolve_and_expand(
    query: str,
    kind: TemplateKind,
    supplied: Mapping[str, str],
    target_name: str,
    index: CatalogIndex,
    *,
    expander: TemplateExpander | None = None,
) -> Expansion:
    """Resolve ``query``, bind ``supplied`` and expand the prototype as ``kind``.

    Args:
        query: Full or trailing part of a prototype name.
        kind: Rendering kind to expand into.
        supplied: Raw parameter values keyed by parameter name.
        target_name: Component the output is generated for.
        index: Catalog to resolve against.
        expander: Optional expander carrying custom evaluators.

    Returns:
        Expansion: The resolved prototype, bound values and output text.
    """

    return expand_prototype(resolve(query, index), kind, supplied, target_name, expander=expander)


def expand_prototype(
    spec: PrototypeSpecification,
    kind: TemplateKind,
    supplied: Mapping[str, str],
    target_name: str,
    *,
    expander: TemplateExpander | None = None,
) -> Expansion:
    """Bind ``supplied`` to an already resolved ``spec`` and expand it as ``kind``."""

    params = bind(spec, supplied)
    text = (expander or TemplateExpander()).expand(spec, kind, params, target_name)
    LOGGER.debug("expanded %s as %s for %s", spec.name, kind, target_name)
    return Expansion(prototype=spec, kind=kind, params=params, text=text)


__all__ = [
    "Expansion",
    "PrototypeDescription",
    "describe_prototype",
    "expand_prototype",
    "format_listing",
    "format_params",
    "list_prototypes",
    "resolve_and_expand",
    "search_prototypes",
]
