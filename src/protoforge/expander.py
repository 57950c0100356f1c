# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Assemble template text for a prototype and hand it to the matching evaluator."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Final, Protocol, runtime_checkable

from .catalog.model_prototype import PrototypeSpecification, TemplateKind
from .evaluators.jsonnet import ParamImportEvaluator
from .evaluators.snippet import SnippetEvaluator as DefaultSnippetEvaluator

LOGGER = logging.getLogger(__name__)

PARAMS_EXT_VAR: Final[str] = "__protoforge/params"
_IDENTIFIER_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


@runtime_checkable
class StructuredEvaluator(Protocol):
    """Evaluate structured template source into output text."""

    def evaluate(self, source: str, entity_name: str) -> str:
        """Return output text for ``source`` or raise the evaluator's own error."""


@runtime_checkable
class SnippetTemplate(Protocol):
    """Parsed snippet that can be filled with bound parameter values."""

    def evaluate(self, values: Mapping[str, str]) -> str:
        """Return the snippet text with placeholders substituted."""


@runtime_checkable
class SnippetEvaluator(Protocol):
    """Parse plain-text snippet source."""

    def parse(self, source: str) -> SnippetTemplate:
        """Return an evaluable snippet for ``source``."""


def is_identifier(name: str) -> bool:
    """Return ``True`` when ``name`` is a bare ASCII identifier."""

    return _IDENTIFIER_PATTERN.fullmatch(name) is not None


def params_prelude(target_name: str) -> str:
    """Return the line binding ``params`` to the component's parameter object.

    Args:
        target_name: Component the expanded text is generated for.

    Returns:
        str: Structured-template statement declaring the local ``params``.
    """

    if is_identifier(target_name):
        accessor = f"components.{target_name}"
    else:
        escaped = target_name.replace("\\", "\\\\").replace('"', '\\"')
        accessor = f'components["{escaped}"]'
    return f'local params = std.extVar("{PARAMS_EXT_VAR}").{accessor};'


@dataclass(slots=True)
class TemplateExpander:
    """Expand prototype bodies through injected structured and snippet evaluators."""

    structured: StructuredEvaluator = field(default_factory=ParamImportEvaluator)
    snippet: SnippetEvaluator = field(default_factory=DefaultSnippetEvaluator)

    def expand(
        self,
        spec: PrototypeSpecification,
        kind: TemplateKind,
        bound: Mapping[str, str],
        target_name: str,
    ) -> str:
        """Return the output text for ``spec`` rendered as ``kind``.

        Args:
            spec: Resolved prototype specification.
            kind: Requested rendering kind.
            bound: Quoted parameter values produced by :func:`protoforge.binder.bind`.
            target_name: Component the output is generated for.

        Returns:
            str: Evaluated output text.

        Raises:
            UnsupportedRenderingKindError: If ``spec`` has no body for ``kind``.
        """

        lines = spec.body(kind)
        if kind.is_structured:
            source = "\n".join((params_prelude(target_name), *lines))
            LOGGER.debug("evaluating structured template %s for %s", spec.name, target_name)
            return self.structured.evaluate(source, target_name)
        LOGGER.debug("evaluating %s snippet %s", kind, spec.name)
        return self.snippet.parse("\n".join(lines)).evaluate(bound)


def expand(
    spec: PrototypeSpecification,
    kind: TemplateKind,
    bound: Mapping[str, str],
    target_name: str,
) -> str:
    """Expand ``spec`` with the default evaluators.

    Args:
        spec: Resolved prototype specification.
        kind: Requested rendering kind.
        bound: Quoted parameter values.
        target_name: Component the output is generated for.

    Returns:
        str: Evaluated output text.
    """

    return TemplateExpander().expand(spec, kind, bound, target_name)


__all__ = [
    "PARAMS_EXT_VAR",
    "SnippetEvaluator",
    "SnippetTemplate",
    "StructuredEvaluator",
    "TemplateExpander",
    "expand",
    "is_identifier",
    "params_prelude",
]
