# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Plain-text snippet evaluation with ``$name`` and ``${1:name}`` placeholders."""

from __future__ import annotations

import string
from collections.abc import Iterator, Mapping
from dataclasses import dataclass

from ..errors import TemplateEvaluationError


class _SnippetPattern(string.Template):
    """``string.Template`` accepting tab-stop prefixes and dashes inside braces."""

    braceidpattern = r"(?a:(?:\d+:)?[_a-z][_a-z0-9-]*)"


def _placeholder_name(key: str) -> str:
    return key.split(":", 1)[-1]


class _PlaceholderValues(Mapping[str, str]):
    """Expose bound values under both plain and tab-stop placeholder keys."""

    def __init__(self, values: Mapping[str, str]) -> None:
        self._values = values

    def __getitem__(self, key: str) -> str:
        return self._values[_placeholder_name(key)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)


@dataclass(frozen=True, slots=True)
class SnippetTemplate:
    """Parsed snippet ready to be filled with parameter values."""

    source: str
    _template: _SnippetPattern

    @property
    def placeholders(self) -> tuple[str, ...]:
        """Return the distinct placeholder names in order of first use."""

        names: dict[str, None] = {}
        for key in self._template.get_identifiers():
            names.setdefault(_placeholder_name(key), None)
        return tuple(names)

    def evaluate(self, values: Mapping[str, str]) -> str:
        """Return the snippet with every placeholder replaced.

        Args:
            values: Parameter values keyed by placeholder name.

        Returns:
            str: Substituted text.

        Raises:
            TemplateEvaluationError: If a placeholder has no value.
        """

        try:
            return self._template.substitute(_PlaceholderValues(values))
        except KeyError as exc:
            name = _placeholder_name(str(exc.args[0]))
            raise TemplateEvaluationError(f"no value supplied for placeholder '{name}'") from exc


class SnippetEvaluator:
    """Parse snippet source into :class:`SnippetTemplate` objects."""

    def parse(self, source: str) -> SnippetTemplate:
        """Return an evaluable snippet for ``source``.

        Raises:
            TemplateEvaluationError: If ``source`` contains a malformed placeholder.
        """

        template = _SnippetPattern(source)
        if not template.is_valid():
            for match in template.pattern.finditer(source):
                if match.group("invalid") is not None:
                    offset = match.start()
                    line = source.count("\n", 0, offset) + 1
                    column = offset - (source.rfind("\n", 0, offset) + 1) + 1
                    raise TemplateEvaluationError(f"malformed placeholder at line {line}, column {column}")
        return SnippetTemplate(source=source, _template=template)


__all__ = ["SnippetEvaluator", "SnippetTemplate"]
