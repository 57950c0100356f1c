# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Structured-template evaluation for Jsonnet prototype bodies.

Prototype bodies refer to their parameters with ``import 'param://<name>'``
expressions. Evaluation rewrites each of them into a lookup on the ``params``
local declared by the expander prelude and checks that brackets balance, so
the emitted component is ready to be evaluated alongside the project's
parameter file. Occurrences inside strings and comments are left untouched.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Final

from ..errors import TemplateEvaluationError

PARAM_IMPORT_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"""import\s*(?P<quote>['"])param://(?P<name>[^'"\s]+)(?P=quote)""",
)
_IDENTIFIER: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
_CLOSERS: Final[dict[str, str]] = {")": "(", "]": "[", "}": "{"}
_TEXT_BLOCK: Final[str] = "|||"


def param_reference(name: str) -> str:
    """Return the expression reading parameter ``name`` from ``params``."""

    if _IDENTIFIER.fullmatch(name):
        return f"params.{name}"
    escaped = name.replace("\\", "\\\\").replace('"', '\\"')
    return f'params["{escaped}"]'


@dataclass(slots=True)
class _Scanner:
    """Single pass over Jsonnet source tracking strings, comments and brackets."""

    source: str
    entity_name: str
    position: int = 0
    output: list[str] = field(default_factory=list)
    brackets: list[tuple[str, int]] = field(default_factory=list)

    def error(self, message: str, offset: int | None = None) -> TemplateEvaluationError:
        where = self.position if offset is None else offset
        line = self.source.count("\n", 0, where) + 1
        return TemplateEvaluationError(f"{message} (line {line})", source_name=self.entity_name)

    def run(self) -> str:
        source = self.source
        while self.position < len(source):
            char = source[self.position]
            if char in "'\"":
                self._copy_string(char, verbatim=False)
            elif char == "@" and source[self.position + 1 : self.position + 2] in ("'", '"'):
                self._emit(1)
                self._copy_string(source[self.position], verbatim=True)
            elif source.startswith(_TEXT_BLOCK, self.position):
                self._copy_until(_TEXT_BLOCK, skip=len(_TEXT_BLOCK), what="text block")
            elif char == "#" or source.startswith("//", self.position):
                end = source.find("\n", self.position)
                self._emit((len(source) if end == -1 else end) - self.position)
            elif source.startswith("/*", self.position):
                self._copy_until("*/", skip=2, what="block comment")
            elif char == "i" and self._at_word_start() and self._rewrite_import():
                continue
            else:
                self._track_bracket(char)
                self._emit(1)
        if self.brackets:
            opener, offset = self.brackets[-1]
            raise self.error(f"unclosed '{opener}'", offset)
        return "".join(self.output)

    def _emit(self, length: int) -> None:
        self.output.append(self.source[self.position : self.position + length])
        self.position += length

    def _at_word_start(self) -> bool:
        if self.position == 0:
            return True
        previous = self.source[self.position - 1]
        return not (previous.isalnum() or previous in "_$")

    def _rewrite_import(self) -> bool:
        match = PARAM_IMPORT_PATTERN.match(self.source, self.position)
        if match is None:
            return False
        self.output.append(param_reference(match.group("name")))
        self.position = match.end()
        return True

    def _track_bracket(self, char: str) -> None:
        if char in "([{":
            self.brackets.append((char, self.position))
        elif char in _CLOSERS:
            if not self.brackets or self.brackets[-1][0] != _CLOSERS[char]:
                raise self.error(f"unexpected '{char}'")
            self.brackets.pop()

    def _copy_string(self, quote: str, *, verbatim: bool) -> None:
        start = self.position
        index = start + 1
        source = self.source
        while index < len(source):
            char = source[index]
            if verbatim and char == quote and source[index + 1 : index + 2] == quote:
                index += 2
                continue
            if not verbatim and char == "\\":
                index += 2
                continue
            if char == quote:
                self._emit(index + 1 - start)
                return
            index += 1
        raise self.error("unterminated string", start)

    def _copy_until(self, terminator: str, *, skip: int, what: str) -> None:
        start = self.position
        end = self.source.find(terminator, start + skip)
        if end == -1:
            raise self.error(f"unterminated {what}", start)
        self._emit(end + len(terminator) - start)


class ParamImportEvaluator:
    """Rewrite ``param://`` imports into ``params`` lookups."""

    def evaluate(self, source: str, entity_name: str) -> str:
        """Return ``source`` with every parameter import resolved.

        Args:
            source: Jsonnet text including the ``params`` prelude.
            entity_name: Component name used in error messages.

        Returns:
            str: Rewritten Jsonnet text.

        Raises:
            TemplateEvaluationError: If ``source`` is empty, has unbalanced
                brackets, or an unterminated string, comment or text block.
        """

        if not source.strip():
            raise TemplateEvaluationError("template body is empty", source_name=entity_name)
        return _Scanner(source=source, entity_name=entity_name).run()


__all__ = ["PARAM_IMPORT_PATTERN", "ParamImportEvaluator", "param_reference"]
