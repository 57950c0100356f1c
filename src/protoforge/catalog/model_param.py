# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Parameter schema models and value quoting for prototype templates."""

from __future__ import annotations

import json
import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Final

from ..errors import InvalidParameterValueError
from .errors import CatalogIntegrityError
from .types import JSONValue
from .utils import expect_string, optional_string

_NUMBER_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$")
_INTEGER_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[+-]?\d+$")


class ParamType(str, Enum):
    """Enumerate the value types a prototype parameter may declare."""

    NUMBER = "number"
    STRING = "string"
    NUMBER_OR_STRING = "numberOrString"
    OBJECT = "object"
    ARRAY = "array"

    def __str__(self) -> str:
        return self.value


def _is_number(value: str) -> bool:
    return _NUMBER_PATTERN.fullmatch(value) is not None and math.isfinite(float(value))


def _number_value(literal: str) -> int | float:
    # Literals such as ".5", "1." and "+1" are valid here but not in JSON.
    if _INTEGER_PATTERN.fullmatch(literal):
        return int(literal)
    return float(literal)


def _quote_string(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


@dataclass(frozen=True, slots=True)
class ParamSchema:
    """Declarative description of a single prototype parameter."""

    name: str
    description: str = ""
    default: str | None = None
    param_type: ParamType = ParamType.STRING
    alias: str | None = None

    @property
    def is_required(self) -> bool:
        """Return ``True`` when the parameter declares no default value."""

        return self.default is None

    @property
    def flag_names(self) -> tuple[str, ...]:
        """Return the names accepted for this parameter on the command line."""

        if self.alias and self.alias != self.name:
            return (self.name, self.alias)
        return (self.name,)

    def quote(self, value: str) -> str:
        """Return ``value`` rendered for direct embedding into a template body.

        Args:
            value: Raw value supplied by the caller or declared as a default.

        Returns:
            str: Value in the literal syntax matching :attr:`param_type`.

        Raises:
            InvalidParameterValueError: If ``value`` cannot represent the declared type.
        """

        if self.param_type is ParamType.NUMBER:
            if not _is_number(value):
                raise InvalidParameterValueError(self.name, value, self.param_type, reason="not a number")
            return value
        if self.param_type is ParamType.STRING:
            return _quote_string(value)
        if self.param_type is ParamType.NUMBER_OR_STRING:
            return value if _is_number(value) else _quote_string(value)
        return self._validate_structured(value)

    def json_value(self, quoted: str) -> JSONValue:
        """Return the JSON value of ``quoted``, a literal produced by :meth:`quote`.

        Number literals are normalised to JSON numbers; strings, objects and
        arrays are decoded, so ``'"nginx"'`` becomes ``"nginx"``.
        """

        if _is_number(quoted):
            return _number_value(quoted)
        return json.loads(quoted)

    def _validate_structured(self, value: str) -> str:
        expected = dict if self.param_type is ParamType.OBJECT else list
        try:
            parsed = json.loads(value)
        except json.JSONDecodeError as exc:
            raise InvalidParameterValueError(
                self.name,
                value,
                self.param_type,
                reason=f"invalid {self.param_type} literal ({exc.msg})",
            ) from exc
        if not isinstance(parsed, expected):
            raise InvalidParameterValueError(self.name, value, self.param_type)
        return value

    @staticmethod
    def from_mapping(data: Mapping[str, JSONValue], *, context: str) -> ParamSchema:
        """Create a parameter schema from catalog JSON data.

        Args:
            data: Mapping describing the parameter.
            context: Human-readable context used in error messages.

        Returns:
            ParamSchema: Frozen parameter schema.
        """

        name = expect_string(data.get("name"), key="name", context=context)
        type_value = expect_string(data.get("type"), key="type", context=context)
        try:
            param_type = ParamType(type_value)
        except ValueError as exc:
            raise CatalogIntegrityError(f"{context}: unknown parameter type '{type_value}'") from exc
        return ParamSchema(
            name=name,
            description=optional_string(data.get("description"), key="description", context=context) or "",
            default=optional_string(data.get("default"), key="default", context=context),
            param_type=param_type,
            alias=optional_string(data.get("alias"), key="alias", context=context),
        )


__all__ = ["ParamSchema", "ParamType"]
