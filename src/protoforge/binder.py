# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Bind caller-supplied values to a prototype's declared parameters."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from .catalog.model_param import ParamSchema
from .catalog.model_prototype import PrototypeSpecification
from .errors import DuplicateParameterError, MissingRequiredParametersError


class BoundParameters(Mapping[str, str]):
    """Immutable mapping of parameter names to values quoted for their schema."""

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, str]) -> None:
        self._values = MappingProxyType(dict(values))

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"BoundParameters({dict(self._values)!r})"

    def to_dict(self) -> dict[str, str]:
        """Return a mutable copy of the bound values."""

        return dict(self._values)


def _supplied(values: Mapping[str, str], param: ParamSchema) -> str | None:
    value = values.get(param.name)
    return value if value else None


def bind(spec: PrototypeSpecification, supplied: Mapping[str, str]) -> BoundParameters:
    """Validate ``supplied`` against ``spec`` and quote every value.

    Required parameters are checked first so that every missing one is
    reported together. An empty string counts as not supplied. Optional
    parameters fall back to their declared default, which is quoted exactly
    like a supplied value.

    Args:
        spec: Prototype whose parameter schema drives binding.
        supplied: Raw values keyed by parameter name.

    Returns:
        BoundParameters: One quoted value per declared parameter.

    Raises:
        MissingRequiredParametersError: If any required parameter is absent.
        DuplicateParameterError: If ``spec`` declares a parameter name twice.
        InvalidParameterValueError: If a value does not fit its declared type.
    """

    values: dict[str, str] = {}
    missing: list[ParamSchema] = []
    for param in spec.required_params:
        raw = _supplied(supplied, param)
        if raw is None:
            missing.append(param)
            continue
        if param.name in values:
            raise DuplicateParameterError(spec.name, param.name)
        values[param.name] = param.quote(raw)

    if missing:
        raise MissingRequiredParametersError(spec.name, missing)

    for param in spec.optional_params:
        if param.name in values:
            raise DuplicateParameterError(spec.name, param.name)
        raw = _supplied(supplied, param)
        values[param.name] = param.quote(raw if raw is not None else param.default or "")

    return BoundParameters(values)


__all__ = ["BoundParameters", "bind"]
