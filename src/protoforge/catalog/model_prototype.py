# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Prototype specification models loaded from the catalog."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType

from ..errors import UnknownRenderingKindError, UnsupportedRenderingKindError
from .errors import CatalogIntegrityError
from .model_param import ParamSchema
from .types import PROTOTYPE_API_VERSION, JSONValue
from .utils import expect_mapping, expect_string, mapping_array, optional_string, string_array


class TemplateKind(str, Enum):
    """Enumerate the rendering kinds a prototype body may target."""

    JSONNET = "jsonnet"
    JSON = "json"
    YAML = "yaml"

    def __str__(self) -> str:
        return self.value

    @property
    def is_structured(self) -> bool:
        """Return ``True`` when bodies of this kind go through the structured evaluator."""

        return self is TemplateKind.JSONNET

    @property
    def extension(self) -> str:
        """Return the file extension used when persisting expanded output."""

        return f".{self.value}"

    @classmethod
    def parse(cls, raw: str) -> TemplateKind:
        """Return the kind named by ``raw``.

        Args:
            raw: Rendering kind as typed by a user.

        Returns:
            TemplateKind: Matching rendering kind.

        Raises:
            UnknownRenderingKindError: If ``raw`` does not name a rendering kind.
        """

        try:
            return cls(raw)
        except ValueError as exc:
            raise UnknownRenderingKindError(raw, [kind.value for kind in cls]) from exc


@dataclass(frozen=True, slots=True)
class TemplateBodies:
    """Template bodies keyed by rendering kind, each an ordered tuple of lines."""

    _bodies: Mapping[TemplateKind, tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        frozen = {kind: tuple(self._bodies[kind]) for kind in TemplateKind if self._bodies.get(kind)}
        object.__setattr__(self, "_bodies", MappingProxyType(frozen))

    @classmethod
    def of(cls, **bodies: Iterable[str]) -> TemplateBodies:
        """Build bodies from keyword arguments named after rendering kinds."""

        return cls({TemplateKind(name): tuple(lines) for name, lines in bodies.items()})

    @property
    def kinds(self) -> tuple[TemplateKind, ...]:
        """Return the rendering kinds that carry a body, in canonical order."""

        return tuple(self._bodies)

    def get(self, kind: TemplateKind) -> tuple[str, ...] | None:
        """Return the lines for ``kind`` or ``None`` when absent."""

        return self._bodies.get(kind)


@dataclass(frozen=True, slots=True)
class PrototypeSpecification:
    """Named, parameterised template that expands into configuration or code."""

    name: str
    description: str = ""
    params: tuple[ParamSchema, ...] = ()
    templates: TemplateBodies = field(default_factory=TemplateBodies)
    short_description: str = ""
    api_version: str = PROTOTYPE_API_VERSION
    source: Path | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", tuple(self.params))

    @property
    def required_params(self) -> tuple[ParamSchema, ...]:
        """Return parameters without a default, in declaration order."""

        return tuple(param for param in self.params if param.is_required)

    @property
    def optional_params(self) -> tuple[ParamSchema, ...]:
        """Return parameters declaring a default, in declaration order."""

        return tuple(param for param in self.params if not param.is_required)

    @property
    def available_kinds(self) -> tuple[TemplateKind, ...]:
        """Return the rendering kinds this prototype can expand into."""

        return self.templates.kinds

    @property
    def summary(self) -> str:
        """Return the one-line description shown in listings."""

        if self.short_description:
            return self.short_description
        first_line = self.description.strip().splitlines()
        return first_line[0] if first_line else ""

    def body(self, kind: TemplateKind) -> tuple[str, ...]:
        """Return the template lines for ``kind``.

        Args:
            kind: Requested rendering kind.

        Returns:
            tuple[str, ...]: Ordered template lines.

        Raises:
            UnsupportedRenderingKindError: If no body exists for ``kind``.
        """

        lines = self.templates.get(kind)
        if lines is None:
            raise UnsupportedRenderingKindError(self.name, kind, self.available_kinds)
        return lines

    @staticmethod
    def from_mapping(data: Mapping[str, JSONValue], *, source: Path | None = None) -> PrototypeSpecification:
        """Create a prototype specification from a validated catalog document.

        Args:
            data: Mapping describing the prototype.
            source: Path of the originating document, when loaded from disk.

        Returns:
            PrototypeSpecification: Frozen prototype specification.

        Raises:
            CatalogIntegrityError: If the mapping is structurally invalid.
        """

        context = str(source) if source is not None else "<prototype>"
        name = expect_string(data.get("name"), key="name", context=context)
        params = tuple(
            ParamSchema.from_mapping(entry, context=f"{context}.params[{index}]")
            for index, entry in enumerate(mapping_array(data.get("params"), key="params", context=context))
        )
        templates_data = expect_mapping(data.get("templates"), key="templates", context=context)
        bodies: dict[TemplateKind, tuple[str, ...]] = {}
        for raw_kind, raw_lines in templates_data.items():
            try:
                kind = TemplateKind(raw_kind)
            except ValueError as exc:
                raise CatalogIntegrityError(f"{context}: unknown template type '{raw_kind}'") from exc
            bodies[kind] = string_array(raw_lines, key=f"templates.{raw_kind}", context=context)
        return PrototypeSpecification(
            name=name,
            description=optional_string(data.get("description"), key="description", context=context) or "",
            short_description=optional_string(data.get("shortDescription"), key="shortDescription", context=context)
            or "",
            api_version=optional_string(data.get("apiVersion"), key="apiVersion", context=context)
            or PROTOTYPE_API_VERSION,
            params=params,
            templates=TemplateBodies(bodies),
            source=source,
        )


__all__ = ["PrototypeSpecification", "TemplateBodies", "TemplateKind"]
