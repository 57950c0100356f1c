# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""JSON-schema validation of prototype documents."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from jsonschema import Draft202012Validator
from jsonschema.exceptions import best_match

from .errors import CatalogValidationError
from .io import load_schema
from .types import PROTOTYPE_SCHEMA_FILENAME, JSONValue

DEFAULT_SCHEMA_ROOT: Final[Path] = Path(__file__).resolve().parent / "schema"


def _location(path: Iterable[str | int]) -> str:
    parts = [f"[{part}]" if isinstance(part, int) else f".{part}" for part in path]
    return "".join(parts).lstrip(".") or "<root>"


@dataclass(slots=True)
class SchemaRepository:
    """Validator for prototype documents, loaded from a schema directory."""

    schema_root: Path
    prototype_validator: Draft202012Validator

    @classmethod
    def load(cls, *, schema_root: Path | None = None) -> SchemaRepository:
        """Load ``prototype.schema.json`` from ``schema_root``.

        Args:
            schema_root: Directory holding the schema. Defaults to the schema
                shipped with the package.

        Returns:
            SchemaRepository: Repository bound to a Draft 2020-12 validator.
        """

        resolved_root = schema_root or DEFAULT_SCHEMA_ROOT
        schema = load_schema(resolved_root / PROTOTYPE_SCHEMA_FILENAME)
        Draft202012Validator.check_schema(schema)
        return cls(schema_root=resolved_root, prototype_validator=Draft202012Validator(schema))

    def validate_prototype(self, document: Mapping[str, JSONValue], *, path: Path) -> None:
        """Raise :class:`CatalogValidationError` if ``document`` breaks the schema.

        The most relevant violation is reported together with its location in
        the document, e.g. ``params[1].type``.
        """

        error = best_match(self.prototype_validator.iter_errors(document))
        if error is not None:
            raise CatalogValidationError(f"{path}: {_location(error.absolute_path)}: {error.message}")


__all__ = ["DEFAULT_SCHEMA_ROOT", "SchemaRepository"]
