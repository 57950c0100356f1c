# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""High-level loader that materialises prototype specifications."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final

from .errors import CatalogIntegrityError
from .index import CatalogIndex
from .io import load_document
from .model_prototype import PrototypeSpecification
from .scanner import CatalogScanner
from .schema import SchemaRepository

LOGGER = logging.getLogger(__name__)

BUILTIN_CATALOG_ROOT: Final[Path] = Path(__file__).resolve().parent / "builtin"


@dataclass(slots=True)
class PrototypeCatalogLoader:
    """Loader that validates and materialises prototype documents from catalog roots."""

    roots: tuple[Path, ...] = ()
    include_builtin: bool = True
    schema_root: Path | None = None
    _schemas: SchemaRepository = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Normalise the configured roots and load the schema validator."""

        self.roots = tuple(Path(root) for root in self.roots)
        self._schemas = SchemaRepository.load(schema_root=self.schema_root)
        self.schema_root = self._schemas.schema_root

    def catalog_roots(self) -> tuple[Path, ...]:
        """Return every root scanned by :meth:`load`, built-ins first."""

        if self.include_builtin:
            return (BUILTIN_CATALOG_ROOT, *self.roots)
        return self.roots

    def load(self) -> tuple[PrototypeSpecification, ...]:
        """Load every prototype reachable from the configured roots.

        Returns:
            tuple[PrototypeSpecification, ...]: Specifications sorted by name.

        Raises:
            CatalogIntegrityError: If a document is malformed or a name is declared twice.
            CatalogValidationError: If a document fails schema validation.
        """

        seen: dict[str, Path | None] = {}
        specifications: list[PrototypeSpecification] = []
        for spec in self._iter_specifications():
            if spec.name in seen:
                raise CatalogIntegrityError(
                    f"Duplicate prototype name '{spec.name}' declared in {spec.source} and {seen[spec.name]}",
                )
            seen[spec.name] = spec.source
            specifications.append(spec)
        LOGGER.debug("loaded %d prototypes from %d roots", len(specifications), len(self.catalog_roots()))
        return tuple(sorted(specifications, key=lambda spec: spec.name))

    def load_index(self) -> CatalogIndex:
        """Return a :class:`CatalogIndex` over the loaded specifications."""

        return CatalogIndex(self.load())

    def _iter_specifications(self) -> Iterable[PrototypeSpecification]:
        for root in self.catalog_roots():
            if not root.is_dir():
                LOGGER.debug("skipping missing catalog root %s", root)
                continue
            for path in CatalogScanner(root).prototype_documents():
                document = load_document(path)
                self._schemas.validate_prototype(document, path=path)
                yield PrototypeSpecification.from_mapping(document, source=path)


__all__ = ["BUILTIN_CATALOG_ROOT", "PrototypeCatalogLoader"]
