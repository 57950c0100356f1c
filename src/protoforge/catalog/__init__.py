# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Public export surface for the prototype catalog."""

from __future__ import annotations

from typing import Final

from .errors import CatalogIntegrityError, CatalogValidationError
from .index import CatalogIndex, SearchMode
from .loader import BUILTIN_CATALOG_ROOT, PrototypeCatalogLoader
from .model_param import ParamSchema, ParamType
from .model_prototype import PrototypeSpecification, TemplateBodies, TemplateKind

__all__: Final[tuple[str, ...]] = (
    "BUILTIN_CATALOG_ROOT",
    "CatalogIndex",
    "CatalogIntegrityError",
    "CatalogValidationError",
    "ParamSchema",
    "ParamType",
    "PrototypeCatalogLoader",
    "PrototypeSpecification",
    "SearchMode",
    "TemplateBodies",
    "TemplateKind",
)
