# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Resolve a possibly abbreviated prototype name to a single catalog entry."""

from __future__ import annotations

import logging

from .catalog.index import CatalogIndex, SearchMode
from .catalog.model_prototype import PrototypeSpecification
from .errors import AmbiguousMatchError, NoExactMatchError, NoMatchError

LOGGER = logging.getLogger(__name__)


def resolve(query: str, index: CatalogIndex) -> PrototypeSpecification:
    """Return the unique prototype whose name ends with ``query``.

    Suffix matches are authoritative: a single hit wins and several hits are
    ambiguous. When nothing ends with ``query`` the names containing it are
    reported as hints, but never selected.

    Args:
        query: Full or trailing part of a dotted prototype name.
        index: Catalog searched for the prototype.

    Returns:
        PrototypeSpecification: The single suffix match.

    Raises:
        AmbiguousMatchError: If more than one name ends with ``query``.
        NoExactMatchError: If no name ends with ``query`` but some contain it.
        NoMatchError: If no name ends with or contains ``query``.
    """

    suffix_matches = index.search(query, SearchMode.SUFFIX)
    if len(suffix_matches) == 1:
        LOGGER.debug("resolved %r to %s", query, suffix_matches[0].name)
        return suffix_matches[0]
    if suffix_matches:
        raise AmbiguousMatchError(query, (spec.name for spec in suffix_matches))

    partial_matches = index.search(query, SearchMode.SUBSTRING)
    if not partial_matches:
        raise NoMatchError(query)
    raise NoExactMatchError(query, (spec.name for spec in partial_matches))


__all__ = ["resolve"]
