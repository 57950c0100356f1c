# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""In-memory index answering name searches over a loaded prototype catalog."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from enum import Enum
from typing import Final

from .model_prototype import PrototypeSpecification


class SearchMode(str, Enum):
    """Enumerate the ways a query may match a prototype name."""

    EXACT = "exact"
    PREFIX = "prefix"
    SUBSTRING = "substring"
    SUFFIX = "suffix"


_MATCHERS: Final[dict[SearchMode, Callable[[str, str], bool]]] = {
    SearchMode.EXACT: lambda name, query: name == query,
    SearchMode.PREFIX: str.startswith,
    SearchMode.SUBSTRING: lambda name, query: query in name,
    SearchMode.SUFFIX: str.endswith,
}


class CatalogIndex:
    """Read-only collection of prototype specifications kept in catalog order."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[PrototypeSpecification] = ()) -> None:
        self._entries: tuple[PrototypeSpecification, ...] = tuple(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[PrototypeSpecification]:
        return iter(self._entries)

    def __contains__(self, name: object) -> bool:
        return any(entry.name == name for entry in self._entries)

    def __repr__(self) -> str:
        return f"CatalogIndex({len(self._entries)} prototypes)"

    def list(self) -> tuple[PrototypeSpecification, ...]:
        """Return every specification in catalog order."""

        return self._entries

    def names(self) -> tuple[str, ...]:
        """Return every prototype name in catalog order."""

        return tuple(entry.name for entry in self._entries)

    def search(self, query: str, mode: SearchMode) -> tuple[PrototypeSpecification, ...]:
        """Return the specifications whose name matches ``query`` under ``mode``.

        Matching is case-sensitive and the result keeps catalog order.

        Args:
            query: Text compared against prototype names.
            mode: Matching strategy.

        Returns:
            tuple[PrototypeSpecification, ...]: Matching specifications.
        """

        matches = _MATCHERS[mode]
        return tuple(entry for entry in self._entries if matches(entry.name, query))


__all__ = ["CatalogIndex", "SearchMode"]
