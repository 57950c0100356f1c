# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Filesystem scanning utilities for prototype catalog roots."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True)
class CatalogScanner:
    """Scan a catalog directory tree for prototype documents."""

    catalog_root: Path

    def prototype_documents(self) -> tuple[Path, ...]:
        """Return sorted prototype document paths.

        Files whose name starts with ``_`` are treated as private and skipped.

        Returns:
            tuple[Path, ...]: Sorted prototype definition file paths, empty when
            the root does not exist.
        """
        if not self.catalog_root.is_dir():
            return ()
        paths = [
            path for path in self.catalog_root.rglob("*.json") if path.is_file() and not path.name.startswith("_")
        ]
        return tuple(sorted(paths))


__all__ = ["CatalogScanner"]
