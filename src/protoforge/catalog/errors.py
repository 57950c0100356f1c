# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised by prototype catalog operations."""

from __future__ import annotations


class CatalogIntegrityError(RuntimeError):
    """Raised when catalog metadata violates semantic invariants."""

    def __init__(self, message: str | None = None) -> None:
        """Create the integrity error with an optional ``message``."""

        super().__init__(message or "catalog integrity violation")


class CatalogValidationError(RuntimeError):
    """Raised when a catalog document fails structural schema validation."""


__all__ = ("CatalogIntegrityError", "CatalogValidationError")
