# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared type aliases and constants for the prototype catalog."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Final, TypeAlias

JSONPrimitive: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONPrimitive | Sequence["JSONValue"] | Mapping[str, "JSONValue"]

PROTOTYPE_API_VERSION: Final[str] = "0.1.0"
PROTOTYPE_SCHEMA_FILENAME: Final[str] = "prototype.schema.json"

__all__ = [
    "PROTOTYPE_API_VERSION",
    "PROTOTYPE_SCHEMA_FILENAME",
    "JSONPrimitive",
    "JSONValue",
]
