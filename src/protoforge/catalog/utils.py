# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Typed field readers for prototype documents.

Each reader takes the raw value of one document field, the field ``key`` and a
``context`` naming the document, and either returns the value narrowed to the
expected type or raises :class:`CatalogIntegrityError`.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .errors import CatalogIntegrityError
from .types import JSONValue


def _is_array(value: JSONValue | None) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def expect_string(value: JSONValue | None, *, key: str, context: str) -> str:
    """Return the string stored under ``key``."""

    if isinstance(value, str):
        return value
    raise CatalogIntegrityError(f"{context}: field '{key}' must be a string")


def optional_string(value: JSONValue | None, *, key: str, context: str) -> str | None:
    """Return the string stored under ``key``, or ``None`` when the field is absent."""

    return None if value is None else expect_string(value, key=key, context=context)


def string_array(value: JSONValue | None, *, key: str, context: str) -> tuple[str, ...]:
    """Return template lines or other string lists; an absent field reads as empty."""

    if value is None:
        return ()
    if not _is_array(value):
        raise CatalogIntegrityError(f"{context}: field '{key}' must be a list of strings")
    return tuple(expect_string(item, key=f"{key}[{position}]", context=context) for position, item in enumerate(value))


def expect_mapping(value: JSONValue | None, *, key: str, context: str) -> Mapping[str, JSONValue]:
    """Return the object stored under ``key``."""

    if isinstance(value, Mapping):
        return value
    raise CatalogIntegrityError(f"{context}: field '{key}' must be an object")


def mapping_array(value: JSONValue | None, *, key: str, context: str) -> tuple[Mapping[str, JSONValue], ...]:
    """Return a list of objects such as the ``params`` entries; absent reads as empty."""

    if value is None:
        return ()
    if not _is_array(value):
        raise CatalogIntegrityError(f"{context}: field '{key}' must be a list of objects")
    return tuple(expect_mapping(item, key=f"{key}[{position}]", context=context) for position, item in enumerate(value))


__all__ = [
    "expect_mapping",
    "expect_string",
    "mapping_array",
    "optional_string",
    "string_array",
]
