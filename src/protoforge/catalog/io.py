# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Read prototype documents and the prototype schema from disk."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path

from .errors import CatalogIntegrityError
from .types import JSONValue


def load_schema(path: Path) -> Mapping[str, JSONValue]:
    """Return the JSON schema stored at ``path``.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        CatalogIntegrityError: If the file is not a JSON object.
    """

    return _read_object(path, what="schema")


def load_document(path: Path) -> Mapping[str, JSONValue]:
    """Return the prototype document stored at ``path``.

    Args:
        path: Location of a ``*.json`` prototype document.

    Returns:
        Mapping[str, JSONValue]: Parsed document, not yet schema-validated.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        CatalogIntegrityError: If the file is not valid JSON or its root is not an object.
    """

    return _read_object(path, what="prototype JSON")


def _read_object(path: Path, *, what: str) -> Mapping[str, JSONValue]:
    text = path.read_text(encoding="utf-8")
    try:
        payload = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise CatalogIntegrityError(f"{path}: failed to parse {what}: {exc.msg} (line {exc.lineno})") from exc
    except ValueError as exc:
        raise CatalogIntegrityError(f"{path}: failed to parse {what}: {exc}") from exc
    if not isinstance(payload, dict):
        raise CatalogIntegrityError(f"{path}: {what} must be a JSON object, not {type(payload).__name__}")
    return payload


def _reject_constant(name: str) -> JSONValue:
    # NaN and Infinity are accepted by the json module but are not JSON.
    raise ValueError(f"non-standard constant {name}")


__all__ = ["load_document", "load_schema"]
