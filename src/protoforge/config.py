# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Project configuration loaded from ``pyproject.toml`` and ``protoforge.toml``."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .catalog.model_prototype import TemplateKind

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
CONFIG_FILENAME: Final[str] = "protoforge.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "protoforge"


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class Settings(BaseModel):
    """Settings controlling where prototypes are found and components written."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    catalog_paths: tuple[Path, ...] = Field(default=(Path("prototypes"),))
    components_dir: Path = Path("components")
    default_kind: TemplateKind = TemplateKind.JSONNET
    include_builtin: bool = True

    def resolve_paths(self, root: Path) -> Settings:
        """Return a copy whose relative paths are anchored at ``root``."""

        return self.model_copy(
            update={
                "catalog_paths": tuple(_anchor(path, root) for path in self.catalog_paths),
                "components_dir": _anchor(self.components_dir, root),
            },
        )


def _anchor(path: Path, root: Path) -> Path:
    expanded = path.expanduser()
    return expanded if expanded.is_absolute() else root / expanded


def _read_toml(path: Path) -> Mapping[str, Any]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"{path}: invalid TOML: {exc}") from exc


def _pyproject_section(path: Path) -> Mapping[str, Any] | None:
    document = _read_toml(path)
    tool_table = document.get(PYPROJECT_TOOL_KEY, {})
    if not isinstance(tool_table, Mapping):
        raise ConfigError(f"{path}: [{PYPROJECT_TOOL_KEY}] must be a table")
    section = tool_table.get(PYPROJECT_SECTION_KEY)
    if section is not None and not isinstance(section, Mapping):
        raise ConfigError(f"{path}: [{PYPROJECT_TOOL_KEY}.{PYPROJECT_SECTION_KEY}] must be a table")
    return section


def _has_config(directory: Path) -> bool:
    if (directory / CONFIG_FILENAME).is_file():
        return True
    pyproject = directory / PYPROJECT_FILENAME
    if not pyproject.is_file():
        return False
    try:
        return _pyproject_section(pyproject) is not None
    except ConfigError:
        return False


def find_project_root(start: Path) -> Path:
    """Return the nearest ancestor of ``start`` holding protoforge configuration.

    Args:
        start: Directory the search begins from.

    Returns:
        Path: Closest directory with ``protoforge.toml`` or a
        ``[tool.protoforge]`` table, otherwise ``start`` itself.
    """

    start = start.resolve()
    for candidate in (start, *start.parents):
        if _has_config(candidate):
            return candidate
    return start


def load_settings(root: Path) -> Settings:
    """Load settings for the project rooted at ``root``.

    ``[tool.protoforge]`` in ``pyproject.toml`` is read first and
    ``protoforge.toml`` overrides it key by key.

    Args:
        root: Project directory.

    Returns:
        Settings: Validated settings with paths resolved against ``root``.

    Raises:
        ConfigError: If a configuration file is malformed or holds unknown keys.
    """

    merged: dict[str, Any] = {}
    pyproject = root / PYPROJECT_FILENAME
    if pyproject.is_file():
        merged.update(_pyproject_section(pyproject) or {})
    config_file = root / CONFIG_FILENAME
    if config_file.is_file():
        merged.update(_read_toml(config_file))
    try:
        settings = Settings.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"invalid protoforge configuration in {root}: {exc}") from exc
    return settings.resolve_paths(root)


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "Settings",
    "find_project_root",
    "load_settings",
]
