# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Persist expanded prototypes as component files of a project."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final

from .catalog.model_prototype import TemplateKind
from .catalog.types import JSONValue

LOGGER = logging.getLogger(__name__)

PARAMS_FILENAME: Final[str] = "params.json"
COMPONENTS_KEY: Final[str] = "components"


class ComponentError(RuntimeError):
    """Base class for failures while writing components."""


class ComponentExistsError(ComponentError):
    """Raised when a component file already exists."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Component '{path}' already exists")
        self.path = path


class InvalidComponentNameError(ComponentError):
    """Raised when a component name cannot be used as a file name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid component name '{name}'")
        self.name = name


@dataclass(frozen=True, slots=True)
class ComponentWriter:
    """Write component files and their parameters under ``components_dir``."""

    components_dir: Path

    @property
    def params_path(self) -> Path:
        """Return the path of the shared component parameter file."""

        return self.components_dir / PARAMS_FILENAME

    def component_path(self, name: str, kind: TemplateKind) -> Path:
        """Return the file a component named ``name`` is written to.

        Raises:
            InvalidComponentNameError: If ``name`` is empty, a relative path
                marker, contains a path separator, or would replace ``params.json``.
        """

        if not name or name in {".", ".."} or "/" in name or "\\" in name:
            raise InvalidComponentNameError(name)
        path = self.components_dir / f"{name}{kind.extension}"
        if path.name == PARAMS_FILENAME:
            raise InvalidComponentNameError(name)
        return path

    def create(self, name: str, text: str, params: Mapping[str, JSONValue], kind: TemplateKind) -> Path:
        """Write ``text`` as component ``name`` and record its ``params``.

        Args:
            name: Component name; becomes the file stem.
            text: Expanded prototype text.
            params: Parameter values for the component, as JSON values.
            kind: Rendering kind selecting the file extension.

        Returns:
            Path: Path of the written component file.

        Raises:
            ComponentExistsError: If the component file is already present.
        """

        path = self.component_path(name, kind)
        if path.exists():
            raise ComponentExistsError(path)
        document = self.load_params()
        document[COMPONENTS_KEY][name] = dict(params)
        self.components_dir.mkdir(parents=True, exist_ok=True)
        path.write_text(text if text.endswith("\n") else f"{text}\n", encoding="utf-8")
        self.params_path.write_text(json.dumps(document, indent=2, sort_keys=True) + "\n", encoding="utf-8")
        LOGGER.debug("wrote component %s", path)
        return path

    def load_params(self) -> dict[str, Any]:
        """Return the parameter document, or an empty skeleton when missing."""

        if not self.params_path.is_file():
            return {COMPONENTS_KEY: {}}
        try:
            document = json.loads(self.params_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ComponentError(f"{self.params_path}: failed to parse parameters: {exc.msg}") from exc
        if not isinstance(document, dict) or not isinstance(document.get(COMPONENTS_KEY, {}), dict):
            raise ComponentError(f"{self.params_path}: expected an object with a '{COMPONENTS_KEY}' object")
        document.setdefault(COMPONENTS_KEY, {})
        return document


__all__ = [
    "ComponentError",
    "ComponentExistsError",
    "ComponentWriter",
    "InvalidComponentNameError",
]
