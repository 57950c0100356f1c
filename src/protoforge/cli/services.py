# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Load configuration and the prototype catalog for CLI commands."""

from __future__ import annotations

from dataclasses import dataclass

from ..catalog.index import CatalogIndex
from ..catalog.loader import PrototypeCatalogLoader
from ..components import ComponentWriter
from ..config import Settings, find_project_root, load_settings
from .shared import CLILogger, CLIState


@dataclass(frozen=True, slots=True)
class CommandContext:
    """Settings and catalog shared by the prototype commands."""

    settings: Settings
    index: CatalogIndex

    def component_writer(self) -> ComponentWriter:
        """Return a writer targeting the configured components directory."""

        return ComponentWriter(self.settings.components_dir)


def prepare_context(state: CLIState, *, logger: CLILogger) -> CommandContext:
    """Discover the project, load its settings and build a fresh catalog index.

    Args:
        state: Top-level CLI options.
        logger: Logger used for debug tracing.

    Returns:
        CommandContext: Settings and index for the invocation.
    """

    root = find_project_root(state.root)
    settings = load_settings(root)
    logger.debug(f"root={root} catalog_paths={','.join(str(path) for path in settings.catalog_paths)}")
    loader = PrototypeCatalogLoader(roots=settings.catalog_paths, include_builtin=settings.include_builtin)
    index = loader.load_index()
    logger.debug(f"prototypes={len(index)}")
    return CommandContext(settings=settings, index=index)


__all__ = ["CommandContext", "prepare_context"]
