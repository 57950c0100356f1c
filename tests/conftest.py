# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from protoforge.catalog import (
    CatalogIndex,
    ParamSchema,
    ParamType,
    PrototypeSpecification,
    TemplateBodies,
)

JSONNET_BODY = (
    "{",
    "  name: import 'param://name',",
    "  image: import 'param://image',",
    "  port: import 'param://port',",
    "}",
)
YAML_BODY = (
    "name: ${name}",
    "image: ${image}",
    "port: ${port}",
)


@pytest.fixture
def simple_deployment() -> PrototypeSpecification:
    """Return a deployment prototype with two required and one optional parameter."""
    return PrototypeSpecification(
        name="io.x.prototype.simple-deployment",
        description="Simple deployment.",
        params=(
            ParamSchema("name", "Name of the deployment."),
            ParamSchema("image", "Container image."),
            ParamSchema("port", "Container port.", default="80", param_type=ParamType.NUMBER),
        ),
        templates=TemplateBodies.of(jsonnet=JSONNET_BODY, yaml=YAML_BODY),
    )


@pytest.fixture
def multi_port_deployment() -> PrototypeSpecification:
    """Return a second deployment prototype sharing the ``deployment`` suffix."""
    return PrototypeSpecification(
        name="io.x.prototype.multi-port-deployment",
        description="Deployment exposing several ports.",
        params=(ParamSchema("name"),),
        templates=TemplateBodies.of(jsonnet=("{ name: import 'param://name' }",)),
    )


@pytest.fixture
def deployment_index(
    multi_port_deployment: PrototypeSpecification,
    simple_deployment: PrototypeSpecification,
) -> CatalogIndex:
    """Return an index over both deployment prototypes, sorted by name."""
    return CatalogIndex([multi_port_deployment, simple_deployment])


@pytest.fixture
def write_prototype() -> Callable[..., Path]:
    """Return a helper writing a prototype JSON document under a directory."""

    def _write(directory: Path, name: str, **overrides: Any) -> Path:
        document: dict[str, Any] = {
            "apiVersion": "0.1.0",
            "name": name,
            "description": f"Prototype {name}.",
            "params": [{"name": "name", "description": "Name.", "type": "string"}],
            "templates": {"yaml": ["name: ${name}"]},
        }
        document.update(overrides)
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / f"{name.rsplit('.', 1)[-1]}.json"
        path.write_text(json.dumps(document, indent=2), encoding="utf-8")
        return path

    return _write
