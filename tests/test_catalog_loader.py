# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from protoforge.catalog import (
    CatalogIntegrityError,
    CatalogValidationError,
    ParamType,
    PrototypeCatalogLoader,
    TemplateKind,
)


def test_builtin_catalog_loads_sorted_by_name() -> None:
    specs = PrototypeCatalogLoader().load()

    names = [spec.name for spec in specs]
    assert names == sorted(names)
    assert "io.protoforge.pkg.simple-deployment" in names
    assert "io.protoforge.pkg.namespace" in names


def test_builtin_simple_deployment_shape() -> None:
    index = PrototypeCatalogLoader().load_index()
    (spec,) = [entry for entry in index if entry.name == "io.protoforge.pkg.simple-deployment"]

    assert [param.name for param in spec.required_params] == ["name", "image"]
    port = next(param for param in spec.params if param.name == "port")
    assert port.param_type is ParamType.NUMBER
    assert port.alias == "containerPort"
    assert port.default == "80"
    assert TemplateKind.JSONNET in spec.available_kinds
    assert spec.source is not None


def test_custom_roots_extend_builtins(tmp_path: Path, write_prototype: Callable[..., Path]) -> None:
    path = write_prototype(tmp_path / "protos", "io.acme.redis")

    loader = PrototypeCatalogLoader(roots=(tmp_path / "protos",))
    specs = {spec.name: spec for spec in loader.load()}

    assert "io.acme.redis" in specs
    assert specs["io.acme.redis"].source == path
    assert "io.protoforge.pkg.configmap" in specs
    assert loader.catalog_roots()[1:] == (tmp_path / "protos",)


def test_builtins_can_be_excluded(tmp_path: Path, write_prototype: Callable[..., Path]) -> None:
    write_prototype(tmp_path, "io.acme.redis")
    write_prototype(tmp_path / "nested", "io.acme.memcached")

    specs = PrototypeCatalogLoader(roots=(tmp_path,), include_builtin=False).load()

    assert [spec.name for spec in specs] == ["io.acme.memcached", "io.acme.redis"]


def test_private_documents_and_missing_roots_are_skipped(
    tmp_path: Path,
    write_prototype: Callable[..., Path],
) -> None:
    write_prototype(tmp_path, "io.acme.redis")
    (tmp_path / "_draft.json").write_text("{not json", encoding="utf-8")

    loader = PrototypeCatalogLoader(roots=(tmp_path, tmp_path / "absent"), include_builtin=False)

    assert [spec.name for spec in loader.load()] == ["io.acme.redis"]


def test_duplicate_names_are_rejected(tmp_path: Path, write_prototype: Callable[..., Path]) -> None:
    write_prototype(tmp_path / "a", "io.acme.redis")
    write_prototype(tmp_path / "b", "io.acme.redis")

    loader = PrototypeCatalogLoader(roots=(tmp_path / "a", tmp_path / "b"), include_builtin=False)

    with pytest.raises(CatalogIntegrityError, match="Duplicate prototype name 'io.acme.redis'"):
        loader.load()


def test_schema_violations_are_reported(tmp_path: Path, write_prototype: Callable[..., Path]) -> None:
    write_prototype(tmp_path, "io.acme.redis", params=[{"name": "port", "type": "integer"}])

    loader = PrototypeCatalogLoader(roots=(tmp_path,), include_builtin=False)

    with pytest.raises(CatalogValidationError, match="redis.json"):
        loader.load()


def test_unknown_template_kind_fails_schema(tmp_path: Path, write_prototype: Callable[..., Path]) -> None:
    write_prototype(tmp_path, "io.acme.redis", templates={"toml": ["x = 1"]})

    with pytest.raises(CatalogValidationError):
        PrototypeCatalogLoader(roots=(tmp_path,), include_builtin=False).load()


def test_malformed_json_is_reported(tmp_path: Path) -> None:
    (tmp_path / "broken.json").write_text('{"name": ', encoding="utf-8")

    with pytest.raises(CatalogIntegrityError, match="failed to parse prototype JSON"):
        PrototypeCatalogLoader(roots=(tmp_path,), include_builtin=False).load()
