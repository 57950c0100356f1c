# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI tests for the prototype commands."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest
from typer.testing import CliRunner

from protoforge.catalog import CatalogIndex, PrototypeSpecification
from protoforge.cli.app import app
from protoforge.cli.commands import prototype as prototype_commands


@pytest.fixture
def project(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    root.mkdir()
    (root / "protoforge.toml").write_text("", encoding="utf-8")
    return root


def _invoke(project: Path, *args: str):
    return CliRunner().invoke(app, ["--root", str(project), "--no-emoji", *args])


def _flat(text: str) -> str:
    return " ".join(text.split())


def test_list_shows_builtin_prototypes(project: Path) -> None:
    result = _invoke(project, "prototype", "list")

    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert lines[0].startswith("NAME")
    assert lines[1].startswith("====")
    assert any(line.startswith("io.protoforge.pkg.simple-deployment ") for line in lines)


def test_list_includes_project_catalog(project: Path, write_prototype: Callable[..., Path]) -> None:
    write_prototype(project / "prototypes", "io.acme.redis", shortDescription="Redis cache.")

    result = _invoke(project, "prototype", "list")

    assert result.exit_code == 0
    assert "Redis cache." in result.stdout


def test_list_without_prototypes_fails(project: Path) -> None:
    (project / "protoforge.toml").write_text("include_builtin = false\n", encoding="utf-8")

    result = _invoke(project, "prototype", "list")

    assert result.exit_code == 1
    assert "No prototypes found" in result.output


def test_describe_lists_parameter_flags(project: Path) -> None:
    result = _invoke(project, "prototype", "describe", "simple-deployment")

    assert result.exit_code == 0
    assert "PROTOTYPE NAME:\nio.protoforge.pkg.simple-deployment" in result.stdout
    assert "--port/--containerPort" in result.stdout
    assert "TEMPLATE TYPES AVAILABLE:\n  jsonnet, json, yaml" in result.stdout


def test_describe_ambiguous_name_fails(project: Path) -> None:
    result = _invoke(project, "prototype", "describe", "deployment")

    assert result.exit_code == 1
    output = _flat(result.output)
    assert "Ambiguous match for 'deployment'" in output
    assert "io.protoforge.pkg.multi-port-deployment" in output
    assert "io.protoforge.pkg.simple-deployment" in output


def test_search_by_substring_and_prefix(project: Path) -> None:
    substring = _invoke(project, "prototype", "search", "deploy")
    prefix = _invoke(project, "prototype", "search", "--mode", "prefix", "io.protoforge.pkg.c")
    missing = _invoke(project, "prototype", "search", "redis")

    assert substring.exit_code == 0
    assert "multi-port-deployment" in substring.stdout
    assert "namespace" not in substring.stdout
    assert prefix.exit_code == 0
    assert "io.protoforge.pkg.configmap" in prefix.stdout
    assert missing.exit_code == 1
    assert "redis" in _flat(missing.output)


def test_preview_jsonnet_by_default(project: Path) -> None:
    result = _invoke(project, "prototype", "preview", "simple-deployment", "--name=nginx", "--image", "nginx")

    assert result.exit_code == 0
    assert result.stdout.startswith('local params = std.extVar("__protoforge/params").components.preview;')
    assert "image: params.image," in result.stdout
    assert "param://" not in result.stdout


def test_preview_yaml_with_alias_flag(project: Path) -> None:
    result = _invoke(
        project,
        "prototype",
        "preview",
        "simple-deployment",
        "yaml",
        "--name=nginx",
        "--image=nginx:1.25",
        "--containerPort=8080",
    )

    assert result.exit_code == 0
    assert '  name: "nginx"' in result.stdout
    assert '        image: "nginx:1.25"' in result.stdout
    assert "  replicas: 1" in result.stdout
    assert "        - containerPort: 8080" in result.stdout


def test_preview_reports_missing_parameters(project: Path) -> None:
    result = _invoke(project, "prototype", "preview", "simple-deployment", "--name=nginx")

    assert result.exit_code == 1
    output = _flat(result.output)
    assert "required parameters are missing" in output
    assert "--image" in output


def test_preview_rejects_unknown_flag_and_kind(project: Path) -> None:
    flag = _invoke(project, "prototype", "preview", "simple-deployment", "--name=a", "--image=b", "--bogus=1")
    kind = _invoke(project, "prototype", "preview", "namespace", "toml", "--name=a")
    unsupported = _invoke(project, "prototype", "preview", "namespace", "yaml", "--name=a")

    assert flag.exit_code == 1
    assert "Unknown flag '--bogus'" in _flat(flag.output)
    assert kind.exit_code == 1
    assert "Unrecognized template type 'toml'" in _flat(kind.output)
    assert unsupported.exit_code == 1
    assert "does not have a template for the type 'yaml'" in _flat(unsupported.output)


def test_use_writes_component_and_params(project: Path) -> None:
    result = _invoke(
        project,
        "prototype",
        "use",
        "simple-deployment",
        "nginx-depl",
        "--name=nginx",
        "--image=nginx",
    )

    assert result.exit_code == 0
    assert "Generated component 'nginx-depl'" in _flat(result.output)
    component = project / "components" / "nginx-depl.jsonnet"
    assert component.read_text(encoding="utf-8").startswith(
        'local params = std.extVar("__protoforge/params").components["nginx-depl"];',
    )
    params = json.loads((project / "components" / "params.json").read_text(encoding="utf-8"))
    assert params["components"]["nginx-depl"] == {
        "image": "nginx",
        "name": "nginx",
        "port": 80,
        "replicas": 1,
    }

    again = _invoke(project, "prototype", "use", "simple-deployment", "nginx-depl", "--name=x", "--image=y")

    assert again.exit_code == 1
    assert "already exists" in _flat(again.output)


def test_generate_alias_accepts_type(project: Path) -> None:
    result = _invoke(project, "generate", "configmap", "settings", "yaml", "--name=settings")

    assert result.exit_code == 0
    text = (project / "components" / "settings.yaml").read_text(encoding="utf-8")
    assert 'name: "settings"' in text


def test_use_requires_component_name(project: Path) -> None:
    result = _invoke(project, "prototype", "use", "simple-deployment")

    assert result.exit_code == 1
    assert "component name" in _flat(result.output)
    assert not (project / "components").exists()


def test_use_resolves_the_prototype_once(project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[str] = []
    original = prototype_commands.resolve

    def counting_resolve(query: str, index: CatalogIndex) -> PrototypeSpecification:
        calls.append(query)
        return original(query, index)

    monkeypatch.setattr(prototype_commands, "resolve", counting_resolve)

    result = _invoke(project, "prototype", "use", "namespace", "team", "--name=team")

    assert result.exit_code == 0
    assert calls == ["namespace"]


def test_filesystem_errors_are_reported(project: Path) -> None:
    (project / "components").write_text("not a directory", encoding="utf-8")

    result = _invoke(project, "prototype", "use", "namespace", "team", "--name=team")

    assert result.exit_code == 1
    assert not isinstance(result.exception, OSError)
    assert (project / "components").read_text(encoding="utf-8") == "not a directory"
