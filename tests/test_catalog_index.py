# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for catalog index searches."""

from __future__ import annotations

from protoforge.catalog import CatalogIndex, PrototypeSpecification, SearchMode


def _spec(name: str) -> PrototypeSpecification:
    return PrototypeSpecification(name=name)


def _names(specs: tuple[PrototypeSpecification, ...]) -> list[str]:
    return [spec.name for spec in specs]


def test_search_modes_match_against_names() -> None:
    index = CatalogIndex([_spec("io.a.deployment"), _spec("io.b.deployment-v2"), _spec("io.b.service")])

    assert _names(index.search("deployment", SearchMode.SUFFIX)) == ["io.a.deployment"]
    assert _names(index.search("deployment", SearchMode.SUBSTRING)) == ["io.a.deployment", "io.b.deployment-v2"]
    assert _names(index.search("io.b", SearchMode.PREFIX)) == ["io.b.deployment-v2", "io.b.service"]
    assert _names(index.search("io.b.service", SearchMode.EXACT)) == ["io.b.service"]
    assert index.search("service", SearchMode.EXACT) == ()


def test_search_is_case_sensitive() -> None:
    index = CatalogIndex([_spec("io.a.Deployment")])

    assert index.search("deployment", SearchMode.SUFFIX) == ()
    assert _names(index.search("Deployment", SearchMode.SUFFIX)) == ["io.a.Deployment"]


def test_search_keeps_catalog_order() -> None:
    index = CatalogIndex([_spec("z.web"), _spec("a.web"), _spec("m.web")])

    assert _names(index.search("web", SearchMode.SUFFIX)) == ["z.web", "a.web", "m.web"]
    assert index.names() == ("z.web", "a.web", "m.web")


def test_list_and_container_protocol() -> None:
    specs = [_spec("one"), _spec("two")]
    index = CatalogIndex(specs)

    assert index.list() == tuple(specs)
    assert len(index) == 2
    assert "two" in index
    assert "three" not in index
    assert list(index) == specs
    assert CatalogIndex().list() == ()
