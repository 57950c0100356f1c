# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

from __future__ import annotations

import pytest

from protoforge.catalog import ParamSchema, PrototypeSpecification, TemplateBodies
from protoforge.cli.params import parameter_values, split_invocation
from protoforge.cli.shared import CLIError


def _spec() -> PrototypeSpecification:
    return PrototypeSpecification(
        name="io.x.web",
        params=(ParamSchema("name"), ParamSchema("port", default="80", alias="containerPort")),
        templates=TemplateBodies.of(yaml=("port: ${port}",)),
    )


def test_split_handles_both_flag_forms() -> None:
    invocation = split_invocation(["web", "--name=nginx", "yaml", "--port", "8080", "--", "--literal"])

    assert invocation.positionals == ("web", "yaml", "--literal")
    assert invocation.flags == (("name", "nginx"), ("port", "8080"))


def test_split_keeps_empty_and_dashed_values() -> None:
    invocation = split_invocation(["--name=", "--image", "-"])

    assert invocation.flags == (("name", ""), ("image", "-"))


@pytest.mark.parametrize("tokens", [["--name"], ["-n", "x"], ["--=x"]])
def test_split_rejects_malformed_flags(tokens: list[str]) -> None:
    with pytest.raises(CLIError):
        split_invocation(tokens)


def test_parameter_values_honour_aliases() -> None:
    values = parameter_values(_spec(), [("name", "web"), ("containerPort", "8080")])

    assert values == {"name": "web", "port": "8080"}


def test_parameter_values_reject_unknown_flags() -> None:
    with pytest.raises(CLIError, match="Unknown flag '--image'"):
        parameter_values(_spec(), [("image", "nginx")])


def test_parameter_values_reject_repeats_through_alias() -> None:
    with pytest.raises(CLIError, match="more than once"):
        parameter_values(_spec(), [("port", "80"), ("containerPort", "8080")])
