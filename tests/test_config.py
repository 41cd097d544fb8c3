# Copyright (c) 2023-2026 Cryft Labs. All rights reserved.
# Licensed under the Apache License, Version 2.0.
# This software is part of a patented system. See LICENSE and PATENT NOTICE.

from __future__ import annotations

from argparse import Namespace
from pathlib import Path

import pytest

from wrap3.config import BuildConfig, from_args, normalize_target
from wrap3.errors import UsageError


def make_args(**overrides) -> Namespace:
    values = dict(
        lang="java",
        target="Token",
        package="com.example",
        contracts="./contracts",
        node_modules="./node_modules",
        output="./wrap3",
        solc_version=None,
        dry_run=False,
        quiet=True,
    )
    values.update(overrides)
    return Namespace(**values)


@pytest.fixture(autouse=True)
def in_project(project, monkeypatch):
    monkeypatch.chdir(project)


def test_valid_java_config():
    config = from_args(make_args())
    assert config.lang == "java"
    assert config.package == "com.example"
    assert config.contracts == Path("contracts")
    assert config.output == Path("wrap3")


@pytest.mark.parametrize("lang", ["java", "go"])
def test_package_required_for_binding_langs(lang, project):
    with pytest.raises(UsageError, match="-p is required"):
        from_args(make_args(lang=lang, package=None))
    assert not (project / "temp").exists()
    assert not (project / "wrap3").exists()


def test_abi_ignores_package():
    config = from_args(make_args(lang="abi", package="ignored"))
    assert config.package is None
    assert not config.needs_package


def test_unsupported_lang_names_value():
    with pytest.raises(UsageError, match="rust"):
        from_args(make_args(lang="rust"))


@pytest.mark.parametrize("missing", ["lang", "target"])
def test_lang_and_target_required(missing):
    with pytest.raises(UsageError, match="-l, -t are required"):
        from_args(make_args(**{missing: None}))


def test_missing_contract_folder():
    with pytest.raises(UsageError, match="contract folder not found"):
        from_args(make_args(contracts="./nope"))


@pytest.mark.parametrize("raw, expected", [
    ("Token", "Token"),
    ("Token.sol", "Token"),
    ("  Token ", "Token"),
    (None, ""),
])
def test_normalize_target(raw, expected):
    assert normalize_target(raw) == expected


def test_config_is_immutable():
    config = BuildConfig(lang="abi", target="Token")
    with pytest.raises(AttributeError):
        config.target = "Other"
