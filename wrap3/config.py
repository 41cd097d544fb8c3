# Copyright (c) 2023-2026 Cryft Labs. All rights reserved.
# Licensed under the Apache License, Version 2.0.
# This software is part of a patented system. See LICENSE and PATENT NOTICE.

"""
Build configuration
===================
One immutable record per invocation, built from parsed arguments and
validated before anything touches the filesystem.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from wrap3.errors import UsageError


SUPPORTED_LANGS = ("java", "go", "abi")
PACKAGE_LANGS = ("java", "go")

DEFAULT_CONTRACT_FOLDER = "./contracts"
DEFAULT_NODE_MODULE_FOLDER = "./node_modules"
DEFAULT_OUTPUT_FOLDER = "./wrap3"

CONTRACT_SUFFIX = ".sol"


@dataclass(frozen=True)
class BuildConfig:
    lang: str
    target: str
    contracts: Path = Path(DEFAULT_CONTRACT_FOLDER)
    node_modules: Path = Path(DEFAULT_NODE_MODULE_FOLDER)
    output: Path = Path(DEFAULT_OUTPUT_FOLDER)
    package: Optional[str] = None
    solc_version: Optional[str] = None
    dry_run: bool = False
    quiet: bool = False

    @property
    def needs_package(self) -> bool:
        return self.lang in PACKAGE_LANGS


def normalize_target(target: Optional[str]) -> str:
    """Strip whitespace and an optional .sol suffix: 'Token.sol' -> 'Token'."""
    target = (target or "").strip()
    if target.endswith(CONTRACT_SUFFIX):
        target = target[: -len(CONTRACT_SUFFIX)]
    return target


def validate(config: BuildConfig) -> BuildConfig:
    if not config.lang or not config.target:
        raise UsageError("-l, -t are required")

    if config.lang not in SUPPORTED_LANGS:
        raise UsageError(f"non-support lang: {config.lang} (expected one of: {', '.join(SUPPORTED_LANGS)})")

    if config.needs_package and not config.package:
        raise UsageError(f"-p is required for lang {config.lang}")

    if not config.contracts.is_dir():
        raise UsageError(f"contract folder not found: {config.contracts}")

    return config


def from_args(args) -> BuildConfig:
    """Build a validated BuildConfig from an argparse namespace."""
    lang = (args.lang or "").strip().lower()
    package = (args.package or "").strip() or None
    config = BuildConfig(
        lang=lang,
        target=normalize_target(args.target),
        contracts=Path(args.contracts),
        node_modules=Path(args.node_modules),
        output=Path(args.output),
        # abi mode ignores the package name entirely
        package=package if lang in PACKAGE_LANGS else None,
        solc_version=args.solc_version,
        dry_run=args.dry_run,
        quiet=args.quiet,
    )
    return validate(config)
