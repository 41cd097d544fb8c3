# Copyright (c) 2023-2026 Cryft Labs. All rights reserved.
# Licensed under the Apache License, Version 2.0.
# This software is part of a patented system. See LICENSE and PATENT NOTICE.

"""
Compile pipeline
================
Every language runs the same sequence; only the last step differs:

    create workspace -> stage contracts -> stage @openzeppelin
        -> rewrite imports -> solc -> web3j | abigen | copy .bin/.abi
        -> remove workspace (always)
"""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Callable, Dict, Optional

from wrap3.config import BuildConfig
from wrap3.errors import UsageError, WorkspaceError
from wrap3.imports import rewrite_imports
from wrap3.tools import (
    Toolchain,
    ToolRunner,
    abigen_command,
    solc_command,
    web3j_command,
)
from wrap3.workspace import WORKSPACE_DIR, Workspace


def _silent(*args, **kwargs):
    pass


def solc_compile(config: BuildConfig, ws: Workspace, runner: ToolRunner, toolchain: Toolchain):
    source = ws.staged_contract(config.target)
    if not source.is_file():
        raise UsageError(f"target contract not found: {config.contracts / (config.target + '.sol')}")
    runner.run("solc", solc_command(toolchain.solc, source, ws.artifacts_dir))


def web3j_generate(config: BuildConfig, ws: Workspace, runner: ToolRunner, toolchain: Toolchain):
    runner.run("web3j", web3j_command(
        toolchain.web3j,
        ws.artifact(config.target, "bin"),
        ws.artifact(config.target, "abi"),
        config.output,
        config.package,
    ))


def abigen_generate(config: BuildConfig, ws: Workspace, runner: ToolRunner, toolchain: Toolchain):
    runner.run("abigen(go)", abigen_command(
        toolchain.abigen,
        ws.artifact(config.target, "bin"),
        ws.artifact(config.target, "abi"),
        config.output / f"{config.target}.go",
        config.package,
    ))


def copy_artifacts(config: BuildConfig, ws: Workspace, runner: ToolRunner, toolchain: Toolchain):
    """Copy <target>.bin and <target>.abi from the artifacts folder to the output folder."""
    for ext in ("bin", "abi"):
        source = ws.artifact(config.target, ext)
        destination = config.output / f"{config.target}.{ext}"
        if runner.dry_run:
            ws.echo(f"  [DRY RUN] Would copy: {source} -> {destination}")
            continue
        if not source.is_file():
            raise WorkspaceError(f"failed to copy .{ext} (solc produced no artifact)", source, destination)
        try:
            shutil.copyfile(source, destination)
        except OSError as e:
            raise WorkspaceError(f"failed to copy .{ext} ({e})", source, destination) from e
        ws.echo(f"  Copied: {destination}")


GENERATORS: Dict[str, Callable] = {
    "java": web3j_generate,
    "go": abigen_generate,
    "abi": copy_artifacts,
}


def build(
    config: BuildConfig,
    runner: Optional[ToolRunner] = None,
    toolchain: Optional[Toolchain] = None,
    workspace_root: Path = WORKSPACE_DIR,
) -> Path:
    """Run one compile action for `config`. Returns the output folder."""
    echo = _silent if config.quiet else print
    generate = GENERATORS[config.lang]
    if runner is None:
        runner = ToolRunner(dry_run=config.dry_run, echo=echo)
    if toolchain is None:
        toolchain = Toolchain.from_env(solc_version=config.solc_version, echo=echo)

    echo("\n" + "=" * 60)
    echo(f"  wrap3 compile: {config.target} ({config.lang})")
    echo("=" * 60)

    with Workspace(workspace_root, echo=echo) as ws:
        ws.copy_contract_folder(config.contracts)
        ws.copy_dependency_package(config.node_modules)
        rewrite_imports(ws.contracts_dir, echo=echo)

        solc_compile(config, ws, runner, toolchain)

        if not runner.dry_run:
            try:
                config.output.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise WorkspaceError(f"failed to create output folder ({e})", config.output) from e
        generate(config, ws, runner, toolchain)

    echo(f"\n  Output: {config.output}\n")
    return config.output
