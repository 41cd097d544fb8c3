# Copyright (c) 2023-2026 Cryft Labs. All rights reserved.
# Licensed under the Apache License, Version 2.0.
# This software is part of a patented system. See LICENSE and PATENT NOTICE.

"""
Scratch workspace
=================
Ephemeral directory tree used for one compile action:

    temp/
        contracts/          <-- copy of the user's contract folder
            @openzeppelin/  <-- copied from <node-module-folder>/@openzeppelin
        artifacts/          <-- solc writes <Name>.bin / <Name>.abi here

Use it as a context manager; the tree is removed on every exit path.
"""

from __future__ import annotations

import shutil
import sys
from pathlib import Path
from typing import Callable

from wrap3.errors import WorkspaceError


WORKSPACE_DIR = Path("temp")
DEPENDENCY_PACKAGE = "@openzeppelin"


class Workspace:

    def __init__(self, root: Path = WORKSPACE_DIR, echo: Callable[..., None] = print):
        self.root = Path(root)
        self.contracts_dir = self.root / "contracts"
        self.artifacts_dir = self.root / "artifacts"
        self.echo = echo

    def __enter__(self) -> "Workspace":
        self.create()
        return self

    def __exit__(self, exc_type, exc, tb):
        if exc_type is None:
            self.remove()
            return False
        # the failure that ended the action wins over a cleanup failure
        try:
            self.remove()
        except WorkspaceError as e:
            print(f"ERROR: {e}", file=sys.stderr)
        return False

    def create(self):
        """Drop any leftover tree and create a fresh one."""
        self.remove()
        try:
            self.contracts_dir.mkdir(parents=True, exist_ok=True)
            self.artifacts_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise WorkspaceError(f"failed to create workspace ({e})", self.root) from e
        self.echo(f"  Workspace: {self.root}")

    def remove(self):
        if not self.root.exists() and not self.root.is_symlink():
            return
        try:
            if self.root.is_dir() and not self.root.is_symlink():
                shutil.rmtree(self.root)
            else:
                self.root.unlink()
        except OSError as e:
            raise WorkspaceError(f"failed to remove workspace ({e})", self.root) from e

    def copy_contract_folder(self, source: Path):
        """Copy the contents of the user's contract folder into contracts/."""
        self._copy_tree(Path(source), self.contracts_dir)
        self.echo(f"  Staged contracts: {source}")

    def copy_dependency_package(self, node_modules: Path, package: str = DEPENDENCY_PACKAGE):
        self._copy_tree(Path(node_modules) / package, self.contracts_dir / package)
        self.echo(f"  Staged dependency: {package}")

    def _copy_tree(self, source: Path, destination: Path):
        if not source.is_dir():
            raise WorkspaceError("failed to copy folder (source is not a directory)", source, destination)
        try:
            shutil.copytree(source, destination, dirs_exist_ok=True, ignore=self._skip_workspace)
        except OSError as e:
            raise WorkspaceError(f"failed to copy folder ({e})", source, destination) from e

    def _skip_workspace(self, directory, names):
        """copytree ignore hook: never copy the workspace into itself (e.g. -cf .)."""
        root = self.root.resolve()
        return [name for name in names if (Path(directory) / name).resolve() == root]

    def artifact(self, target: str, ext: str) -> Path:
        return self.artifacts_dir / f"{target}.{ext}"

    def staged_contract(self, target: str) -> Path:
        return self.contracts_dir / f"{target}.sol"
