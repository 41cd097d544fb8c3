# Copyright (c) 2023-2026 Cryft Labs. All rights reserved.
# Licensed under the Apache License, Version 2.0.
# This software is part of a patented system. See LICENSE and PATENT NOTICE.

"""
Import rewriting
================
solc resolves `import "@openzeppelin/..."` against its base path, but the
staged package lives next to the contracts. Every occurrence of the package
import prefix is turned into a relative one:

    import "@openzeppelin/token/ERC20/ERC20.sol";
    import "./@openzeppelin/token/ERC20/ERC20.sol";

Plain substring substitution; nothing is parsed.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, List

from wrap3.config import CONTRACT_SUFFIX
from wrap3.errors import WorkspaceError
from wrap3.workspace import DEPENDENCY_PACKAGE


def import_patterns(package: str = DEPENDENCY_PACKAGE):
    """Return (old, new) byte strings for the package import prefix."""
    old = f'import "{package}'.encode("utf-8")
    new = f'import "./{package}'.encode("utf-8")
    return old, new


def find_contract_files(directory: Path) -> List[Path]:
    """Every file below `directory`, at any depth, whose name contains .sol."""
    directory = Path(directory)
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as e:
        raise WorkspaceError(f"failed to read directory ({e})", directory) from e

    paths = []
    for entry in entries:
        if entry.is_dir(follow_symlinks=False):
            paths.extend(find_contract_files(Path(entry.path)))
        elif CONTRACT_SUFFIX in entry.name:
            paths.append(Path(entry.path))
    return paths


def rewrite_file(path: Path, package: str = DEPENDENCY_PACKAGE) -> bool:
    """Rewrite one file in place. Returns True if its content changed."""
    old, new = import_patterns(package)
    try:
        content = path.read_bytes()
    except OSError as e:
        raise WorkspaceError(f"failed to read contract file ({e})", path) from e

    if old not in content:
        return False

    # open(..., "wb") truncates the existing inode, so permissions survive
    try:
        with open(path, "wb") as f:
            f.write(content.replace(old, new))
    except OSError as e:
        raise WorkspaceError(f"failed to write contract file ({e})", path) from e
    return True


def rewrite_imports(directory: Path, package: str = DEPENDENCY_PACKAGE,
                    echo: Callable[..., None] = print) -> int:
    """Rewrite every contract file under `directory`; returns the number changed."""
    files = find_contract_files(directory)
    changed = sum(1 for path in files if rewrite_file(path, package))
    echo(f"  Rewrote imports: {changed} of {len(files)} contract file(s)")
    return changed
