# Copyright (c) 2023-2026 Cryft Labs. All rights reserved.
# Licensed under the Apache License, Version 2.0.
# This software is part of a patented system. See LICENSE and PATENT NOTICE.

from __future__ import annotations

from pathlib import Path

import pytest

from wrap3.errors import ToolError
from wrap3.tools import format_command


TOKEN_SOL = '''// SPDX-License-Identifier: MIT
pragma solidity ^0.8.0;

import "@openzeppelin/contracts/token/ERC20/ERC20.sol";
import "./lib/Math.sol";

contract Token is ERC20 {
    constructor() ERC20("Token", "TKN") {}
}
'''

MATH_SOL = '''// SPDX-License-Identifier: MIT
pragma solidity ^0.8.0;

import "@openzeppelin/contracts/utils/math/Math.sol";

library TokenMath {}
'''

ERC20_SOL = '''// SPDX-License-Identifier: MIT
pragma solidity ^0.8.0;

contract ERC20 {}
'''


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """contracts/ with a nested library plus node_modules/@openzeppelin."""
    contracts = tmp_path / "contracts"
    (contracts / "lib").mkdir(parents=True)
    (contracts / "Token.sol").write_text(TOKEN_SOL, encoding="utf-8")
    (contracts / "lib" / "Math.sol").write_text(MATH_SOL, encoding="utf-8")

    oz = tmp_path / "node_modules" / "@openzeppelin" / "contracts" / "token" / "ERC20"
    oz.mkdir(parents=True)
    (oz / "ERC20.sol").write_text(ERC20_SOL, encoding="utf-8")
    return tmp_path


class RecordingRunner:
    """Stands in for ToolRunner; solc 'compiles' by writing fake artifacts."""

    def __init__(self, fail_on: str = None, dry_run: bool = False):
        self.fail_on = fail_on
        self.dry_run = dry_run
        self.calls = []

    def run(self, name, cmd, cwd=None):
        self.calls.append((name, [str(c) for c in cmd]))
        if name == self.fail_on:
            raise ToolError(name, format_command(cmd), returncode=1)
        if name == "solc":
            source, out_dir = Path(cmd[1]), Path(cmd[-1])
            out_dir.mkdir(parents=True, exist_ok=True)
            (out_dir / f"{source.stem}.bin").write_bytes(b"6080604052\n")
            (out_dir / f"{source.stem}.abi").write_bytes(b'[{"type":"constructor"}]')

    def names(self):
        return [name for name, _ in self.calls]


@pytest.fixture
def runner() -> RecordingRunner:
    return RecordingRunner()
