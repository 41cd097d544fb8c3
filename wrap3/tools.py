# Copyright (c) 2023-2026 Cryft Labs. All rights reserved.
# Licensed under the Apache License, Version 2.0.
# This software is part of a patented system. See LICENSE and PATENT NOTICE.

"""
External tools
==============
Argument templates for solc, web3j and abigen, plus the one place that
actually spawns processes (ToolRunner). Swapping a binary means changing the
Toolchain, never the build steps.

    solc   <temp/contracts/T.sol> --bin --abi --overwrite -o <temp/artifacts>
    web3j  generate solidity -b <T.bin> -a <T.abi> -o <output> -p <package>
    abigen --bin=<T.bin> --abi=<T.abi> --out=<output>/T.go --pkg=<package>
"""

from __future__ import annotations

import os
import shlex
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional

import certifi
import requests
import solcx
from solcx.exceptions import (
    SolcInstallationError,
    SolcNotInstalled,
    UnsupportedVersionError,
)
from solcx.install import get_executable

from wrap3.errors import ToolError


SOLC_ENV = "WRAP3_SOLC"
WEB3J_ENV = "WRAP3_WEB3J"
ABIGEN_ENV = "WRAP3_ABIGEN"


def eprint(*args, **kwargs):
    print(*args, file=sys.stderr, **kwargs)


# ────────────────────────────────────────────
# Toolchain
# ────────────────────────────────────────────

@dataclass(frozen=True)
class Toolchain:
    solc: str = "solc"
    web3j: str = "web3j"
    abigen: str = "abigen"

    @classmethod
    def from_env(cls, environ=None, solc_version: Optional[str] = None,
                 echo: Callable[..., None] = print) -> "Toolchain":
        """PATH names, overridden by WRAP3_* variables, then by --solc-version."""
        environ = os.environ if environ is None else environ
        solc = environ.get(SOLC_ENV) or "solc"
        if solc_version:
            solc = str(resolve_solc(solc_version, echo=echo))
        return cls(
            solc=solc,
            web3j=environ.get(WEB3J_ENV) or "web3j",
            abigen=environ.get(ABIGEN_ENV) or "abigen",
        )


def _use_certifi_bundle():
    # solcx downloads compiler binaries over HTTPS via requests
    ca_bundle = certifi.where()
    os.environ.setdefault("SSL_CERT_FILE", ca_bundle)
    os.environ.setdefault("REQUESTS_CA_BUNDLE", ca_bundle)


def resolve_solc(version: str, echo: Callable[..., None] = print) -> Path:
    """Install the requested solc release (if needed) and return its executable."""
    version = version.strip().removeprefix("v")
    installed = [str(v) for v in solcx.get_installed_solc_versions()]
    try:
        if version not in installed:
            echo(f"  Installing solc {version}...")
            _use_certifi_bundle()
            solcx.install_solc(version)
        return Path(get_executable(version))
    except (SolcInstallationError, SolcNotInstalled, UnsupportedVersionError,
            requests.RequestException) as e:
        raise ToolError("solc", f"solcx.install_solc({version!r})", reason=str(e)) from e


# ────────────────────────────────────────────
# Command templates
# ────────────────────────────────────────────

def solc_command(solc: str, source: Path, artifacts: Path) -> List[str]:
    return [solc, str(source), "--bin", "--abi", "--overwrite", "-o", str(artifacts)]


def web3j_command(web3j: str, bin_path: Path, abi_path: Path, output: Path, package: str) -> List[str]:
    return [web3j, "generate", "solidity", "-b", str(bin_path), "-a", str(abi_path),
            "-o", str(output), "-p", package]


def abigen_command(abigen: str, bin_path: Path, abi_path: Path, out_file: Path, package: str) -> List[str]:
    return [abigen, f"--bin={bin_path}", f"--abi={abi_path}", f"--out={out_file}", f"--pkg={package}"]


def format_command(cmd: List[str]) -> str:
    return shlex.join(str(c) for c in cmd)


# ────────────────────────────────────────────
# Runner
# ────────────────────────────────────────────

class ToolRunner:
    """
    Runs one external command to completion.

    Output is captured; on failure it is echoed to stderr and a ToolError
    naming the full command line is raised. With dry_run=True the command
    is only printed.
    """

    def __init__(self, dry_run: bool = False, echo: Callable[..., None] = print):
        self.dry_run = dry_run
        self._echo = echo

    def run(self, name: str, cmd: List[str], cwd: Optional[Path] = None) -> subprocess.CompletedProcess:
        command = format_command(cmd)
        if self.dry_run:
            self._echo(f"  [DRY RUN] Would execute: {command}")
            return subprocess.CompletedProcess(cmd, 0, "", "")

        self._echo(f"  Running {name}: {command}")
        try:
            result = subprocess.run(
                [str(c) for c in cmd],
                cwd=cwd,
                capture_output=True,
                text=True,
            )
        except OSError as e:
            raise ToolError(name, command, reason=e.strerror or str(e)) from e

        if result.returncode != 0:
            if result.stdout:
                eprint(result.stdout.rstrip())
            if result.stderr:
                eprint(result.stderr.rstrip())
            raise ToolError(name, command, returncode=result.returncode)

        return result
