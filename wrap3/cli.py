# Copyright (c) 2023-2026 Cryft Labs. All rights reserved.
# Licensed under the Apache License, Version 2.0.
# This software is part of a patented system. See LICENSE and PATENT NOTICE.

"""
wrap3 command line
==================
Compiles a Solidity contract and generates Java/Go bindings for it, or
copies the raw .bin/.abi artifacts.

Usage:
    wrap3 help
    wrap3 compile -l java -t Token -p com.example.token
    wrap3 compile -l go   -t Token -p token -o ./bindings
    wrap3 compile -l abi  -t Token -cf ./src/contracts
    wrap3 compile -l abi  -t Token --solc-version 0.8.19 --dry-run

The action is the first positional argument; flags may appear before or
after it.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from wrap3 import __version__
from wrap3.build import build
from wrap3.config import (
    DEFAULT_CONTRACT_FOLDER,
    DEFAULT_NODE_MODULE_FOLDER,
    DEFAULT_OUTPUT_FOLDER,
    SUPPORTED_LANGS,
    from_args,
)
from wrap3.errors import Wrap3Error
from wrap3.tools import SOLC_ENV, WEB3J_ENV, ABIGEN_ENV, eprint


ACTIONS = ("help", "compile")

EPILOG = f"""\
actions:
  help       show this message
  compile    stage, compile and generate bindings for the target contract

environment:
  {SOLC_ENV}, {WEB3J_ENV}, {ABIGEN_ENV}
             override the solc / web3j / abigen executables

example:
  wrap3 compile -l java -t Token -p com.example.token
"""


def die(msg: str, code: int = 1):
    eprint(f"ERROR: {msg}")
    sys.exit(code)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wrap3",
        description="Compile a Solidity contract with solc and wrap it for Java (web3j), Go (abigen) or raw ABI",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("action", nargs="?", help="help | compile")
    parser.add_argument("-l", "--lang", help=f"language of the wrapper: {' | '.join(SUPPORTED_LANGS)}")
    parser.add_argument("-t", "--target", help="contract to compile, file extension is not needed")
    parser.add_argument("-p", "--package", help="package name of the java class or the go file (java/go only)")
    parser.add_argument("-c", "-cf", "--contracts", dest="contracts", default=DEFAULT_CONTRACT_FOLDER,
                        help=f"contract folder of .sol files (default: {DEFAULT_CONTRACT_FOLDER})")
    parser.add_argument("-n", "-nf", "--node", dest="node_modules", default=DEFAULT_NODE_MODULE_FOLDER,
                        help=f"folder holding the @openzeppelin package (default: {DEFAULT_NODE_MODULE_FOLDER})")
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT_FOLDER,
                        help=f"output folder (default: {DEFAULT_OUTPUT_FOLDER})")
    parser.add_argument("--solc-version", default=None,
                        help="install and use this solc release via py-solc-x instead of solc on PATH")
    parser.add_argument("--dry-run", action="store_true", help="Print commands without executing")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only print errors")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.action:
        die("action is missing. usage: wrap3 <action> <options>")

    if args.action == "help":
        parser.print_help()
        return

    if args.action != "compile":
        die(f"unknown action: {args.action} (expected one of: {', '.join(ACTIONS)})")

    try:
        config = from_args(args)
        build(config)
    except Wrap3Error as e:
        die(str(e))
    except KeyboardInterrupt:
        eprint("\nInterrupted.")
        sys.exit(130)


if __name__ == "__main__":
    main()
