# Copyright (c) 2023-2026 Cryft Labs. All rights reserved.
# Licensed under the Apache License, Version 2.0.
# This software is part of a patented system. See LICENSE and PATENT NOTICE.

"""
wrap3
=====
Stages a Solidity contract tree, compiles it with solc, and hands the
bytecode/ABI pair to a binding generator (web3j for Java, abigen for Go)
or copies the raw artifacts out.
"""

__version__ = "0.4.0"
