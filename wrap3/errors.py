# Copyright (c) 2023-2026 Cryft Labs. All rights reserved.
# Licensed under the Apache License, Version 2.0.
# This software is part of a patented system. See LICENSE and PATENT NOTICE.

from __future__ import annotations

from typing import Optional


class Wrap3Error(Exception):
    """Base for every failure that aborts a wrap3 action."""


class UsageError(Wrap3Error):
    """Missing or invalid command-line input."""


class WorkspaceError(Wrap3Error):
    """A filesystem step (copy, read, write, mkdir, remove) failed."""

    def __init__(self, message: str, source=None, destination=None):
        self.source = source
        self.destination = destination
        if source is not None and destination is not None:
            message = f"{message} - from: {source} to: {destination}"
        elif source is not None:
            message = f"{message}: {source}"
        super().__init__(message)


class ToolError(Wrap3Error):
    """An external executable could not be spawned or exited non-zero."""

    def __init__(self, tool: str, command: str, returncode: Optional[int] = None, reason: str = ""):
        self.tool = tool
        self.command = command
        self.returncode = returncode
        if returncode is None:
            detail = f"could not run ({reason})" if reason else "could not run"
        else:
            detail = f"exit code {returncode}"
        super().__init__(f"Failed to run {tool} [{detail}]: {command}")
