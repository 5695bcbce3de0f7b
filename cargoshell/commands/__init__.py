#!/usr/bin/env python3
# cargoshell/commands/__init__.py
from __future__ import annotations

"""
Package for the command forms understood by the shell.

This package re-exports public APIs from command_types.py.
"""


from .command_types import (
    BUILD_TOOL,
    RUN_VERB,
    WATCH_SUBCOMMAND,
    Command,
    Exit,
    FanOutRun,
    Help,
    Invocation,
    PlainRun,
    RunFromFile,
    SetPrompt,
    TemporaryToolchainRun,
    WatchRun,
)

__all__ = [
    "BUILD_TOOL",
    "RUN_VERB",
    "WATCH_SUBCOMMAND",
    "Command",
    "Exit",
    "FanOutRun",
    "Help",
    "Invocation",
    "PlainRun",
    "RunFromFile",
    "SetPrompt",
    "TemporaryToolchainRun",
    "WatchRun",
]
