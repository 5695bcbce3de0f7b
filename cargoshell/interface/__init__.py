#!/usr/bin/env python3
# cargoshell/interface/__init__.py
from __future__ import annotations

"""
Package for the interactive console interface and command dispatch.

Provides:
- CLI frontends with history and completion (prompt_toolkit / readline / plain).
- Token-aware completion helpers.
- Line classification and batch-file parsing.
- Command dispatcher and help text.
- The read-dispatch loop.
"""


# Completion FIRST (cli depends on it)
from .completion import suggest, current_token, BUILT_IN_COMMANDS, CARGO_SUBCOMMANDS

# Parser utilities
from .parser import split_args, strip_quotes, parse_line, parse_batch_lines, parse_batch_file

# Command dispatcher / help
from .handler import dispatch, execute, build_invocation, USAGE

# CLI frontends (after completion is available)
from .cli import BaseCLI, PromptToolkitCLI, ReadlineCLI, make_cli, HISTORY_FILE_PATH

# Loop
from .shell import run_shell

__all__ = [
    # completion
    "suggest",
    "current_token",
    "BUILT_IN_COMMANDS",
    "CARGO_SUBCOMMANDS",
    # parser
    "split_args",
    "strip_quotes",
    "parse_line",
    "parse_batch_lines",
    "parse_batch_file",
    # handler
    "dispatch",
    "execute",
    "build_invocation",
    "USAGE",
    # cli
    "BaseCLI",
    "PromptToolkitCLI",
    "ReadlineCLI",
    "make_cli",
    "HISTORY_FILE_PATH",
    # loop
    "run_shell",
]
