#!/usr/bin/env python3
# cargoshell/commands/command_types.py
from __future__ import annotations

"""
Command data structures.

This module defines:
- One frozen dataclass per command form a REPL line can take, joined in the
  `Command` union so the dispatcher can match on them exhaustively.
- Invocation: the fully resolved `rustup run` call a command turns into.
"""

import shlex
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

# Build tool every invocation forwards to
BUILD_TOOL = "cargo"
# Verb given to the toolchain selector
RUN_VERB = "run"
# Subcommand prepended by the `~` form
WATCH_SUBCOMMAND = "watch"


@dataclass(frozen=True, slots=True)
class Exit:
    """`exit` / `quit`."""


@dataclass(frozen=True, slots=True)
class Help:
    """`help`."""


@dataclass(frozen=True, slots=True)
class SetPrompt:
    """`p <text>`: replace the prompt template."""
    text: str


@dataclass(frozen=True, slots=True)
class WatchRun:
    """`~<command>`: re-run through cargo-watch on every source change."""
    args: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class RunFromFile:
    """`< <path>`: preview commands listed in a file."""
    path: str


@dataclass(frozen=True, slots=True)
class TemporaryToolchainRun:
    """
    `++ <toolchain> [<command>]`.

    args is None when no command followed the toolchain, which makes the
    switch permanent.
    """
    toolchain: str
    args: Optional[tuple[str, ...]] = None


@dataclass(frozen=True, slots=True)
class FanOutRun:
    """`+ <command>`: run under every configured toolchain in turn."""
    args: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class PlainRun:
    """Anything else: forwarded to cargo as-is."""
    args: tuple[str, ...]


Command = Union[
    Exit,
    Help,
    SetPrompt,
    WatchRun,
    RunFromFile,
    TemporaryToolchainRun,
    FanOutRun,
    PlainRun,
]


@dataclass(frozen=True, slots=True)
class Invocation:
    """
    A resolved subprocess call: `<selector> run <toolchain> <tool> <args...>`.

    Attributes:
        selector: Path to the rustup binary.
        toolchain: Toolchain name handed to `rustup run`.
        args: Arguments after the build tool name.
        cwd: Working directory of the child.
        tool: Build tool name, normally `cargo`.
    """
    selector: Path
    toolchain: str
    args: tuple[str, ...]
    cwd: Path
    tool: str = BUILD_TOOL

    @property
    def argv(self) -> list[str]:
        return [str(self.selector), RUN_VERB, self.toolchain, self.tool, *self.args]

    def __str__(self) -> str:
        return shlex.join(self.argv)
