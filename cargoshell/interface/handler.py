#!/usr/bin/env python3
# cargoshell/interface/handler.py
from __future__ import annotations

"""
Command dispatch and help text.

dispatch() takes one REPL line and the session state, classifies the line
(see parser.parse_line) and carries it out. Failures are raised as ShellError
subclasses; the REPL loop prints them and keeps going.
"""

import logging
import shlex
from typing import Optional, Sequence

from cargoshell.commands import (
    BUILD_TOOL,
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
from cargoshell.interface.parser import parse_batch_file, parse_line
from cargoshell.session import SessionState
from cargoshell.system import Kernel
from cargoshell.ui import print_line, print_warning

log = logging.getLogger(__name__)

USAGE = """Cargo Command Shell
-------------------

Any command that you would normally type after `cargo ` is a valid command here, and should
bring about the same result that running `cargo COMMAND` would from your regular command shell.

Special commands:

  * `+ <command>`
    runs the command under multiple toolchains, which are defined using the `cargo-shell.toolchains`
    configuration option
  * `++ <toolchain> [<command>]`
    This runs a command under a specific toolchain. If the `<command>` is left off, then the active
    toolchain for the shell is changed.
  * `< <filename>`
    This previews commands from the file named by `<filename>`. It looks for a command on each line,
    and lines that are empty or that start with `#` are ignored. Nothing is executed.
  * `~ <command>`
    This command is only available if `cargo-watch` is available. It will run the `<command>` using
    `cargo-watch`, which causes the command to be re-run whenever a source file changes.
  * `p <prompt>`
    Changes the prompt. `{project}`, `{version}` and `{toolchain}` are replaced with the crate name,
    crate version and active toolchain.
  * `help`, `exit`, `quit`
"""

WATCH_MISSING = "Could not find cargo-watch, you might need to install it?"


# ---------------------------------------------------------------------------
# Execution helpers
# ---------------------------------------------------------------------------


def build_invocation(state: SessionState, args: Sequence[str]) -> Invocation:
    """Resolve arguments into a `rustup run` call under the active toolchain."""
    return Invocation(
        selector=state.rustup,
        toolchain=state.current_toolchain,
        args=tuple(args),
        cwd=state.cwd,
    )


def _run(state: SessionState, kernel: Kernel, args: Sequence[str]) -> None:
    kernel.run(build_invocation(state, args))


def _preview_batch(path: str) -> list[tuple[str, ...]]:
    """
    Print the commands a batch file would run.

    Batch files are preview-only; nothing is executed.
    """
    commands = parse_batch_file(path)
    for args in commands:
        print_line(f"want to run {shlex.join([BUILD_TOOL, *args])}?")
    log.debug("previewed %d command(s) from %s", len(commands), path)
    return commands


def _fan_out(state: SessionState, kernel: Kernel, args: Sequence[str]) -> None:
    with state.preserve_toolchain():
        for toolchain in state.toolchains:
            state.set_toolchain(toolchain)
            print_line(f"Running command with toolchain `{toolchain}`")
            _run(state, kernel, args)


def _switch_toolchain(state: SessionState, kernel: Kernel, command: TemporaryToolchainRun) -> None:
    if command.args is None:
        state.set_toolchain(command.toolchain)
        log.info("active toolchain is now %s", command.toolchain)
        return
    with state.preserve_toolchain():
        state.set_toolchain(command.toolchain)
        _run(state, kernel, command.args)


# ---------------------------------------------------------------------------
# Core execution
# ---------------------------------------------------------------------------


def execute(state: SessionState, command: Command, kernel: Kernel) -> None:
    """Carry out an already classified command."""
    if isinstance(command, Exit):
        raise SystemExit(0)

    if isinstance(command, Help):
        print_line(USAGE)
        return

    if isinstance(command, SetPrompt):
        state.set_prompt(command.text)
        return

    if isinstance(command, WatchRun):
        if not kernel.has_cargo_watch():
            print_warning(WATCH_MISSING)
            return
        _run(state, kernel, (WATCH_SUBCOMMAND, *command.args))
        return

    if isinstance(command, RunFromFile):
        _preview_batch(command.path)
        return

    if isinstance(command, TemporaryToolchainRun):
        _switch_toolchain(state, kernel, command)
        return

    if isinstance(command, FanOutRun):
        _fan_out(state, kernel, command.args)
        return

    if isinstance(command, PlainRun):
        _run(state, kernel, command.args)
        return

    raise TypeError(f"unhandled command: {command!r}")


def dispatch(state: SessionState, line: str, *, kernel: Optional[Kernel] = None) -> None:
    """
    Parse and execute one REPL line.

    Raises:
        SystemExit: for `exit` / `quit`.
        ShellError: any per-command failure (bad file, failed cargo run, ...).
    """
    if not line.strip():
        return
    command = parse_line(line)
    log.debug("dispatch %r -> %r", line, command)
    execute(state, command, kernel if kernel is not None else Kernel())
