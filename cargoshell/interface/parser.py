#!/usr/bin/env python3
# cargoshell/interface/parser.py
from __future__ import annotations

"""
Line parsing for the shell.

Responsibilities:
- Split command text into arguments (single spaces, no quoting rules).
- Classify a REPL line into one of the command forms by literal prefix.
- Parse `<` batch files into argument vectors.

Classification order, first match wins:
    exit | quit      -> Exit
    help             -> Help
    p <text>         -> SetPrompt
    ~<command>       -> WatchRun
    < <path>         -> RunFromFile
    ++<tc> [<cmd>]   -> TemporaryToolchainRun
    +<cmd>           -> FanOutRun
    anything else    -> PlainRun
"""

from pathlib import Path
from typing import Iterable

from cargoshell.commands import (
    Command,
    Exit,
    FanOutRun,
    Help,
    PlainRun,
    RunFromFile,
    SetPrompt,
    TemporaryToolchainRun,
    WatchRun,
)
from cargoshell.errors import BatchFileError, UsageError

_QUOTES = "'\""


def split_args(text: str) -> tuple[str, ...]:
    """
    Split on single spaces.

    Consecutive spaces produce empty arguments, matching what the user typed.
    An empty string yields no arguments at all.
    """
    if text == "":
        return ()
    return tuple(text.split(" "))


def strip_quotes(text: str) -> str:
    """Strip any run of ' and " characters from both ends."""
    return text.strip(_QUOTES)


def parse_line(line: str) -> Command:
    """Classify one REPL line; surrounding whitespace is ignored."""
    cmd = line.strip()

    if cmd in ("exit", "quit"):
        return Exit()
    if cmd == "help":
        return Help()
    if cmd.startswith("p "):
        return SetPrompt(strip_quotes(cmd[2:]))
    if cmd.startswith("~"):
        return WatchRun(split_args(cmd[1:].strip()))
    if cmd.startswith("<"):
        return RunFromFile(cmd[1:].strip())
    if cmd.startswith("++"):
        parts = split_args(cmd[2:].strip())
        if not parts or not parts[0].strip():
            raise UsageError("usage: ++ <toolchain> [<command>]")
        toolchain, rest = parts[0].strip(), parts[1:]
        return TemporaryToolchainRun(toolchain, rest if rest else None)
    if cmd.startswith("+"):
        return FanOutRun(split_args(cmd[1:].strip()))
    return PlainRun(split_args(cmd))


def parse_batch_lines(lines: Iterable[str]) -> list[tuple[str, ...]]:
    """Turn batch-file lines into argument vectors; blanks and `#` comments are skipped."""
    commands: list[tuple[str, ...]] = []
    for raw in lines:
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        commands.append(split_args(line))
    return commands


def parse_batch_file(path: str | Path) -> list[tuple[str, ...]]:
    """
    Read a batch file and return its commands.

    Raises:
        BatchFileError: the file cannot be opened, read or decoded.
    """
    try:
        with open(path, encoding="utf-8") as f:
            return parse_batch_lines(f)
    except (OSError, UnicodeDecodeError) as exc:
        raise BatchFileError(f"Could not open filename {path}: {exc}") from exc
