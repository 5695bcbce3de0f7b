#!/usr/bin/env python3
# cargoshell/interface/completion.py
from __future__ import annotations

"""
Command line completion utilities.

Token-aware suggestions for:
- First token: built-in verbs and common cargo subcommands.
- `++ <partial>`: configured toolchain names, then cargo subcommands.
- `+ <partial>` and `~<partial>`: cargo subcommands.
"""

from typing import Sequence

# Built-in verbs always available
BUILT_IN_COMMANDS: tuple[str, ...] = ("help", "exit", "quit", "p")

# Built-in cargo subcommands plus clippy, fmt and cargo-watch
CARGO_SUBCOMMANDS: tuple[str, ...] = (
    "add", "bench", "build", "check", "clean", "clippy", "doc", "fetch",
    "fix", "fmt", "generate-lockfile", "init", "install", "metadata", "new",
    "package", "publish", "remove", "run", "rustc", "rustdoc", "search",
    "test", "tree", "uninstall", "update", "vendor", "watch",
)


def _split_current_token(raw_input: str) -> tuple[list[str], str]:
    """
    Return (parts, current_prefix).

    Splits on whitespace; trailing whitespace appends an empty token to
    signal that a new token has started.
    """
    if not raw_input:
        return [], ""
    parts = raw_input.split()
    if raw_input[-1].isspace():
        parts.append("")
    current_prefix = parts[-1] if parts else ""
    return parts, current_prefix


def current_token(text_before_cursor: str) -> str:
    """
    Return the text a completion replaces: the last whitespace-separated
    token, minus a leading `++`, `+` or `~` glued to the first token.
    """
    raw_buffer = text_before_cursor.lstrip()
    for marker in ("++", "+", "~"):
        if raw_buffer.startswith(marker):
            raw_buffer = raw_buffer[len(marker):].lstrip()
            break
    _, current_prefix = _split_current_token(raw_buffer)
    return current_prefix


def _matching(universe: Sequence[str], prefix: str) -> list[str]:
    return sorted({w for w in universe if w.startswith(prefix)})


def suggest(text_before_cursor: str, toolchains: Sequence[str] = ()) -> list[str]:
    """
    Produce suggestions based on the current buffer content.

    Strategy:
      1) `++`: first argument completes toolchains, the next one subcommands.
      2) `+` / `~`: first argument completes subcommands.
      3) First token: built-ins and subcommands.
      4) Anything deeper: no suggestions (cargo flags are left to the user).
    """
    raw_buffer = text_before_cursor.lstrip()

    if raw_buffer.startswith("++"):
        parts, current_prefix = _split_current_token(raw_buffer[2:].lstrip())
        if len(parts) <= 1:
            return _matching(toolchains, current_prefix)
        if len(parts) == 2:
            return _matching(CARGO_SUBCOMMANDS, current_prefix)
        return []

    if raw_buffer.startswith(("+", "~")):
        parts, current_prefix = _split_current_token(raw_buffer[1:].lstrip())
        return _matching(CARGO_SUBCOMMANDS, current_prefix) if len(parts) <= 1 else []

    parts, current_prefix = _split_current_token(raw_buffer)
    if len(parts) <= 1:
        return _matching((*BUILT_IN_COMMANDS, *CARGO_SUBCOMMANDS), current_prefix)
    return []
