#!/usr/bin/env python3
# cargoshell/errors.py
from __future__ import annotations

"""
Error kinds raised by the shell.

Everything derives from ShellError so the REPL loop can catch one type,
print it and keep reading input. Startup code treats the same errors as fatal.
"""

from typing import Sequence


class ShellError(Exception):
    """Base class for every error the shell reports to the user."""


class ConfigError(ShellError):
    """Configuration or project manifest could not be read or is invalid."""


class SelectorNotFoundError(ShellError):
    """No `rustup` binary in $CARGO_HOME/bin or on PATH."""


class BatchFileError(ShellError):
    """A `<` batch file could not be opened or read."""


class UsageError(ShellError):
    """A special command was typed without its required parts."""


class InvocationError(ShellError):
    """
    A `rustup run` invocation failed to start or exited non-zero.

    Launch failures and non-zero exits are not distinguished; `returncode`
    is None when the process never started.
    """

    def __init__(self, message: str, *, argv: Sequence[str] = (), returncode: int | None = None) -> None:
        super().__init__(message)
        self.argv = list(argv)
        self.returncode = returncode
