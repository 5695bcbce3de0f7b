#!/usr/bin/env python3
# cargoshell/ui/console.py
from __future__ import annotations

import sys
import threading

from .ansi import status

# Shared by print_line and the logging handler so lines never interleave.
PRINT_MUTEX = threading.Lock()


def print_line(text: str = "", *, file=None, flush: bool = False) -> None:
    """Print a single line while holding the shared print mutex."""
    stream = file if file is not None else sys.stdout
    with PRINT_MUTEX:
        stream.write(f"{text}\n")
        if flush:
            stream.flush()


def print_warning(text: str) -> None:
    """Yellow warning on stderr; never raises."""
    print_line(status("warn", text), file=sys.stderr, flush=True)


def print_error(text: str) -> None:
    """Red error line on stdout, where the REPL reports failed commands."""
    print_line(status("error", text), flush=True)
