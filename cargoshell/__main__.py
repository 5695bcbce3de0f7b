#!/usr/bin/env python3
# cargoshell/__main__.py
from __future__ import annotations

import sys

from cargoshell import __version__
from cargoshell.boot import boot_sequence
from cargoshell.errors import ShellError
from cargoshell.interface import run_shell
from cargoshell.ui import print_line

# Exit status when the shell cannot start
STARTUP_FAILURE = 255


def main() -> int:
    print_line(f"Welcome to cargo-shell v{__version__}")
    try:
        state = boot_sequence()
    except ShellError as exc:
        print_line(f"Error was {exc}", file=sys.stderr)
        return STARTUP_FAILURE
    return run_shell(state.session, state.cli, kernel=state.kernel)


if __name__ == "__main__":
    sys.exit(main())
