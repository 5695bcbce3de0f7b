#!/usr/bin/env python3
# cargoshell/interface/shell.py
from __future__ import annotations

"""
The read-dispatch loop.

One line is read, dispatched and fully completed (including any cargo
process) before the next prompt is shown.
"""

import logging
from typing import Optional

from cargoshell.errors import ShellError
from cargoshell.interface.cli import BaseCLI
from cargoshell.interface.handler import dispatch
from cargoshell.session import SessionState
from cargoshell.system import Kernel
from cargoshell.ui import print_error, print_line

log = logging.getLogger(__name__)


def run_shell(state: SessionState, cli: BaseCLI, *, kernel: Optional[Kernel] = None) -> int:
    """
    Run the REPL until end of input.

    Ctrl-C at the prompt or during a command re-prompts. Command errors are
    printed and the loop continues. `exit` / `quit` propagate SystemExit to the caller.
    """
    kernel = kernel if kernel is not None else Kernel()
    with cli:
        while True:
            try:
                line = cli.get_line(state.render_prompt())
            except KeyboardInterrupt:
                continue
            except EOFError:
                print_line()
                break

            try:
                dispatch(state, line, kernel=kernel)
            except KeyboardInterrupt:
                # cargo already got the SIGINT; `~` sessions only end this way
                log.debug("interrupted: %r", line)
                print_line()
            except ShellError as exc:
                log.debug("command failed: %r", line, exc_info=True)
                print_error(str(exc))
    return 0
