#!/usr/bin/env python3
# cargoshell/system/kernel.py
"""
Process interface for the shell.

This module provides a small facade for:
- Locating the `rustup` toolchain selector.
- Running `rustup run <toolchain> cargo ...` invocations in the foreground.
- Probing whether the cargo-watch subcommand is installed.
"""

from __future__ import annotations

import logging
import os
import subprocess
import time
from pathlib import Path
from typing import Mapping, Optional, Sequence

from cargoshell.commands import BUILD_TOOL, WATCH_SUBCOMMAND, Invocation
from cargoshell.errors import InvocationError, SelectorNotFoundError

log = logging.getLogger(__name__)

SELECTOR_NAME = "rustup"


class Kernel:
    """
    Thin interface to run toolchain invocations.

    Notes:
        - Passes argument lists to subprocess; nothing goes through a shell.
        - Children inherit stdin/stdout/stderr so cargo output and prompts
          reach the user directly.
        - No timeout: a build runs until it finishes or is killed.
    """

    # ---- Runners ------------------------------------------------------------

    def run(self, invocation: Invocation) -> int:
        """
        Run an invocation and wait for it.

        Returns:
            The child's exit status (always 0).

        Raises:
            InvocationError: the child could not be started or exited non-zero.
        """
        argv = invocation.argv
        log.debug("%s", invocation)
        start = time.perf_counter()
        try:
            completed = subprocess.run(argv, cwd=invocation.cwd)
        except OSError as exc:
            raise InvocationError(
                f"Could not execute {SELECTOR_NAME} run command: {exc}", argv=argv) from exc
        log.debug("exit=%s after %.2fs", completed.returncode, time.perf_counter() - start)
        if completed.returncode != 0:
            raise InvocationError(
                f"Could not execute {SELECTOR_NAME} run command: "
                f"`{invocation}` exited with status {completed.returncode}",
                argv=argv,
                returncode=completed.returncode,
            )
        return completed.returncode

    def has_cargo_watch(self) -> bool:
        """Return True if `cargo watch --help` (cargo from PATH) succeeds; all of its output is discarded."""
        try:
            completed = subprocess.run(
                [BUILD_TOOL, WATCH_SUBCOMMAND, "--help"],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError as exc:
            log.debug("cargo-watch check failed to start: %s", exc)
            return False
        return completed.returncode == 0

    # ---- Discovery ----------------------------------------------------------

    @staticmethod
    def locate_selector(env: Optional[Mapping[str, str]] = None) -> Path:
        """
        Find the rustup binary.

        Looks in $CARGO_HOME/bin first, then every directory on PATH.

        Raises:
            SelectorNotFoundError: neither location has a rustup binary.
        """
        env = os.environ if env is None else env
        cargo_home = env.get("CARGO_HOME")
        if cargo_home:
            found = Kernel._which(SELECTOR_NAME, [str(Path(cargo_home) / "bin")], env)
            if found:
                return Path(found)
        else:
            log.debug("CARGO_HOME is not set; searching PATH only")

        found = Kernel._which(SELECTOR_NAME, env.get("PATH", "").split(os.pathsep), env)
        if found:
            return Path(found)
        raise SelectorNotFoundError(
            f"Could not find a `{SELECTOR_NAME}` binary in $CARGO_HOME/bin or on PATH")

    @staticmethod
    def _which(executable: str, paths: Sequence[str], env: Mapping[str, str]) -> Optional[str]:
        """
        A minimal 'which' over an explicit directory list.
        On Windows, PATHEXT variants are tried as well.
        """
        exts = env.get("PATHEXT", ".EXE;.BAT;.CMD").split(";") if os.name == "nt" else []
        for p in paths:
            if not p:
                continue
            full = os.path.join(p, executable)
            if os.path.isfile(full):
                return full
            for ext in exts:
                full_ext = full + ext
                if os.path.isfile(full_ext):
                    return full_ext
        return None
