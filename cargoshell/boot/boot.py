#!/usr/bin/env python3
# cargoshell/boot/boot.py
from __future__ import annotations
"""
Boot sequence for cargo-shell.

Builds everything the REPL needs: configuration, logger, crate metadata,
the rustup location, the session state and a line-editor frontend.
Any failing step aborts start-up.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Mapping, Optional

from cargoshell.config import ShellConfig, load_config, read_package
from cargoshell.interface import BaseCLI, make_cli
from cargoshell.session import SessionState
from cargoshell.system import Kernel
from cargoshell.ui import init_logger, print_line, status

log = logging.getLogger(__name__)


@dataclass(slots=True)
class BootState:
    session: SessionState
    config: ShellConfig
    logger: logging.Logger
    kernel: Kernel
    cli: BaseCLI


def _step(label: str, fn: Callable[[], Any], *, verbose: bool = False) -> Any:
    """Run a boot step with status output."""
    try:
        out = fn()
    except Exception as exc:
        print_line(
            status("failed", f"{label} ({type(exc).__name__}: {exc})")
        )
        raise
    if verbose:
        print_line(status("ok", label))
    log.debug("[  OK  ] %s", label)
    return out


def boot_sequence(
    cwd: Optional[Path] = None,
    env: Optional[Mapping[str, str]] = None,
    *,
    cli_factory: Callable[..., BaseCLI] = make_cli,
) -> BootState:
    cwd = Path.cwd() if cwd is None else Path(cwd)
    env = os.environ if env is None else env

    # ---------- config + logging ----------
    config: ShellConfig = _step("Load configuration", lambda: load_config(cwd, env))
    verbose = config.show_boot
    if verbose:
        print_line(status("ok", "Load configuration"))

    logger = _step(
        "Initialize logger",
        lambda: init_logger("cargoshell", config.log_level, logfile=config.log_file_path),
        verbose=verbose,
    )
    for source in config.sources:
        log.debug("config source: %s", source)

    # ---------- project + toolchain selector ----------
    package = _step("Read project manifest", lambda: read_package(cwd), verbose=verbose)
    rustup = _step("Locate rustup binary", lambda: Kernel.locate_selector(env), verbose=verbose)
    log.debug("rustup binary found at %s", rustup)

    session = _step(
        "Build session state",
        lambda: SessionState(
            prompt=config.prompt,
            rustup=rustup,
            name=package.name,
            version=package.version,
            default_toolchain=config.default_toolchain,
            toolchains=config.toolchains,
            cwd=cwd,
        ),
        verbose=verbose,
    )

    # ---------- interface ----------
    cli = _step(
        "Select line editor",
        lambda: cli_factory(
            lambda: session.toolchains,
            history_path=config.history_file_path,
            enable_completion=config.enable_completion,
        ),
        verbose=verbose,
    )
    _step("Boot complete", lambda: None, verbose=verbose)

    return BootState(
        session=session,
        config=config,
        logger=logger,
        kernel=Kernel(),
        cli=cli,
    )
