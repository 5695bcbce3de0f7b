#!/usr/bin/env python3
# cargoshell/session/state.py
from __future__ import annotations

"""
Mutable session state owned by the REPL loop.

Only the prompt template and the current toolchain override change after
start-up; everything else is fixed when the shell boots.
"""

from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Iterator

from cargoshell.errors import UsageError


class SessionState:
    """
    State shared between the REPL loop and the dispatcher.

    Attributes (read-only unless noted):
        prompt: Prompt template; mutable via set_prompt().
        rustup: Path to the toolchain selector binary.
        name / version: Crate metadata shown in the prompt.
        default_toolchain: Toolchain the session starts with.
        toolchains: Ordered, de-duplicated toolchains for `+` fan-out.
        current_toolchain: Active override; mutable via set_toolchain().
        cwd: Directory every invocation runs in.
    """

    __slots__ = (
        "_prompt",
        "_rustup",
        "_name",
        "_version",
        "_default_toolchain",
        "_toolchains",
        "_current_toolchain",
        "_cwd",
    )

    def __init__(
        self,
        *,
        prompt: str,
        rustup: Path | str,
        name: str,
        version: str,
        default_toolchain: str,
        toolchains: Iterable[str],
        cwd: Path | str,
    ) -> None:
        if not default_toolchain:
            raise UsageError("default toolchain must not be empty")
        self._prompt = prompt
        self._rustup = Path(rustup)
        self._name = name
        self._version = version
        self._default_toolchain = default_toolchain
        self._toolchains = tuple(dict.fromkeys(toolchains))
        self._current_toolchain = default_toolchain
        self._cwd = Path(cwd)

    # ---------------- Accessors ----------------

    @property
    def prompt(self) -> str:
        return self._prompt

    @property
    def rustup(self) -> Path:
        return self._rustup

    @property
    def name(self) -> str:
        return self._name

    @property
    def version(self) -> str:
        return self._version

    @property
    def default_toolchain(self) -> str:
        return self._default_toolchain

    @property
    def toolchains(self) -> tuple[str, ...]:
        return self._toolchains

    @property
    def current_toolchain(self) -> str:
        return self._current_toolchain

    @property
    def cwd(self) -> Path:
        return self._cwd

    # ---------------- Mutators ----------------

    def set_prompt(self, text: str) -> None:
        self._prompt = text

    def set_toolchain(self, name: str) -> None:
        """Switch the active toolchain override; the name is not validated against `toolchains`."""
        if not name:
            raise UsageError("toolchain name must not be empty")
        self._current_toolchain = name

    @contextmanager
    def preserve_toolchain(self) -> Iterator[str]:
        """
        Snapshot the current override and restore it on exit, including
        exits caused by an exception.
        """
        saved = self._current_toolchain
        try:
            yield saved
        finally:
            self._current_toolchain = saved

    # ---------------- Rendering ----------------

    def render_prompt(self) -> str:
        """Substitute {project}, {version} and {toolchain}; other text is kept verbatim."""
        return (
            self._prompt
            .replace("{project}", self._name)
            .replace("{version}", self._version)
            .replace("{toolchain}", self._current_toolchain)
        )

    def __repr__(self) -> str:
        return (
            f"SessionState(name={self._name!r}, version={self._version!r}, "
            f"toolchain={self._current_toolchain!r}, default={self._default_toolchain!r})"
        )
