#!/usr/bin/env python3
# cargoshell/interface/cli.py
from __future__ import annotations

"""
Interactive input frontends.

Selection order:
    1) prompt_toolkit (rich completion + history)
    2) readline / pyreadline3 (basic completion + history)
    3) plain input (last resort)

Every frontend's get_line() raises EOFError at end of input and
KeyboardInterrupt on Ctrl-C, leaving the reaction to the REPL loop.
"""

import sys
from pathlib import Path
from typing import Callable, Optional, Sequence

from cargoshell.interface.completion import current_token, suggest

# History location in the user home directory
HISTORY_FILE_PATH = Path.home() / ".cargo_shell_history"


class BaseCLI:
    """
    Plain `input()` frontend and base interface for the others.

    Subclasses override:
        - setup()
        - get_line(prompt)
        - teardown()

    Context manager support guarantees teardown.
    """

    def setup(self) -> None:
        pass

    def get_line(self, prompt: str) -> str:
        return input(prompt)

    def teardown(self) -> None:
        pass

    # Context manager helpers
    def __enter__(self) -> "BaseCLI":
        self.setup()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            self.teardown()
        except OSError:
            pass


# ===== Preferred: prompt_toolkit =====
class PromptToolkitCLI(BaseCLI):
    """Rich line editor with history and live completion."""

    def __init__(
        self,
        toolchains: Callable[[], Sequence[str]] = tuple,
        *,
        history_path: Path = HISTORY_FILE_PATH,
        enable_completion: bool = True,
    ) -> None:
        from prompt_toolkit import PromptSession
        from prompt_toolkit.completion import Completer, Completion, PathCompleter
        from prompt_toolkit.document import Document
        from prompt_toolkit.history import FileHistory

        self._history_path = history_path
        path_completer = PathCompleter(expanduser=True)

        class _Completer(Completer):
            def get_completions(self, document, complete_event):
                text_before_cursor = document.text_before_cursor
                stripped = text_before_cursor.lstrip()
                if stripped.startswith("<"):
                    # `< <path>`: complete file names for the batch path
                    path_text = stripped[1:].lstrip()
                    yield from path_completer.get_completions(
                        Document(path_text, len(path_text)), complete_event)
                    return
                replace_len = len(current_token(text_before_cursor))
                for word in suggest(text_before_cursor, toolchains()):
                    # replace exactly the current token
                    yield Completion(word, start_position=-replace_len)

        self._session = PromptSession(
            history=FileHistory(str(history_path)),
            completer=_Completer() if enable_completion else None,
            complete_while_typing=enable_completion,
        )

    def setup(self) -> None:
        self._history_path.parent.mkdir(parents=True, exist_ok=True)
        self._history_path.touch(exist_ok=True)

    def get_line(self, prompt: str) -> str:
        return self._session.prompt(prompt)

    def teardown(self) -> None:
        # prompt_toolkit flushes history automatically
        pass


# ===== Fallback: readline / pyreadline3 =====
class ReadlineCLI(BaseCLI):
    """Fallback editor with basic completion and history."""

    def __init__(
        self,
        toolchains: Callable[[], Sequence[str]] = tuple,
        *,
        history_path: Path = HISTORY_FILE_PATH,
        enable_completion: bool = True,
    ) -> None:
        import readline  # type: ignore[attr-defined]

        self.readline = readline
        self._toolchains = toolchains
        self._history_path = history_path
        self._enable_completion = enable_completion

    def setup(self) -> None:
        try:
            self._history_path.parent.mkdir(parents=True, exist_ok=True)
            self._history_path.touch(exist_ok=True)
            self.readline.read_history_file(str(self._history_path))
        except OSError:
            pass

        if not self._enable_completion:
            return

        self.readline.set_completer_delims(" \t\n")

        def _complete(text_fragment: str, state_index: int) -> Optional[str]:
            # Build the entire line buffer and return the Nth suggestion
            buffer_text = self.readline.get_line_buffer()
            candidates = suggest(buffer_text, self._toolchains())
            # keep a glued `++` / `+` / `~` in front of the completed word
            lead = text_fragment[:max(0, len(text_fragment) - len(current_token(buffer_text)))]
            matches = [lead + word for word in candidates if (lead + word).startswith(text_fragment)]
            return matches[state_index] if state_index < len(matches) else None

        self.readline.set_completer(_complete)
        self.readline.parse_and_bind("tab: complete")

    def teardown(self) -> None:
        self.readline.write_history_file(str(self._history_path))


def make_cli(
    toolchains: Callable[[], Sequence[str]] = tuple,
    *,
    history_path: Path = HISTORY_FILE_PATH,
    enable_completion: bool = True,
) -> BaseCLI:
    """
    Factory to select the best available CLI frontend at runtime.
    Piped input always gets the plain frontend.
    """
    if not sys.stdin.isatty():
        return BaseCLI()
    try:
        return PromptToolkitCLI(
            toolchains, history_path=history_path, enable_completion=enable_completion)
    except Exception:
        # prompt_toolkit missing or no usable console
        pass
    try:
        return ReadlineCLI(
            toolchains, history_path=history_path, enable_completion=enable_completion)
    except ImportError:
        # Last resort: plain input with no completion or history
        return BaseCLI()
