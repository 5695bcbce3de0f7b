#!/usr/bin/env python3
# cargoshell/ui/ansi.py
from __future__ import annotations

"""
Terminal colors for status lines and log records.

Every line the shell prints about itself starts with a bracketed tag
(`[  OK  ]`, `[FAILED]`, `[ WARN ]`, `[error]`); `status` renders those.
"""

import ctypes
import os
import re
from typing import Optional

ANSI = {
    "reset": "\x1b[0m",
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "magenta": "\x1b[35m",
    "bright_black": "\x1b[90m",
}

# tag -> (label padded for alignment, color)
STATUS_TAGS = {
    "ok": ("  OK  ", "green"),
    "failed": ("FAILED", "red"),
    "warn": (" WARN ", "yellow"),
    "error": ("error", "red"),
}

ANSI_REGEX = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")

_vt_enabled_cache: Optional[bool] = None


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from text."""
    return ANSI_REGEX.sub("", text)


def _windows_console_vt() -> bool:
    # ENABLE_VIRTUAL_TERMINAL_PROCESSING on stdout (-11) or stderr (-12)
    kernel32 = ctypes.windll.kernel32  # type: ignore[attr-defined]
    for handle_id in (-11, -12):
        handle = kernel32.GetStdHandle(handle_id)
        if handle in (0, -1):
            continue
        mode = ctypes.c_uint()
        if kernel32.GetConsoleMode(handle, ctypes.byref(mode)) and \
                kernel32.SetConsoleMode(handle, mode.value | 0x0004):
            return True
    return False


def enable_windows_vt() -> bool:
    """
    Decide once per process whether escape sequences may be written.

    NO_COLOR turns colors off everywhere. On Windows the console is switched
    into VT mode unless the terminal already understands ANSI.
    """
    global _vt_enabled_cache
    if _vt_enabled_cache is None:
        if os.environ.get("NO_COLOR"):
            _vt_enabled_cache = False
        elif os.name != "nt" or os.environ.get("WT_SESSION") or os.environ.get("ANSICON"):
            _vt_enabled_cache = True
        else:
            try:
                _vt_enabled_cache = _windows_console_vt()
            except (AttributeError, OSError):
                _vt_enabled_cache = False
    return _vt_enabled_cache


def colorize(text: str, *styles: str) -> str:
    """Wrap text in the named styles; plain text when colors are off."""
    if not enable_windows_vt():
        return text
    seq = "".join(ANSI[s] for s in styles if s in ANSI)
    return f"{seq}{text}{ANSI['reset']}" if seq else text


def status(tag: str, text: str) -> str:
    """Render `[LABEL] text` for one of STATUS_TAGS, colored as a whole."""
    label, color = STATUS_TAGS[tag]
    return colorize(f"[{label}] {text}", color)
