#!/usr/bin/env python3
# cargoshell/ui/__init__.py
from __future__ import annotations
# Re-export convenient top-level API
from .ansi import ANSI, STATUS_TAGS, strip_ansi, enable_windows_vt, colorize, status
from .console import PRINT_MUTEX, print_line, print_warning, print_error
from .logging import init_logger, ColorizingStreamHandler, PlainFormatter

__all__ = [
    "ANSI",
    "strip_ansi",
    "enable_windows_vt",
    "colorize",
    "STATUS_TAGS",
    "status",
    "PRINT_MUTEX",
    "print_line",
    "print_warning",
    "print_error",
    "init_logger",
    "ColorizingStreamHandler",
    "PlainFormatter",
]
