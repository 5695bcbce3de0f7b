#!/usr/bin/env python3
# cargoshell/__init__.py
from __future__ import annotations
"""
cargo-shell: an interactive shell for cargo with per-command toolchain switching.

Keep this module import-light; subpackages expose their own APIs.
"""

__version__ = "0.1.0"
