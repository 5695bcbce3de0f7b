#!/usr/bin/env python3
# cargoshell/boot/__init__.py
from __future__ import annotations
"""
Boot sequence package.

Exports:
- boot_sequence: start-up pipeline with [ OK ] / [FAILED] lines.
- BootState: Dataclass holding the session, config, logger, kernel and frontend.
"""


from .boot import BootState, boot_sequence

__all__ = ["boot_sequence", "BootState"]
