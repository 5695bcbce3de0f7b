#!/usr/bin/env python3
# cargoshell/session/__init__.py
from __future__ import annotations

from .state import SessionState

__all__ = ["SessionState"]
