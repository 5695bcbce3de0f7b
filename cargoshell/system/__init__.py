#!/usr/bin/env python3
# cargoshell/system/__init__.py
from __future__ import annotations

"""Subprocess execution and binary discovery."""


from .kernel import Kernel, SELECTOR_NAME

__all__ = ["Kernel", "SELECTOR_NAME"]
