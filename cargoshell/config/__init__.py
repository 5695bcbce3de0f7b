#!/usr/bin/env python3
# cargoshell/config/__init__.py
from __future__ import annotations

"""
Package for configuration and project metadata.

Provides:
- Layered loader for the `[cargo-shell]` settings (`config`).
- Reader for the crate name/version from Cargo.toml (`manifest`).
"""


from .config import ShellConfig, load_config, cargo_home, DEFAULTS
from .manifest import PackageInfo, read_package, find_root_manifest

__all__ = [
    "ShellConfig",
    "load_config",
    "cargo_home",
    "DEFAULTS",
    "PackageInfo",
    "read_package",
    "find_root_manifest",
]
