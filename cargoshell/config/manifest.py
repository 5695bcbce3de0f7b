#!/usr/bin/env python3
# cargoshell/config/manifest.py
from __future__ import annotations

"""
Project name and version from the nearest Cargo.toml.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping
import tomllib

from cargoshell.errors import ConfigError

MANIFEST_NAME = "Cargo.toml"
# Cargo's own default when [package].version is omitted
DEFAULT_VERSION = "0.0.0"


@dataclass(frozen=True)
class PackageInfo:
    name: str
    version: str
    manifest_path: Path


def find_root_manifest(cwd: Path) -> Path:
    """Return the first Cargo.toml found walking up from `cwd`."""
    for directory in (cwd, *cwd.parents):
        candidate = directory / MANIFEST_NAME
        if candidate.is_file():
            return candidate
    raise ConfigError(
        f"Could not find root manifest for project: no {MANIFEST_NAME} in {cwd} or any parent directory")


def _read_manifest(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Could not read manifest {path}: {exc}") from exc


def _inherited_version(manifest_path: Path) -> str:
    """Resolve `version.workspace = true`, starting with the manifest itself."""
    for directory in (manifest_path.parent, *manifest_path.parent.parents):
        candidate = directory / MANIFEST_NAME
        if not candidate.is_file():
            continue
        workspace = _read_manifest(candidate).get("workspace", {})
        version = workspace.get("package", {}).get("version") if isinstance(workspace, Mapping) else None
        if isinstance(version, str):
            return version
    raise ConfigError(
        f"{manifest_path} inherits its version from a workspace, but no workspace defines [workspace.package].version")


def read_package(cwd: Path | None = None) -> PackageInfo:
    """
    Read [package].name and [package].version for the crate containing `cwd`.

    Raises ConfigError when there is no manifest, the manifest is a virtual
    workspace, or the fields have unexpected types.
    """
    cwd = (Path.cwd() if cwd is None else Path(cwd)).resolve()
    manifest_path = find_root_manifest(cwd)
    data = _read_manifest(manifest_path)

    package = data.get("package")
    if not isinstance(package, Mapping):
        raise ConfigError(f"Could not get package for current crate: {manifest_path} has no [package] table")

    name = package.get("name")
    if not isinstance(name, str) or not name:
        raise ConfigError(f"{manifest_path}: [package].name must be a non-empty string")

    version = package.get("version", DEFAULT_VERSION)
    if isinstance(version, Mapping) and version.get("workspace") is True:
        version = _inherited_version(manifest_path)
    elif not isinstance(version, str):
        raise ConfigError(f"{manifest_path}: [package].version must be a string")

    return PackageInfo(name=name, version=version, manifest_path=manifest_path)
