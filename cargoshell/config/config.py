#!/usr/bin/env python3
# cargoshell/config/config.py
from __future__ import annotations

"""
Configuration loader for the shell (stdlib-only).

Settings live in the `[cargo-shell]` table of Cargo's own config files, so a
project can ship its prompt and toolchain matrix next to its other Cargo
settings.

Precedence (low → high):
  1) Built-in defaults
  2) $CARGO_HOME/config.toml (CARGO_HOME defaults to ~/.cargo)
  3) .cargo/config.toml in every ancestor of the working directory,
     farthest first so the closest directory wins
  4) Environment variables CARGO_SHELL_<KEY> ('-' in keys becomes '_')

Validation:
  - PROMPT: str (may be empty)
  - DEFAULT_TOOLCHAIN: non-empty str
  - TOOLCHAINS: non-empty list of str, or a comma/space separated string
  - LOG_LEVEL: one of {'DEBUG','INFO','WARNING','ERROR','CRITICAL'}
  - LOG_FILE: None or path
  - HISTORY_FILE: path
  - ENABLE_COMPLETION / SHOW_BOOT: bool
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping
import os
import re
import tomllib

from cargoshell.errors import ConfigError

SECTION = "cargo-shell"
ENV_PREFIX = "CARGO_SHELL_"

# ---------- defaults ----------

DEFAULTS: dict[str, Any] = {
    "PROMPT": ">> ",
    "DEFAULT_TOOLCHAIN": "stable",
    "TOOLCHAINS": ["stable", "beta", "nightly"],
    "LOG_LEVEL": "WARNING",
    "LOG_FILE": None,
    "HISTORY_FILE": "~/.cargo_shell_history",
    "ENABLE_COMPLETION": True,
    "SHOW_BOOT": False,
}


# ---------- data model ----------

@dataclass(frozen=True)
class ShellConfig:
    prompt: str
    default_toolchain: str
    toolchains: tuple[str, ...]

    log_level: str
    log_file_path: Path | None
    history_file_path: Path
    enable_completion: bool
    show_boot: bool

    # Files that contributed, lowest precedence first
    sources: tuple[Path, ...] = ()
    # Unrecognized keys preserved for debugging/forward-compat
    extra: dict[str, Any] = field(default_factory=dict)


# ---------- file discovery ----------

def cargo_home(env: Mapping[str, str]) -> Path:
    value = env.get("CARGO_HOME")
    if value:
        return Path(os.path.expanduser(value))
    return Path.home() / ".cargo"


def _first_existing(*candidates: Path) -> Path | None:
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    return None


def _find_config_files(cwd: Path, env: Mapping[str, str]) -> list[Path]:
    """Return config files in ascending precedence order, without duplicates."""
    found: list[Path] = []
    home = cargo_home(env)
    home_file = _first_existing(home / "config.toml", home / "config")
    if home_file is not None:
        found.append(home_file)

    for directory in reversed([cwd, *cwd.parents]):
        candidate = _first_existing(
            directory / ".cargo" / "config.toml",
            directory / ".cargo" / "config",
        )
        if candidate is None:
            continue
        if any(candidate.resolve() == seen.resolve() for seen in found):
            # ~/.cargo is both CARGO_HOME and an ancestor's .cargo
            continue
        found.append(candidate)
    return found


# ---------- file loaders ----------

def _load_toml_file(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Could not parse {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Could not read {path}: {exc}") from exc


def _section(data: Mapping[str, Any], path: Path) -> dict[str, Any]:
    table = data.get(SECTION, {})
    if not isinstance(table, Mapping):
        raise ConfigError(f"'{SECTION}' in {path} must be a table")
    return _normalize_keys(table)


def _normalize_keys(d: Mapping[str, Any]) -> dict[str, Any]:
    return {str(k).upper().replace("-", "_"): v for k, v in d.items()}


def _env_overrides(env: Mapping[str, str]) -> dict[str, Any]:
    return {
        k[len(ENV_PREFIX):]: v
        for k, v in env.items()
        if k.startswith(ENV_PREFIX) and len(k) > len(ENV_PREFIX)
    }


# ---------- normalization & coercion ----------

_BOOL_TRUE = {"1", "true", "yes", "y", "on"}
_BOOL_FALSE = {"0", "false", "no", "n", "off"}


def _as_bool(key: str, val: Any) -> bool:
    if isinstance(val, bool):
        return val
    s = str(val).strip().lower()
    if s in _BOOL_TRUE:
        return True
    if s in _BOOL_FALSE:
        return False
    raise ConfigError(f"{key} must be a boolean, got: {val!r}")


def _as_str(key: str, val: Any) -> str:
    if not isinstance(val, str):
        raise ConfigError(f"{key} must be a string, got: {val!r}")
    return val


def _as_opt_str(val: Any) -> str | None:
    return None if val is None or str(val).strip().lower() in {"", "none"} else str(val)


def _as_toolchain(key: str, val: Any) -> str:
    name = _as_str(key, val).strip()
    if not name:
        raise ConfigError(f"{key} must not be empty")
    return name


def _as_toolchains(key: str, val: Any) -> tuple[str, ...]:
    if isinstance(val, str):
        items = [t for t in re.split(r"[,\s]+", val) if t]
    elif isinstance(val, (list, tuple)):
        items = [_as_toolchain(key, item) for item in val]
    else:
        raise ConfigError(f"{key} must be a list of toolchain names, got: {val!r}")
    if not items:
        raise ConfigError(f"{key} must name at least one toolchain")
    # ordered set
    return tuple(dict.fromkeys(items))


def _as_log_level(val: Any) -> str:
    up = str(val).strip().upper()
    allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
    if up not in allowed:
        raise ConfigError(
            f"LOG_LEVEL must be one of {sorted(allowed)}, got {val!r}")
    return up


def _as_path(val: Any) -> Path:
    s = os.path.expandvars(os.path.expanduser(str(val)))
    return Path(s)


def _as_opt_path(val: Any) -> Path | None:
    v = _as_opt_str(val)
    return None if v is None else _as_path(v)


# ---------- merge & load ----------

def _merge_sources(cwd: Path, env: Mapping[str, str]) -> tuple[dict[str, Any], list[Path]]:
    merged: dict[str, Any] = dict(DEFAULTS)
    files = _find_config_files(cwd, env)
    for file in files:
        merged.update(_section(_load_toml_file(file), file))
    merged.update(_env_overrides(env))
    return merged, files


def _validate_and_build(config: Mapping[str, Any], sources: list[Path]) -> ShellConfig:
    def get(key: str) -> Any:
        return config.get(key, DEFAULTS[key])

    recognized = set(DEFAULTS.keys())
    extra = {k: v for k, v in config.items() if k not in recognized}

    return ShellConfig(
        prompt=_as_str("PROMPT", get("PROMPT")),
        default_toolchain=_as_toolchain("DEFAULT_TOOLCHAIN", get("DEFAULT_TOOLCHAIN")),
        toolchains=_as_toolchains("TOOLCHAINS", get("TOOLCHAINS")),
        log_level=_as_log_level(get("LOG_LEVEL")),
        log_file_path=_as_opt_path(get("LOG_FILE")),
        history_file_path=_as_path(get("HISTORY_FILE")),
        enable_completion=_as_bool("ENABLE_COMPLETION", get("ENABLE_COMPLETION")),
        show_boot=_as_bool("SHOW_BOOT", get("SHOW_BOOT")),
        sources=tuple(sources),
        extra=extra,
    )


# ---------- public API ----------

def load_config(cwd: Path | None = None, env: Mapping[str, str] | None = None) -> ShellConfig:
    """
    Load, merge, normalize, and validate configuration.
    No filesystem side-effects. Raises ConfigError on any invalid source.
    """
    cwd = Path.cwd() if cwd is None else Path(cwd)
    env = os.environ if env is None else env
    raw, sources = _merge_sources(cwd.resolve(), env)
    return _validate_and_build(raw, sources)
