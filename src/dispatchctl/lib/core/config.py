# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

import os
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import yaml  # pip install pyyaml

from .paths import config_root as _config_root_base, state_root as _state_root_base

DEFAULT_ARGV_SKIP = 1
DEFAULT_COMMAND = "help"

# ---------- Global config file ----------


def global_config_search_paths() -> list[Path]:
    """Return the ordered list of paths that will be checked for global config.

    - If DISPATCHCTL_CONFIG_FILE is set, only that single path is considered.
    - Otherwise, check in order:
        1) config_root()/config.yml (DISPATCHCTL_CONFIG_DIR or XDG config dir)
        2) sys.prefix/etc/dispatchctl/config.yml
        3) /etc/dispatchctl/config.yml
    """
    env_file = os.environ.get("DISPATCHCTL_CONFIG_FILE")
    if env_file:
        return [Path(env_file).expanduser().resolve()]

    user_cfg = _config_root_base() / "config.yml"
    sp_cfg = Path(sys.prefix) / "etc" / "dispatchctl" / "config.yml"
    etc_cfg = Path("/etc/dispatchctl/config.yml")
    return [user_cfg, sp_cfg, etc_cfg]


def global_config_path() -> Path:
    """Global config file path (first existing search path wins).

    An explicit DISPATCHCTL_CONFIG_FILE is returned even if missing to make
    intent visible to the user. If no candidate exists, the last path
    (/etc/dispatchctl/config.yml) is returned.
    """
    candidates = global_config_search_paths()
    if len(candidates) == 1:
        return candidates[0]

    for c in candidates:
        if c.is_file():
            return c.resolve()
    return candidates[-1]


def load_global_config() -> dict[str, Any]:
    cfg_path = global_config_path()
    if not cfg_path.is_file():
        return {}
    data = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        return {}
    return data


def get_global_section(key: str) -> dict[str, Any]:
    """Return a top-level section from the global config, defaulting to ``{}``.

    If the value under *key* is not a dict (e.g. ``dispatch: "oops"``),
    returns ``{}`` so callers can always use ``.get()``.
    """
    value = load_global_config().get(key, {})
    if not isinstance(value, dict):
        return {}
    return value or {}


# ---------- Path resolution ----------


def _resolve_path(
    env_var: str | None,
    config_key: tuple[str, str] | None,
    default: Callable[[], Path],
) -> Path:
    """Resolve a path: env var → global config → computed default."""
    if env_var:
        env = os.environ.get(env_var)
        if env:
            return Path(env).expanduser().resolve()

    if config_key:
        try:
            section = get_global_section(config_key[0])
            val = section.get(config_key[1])
            if val:
                return Path(val).expanduser().resolve()
        except (OSError, TypeError, yaml.YAMLError):
            pass

    return default().resolve()


def state_root() -> Path:
    """Writable state directory (holds the debug log).

    Precedence:
    - Environment variable DISPATCHCTL_STATE_DIR
    - Global config ``paths.state_root``
    - dispatchctl.lib.core.paths.state_root() (FHS/XDG handling)
    """
    return _resolve_path("DISPATCHCTL_STATE_DIR", ("paths", "state_root"), _state_root_base)


# ---------- Dispatch settings ----------


def _dispatch_section() -> dict[str, Any]:
    """Return the ``dispatch:`` section, exiting cleanly on unparsable YAML."""
    try:
        return get_global_section("dispatch")
    except yaml.YAMLError as e:
        raise SystemExit(f"Invalid config {global_config_path()}: {e}") from e


def get_argv_skip() -> int:
    """Return how many leading argv tokens precede the command name.

    Global config::

      dispatch:
        argv_skip: 1

    Default 1: Python puts the script path in ``sys.argv[0]``.
    """
    raw = _dispatch_section().get("argv_skip", DEFAULT_ARGV_SKIP)
    if isinstance(raw, bool) or not isinstance(raw, int) or raw < 0:
        raise SystemExit(
            f"Invalid dispatch.argv_skip in {global_config_path()}: "
            f"expected a non-negative integer, got {raw!r}"
        )
    return raw


def get_default_command() -> str:
    """Return the command run when no command name is given (default ``help``)."""
    value = _dispatch_section().get("default_command")
    return str(value) if value else DEFAULT_COMMAND
