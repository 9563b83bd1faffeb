import os
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import yaml  # pip install pyyaml

from .._util.logging_utils import _log_debug
from .paths import state_root as _state_root_base

# ---------- Defaults ----------

DEFAULT_CANVAS_WIDTH = 80
DEFAULT_CANVAS_HEIGHT = 1

DEFAULT_ROLE_STYLES: dict[str, str] = {
    "text": "",
    "label": "bold",
    "title": "bold magenta",
    "border": "bright_black",
    "arrow": "cyan",
    "warning": "yellow",
    "error": "bold red",
}


# ---------- Global config file ----------


def global_config_search_paths() -> list[Path]:
    """Return the ordered list of paths that will be checked for global config.

    Behavior matches global_config_path():
    - If GRIDTEXT_CONFIG_FILE is set, only that single path is considered.
    - Otherwise, check in order:
        1) ${XDG_CONFIG_HOME:-~/.config}/gridtext/config.yml
        2) sys.prefix/etc/gridtext/config.yml
        3) /etc/gridtext/config.yml
    """
    env_file = os.environ.get("GRIDTEXT_CONFIG_FILE")
    if env_file:
        return [Path(env_file).expanduser().resolve()]

    xdg_home = os.environ.get("XDG_CONFIG_HOME")
    user_cfg = (Path(xdg_home) if xdg_home else Path.home() / ".config") / "gridtext" / "config.yml"
    sp_cfg = Path(sys.prefix) / "etc" / "gridtext" / "config.yml"
    etc_cfg = Path("/etc/gridtext/config.yml")
    return [user_cfg, sp_cfg, etc_cfg]


def global_config_path() -> Path:
    """Global config file path (resolved based on search paths).

    The first existing candidate wins.  An explicit GRIDTEXT_CONFIG_FILE is
    returned even if missing, to make intent visible to the user.  If no
    candidate exists, the last one (/etc/gridtext/config.yml) is returned.
    """
    candidates = global_config_search_paths()
    if len(candidates) == 1:
        return candidates[0]

    for c in candidates:
        if c.is_file():
            return c.resolve()
    return candidates[-1]


def load_global_config() -> dict[str, Any]:
    """Parse the global config file; a missing file yields ``{}``.

    Raises ``yaml.YAMLError`` for malformed files.
    """
    cfg_path = global_config_path()
    if not cfg_path.is_file():
        return {}
    data = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        # Not logged: the log location itself is resolved from this file.
        return {}
    return data


def get_global_section(key: str) -> dict[str, Any]:
    """Return a top-level section from the global config, defaulting to ``{}``.

    If the value under *key* is not a dict (e.g. ``render: "oops"``), returns
    ``{}`` so callers can use ``.get()`` safely.
    """
    cfg = load_global_config()
    value = cfg.get(key, {})
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
        except (OSError, KeyError, TypeError, yaml.YAMLError):
            pass

    return default().resolve()


def state_root() -> Path:
    """Writable state directory (holds the debug log).

    Precedence:
    - Environment variable GRIDTEXT_STATE_DIR
    - Global config ``paths.state_root``
    - Otherwise gridtext.core.paths.state_root() (FHS/XDG handling)
    """
    return _resolve_path("GRIDTEXT_STATE_DIR", ("paths", "state_root"), _state_root_base)


# ---------- Render settings ----------


def get_role_styles() -> dict[str, str]:
    """Return role → rich style mapping: defaults overlaid by ``render.styles``.

    Non-string values in the config are ignored.
    """
    styles = dict(DEFAULT_ROLE_STYLES)
    overrides = get_global_section("render").get("styles") or {}
    if not isinstance(overrides, dict):
        _log_debug("config: render.styles is not a mapping, using defaults")
        return styles
    for role, style in overrides.items():
        if isinstance(style, str):
            styles[str(role)] = style
        else:
            _log_debug(f"config: ignoring non-string style for role {role!r}")
    return styles


def get_strip_padding() -> bool:
    """Return whether serialised canvases drop pad markers (default True)."""
    value = get_global_section("render").get("strip_padding", True)
    if not isinstance(value, bool):
        _log_debug(f"config: render.strip_padding must be a boolean, got {value!r}")
        return True
    return value


def _positive_int(value: Any, default: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return default
    return value


def get_canvas_size() -> tuple[int, int]:
    """Return the default ``(width, height)`` for canvases created by the CLI."""
    section = get_global_section("canvas")
    return (
        _positive_int(section.get("width"), DEFAULT_CANVAS_WIDTH),
        _positive_int(section.get("height"), DEFAULT_CANVAS_HEIGHT),
    )
