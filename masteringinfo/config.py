from __future__ import annotations
import json
from dataclasses import replace

from masteringinfo.errors import ConfigError
from masteringinfo.types import ToolConfig


def _as_str(value, key: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"tools.{key} must be a non-empty string")
    return value


def load_tool_config(path: str | None = None) -> ToolConfig:
    """
    Load tool settings from a JSON file.

    The file holds a "tools" object; any key left out keeps its default:

        {"tools": {"afconvert": "/usr/bin/afconvert",
                   "afinfo": "afinfo",
                   "afconvert_flags": ["-f", "caff", "-d", "0", "--soundcheck-generate"],
                   "timeout": 600}}
    """
    config = ToolConfig()
    if path is None:
        return config
    try:
        with open(path, "r", encoding="utf-8") as f:
            j = json.load(f)
    except FileNotFoundError as exc:
        raise ConfigError(f"config file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in {path}: {exc}") from exc

    tools = j.get("tools", {}) if isinstance(j, dict) else None
    if not isinstance(tools, dict):
        raise ConfigError("'tools' must be an object")

    updates: dict = {}
    for key in ("afconvert", "afinfo"):
        if key in tools:
            updates[key] = _as_str(tools[key], key)
    if "afconvert_flags" in tools:
        flags = tools["afconvert_flags"]
        if not isinstance(flags, list) or not all(isinstance(x, str) for x in flags):
            raise ConfigError("tools.afconvert_flags must be a list of strings")
        updates["afconvert_flags"] = tuple(flags)
    if "timeout" in tools:
        timeout = tools["timeout"]
        if timeout is not None and (
            isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0
        ):
            raise ConfigError("tools.timeout must be a positive number or null")
        updates["timeout"] = None if timeout is None else float(timeout)
    return replace(config, **updates)


def apply_overrides(config: ToolConfig, *, afconvert: str | None = None, afinfo: str | None = None) -> ToolConfig:
    """Apply command line tool overrides on top of a loaded config."""
    updates = {}
    if afconvert:
        updates["afconvert"] = afconvert
    if afinfo:
        updates["afinfo"] = afinfo
    return replace(config, **updates) if updates else config
