from __future__ import annotations

from datetime import date, datetime, time
import os
from pathlib import Path
from typing import TypeAlias
import tomllib

from dissectopt.exceptions import ConfigError

DEFAULT_CONFIG_NAME = "dissectopt.toml"
CONFIG_PATH_ENV = "DISSECTOPT_CONFIG"

TomlScalar: TypeAlias = str | int | float | bool | None | date | datetime | time
TomlValue: TypeAlias = TomlScalar | list["TomlValue"] | dict[str, "TomlValue"]
TomlTable: TypeAlias = dict[str, TomlValue]

# [dissect] list keys and the long options they expand to, in scan order.
_NAME_LIST_OPTIONS: tuple[tuple[str, str], ...] = (
    ("disable_protocols", "--disable-protocol"),
    ("enable_protocols", "--enable-protocol"),
    ("enable_heuristics", "--enable-heuristic"),
    ("disable_heuristics", "--disable-heuristic"),
)


def _load_toml(path: Path) -> TomlTable:
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    except OSError:
        return {}
    try:
        data = tomllib.loads(raw)
    except tomllib.TOMLDecodeError:
        return {}
    return data if isinstance(data, dict) else {}


def resolve_config_path(root: Path | None = None, config_path: Path | None = None) -> Path:
    if config_path is not None:
        return config_path
    override = os.getenv(CONFIG_PATH_ENV, "").strip()
    if override:
        return Path(override)
    base = root if root is not None else Path.cwd()
    return base / DEFAULT_CONFIG_NAME


def load_config(root: Path | None = None, config_path: Path | None = None) -> TomlTable:
    return _load_toml(resolve_config_path(root=root, config_path=config_path))


def _table_section(data: TomlTable, name: str) -> TomlTable:
    section = data.get(name, {})
    return section if isinstance(section, dict) else {}


def dissect_section(data: TomlTable) -> TomlTable:
    return _table_section(data, "dissect")


def registry_section(data: TomlTable) -> TomlTable:
    return _table_section(data, "registry")


def dissect_defaults(
    root: Path | None = None, config_path: Path | None = None
) -> TomlTable:
    return dissect_section(load_config(root=root, config_path=config_path))


def registry_defaults(
    root: Path | None = None, config_path: Path | None = None
) -> TomlTable:
    return registry_section(load_config(root=root, config_path=config_path))


def _normalize_name_list(value: TomlValue) -> list[str]:
    items: list[str] = []
    if value is None:
        return items
    if isinstance(value, str):
        items = [part.strip() for part in value.split(",") if part.strip()]
    elif isinstance(value, (list, tuple, set)):
        for item in value:
            if isinstance(item, str):
                items.extend([part.strip() for part in item.split(",") if part.strip()])
    return [item for item in items if item]


def _as_option_text(key: str, value: TomlValue) -> str:
    if isinstance(value, bool) or not isinstance(value, str):
        raise ConfigError(f'[dissect] {key} must be a string, got {value!r}')
    return value


def config_argv(section: TomlTable | None) -> list[str]:
    """Expand a ``[dissect]`` table into option tokens.

    The tokens are scanned ahead of the command line, so anything given on
    the command line is applied after them.
    """
    if not section:
        return []
    argv: list[str] = []
    if "time_stamp" in section:
        argv.extend(["-t", _as_option_text("time_stamp", section["time_stamp"])])
    if "seconds" in section:
        argv.extend(["-u", _as_option_text("seconds", section["seconds"])])
    if "name_resolution" in section:
        resolution = section["name_resolution"]
        if resolution is False:
            argv.append("-n")
        else:
            argv.extend(["-N", _as_option_text("name_resolution", resolution)])
    for rule in _normalize_rule_list(section.get("decode_as")):
        argv.extend(["-d", rule])
    if "keytab" in section:
        argv.extend(["-K", _as_option_text("keytab", section["keytab"])])
    for key, flag in _NAME_LIST_OPTIONS:
        for name in _normalize_name_list(section.get(key)):
            argv.extend([flag, name])
    return argv


def _normalize_rule_list(value: TomlValue) -> list[str]:
    # Decode-as rules contain commas, so they are never comma-split.
    if value is None:
        return []
    if isinstance(value, str):
        return [value.strip()] if value.strip() else []
    if isinstance(value, list):
        return [item.strip() for item in value if isinstance(item, str) and item.strip()]
    raise ConfigError(f"[dissect] decode_as must be a string or a list, got {value!r}")
