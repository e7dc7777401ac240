"""Settings management for the initializr CLI.

Reads and writes ``~/.initializr/config`` using a dotenv-style format
(``KEY=VALUE``, ``#`` comments, blank lines allowed).

Resolution order: environment variables > config file > defaults.
"""

from __future__ import annotations

import os
from enum import unique
from pathlib import Path
from typing import NamedTuple

from initializr._compat import StrEnum

# ── Types ───────────────────────────────────────────────────────────


@unique
class SettingSource(StrEnum):
    ENV = "env"
    FILE = "file"
    DEFAULT = "default"


class SettingEntry(NamedTuple):
    key: str
    cli_key: str
    value: str
    source: SettingSource


# ── Paths ───────────────────────────────────────────────────────────

CONFIG_DIR = Path.home() / ".initializr"
CONFIG_PATH = CONFIG_DIR / "config"

# ── Setting keys ───────────────────────────────────────────────────

# Internal key -> env var name (also used as the key inside the config file)
_SETTING_KEYS: dict[str, str] = {
    "service_url": "INITIALIZR_SERVICE_URL",
    "timeout": "INITIALIZR_TIMEOUT",
    "extract": "INITIALIZR_EXTRACT",
}

_DEFAULTS: dict[str, str] = {
    "service_url": "https://start.spring.io",
    "timeout": "30",
    "extract": "1",
}

# CLI flag names (kebab-case) -> internal keys
_KEY_ALIASES: dict[str, str] = {
    "service-url": "service_url",
    "timeout": "timeout",
    "extract": "extract",
}

VALID_KEYS: list[str] = list(_KEY_ALIASES.keys())

_FALSY_VALUES = frozenset({"0", "false", "no", "off"})


def resolve_key(cli_key: str) -> str | None:
    """Resolve a CLI flag name to an internal setting key."""
    return _KEY_ALIASES.get(cli_key)


# ── Dotenv parser / serializer ─────────────────────────────────────


def _parse_dotenv(content: str) -> dict[str, str]:
    result: dict[str, str] = {}
    for line in content.splitlines():
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("#"):
            continue
        key, sep, value = trimmed.partition("=")
        if not sep:
            continue
        result[key.strip()] = value.strip()
    return result


def _serialize_dotenv(entries: dict[str, str]) -> str:
    return "".join(f"{key}={value}\n" for key, value in entries.items())


# ── File I/O ───────────────────────────────────────────────────────


def _read_config_file() -> dict[str, str]:
    if not CONFIG_PATH.is_file():
        return {}
    try:
        return _parse_dotenv(CONFIG_PATH.read_text(encoding="utf-8"))
    except OSError:
        return {}


def _write_config_file(entries: dict[str, str]) -> None:
    """Write the config file with owner-only permissions."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    CONFIG_PATH.write_text(_serialize_dotenv(entries), encoding="utf-8")
    CONFIG_PATH.chmod(0o600)


# ── Public API ─────────────────────────────────────────────────────


def load_settings() -> dict[str, str]:
    """Load all settings with resolution: env > file > defaults.

    Returns:
        A dict with keys: service_url, timeout, extract (raw string values).
    """
    file_entries = _read_config_file()
    merged = dict(_DEFAULTS)

    for internal_key, file_key in _SETTING_KEYS.items():
        if file_key in file_entries:
            merged[internal_key] = file_entries[file_key]

    for internal_key, env_name in _SETTING_KEYS.items():
        env_val = os.environ.get(env_name)
        if env_val is not None:
            merged[internal_key] = env_val

    return merged


def _cli_key_for(internal_key: str) -> str:
    return next(cli_k for cli_k, int_k in _KEY_ALIASES.items() if int_k == internal_key)


def get_setting_value(key: str) -> SettingEntry:
    """Get a single setting value with its source.

    Args:
        key: Internal key (e.g. "service_url", "timeout").

    Returns:
        A SettingEntry with the value and where it came from.
    """
    cli_key = _cli_key_for(key)

    env_name = _SETTING_KEYS[key]
    env_val = os.environ.get(env_name)
    if env_val is not None:
        return SettingEntry(key=key, cli_key=cli_key, value=env_val, source=SettingSource.ENV)

    file_entries = _read_config_file()
    if env_name in file_entries:
        return SettingEntry(key=key, cli_key=cli_key, value=file_entries[env_name], source=SettingSource.FILE)

    return SettingEntry(key=key, cli_key=cli_key, value=_DEFAULTS[key], source=SettingSource.DEFAULT)


def set_setting_value(key: str, value: str) -> None:
    """Store a setting value in the config file.

    Args:
        key: Internal key (e.g. "service_url").
        value: The value to store.
    """
    file_entries = _read_config_file()
    file_entries[_SETTING_KEYS[key]] = value
    _write_config_file(file_entries)


def list_settings() -> list[SettingEntry]:
    """List all setting values with their sources."""
    return [get_setting_value(internal_key) for internal_key in _KEY_ALIASES.values()]


# ── Typed accessors ────────────────────────────────────────────────


def get_service_url() -> str:
    return load_settings()["service_url"].rstrip("/")


def get_timeout() -> float:
    """Return the HTTP timeout in seconds, falling back to the default on bad values."""
    raw = load_settings()["timeout"]
    try:
        timeout = float(raw)
    except ValueError:
        return float(_DEFAULTS["timeout"])
    if timeout <= 0:
        return float(_DEFAULTS["timeout"])
    return timeout


def parse_flag(value: str) -> bool:
    """Interpret a stored on/off setting; anything but an explicit falsy word is on."""
    return value.strip().lower() not in _FALSY_VALUES


def is_extract_enabled() -> bool:
    return parse_flag(load_settings()["extract"])
