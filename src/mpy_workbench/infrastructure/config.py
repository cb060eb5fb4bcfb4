"""Settings from the environment and the workspace .env file."""

from __future__ import annotations

import os
from pathlib import Path


def read_env_file(keys: list[str]) -> dict[str, str]:
    """Parse .env file and return values for requested keys.

    Does NOT load into os.environ — callers decide what to do with values.
    """
    env_file = Path.cwd() / ".env"
    try:
        content = env_file.read_text()
    except OSError:
        return {}

    result: dict[str, str] = {}
    wanted = set(keys)

    for line in content.splitlines():
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("#"):
            continue
        eq_idx = trimmed.find("=")
        if eq_idx == -1:
            continue
        key = trimmed[:eq_idx].strip()
        if key not in wanted:
            continue
        value = trimmed[eq_idx + 1 :].strip()
        if (value.startswith('"') and value.endswith('"')) or (value.startswith("'") and value.endswith("'")):
            value = value[1:-1]
        if value:
            result[key] = value

    return result


def get_setting(name: str, default: str, env_config: dict[str, str] | None = None) -> str:
    """Resolve a setting: os.environ first, then .env values, then the default."""
    env_config = env_config if env_config is not None else read_env_file([name])
    return os.environ.get(name) or env_config.get(name, default)


_SETTING_KEYS = ["MPY_WORKBENCH_DIR", "MPY_WORKBENCH_CONFIG_FILE", "MPY_DEVICE_ROOT"]
_env_config = read_env_file(_SETTING_KEYS)

WORKBENCH_DIR: str = get_setting("MPY_WORKBENCH_DIR", ".mpy-workbench", _env_config)
CONFIG_FILE: str = get_setting("MPY_WORKBENCH_CONFIG_FILE", "config.json", _env_config)
DEFAULT_DEVICE_ROOT: str = get_setting("MPY_DEVICE_ROOT", "/", _env_config)
