from __future__ import annotations

import os
from pathlib import Path

TRUTHY = {"1", "true", "yes", "on"}
FALSY = {"0", "false", "no", "off"}


def load_env_file_if_present(
    path: str | Path = ".env", prefix: str = "AMADEUS_", override: bool = False
) -> dict[str, str]:
    """Load `AMADEUS_*` KEY=VALUE pairs from a .env file if present.

    Only keys starting with `prefix` are read so that unrelated settings in a
    shared .env stay out of the process environment. An `export ` prefix on
    a line is tolerated. Quoted values are unquoted.

    Returns the loaded pairs (os.environ is updated as a side effect; existing
    variables win unless `override` is set).
    """
    env_path = Path(path)
    loaded: dict[str, str] = {}
    if not env_path.exists():
        return loaded

    for raw in env_path.read_text(encoding="utf-8").splitlines():
        line = raw.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        if line.startswith("export "):
            line = line[len("export ") :].lstrip()
        key, value = line.split("=", 1)
        key = key.strip()
        if prefix and not key.startswith(prefix):
            continue
        value = value.strip().strip('"').strip("'")
        if override or key not in os.environ:
            os.environ[key] = value
        loaded[key] = value
    return loaded


def env_flag(name: str, default: bool | None = None) -> bool | None:
    """Read a boolean environment variable; unset or unrecognised gives `default`."""
    value = os.getenv(name)
    if value is None:
        return default
    value = value.strip().lower()
    if value in TRUTHY:
        return True
    if value in FALSY:
        return False
    return default
