from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _load_env_file(path: Path) -> None:
    """Populate os.environ with values from a simple KEY=VALUE .env file.

    Existing environment variables always win so callers can layer files without
    clobbering explicit runtime configuration.
    """

    if not path.exists():
        return

    for line in path.read_text(encoding="utf-8").splitlines():
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("#"):
            continue
        if "=" not in trimmed:
            continue
        key, value = trimmed.split("=", 1)
        os.environ.setdefault(key.strip(), value.strip())


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


@dataclass(frozen=True)
class CodecConfig:
    """Options that loosen or tighten how deck codes are decoded."""

    strict_keys: bool = False
    strip_whitespace: bool = False
    env_path: Path | None = None


def load_config(env_path: str | Path | None = ".env") -> CodecConfig:
    """Load codec options from the environment or a .env file.

    Environment variables take precedence over .env entries. Both options
    default to off, which matches the behaviour of the game client.
    """

    env_file = Path(env_path) if env_path is not None else None
    if env_file is not None:
        _load_env_file(env_file)

    return CodecConfig(
        strict_keys=_env_flag("SNAP_DECKS_STRICT_KEYS"),
        strip_whitespace=_env_flag("SNAP_DECKS_STRIP_WHITESPACE"),
        env_path=env_file,
    )
