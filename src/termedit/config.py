"""Editor configuration and constants."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "TERMEDIT_"


def _env_int(env: Mapping[str, str], key: str, fallback: int) -> int:
    value = env.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


@dataclass(slots=True)
class EditorConfig:
    """Tunables for history, cursor blink and row layout."""

    coalesce_window_ms: int = 200
    blink_interval_ms: int = 500
    gutter_width: int = 4
    banner: str = "Welcome to termedit"
    history_limit: Optional[int] = None

    @property
    def coalesce_window(self) -> float:
        return self.coalesce_window_ms / 1000.0

    @property
    def blink_interval(self) -> float:
        return self.blink_interval_ms / 1000.0

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "EditorConfig":
        source = os.environ if env is None else env
        defaults = cls()
        limit = _env_int(source, "HISTORY_LIMIT", 0)
        return cls(
            coalesce_window_ms=max(0, _env_int(source, "COALESCE_MS", defaults.coalesce_window_ms)),
            blink_interval_ms=max(1, _env_int(source, "BLINK_MS", defaults.blink_interval_ms)),
            gutter_width=max(1, _env_int(source, "GUTTER_WIDTH", defaults.gutter_width)),
            banner=source.get(f"{ENV_PREFIX}BANNER", defaults.banner),
            history_limit=limit if limit > 0 else None,
        )


__all__ = ["EditorConfig", "ENV_PREFIX"]
