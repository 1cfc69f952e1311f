"""Search defaults, overridable from the environment."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "OTHELLO_"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


@dataclass
class Settings:
    depth: int = 4
    # Upper bound on depths accepted from API callers.
    max_depth: int = 8
    prune: bool = True
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.depth < 1:
            raise ValueError(f"depth must be at least 1, got {self.depth}")
        if self.max_depth < self.depth:
            raise ValueError(
                f"max_depth ({self.max_depth}) must not be below depth ({self.depth})"
            )
        level = self.log_level.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {self.log_level!r}")
        self.log_level = level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``OTHELLO_*`` variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        kwargs = {}
        for key in ("depth", "max_depth"):
            raw = env.get(ENV_PREFIX + key.upper())
            if raw is not None:
                try:
                    kwargs[key] = int(raw)
                except ValueError as exc:
                    raise ValueError(
                        f"{ENV_PREFIX}{key.upper()} must be an integer, got {raw!r}"
                    ) from exc
        raw = env.get(ENV_PREFIX + "PRUNE")
        if raw is not None:
            kwargs["prune"] = _parse_bool(ENV_PREFIX + "PRUNE", raw)
        raw = env.get(ENV_PREFIX + "LOG_LEVEL")
        if raw is not None:
            kwargs["log_level"] = raw
        return cls(**kwargs)
