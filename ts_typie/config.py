"""Runtime settings read from the environment."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass

import structlog

log = structlog.get_logger("ts_typie")

DEFAULT_REGISTRY_URL = "https://registry.npmjs.org/"
DEFAULT_CONCURRENCY = 1
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class Settings:
    """Knobs that are not exposed on the command line.

    Environment variables:
        TS_TYPIE_REGISTRY_URL — registry base URL
        TS_TYPIE_CONCURRENCY  — registry lookups in flight (>= 1)
        TS_TYPIE_TIMEOUT      — registry request timeout in seconds
    """

    registry_url: str = DEFAULT_REGISTRY_URL
    concurrency: int = DEFAULT_CONCURRENCY
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls) -> Settings:
        registry_url = os.environ.get("TS_TYPIE_REGISTRY_URL") or DEFAULT_REGISTRY_URL
        if not registry_url.endswith("/"):
            registry_url += "/"
        return cls(
            registry_url=registry_url,
            concurrency=_read_number("TS_TYPIE_CONCURRENCY", int, DEFAULT_CONCURRENCY),
            timeout=_read_number("TS_TYPIE_TIMEOUT", float, DEFAULT_TIMEOUT),
        )


def _read_number(name: str, kind: type, default):
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = kind(raw)
    except ValueError:
        log.warning("config.invalid_value", variable=name, value=raw, default=default)
        return default
    if not math.isfinite(value) or value <= 0:
        log.warning("config.invalid_value", variable=name, value=raw, default=default)
        return default
    return value
