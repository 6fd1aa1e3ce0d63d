"""Tests for environment-driven settings."""

from __future__ import annotations

import os
from unittest.mock import patch

from ts_typie.config import DEFAULT_REGISTRY_URL, Settings

_VARS = ["TS_TYPIE_REGISTRY_URL", "TS_TYPIE_CONCURRENCY", "TS_TYPIE_TIMEOUT"]


def _env(**values: str):
    env = {k: v for k, v in os.environ.items() if k not in _VARS}
    env.update(values)
    return patch.dict(os.environ, env, clear=True)


class TestSettings:
    def test_defaults(self):
        with _env():
            settings = Settings.from_env()
        assert settings == Settings(DEFAULT_REGISTRY_URL, 1, 30.0)

    def test_overrides(self):
        with _env(
            TS_TYPIE_REGISTRY_URL="http://mirror.local/npm/",
            TS_TYPIE_CONCURRENCY="8",
            TS_TYPIE_TIMEOUT="2.5",
        ):
            settings = Settings.from_env()
        assert settings.registry_url == "http://mirror.local/npm/"
        assert settings.concurrency == 8
        assert settings.timeout == 2.5

    def test_registry_url_gets_trailing_slash(self):
        with _env(TS_TYPIE_REGISTRY_URL="http://mirror.local/npm"):
            assert Settings.from_env().registry_url == "http://mirror.local/npm/"

    def test_invalid_numbers_fall_back(self):
        with _env(TS_TYPIE_CONCURRENCY="lots", TS_TYPIE_TIMEOUT="-1"):
            settings = Settings.from_env()
        assert settings.concurrency == 1
        assert settings.timeout == 30.0

    def test_non_finite_numbers_fall_back(self):
        with _env(TS_TYPIE_TIMEOUT="nan"):
            assert Settings.from_env().timeout == 30.0
        with _env(TS_TYPIE_TIMEOUT="inf"):
            assert Settings.from_env().timeout == 30.0
