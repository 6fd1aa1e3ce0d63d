"""Shared pytest fixtures for ts-typie tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest


def _write_json(path: Path, data: object) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data))
    return path


@pytest.fixture
def project(tmp_path):
    """Factory writing package.json (and optional node_modules manifests) under tmp_path."""

    def _make(manifest: dict, installed: dict[str, dict] | None = None) -> Path:
        _write_json(tmp_path / "package.json", manifest)
        for name, pkg in (installed or {}).items():
            _write_json(tmp_path / "node_modules" / name / "package.json", pkg)
        return tmp_path

    return _make
