"""Locate and read the project's package.json."""

from __future__ import annotations

import json
from pathlib import Path

from ts_typie.exceptions import ManifestError
from ts_typie.models import Manifest

MANIFEST_NAME = "package.json"


def find_manifest(project_root: Path) -> Path | None:
    """Return the manifest path under *project_root*, or None if absent."""
    path = project_root / MANIFEST_NAME
    if path.is_file():
        return path
    return None


def load_manifest(path: Path) -> Manifest:
    """Parse *path* into a :class:`Manifest`.

    Only the keys of ``dependencies`` and ``devDependencies`` are kept; version
    constraints are not interpreted.

    Raises ``ManifestError`` if the file is not a JSON object or a dependency
    field is not an object.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ManifestError(f"cannot read {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ManifestError(f"{path} must contain a JSON object")

    return Manifest(
        path=path,
        dependencies=_dependency_names(data, "dependencies", path),
        dev_dependencies=_dependency_names(data, "devDependencies", path),
    )


def _dependency_names(data: dict, key: str, path: Path) -> list[str]:
    section = data.get(key)
    if section is None:
        return []
    if not isinstance(section, dict):
        raise ManifestError(f"'{key}' in {path} must be an object")
    return [name for name in section if name]
