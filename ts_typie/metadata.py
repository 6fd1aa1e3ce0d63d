"""Local package metadata lookup — does an installed package bundle its own types?"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Protocol, runtime_checkable

import structlog

log = structlog.get_logger("ts_typie")

_TYPES_FIELDS = ("types", "typings")


@runtime_checkable
class PackageMetadataLookup(Protocol):
    """Reports whether an installed dependency declares a types entry point."""

    def bundles_types(self, name: str) -> bool: ...


class NodeModulesMetadata:
    """Reads ``node_modules/<name>/package.json`` under a project root."""

    def __init__(self, project_root: Path) -> None:
        self._node_modules = project_root / "node_modules"

    def package_json_path(self, name: str) -> Path:
        # Scoped names ("@scope/pkg") live in nested directories.
        return self._node_modules.joinpath(*name.split("/")) / "package.json"

    def bundles_types(self, name: str) -> bool:
        """True if the package's own manifest has a non-empty types or typings field.

        A missing or unreadable manifest is reported as False, never raised:
        most dependencies are simply not installed yet.
        """
        path = self.package_json_path(name)
        if not path.is_file():
            return False
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            log.debug("metadata.unreadable", package=name, path=str(path), error=str(exc))
            return False
        if not isinstance(data, dict):
            return False
        return any(data.get(key) for key in _TYPES_FIELDS)
