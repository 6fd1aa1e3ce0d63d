"""Supported package managers and autodetection."""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class PackageManager:
    """A package manager and the argv prefix that adds dev dependencies."""

    name: str
    install_command: tuple[str, ...]


# Declaration order is the detection preference: the first one found wins.
TOOLS: dict[str, PackageManager] = {
    "npm": PackageManager("npm", ("npm", "install", "--save-dev")),
    "yarn": PackageManager("yarn", ("yarn", "add", "-D")),
}


def detect_default_tool(which: Callable[[str], str | None] = shutil.which) -> str | None:
    """Return the first tool in ``TOOLS`` whose executable is on PATH."""
    for name in TOOLS:
        if which(name):
            return name
    return None


def resolve_tool(name: str | None) -> PackageManager | None:
    if name is None:
        return None
    return TOOLS.get(name)
