"""Data models for dependency classification."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

TYPES_PREFIX = "@types/"


def type_package_name(name: str) -> str:
    """Return the type-declaration package name for *name*."""
    return TYPES_PREFIX + name


def is_type_package(name: str) -> bool:
    return name.startswith(TYPES_PREFIX)


class Disposition(Enum):
    """What to do about a dependency's type declarations."""

    ALREADY_HAS_TYPES = "already_has_types"
    BUNDLES_OWN_TYPES = "bundles_own_types"
    NEEDS_INSTALL = "needs_install"
    NOT_FOUND_IN_REGISTRY = "not_found_in_registry"


@dataclass(frozen=True)
class ClassificationOutcome:
    """Result of classifying a single dependency.

    ``type_package`` is only set for :attr:`Disposition.NEEDS_INSTALL`.
    """

    dependency: str
    disposition: Disposition
    type_package: str | None = None

    @property
    def needs_install(self) -> bool:
        return self.disposition is Disposition.NEEDS_INSTALL


@dataclass
class Manifest:
    """Dependency names declared in a package.json, in declaration order."""

    path: Path
    dependencies: list[str] = field(default_factory=list)
    dev_dependencies: list[str] = field(default_factory=list)

    @property
    def names(self) -> list[str]:
        """Production names followed by development names."""
        return self.dependencies + self.dev_dependencies


@dataclass
class RunResult:
    """Summary of a full classify + install run."""

    outcomes: list[ClassificationOutcome]
    install_batch: list[str]
    installed: bool = False
