"""Dependency classifier — decide whether a dependency needs an @types package."""

from __future__ import annotations

from collections.abc import Container

import structlog

from ts_typie.metadata import PackageMetadataLookup
from ts_typie.models import ClassificationOutcome, Disposition, type_package_name
from ts_typie.registry import RegistryLookup

log = structlog.get_logger("ts_typie")


async def classify(
    name: str,
    already_installed_types: Container[str],
    metadata_lookup: PackageMetadataLookup,
    registry_lookup: RegistryLookup,
) -> ClassificationOutcome:
    """Classify one dependency.

    Checks run cheapest first and stop at the first hit:

    1. ``@types/<name>`` is already declared in the manifest.
    2. The installed package declares ``types`` or ``typings`` itself.
    3. The registry has ``@types/<name>``.

    *name* must not carry the ``@types/`` prefix. Registry transport
    failures propagate as ``RegistryError``.
    """
    type_package = type_package_name(name)

    if type_package in already_installed_types:
        outcome = ClassificationOutcome(name, Disposition.ALREADY_HAS_TYPES)
    elif metadata_lookup.bundles_types(name):
        outcome = ClassificationOutcome(name, Disposition.BUNDLES_OWN_TYPES)
    elif await registry_lookup.exists(type_package):
        outcome = ClassificationOutcome(name, Disposition.NEEDS_INSTALL, type_package)
    else:
        outcome = ClassificationOutcome(name, Disposition.NOT_FOUND_IN_REGISTRY)

    log.debug(f"classifier.{outcome.disposition.value}", dependency=name)
    return outcome
