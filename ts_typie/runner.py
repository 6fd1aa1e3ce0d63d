"""Run orchestrator — classify every candidate, then install the batch once."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Iterable

import structlog

from ts_typie.classifier import classify
from ts_typie.metadata import PackageMetadataLookup
from ts_typie.models import ClassificationOutcome, Manifest, RunResult, is_type_package
from ts_typie.registry import RegistryLookup

log = structlog.get_logger("ts_typie")

OutcomeObserver = Callable[[ClassificationOutcome], None]
Installer = Callable[[list[str]], Awaitable[object]]


def partition(names: Iterable[str]) -> tuple[frozenset[str], list[str]]:
    """Split manifest names into (already-installed @types set, candidates).

    Candidates keep manifest order; a name declared twice is kept at its
    first position only.
    """
    installed: set[str] = set()
    candidates: list[str] = []
    seen: set[str] = set()
    for name in names:
        if is_type_package(name):
            installed.add(name)
        elif name not in seen:
            seen.add(name)
            candidates.append(name)
    return frozenset(installed), candidates


async def classify_all(
    candidates: list[str],
    already_installed_types: frozenset[str],
    metadata_lookup: PackageMetadataLookup,
    registry_lookup: RegistryLookup,
    *,
    concurrency: int = 1,
    on_outcome: OutcomeObserver | None = None,
) -> list[ClassificationOutcome]:
    """Classify *candidates*, returning outcomes in candidate order.

    With ``concurrency == 1`` each dependency is fully resolved before the
    next one starts. Higher values allow that many classifications in
    flight; *on_outcome* still sees outcomes in candidate order, each as
    soon as every earlier one is known. The first failure cancels all
    lookups still pending and is re-raised.
    """

    async def _one(name: str) -> ClassificationOutcome:
        return await classify(name, already_installed_types, metadata_lookup, registry_lookup)

    if concurrency <= 1:
        outcomes = []
        for name in candidates:
            outcome = await _one(name)
            if on_outcome is not None:
                on_outcome(outcome)
            outcomes.append(outcome)
        return outcomes

    semaphore = asyncio.Semaphore(concurrency)

    async def _bounded(name: str) -> ClassificationOutcome:
        async with semaphore:
            return await _one(name)

    tasks = [asyncio.ensure_future(_bounded(name)) for name in candidates]
    pending = set(tasks)
    emitted = 0
    try:
        while pending:
            done, pending = await asyncio.wait(pending, return_when=asyncio.FIRST_EXCEPTION)
            errors = [task.exception() for task in done if task.exception() is not None]
            if errors:
                raise errors[0]
            while emitted < len(tasks) and tasks[emitted].done():
                if on_outcome is not None:
                    on_outcome(tasks[emitted].result())
                emitted += 1
    finally:
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)

    return [task.result() for task in tasks]


def build_install_batch(outcomes: Iterable[ClassificationOutcome]) -> list[str]:
    """Type packages of every NEEDS_INSTALL outcome, in outcome order."""
    return [o.type_package for o in outcomes if o.needs_install and o.type_package]


async def run(
    manifest: Manifest,
    *,
    metadata_lookup: PackageMetadataLookup,
    registry_lookup: RegistryLookup,
    installer: Installer,
    concurrency: int = 1,
    on_outcome: OutcomeObserver | None = None,
) -> RunResult:
    """Full pipeline: partition -> classify -> install (only if anything is missing)."""
    already_installed_types, candidates = partition(manifest.names)
    log.info(
        "runner.start",
        manifest=str(manifest.path),
        candidates=len(candidates),
        already_typed=len(already_installed_types),
    )

    outcomes = await classify_all(
        candidates,
        already_installed_types,
        metadata_lookup,
        registry_lookup,
        concurrency=concurrency,
        on_outcome=on_outcome,
    )
    batch = build_install_batch(outcomes)

    if not batch:
        log.info("runner.nothing_to_install")
        return RunResult(outcomes=outcomes, install_batch=batch)

    await installer(batch)
    return RunResult(outcomes=outcomes, install_batch=batch, installed=True)
