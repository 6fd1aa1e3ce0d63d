"""Test doubles for ts_typie capabilities — no filesystem or network needed.

Usage::

    from ts_typie.testing import FakeMetadata, FakeRegistry

    metadata = FakeMetadata(bundled={"axios"})          # axios ships its own types
    registry = FakeRegistry(existing={"@types/lodash"})  # only @types/lodash exists
    registry.calls                                       # names looked up so far
"""

from __future__ import annotations


class FakeMetadata:
    """In-memory metadata lookup: names in *bundled* ship their own types."""

    def __init__(self, bundled: set[str] | None = None) -> None:
        self.bundled = set(bundled or ())
        self.calls: list[str] = []

    def bundles_types(self, name: str) -> bool:
        self.calls.append(name)
        return name in self.bundled


class FakeRegistry:
    """In-memory registry: names in *existing* resolve, everything else is a miss.

    If *error* is given every lookup raises it, to simulate transport failures.
    Usable as an async context manager in place of ``RegistryClient``.
    """

    def __init__(
        self,
        existing: set[str] | None = None,
        error: Exception | None = None,
    ) -> None:
        self.existing = set(existing or ())
        self.error = error
        self.calls: list[str] = []

    async def exists(self, package_name: str) -> bool:
        self.calls.append(package_name)
        if self.error is not None:
            raise self.error
        return package_name in self.existing

    async def __aenter__(self) -> FakeRegistry:
        return self

    async def __aexit__(self, *exc: object) -> None:
        return None
