"""Async npm registry client — only answers "does this package exist?"."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import httpx
import structlog

from ts_typie.config import DEFAULT_REGISTRY_URL, DEFAULT_TIMEOUT
from ts_typie.exceptions import RegistryError

log = structlog.get_logger("ts_typie")


@runtime_checkable
class RegistryLookup(Protocol):
    """Interface for checking package existence in a registry."""

    async def exists(self, package_name: str) -> bool: ...


class RegistryClient:
    """Thin async wrapper around the registry's package document endpoint."""

    def __init__(
        self,
        base_url: str = DEFAULT_REGISTRY_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url
        self._client = httpx.AsyncClient(
            headers={"Accept": "application/json"},
            timeout=timeout,
            transport=transport,
        )

    # ── lifecycle ──────────────────────────────────────────────────────────

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> RegistryClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

    # ── public ─────────────────────────────────────────────────────────────

    async def exists(self, package_name: str) -> bool:
        """GET ``<base_url><package_name>``; HTTP 200 means the package exists.

        Any other status is a plain "no". Connection-level failures raise
        ``RegistryError`` and are not retried.
        """
        try:
            resp = await self._client.get(self.base_url + package_name)
        except httpx.TransportError as exc:
            log.error("registry.transport_error", package=package_name, error=str(exc))
            raise RegistryError(package_name, str(exc) or type(exc).__name__) from exc

        log.debug("registry.lookup", package=package_name, status=resp.status_code)
        return resp.status_code == 200
