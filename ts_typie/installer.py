"""Batch installer — one package-manager invocation for all missing types."""

from __future__ import annotations

import asyncio

import structlog

from ts_typie.exceptions import InstallError, ToolNotFoundError
from ts_typie.tools import PackageManager

log = structlog.get_logger("ts_typie")


async def install_packages(manager: PackageManager | None, packages: list[str]) -> str:
    """Install *packages* as dev dependencies with *manager* and return its stdout.

    Raises ``ToolNotFoundError`` if *manager* is None and ``InstallError`` on a
    non-zero exit code.
    """
    if manager is None:
        raise ToolNotFoundError("no supported package manager available to install types")

    cmd = [*manager.install_command, *packages]
    log.info("installer.run", tool=manager.name, packages=packages)
    try:
        proc = await asyncio.create_subprocess_exec(
            *cmd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except FileNotFoundError as exc:
        raise ToolNotFoundError(f"{manager.name} executable not found on PATH") from exc
    stdout, stderr = await proc.communicate()
    if proc.returncode != 0:
        raise InstallError(cmd, proc.returncode, stderr.decode(errors="replace").strip())
    return stdout.decode(errors="replace")
