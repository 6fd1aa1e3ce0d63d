"""CLI entry point: ts-typie.

Usage:
    ts-typie               # install missing @types with the detected tool
    ts-typie --tool yarn   # force a package manager
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import click
import structlog

from ts_typie import __version__
from ts_typie.config import Settings
from ts_typie.core.logging import setup_logging
from ts_typie.exceptions import InstallError, TypieError
from ts_typie.installer import install_packages
from ts_typie.manifest import find_manifest, load_manifest
from ts_typie.metadata import NodeModulesMetadata
from ts_typie.models import RunResult
from ts_typie.output import echo_install_start, echo_outcome
from ts_typie.registry import RegistryClient
from ts_typie.runner import run
from ts_typie.tools import TOOLS, PackageManager, detect_default_tool, resolve_tool

log = structlog.get_logger("ts_typie")


async def _run_project(
    project_root: Path,
    manager: PackageManager | None,
    settings: Settings,
) -> RunResult | None:
    manifest_path = find_manifest(project_root)
    if manifest_path is None:
        click.echo("No package.json file found!", err=True)
        return None

    manifest = load_manifest(manifest_path)

    async def _install(packages: list[str]) -> str:
        echo_install_start(packages)
        stdout = await install_packages(manager, packages)
        click.echo(stdout)
        return stdout

    async with RegistryClient(settings.registry_url, timeout=settings.timeout) as registry:
        return await run(
            manifest,
            metadata_lookup=NodeModulesMetadata(project_root),
            registry_lookup=registry,
            installer=_install,
            concurrency=settings.concurrency,
            on_outcome=echo_outcome,
        )


@click.command("ts-typie")
@click.option(
    "--tool",
    type=click.Choice(list(TOOLS)),
    default=None,
    help="Which package manager tool to use (default: first one found on PATH)",
)
@click.version_option(__version__, prog_name="ts-typie")
def main(tool: str | None) -> None:
    """Install missing @types packages for the dependencies in ./package.json."""
    setup_logging()

    if tool is None:
        tool = detect_default_tool()
        if tool is None:
            click.echo("Couldn't find a supported package manager tool.", err=True)
    log.debug("cli.tool", tool=tool)

    settings = Settings.from_env()
    try:
        asyncio.run(_run_project(Path.cwd(), resolve_tool(tool), settings))
    except InstallError as e:
        if e.stderr:
            click.echo(e.stderr, err=True)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except TypieError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
