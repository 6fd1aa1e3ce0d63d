"""Console status lines for classification outcomes."""

from __future__ import annotations

import click

from ts_typie.models import ClassificationOutcome, Disposition

PLAY = "▶"
WARNING = "⚠"
CROSS = "✖"

# disposition -> (icon, colour, message template); NEEDS_INSTALL is announced
# by the install line instead.
_STATUS: dict[Disposition, tuple[str, str, str]] = {
    Disposition.ALREADY_HAS_TYPES: (
        PLAY, "yellow", "Types for {name} already installed. Skipping...",
    ),
    Disposition.BUNDLES_OWN_TYPES: (
        WARNING, "yellow", "Module {name} includes own types. Skipping...",
    ),
    Disposition.NOT_FOUND_IN_REGISTRY: (
        CROSS, "red", "No types found for {name} in registry. Skipping...",
    ),
}


def format_outcome(outcome: ClassificationOutcome) -> str | None:
    """Return the styled status line for *outcome*, or None if it has none."""
    status = _STATUS.get(outcome.disposition)
    if status is None:
        return None
    icon, colour, template = status
    name = click.style(outcome.dependency, fg=colour, bold=True)
    before, after = template.split("{name}")
    return (
        click.style(f"{icon} {before}", fg=colour)
        + name
        + click.style(after, fg=colour)
    )


def echo_outcome(outcome: ClassificationOutcome) -> None:
    line = format_outcome(outcome)
    if line is not None:
        click.echo(line)


def echo_install_start(packages: list[str]) -> None:
    click.secho(
        f"{PLAY} Installing types for {len(packages)} packages: {' '.join(packages)}",
        fg="green",
    )
