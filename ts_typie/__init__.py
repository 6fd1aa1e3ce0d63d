"""ts-typie: install missing TypeScript type declarations for npm dependencies."""

__version__ = "0.1.0"

from ts_typie.classifier import classify
from ts_typie.models import (
    ClassificationOutcome,
    Disposition,
    Manifest,
    RunResult,
)
from ts_typie.runner import build_install_batch, partition, run

__all__ = [
    "ClassificationOutcome",
    "Disposition",
    "Manifest",
    "RunResult",
    "build_install_batch",
    "classify",
    "partition",
    "run",
]
