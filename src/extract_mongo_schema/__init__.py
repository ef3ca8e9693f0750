"""
High-level package exports for extract-mongo-schema.
"""

from __future__ import annotations

from importlib import metadata
from typing import Final

try:
    __version__: Final[str] = metadata.version("extract-mongo-schema")
except metadata.PackageNotFoundError:  # pragma: no cover - local execution
    __version__ = "0.0.0"

# Convenience re-exports
from . import exporters  # noqa: E402
from .core.exclusions import build_exclusion_map  # noqa: E402
from .core.models import ExtractionConfig, RawOptions, RunSettings  # noqa: E402
from .core.resolver import resolve_settings  # noqa: E402
from .core.services import run_pipeline  # noqa: E402

__all__ = [
    "__version__",
    "ExtractionConfig",
    "RawOptions",
    "RunSettings",
    "build_exclusion_map",
    "exporters",
    "resolve_settings",
    "run_pipeline",
]
