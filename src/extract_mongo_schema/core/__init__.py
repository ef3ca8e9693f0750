"""Core resolution and extraction APIs."""

from .exclusions import build_exclusion_map
from .extraction import invoke_extraction
from .models import (
    ExclusionMap,
    ExtractionConfig,
    ExtractionResult,
    RawOptions,
    RunSettings,
)
from .resolver import resolve_settings, split_list

__all__ = [
    "ExclusionMap",
    "ExtractionConfig",
    "ExtractionResult",
    "RawOptions",
    "RunSettings",
    "build_exclusion_map",
    "invoke_extraction",
    "resolve_settings",
    "split_list",
]
