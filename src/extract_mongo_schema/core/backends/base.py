"""
Extractor protocol and loading of the installed implementation.

The extractor performs the actual database work (sampling documents, inferring
field types, detecting foreign keys). It is plugged in either through an import
path such as ``my_package.schema:extract`` or through an entry point in the
``extract_mongo_schema.extractors`` group.
"""

from __future__ import annotations

import importlib
from collections.abc import Awaitable
from importlib import metadata
from typing import Protocol

from extract_mongo_schema.config import EXTRACTOR_ENTRY_POINT_GROUP
from extract_mongo_schema.core.models import ExtractionConfig, ExtractionResult
from extract_mongo_schema.errors import ExtractionFailure
from extract_mongo_schema.logging import get_logger

logger = get_logger(__name__)


class SchemaExtractor(Protocol):
    """Protocol describing the schema extraction callable."""

    def __call__(
        self,
        connection_string: str,
        config: ExtractionConfig,
    ) -> Awaitable[ExtractionResult] | ExtractionResult:
        ...


def _import_from_path(spec: str) -> object:
    module_name, sep, attribute = spec.partition(":")
    if not sep or not module_name or not attribute:
        raise ExtractionFailure(f'Invalid extractor "{spec}". Expected "package.module:callable".')
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ExtractionFailure(f'Cannot import extractor module "{module_name}". {exc}') from exc

    target: object = module
    for part in attribute.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise ExtractionFailure(f'Extractor "{spec}" not found. {exc}') from exc
    return target


def _load_entry_point() -> object:
    entry_points = list(metadata.entry_points(group=EXTRACTOR_ENTRY_POINT_GROUP))
    if not entry_points:
        raise ExtractionFailure(
            "No schema extractor available. Pass --extractor package.module:callable "
            f'or install a package providing the "{EXTRACTOR_ENTRY_POINT_GROUP}" entry point.'
        )

    chosen = next((ep for ep in entry_points if ep.name == "default"), None)
    if chosen is None:
        if len(entry_points) > 1:
            names = ", ".join(sorted(ep.name for ep in entry_points))
            raise ExtractionFailure(f"Several schema extractors installed ({names}). Select one with --extractor.")
        chosen = entry_points[0]

    logger.info("Using schema extractor entry point %s = %s", chosen.name, chosen.value)
    try:
        return chosen.load()
    except Exception as exc:
        raise ExtractionFailure(f'Cannot load schema extractor "{chosen.value}". {exc}') from exc


def load_extractor(spec: str | None = None) -> SchemaExtractor:
    """Resolve the schema extractor from an import path or the installed entry point."""
    target = _import_from_path(spec) if spec else _load_entry_point()
    if not callable(target):
        raise ExtractionFailure(f"Schema extractor {target!r} is not callable.")
    return target  # type: ignore[return-value]
