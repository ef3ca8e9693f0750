"""
High level orchestration services.
"""

from __future__ import annotations

from pathlib import Path

from extract_mongo_schema import exporters

from .backends import SchemaExtractor
from .extraction import invoke_extraction
from .models import RunSettings


def run_pipeline(
    settings: RunSettings,
    extractor: SchemaExtractor,
    template_path: Path | None = None,
) -> Path | None:
    """Extract the schema and render it; returns the written path, if any."""
    result = invoke_extraction(extractor, settings.database, settings.config)
    return exporters.render_output(
        result,
        output_format=settings.output_format,
        output_path=settings.output_path,
        template_path=template_path,
    )
