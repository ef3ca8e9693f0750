"""
Output renderers for extracted schemas.

Each renderer serializes the extraction result with the same tab-indented JSON
encoding and writes exactly one file. Renderers are looked up by format name.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

from extract_mongo_schema.config import DEFAULT_FORMAT, HTML_DIAGRAM_FORMAT
from extract_mongo_schema.logging import get_logger

from .base import serialize_schema, write_text_output
from .html_diagram import export_schema_to_html_diagram, read_template, render_html_diagram
from .json_writer import export_schema_to_json

logger = get_logger("extract_mongo_schema.exporters")

Renderer = Callable[..., Path]

RENDERERS: dict[str, Renderer] = {
    DEFAULT_FORMAT: export_schema_to_json,
    HTML_DIAGRAM_FORMAT: export_schema_to_html_diagram,
}


def render_output(
    result: Any,
    *,
    output_format: str,
    output_path: str | Path,
    template_path: Path | None = None,
) -> Path | None:
    """
    Render ``result`` in ``output_format`` and write it to ``output_path``.

    Unknown formats write nothing and return ``None``; the caller still treats
    the run as successful.
    """
    renderer = RENDERERS.get(output_format)
    if renderer is None:
        logger.warning(
            'Unknown output format "%s" (expected one of: %s). No output written.',
            output_format,
            ", ".join(RENDERERS),
        )
        return None

    if output_format == HTML_DIAGRAM_FORMAT:
        return renderer(output_path, result, template_path=template_path)
    return renderer(output_path, result)


__all__ = [
    "RENDERERS",
    "export_schema_to_html_diagram",
    "export_schema_to_json",
    "read_template",
    "render_html_diagram",
    "render_output",
    "serialize_schema",
    "write_text_output",
]
