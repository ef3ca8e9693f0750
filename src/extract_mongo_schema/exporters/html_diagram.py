"""
HTML diagram renderer for extracted schemas.

The diagram is a static HTML page shipped with the package. Its only dynamic
part is the ``{/*DATA_HERE*/}`` marker, which is replaced by the serialized
schema so the page's script can draw collections and their relations.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from extract_mongo_schema.config import DATA_MARKER, TEMPLATE_PATH
from extract_mongo_schema.errors import TemplateReadFailure

from .base import serialize_schema, write_text_output

logger = logging.getLogger("extract_mongo_schema.exporters.html")


def read_template(template_path: Path | None = None) -> str:
    """Read the diagram template, raising :class:`TemplateReadFailure` if it is unavailable."""
    path = template_path or TEMPLATE_PATH
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise TemplateReadFailure(path, exc.strerror or str(exc)) from exc


def render_html_diagram(template: str, schema: Any) -> str:
    """Substitute the serialized schema for the first data marker in ``template``."""
    if DATA_MARKER not in template:
        logger.warning("Template has no %s marker; schema data will be missing from the diagram", DATA_MARKER)
    return template.replace(DATA_MARKER, serialize_schema(schema), 1)


def export_schema_to_html_diagram(
    output_path: str | Path,
    schema: Any,
    *,
    template_path: Path | None = None,
) -> Path:
    """
    Write the schema embedded in the HTML diagram template.

    Args:
        output_path: Path where the HTML file will be written
        schema: Extraction result to embed
        template_path: Optional override of the packaged template

    Returns:
        Path to the generated HTML file
    """
    template = read_template(template_path)
    logger.info("Writing HTML diagram to %s", output_path)
    return write_text_output(output_path, render_html_diagram(template, schema))
