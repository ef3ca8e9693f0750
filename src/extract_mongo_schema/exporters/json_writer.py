"""
JSON renderer for extracted schemas.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from .base import serialize_schema, write_text_output

logger = logging.getLogger("extract_mongo_schema.exporters.json")


def export_schema_to_json(output_path: str | Path, schema: Any) -> Path:
    """Write the schema as tab-indented JSON."""
    logger.info("Writing JSON schema to %s", output_path)
    return write_text_output(output_path, serialize_schema(schema))
