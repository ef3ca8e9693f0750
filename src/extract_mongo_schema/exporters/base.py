"""
Shared serialization and file writing helpers for renderers.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from extract_mongo_schema.errors import WriteFailure


def serialize_schema(result: Any) -> str:
    """Pretty-print the extraction result as JSON indented with one tab per level."""
    # Insertion order of the extractor's mappings is kept; values JSON cannot
    # represent natively (ObjectId, datetime, ...) fall back to str()
    return json.dumps(result, ensure_ascii=False, indent="\t", default=str)


def write_text_output(output_path: str | Path, content: str) -> Path:
    """
    Write ``content`` to exactly ``output_path``.

    The text is staged in a sibling file and moved over the destination once
    complete; a failed write leaves no partial file and an existing file intact.
    """
    destination = Path(output_path)
    staging = destination.with_name(f".{destination.name}.{os.getpid()}.tmp")
    try:
        staging.write_text(content, encoding="utf-8")
        staging.replace(destination)
    except OSError as exc:
        staging.unlink(missing_ok=True)
        raise WriteFailure(output_path, exc.strerror or str(exc)) from exc
    return destination
