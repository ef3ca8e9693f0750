"""
Shared configuration constants and defaults.
"""

from __future__ import annotations

from pathlib import Path

APP_NAME = "extract-mongo-schema"
BANNER = "Extract schema from Mongo database (including foreign keys)"

DEFAULT_FORMAT = "json"
HTML_DIAGRAM_FORMAT = "html-diagram"
DEFAULT_LIMIT = 100

# Exclusion map key that applies to every collection
ANY_COLLECTION = "__ANY__"

TEMPLATE_PATH = Path(__file__).resolve().parent / "exporters" / "templates" / "template-html-diagram.html"
DATA_MARKER = "{/*DATA_HERE*/}"

EXTRACTOR_ENTRY_POINT_GROUP = "extract_mongo_schema.extractors"
EXTRACTOR_ENV_VAR = "EXTRACT_MONGO_SCHEMA_EXTRACTOR"
