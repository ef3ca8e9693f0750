"""Schema extractor backends."""

from .base import SchemaExtractor, load_extractor

__all__ = [
    "SchemaExtractor",
    "load_extractor",
]
