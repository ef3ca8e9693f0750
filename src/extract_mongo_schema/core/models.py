"""
Typed models used across the extraction pipeline.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Union

from extract_mongo_schema.config import DEFAULT_LIMIT

# collection name (or ANY_COLLECTION) -> field name -> excluded marker
ExclusionMap = dict[str, dict[str, bool]]

# Whatever the extractor returns; only ever serialized, never inspected
ExtractionResult = Union[Mapping[str, Any], Sequence[Any], str, int, float, bool, None]


@dataclass(slots=True)
class RawOptions:
    collection: str | None = None
    array: str | None = None
    format: str | None = None
    raw: bool = False
    limit: int | None = None
    dont_follow_fk: list[str] | None = None


@dataclass(frozen=True, slots=True)
class ExtractionConfig:
    """Parameters handed to the schema extractor."""

    collections: list[str] | None = None
    arrays: list[str] | None = None
    raw: bool = False
    limit: int = DEFAULT_LIMIT
    dont_follow_fk: ExclusionMap = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class RunSettings:
    database: str
    output_path: Path
    output_format: str
    config: ExtractionConfig
