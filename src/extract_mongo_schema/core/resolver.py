"""
Turn raw command line values into validated run settings.
"""

from __future__ import annotations

from pathlib import Path

from extract_mongo_schema.config import DEFAULT_FORMAT, DEFAULT_LIMIT
from extract_mongo_schema.errors import InvalidOption, InvalidOutputTarget, MissingInput
from extract_mongo_schema.logging import get_logger

from .exclusions import build_exclusion_map
from .models import ExtractionConfig, RawOptions, RunSettings

logger = get_logger(__name__)


def split_list(value: str | None) -> list[str] | None:
    """Split a comma separated option; ``None`` means the option was not given."""
    if not value:
        return None
    return value.split(",")


def _validate_output(output: str) -> Path:
    # The same path is checked here and written at the end of the run; an
    # existing file is fine, it gets overwritten
    output_path = Path(output).expanduser()
    if output_path.is_dir():
        raise InvalidOutputTarget(output)
    return output_path


def resolve_settings(
    database: str | None,
    output: str | None,
    options: RawOptions | None = None,
) -> RunSettings:
    """Validate required inputs and assemble the settings for a single run."""
    if not database:
        raise MissingInput("Database connection string is missing.", option="--database")
    if not output:
        raise MissingInput("Output path is missing.", option="--output")

    options = options or RawOptions()
    output_path = _validate_output(output)

    limit = DEFAULT_LIMIT if options.limit is None else options.limit
    if limit < 1:
        raise InvalidOption(f"Limit must be a positive integer (got {limit}).", option="--limit", value=limit)

    config = ExtractionConfig(
        collections=split_list(options.collection),
        arrays=split_list(options.array),
        raw=options.raw,
        limit=limit,
        dont_follow_fk=build_exclusion_map(options.dont_follow_fk or []),
    )
    settings = RunSettings(
        database=database,
        output_path=output_path,
        output_format=options.format or DEFAULT_FORMAT,
        config=config,
    )
    logger.info(
        "Resolved settings: format=%s, output=%s, collections=%s, limit=%d, raw=%s",
        settings.output_format,
        settings.output_path,
        config.collections,
        config.limit,
        config.raw,
    )
    return settings
