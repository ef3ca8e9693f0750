"""
Extraction invocation.
"""

from __future__ import annotations

import asyncio
import inspect

from extract_mongo_schema.errors import ExtractionFailure
from extract_mongo_schema.logging import get_logger

from .backends import SchemaExtractor
from .models import ExtractionConfig, ExtractionResult

logger = get_logger(__name__)


async def _await_result(pending) -> ExtractionResult:
    return await pending


def invoke_extraction(
    extractor: SchemaExtractor,
    database: str,
    config: ExtractionConfig,
) -> ExtractionResult:
    """
    Call the extractor exactly once and wait for its result.

    Any error raised by the extractor (connectivity, authentication, internal
    failures) is wrapped in :class:`ExtractionFailure` with the original error
    chained. Nothing is retried.
    """
    logger.info("Starting schema extraction (limit=%d, raw=%s)", config.limit, config.raw)
    try:
        outcome = extractor(database, config)
        if inspect.isawaitable(outcome):
            outcome = asyncio.run(_await_result(outcome))
    except Exception as exc:
        logger.error("Schema extraction failed: %s", exc)
        raise ExtractionFailure(f"Extraction failed: {exc!r}") from exc

    logger.info("Schema extraction finished")
    return outcome
