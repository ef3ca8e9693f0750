"""
Foreign-key exclusion map construction.
"""

from __future__ import annotations

from collections.abc import Iterable

from extract_mongo_schema.config import ANY_COLLECTION

from .models import ExclusionMap


def build_exclusion_map(tokens: Iterable[str] | None) -> ExclusionMap:
    """
    Build the nested "don't follow" lookup from ``field`` / ``collection:field`` tokens.

    Bare field names are excluded for every collection (stored under
    ``ANY_COLLECTION``); qualified tokens only for the named collection. Tokens
    are split on the first ``:`` and are otherwise accepted verbatim.
    """
    exclusions: ExclusionMap = {ANY_COLLECTION: {}}
    for token in tokens or []:
        # Everything after the first colon is the field name, so "a:b:c" excludes "b:c" in "a"
        collection, sep, field_name = token.partition(":")
        if not sep:
            collection, field_name = ANY_COLLECTION, token
        exclusions.setdefault(collection, {})[field_name] = True
    return exclusions
