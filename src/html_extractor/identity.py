"""Deterministic, content-derived record identifiers."""

from __future__ import annotations

from typing import Any, Mapping

import orjson
import xxhash

from html_extractor.schemas import Record

# Fields taking part in the hash. objectID and node never do.
HASHED_FIELDS = ("content", "html", "anchor", "headings", "customRanking")


def _canonical_payload(data: Record | Mapping[str, Any]) -> dict[str, Any]:
    if isinstance(data, Record):
        source = data.model_dump(by_alias=True, exclude={"object_id", "node"})
    else:
        source = dict(data)
        if "custom_ranking" in source and "customRanking" not in source:
            source["customRanking"] = source["custom_ranking"]
    payload: dict[str, Any] = {}
    for key in HASHED_FIELDS:
        if key not in source:
            continue
        value = source[key]
        if hasattr(value, "model_dump"):
            value = value.model_dump()
        payload[key] = value
    return payload


def compute_object_id(data: Record | Mapping[str, Any]) -> str:
    """Hash the semantic fields of a record (or record-like mapping).

    Any pre-existing ``objectID`` is ignored, so records differing only in
    that field collapse to the same identifier.
    """
    payload = orjson.dumps(_canonical_payload(data), option=orjson.OPT_SORT_KEYS)
    return xxhash.xxh3_128(payload).hexdigest()
