"""Payload encoding for both cache tiers.

Fast-tier payloads are a JSON entry object::

    {"status": "success", "content": "..."}

Slow-tier payloads wrap an entry with an absolute expiry in milliseconds::

    {"v": {"status": "success", "content": "..."}, "e": 1767225600000}

Older writers left a bare answer string in place of the entry object, in
either tier. ``parse_entry`` is the single tolerance policy for both:

1. a JSON object with string ``status`` and ``content`` -> that entry
2. a JSON object missing either field -> absent
3. text that opens like a JSON object or array but does not parse -> absent
4. anything else that is not a JSON object -> legacy raw answer, status success
"""

import json
import math
from typing import Any

from groq_cache.entities import CacheEntryEntity, EntryStatus, TierRecordEntity


def dump_entry(entry: CacheEntryEntity) -> str:
    return json.dumps(_entry_to_dict(entry), ensure_ascii=False)


def parse_entry(payload: str) -> CacheEntryEntity | None:
    """Parse a fast-tier payload.

    Args:
        payload: Raw string read from the tier

    Returns:
        The entry, or None when the payload should be treated as absent
    """
    try:
        decoded = json.loads(payload)
    except (ValueError, RecursionError):
        if payload.lstrip().startswith(("{", "[")):
            return None
        return CacheEntryEntity.success(payload)

    if isinstance(decoded, str):
        return CacheEntryEntity.success(decoded)
    if not isinstance(decoded, dict):
        # A bare number or literal is still the legacy raw answer text
        return CacheEntryEntity.success(payload)
    return _entry_from_value(decoded)


def dump_record(record: TierRecordEntity) -> str:
    return json.dumps(
        {"v": _entry_to_dict(record.value), "e": record.expires_at},
        ensure_ascii=False,
    )


def parse_record(payload: str) -> TierRecordEntity | None:
    """Parse a slow-tier payload.

    Returns None for anything unreadable: invalid JSON, a non-object, a
    missing, non-numeric or non-finite expiry, or a value ``parse_entry`` rejects.
    """
    try:
        decoded = json.loads(payload)
    except (ValueError, RecursionError):
        return None

    if not isinstance(decoded, dict) or "v" not in decoded:
        return None

    expires_at = decoded.get("e")
    # bool is an int subclass but never a timestamp
    if isinstance(expires_at, bool) or not isinstance(expires_at, (int, float)):
        return None
    # json accepts Infinity, NaN and 1e400
    if isinstance(expires_at, float) and not math.isfinite(expires_at):
        return None

    value = decoded["v"]
    if isinstance(value, str):
        entry = CacheEntryEntity.success(value)
    elif isinstance(value, dict):
        entry = _entry_from_value(value)
    else:
        entry = None

    if entry is None:
        return None
    return TierRecordEntity(value=entry, expires_at=int(expires_at))


def _entry_to_dict(entry: CacheEntryEntity) -> dict[str, str]:
    return {"status": entry.status.value, "content": entry.content}


def _entry_from_value(value: dict[str, Any]) -> CacheEntryEntity | None:
    status = value.get("status")
    content = value.get("content")
    if not isinstance(status, str) or not isinstance(content, str):
        return None
    try:
        return CacheEntryEntity(status=EntryStatus(status), content=content)
    except ValueError:
        return None
