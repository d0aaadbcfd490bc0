"""
Canonical encoding of grant data.

The bytes produced here are exactly what gets signed and verified, so the
output must depend only on field values: keys sorted by code point, compact
separators, ASCII escapes, timestamps through ``canonical_timestamp``.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from offlic.common.timeutils import canonical_timestamp

if TYPE_CHECKING:
    from offlic.common.models import GrantData


def canonical_document(grant: GrantData) -> dict[str, Any]:
    """Plain dict view of the signed fields."""
    return {
        "expires": canonical_timestamp(grant.expires),
        "features": {key: grant.features[key] for key in sorted(grant.features)},
        "id": grant.id,
        "key_phrase": grant.key_phrase,
        "max_users": int(grant.max_users),
    }


def canonical_json(obj: dict[str, Any]) -> bytes:
    return json.dumps(
        obj, sort_keys=True, separators=(",", ":"), ensure_ascii=True
    ).encode("utf-8")


def canonicalize(grant: GrantData) -> bytes:
    """Deterministic bytes for a GrantData, used for signing and verifying."""
    return canonical_json(canonical_document(grant))
