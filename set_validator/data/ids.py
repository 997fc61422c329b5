"""Identifier normalisation shared by every lookup table."""

import re
from typing import Any

_NON_ID_CHARS = re.compile(r"[^a-z0-9]+")


def to_id(name: Any) -> str:
    """Normalize a name for lookup (lowercase, alphanumerics only).

    Args:
        name: Display name or id (e.g., "Double-Edge", "King's Rock")

    Returns:
        Lookup id (e.g., "doubleedge", "kingsrock"), "" for empty input
    """
    if not name:
        return ""
    return _NON_ID_CHARS.sub("", str(name).lower())
