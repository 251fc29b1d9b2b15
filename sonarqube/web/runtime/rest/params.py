"""Encode a builder's parameter map into wire pairs.

The Web API expects list filters as comma-separated strings, booleans as
``true``/``false`` and, for a few write endpoints, repeated keys
(``values=a&values=b``).
"""

from __future__ import annotations

import json
from collections.abc import Collection, Mapping
from enum import Enum
from typing import Any


def encode_value(value: Any) -> str:
    """Render a scalar parameter value."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, Mapping):
        return json.dumps(dict(value), separators=(",", ":"))
    return str(value)


def encode_params(
    params: Mapping[str, Any],
    *,
    repeated: Collection[str] = (),
) -> list[tuple[str, str]]:
    """Convert a parameter map into ordered ``(name, value)`` pairs.

    Args:
        params: Parameter map keyed by wire names
        repeated: Keys whose list values are sent as one pair per element

    Returns:
        Pairs suitable for aiohttp ``params=`` or a form body. ``None`` values
        are skipped; empty strings are kept.
    """
    pairs: list[tuple[str, str]] = []
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            if key in repeated:
                pairs.extend((key, encode_value(v)) for v in value)
            else:
                pairs.append((key, ",".join(encode_value(v) for v in value)))
        else:
            pairs.append((key, encode_value(value)))
    return pairs
