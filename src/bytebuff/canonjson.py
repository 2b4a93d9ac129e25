"""
Canonical JSON

Encodes JSON values with lexicographically sorted object keys and no extra
whitespace, so the bytes produced for a given value (and any digest taken of
them) are stable regardless of dict insertion order.
"""

import json
from typing import Any


def dumps_canonical(obj: Any) -> str:
    """
    Encode object as canonical JSON string.

    Args:
        obj: Object to encode (dict, list, tuple, str, int, float, bool, None)

    Returns:
        Canonical JSON string with sorted keys and no extra whitespace

    Raises:
        TypeError: If obj contains a value JSON cannot represent
        ValueError: If obj contains NaN or infinity
    """
    return json.dumps(
        _canonicalize(obj),
        separators=(',', ':'),
        ensure_ascii=False,
        sort_keys=True,
        allow_nan=False,
    )


def loads(text: str) -> Any:
    """Decode a JSON document produced by dumps_canonical (or any JSON)."""
    return json.loads(text)


def _canonicalize(v: Any) -> Any:
    """
    Recursively canonicalize a value.

    - Maps: keys coerced to str, values canonicalized
    - Lists/tuples: elements canonicalized, order preserved
    - Primitives: passed through unchanged
    """
    if isinstance(v, dict):
        return {str(k): _canonicalize(item) for k, item in v.items()}
    elif isinstance(v, (list, tuple)):
        return [_canonicalize(item) for item in v]
    else:
        return v


__all__ = ["dumps_canonical", "loads"]
