"""Approximate byte-size estimation for cached values.

This is a heuristic, not a memory measurement: strings count two bytes per
UTF-16 code unit (four for characters outside the BMP), numbers eight,
booleans four, and anything else the UTF-8 length of its JSON rendering.
Objects already present in ``seen`` are skipped, but only at the top level;
repeated references nested inside a container are counted each time they are
serialized.
"""

from __future__ import annotations

import json
import typing as t

BOOL_SIZE = 4
NUMBER_SIZE = 8


def estimate_size(value: t.Any, seen: t.Optional[t.Set[int]] = None) -> int:
    if seen is None:
        seen = set()

    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return BOOL_SIZE
    if isinstance(value, str):
        return len(value.encode("utf-16-le", "surrogatepass"))
    if isinstance(value, (int, float)):
        return NUMBER_SIZE
    if value is None or id(value) in seen:
        return 0

    seen.add(id(value))
    try:
        encoded = json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        # circular or non-string-keyed containers
        encoded = repr(value)
    return len(encoded.encode("utf-8"))
