"""JSON value helpers.

``merge`` overlays caller-supplied JSON onto an adapter-built request body.
"""

from __future__ import annotations

from typing import Any


def merge(base: Any, overlay: Any) -> Any:
    """Return ``base`` with ``overlay`` merged on top.

    When both values are objects (dicts) keys are merged recursively and the
    overlay wins on conflict, so any field of ``base`` can be replaced. Any
    other combination returns ``base`` unchanged. Neither argument is mutated.

    Example:
        >>> merge({"a": 1, "b": {"c": 2}}, {"b": {"d": 3}, "e": 4})
        {'a': 1, 'b': {'c': 2, 'd': 3}, 'e': 4}
    """
    if not isinstance(base, dict) or not isinstance(overlay, dict):
        return base
    merged = dict(base)
    for key, value in overlay.items():
        if isinstance(merged.get(key), dict) and isinstance(value, dict):
            merged[key] = merge(merged[key], value)
        else:
            merged[key] = value
    return merged


__all__ = ["merge"]
