"""Renders generic structured values as TypeScript literal source text.

The renderer works on the plain Python form of a parsed JSON document
(None, bool, numbers, str, list and dict) and has no knowledge of ABI
fragments, so it can render any structurally serializable value.
"""
from __future__ import annotations

import math
from decimal import Decimal
from typing import Any

from abi2ts.errors import SerializationError


def _quote(value: str) -> str:
    # Only double quotes are escaped; input strings come from ABI JSON and
    # are expected to be free of raw control characters.
    return '"' + value.replace('"', '\\"') + '"'


def create_literal_for(value: Any) -> str:
    """Converts a structured value into TypeScript literal syntax.

    Args:
        value: None, a bool, an int, a float, a Decimal, a str, a list or
            tuple of such values, or a dict with str keys mapping to such
            values.

    Returns:
        The literal source text. Lists render as ``[a, b]`` and dicts as
        ``{key: value}`` with keys in insertion order.

    Raises:
        SerializationError: If the value (or a nested value) has an
            unsupported type.
    """
    if value is None:
        return "null"
    # bool is a subclass of int, so it has to be checked first
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise SerializationError(f"Cannot render non-finite number {value!r} as a literal")
        return repr(value)
    if isinstance(value, Decimal):
        # str() keeps the digits exactly as they were parsed
        if not value.is_finite():
            raise SerializationError(f"Cannot render non-finite number {value!r} as a literal")
        return str(value)
    if isinstance(value, str):
        return _quote(value)
    if isinstance(value, (list, tuple)):
        elements = [create_literal_for(element) for element in value]
        return "[" + ", ".join(elements) + "]"
    if isinstance(value, dict):
        properties = [f"{key}: {create_literal_for(item)}" for key, item in value.items()]
        return "{" + ", ".join(properties) + "}"
    raise SerializationError(f"Cannot render value of type {type(value).__name__} as a literal")
