"""
Numeric Normalizer

Exchanges disagree on how they encode numbers in JSON: some send 123.45,
others "123.45". normalize() converts decimal-looking strings to floats so
every ticker comes back with real numbers.

Rules:
    - Mappings are walked recursively, keys are kept as they are
    - None and numbers pass through unchanged
    - Strings made only of digits with at most one decimal point become floats
    - Everything else (other strings, booleans, lists) passes through unchanged
    - Lists are NOT walked: their elements are returned exactly as received

Example:
    >>> normalize({"last": "29000.5", "vol": {"btc": "12"}, "ok": True})
    {'last': 29000.5, 'vol': {'btc': 12.0}, 'ok': True}
"""

import re
from typing import Any, Mapping

# ASCII digits only; "" and "." also match and are rejected in is_numeric_string()
NUMERIC_STRING = re.compile(r"[0-9]*\.?[0-9]*")


def is_numeric_string(value: Any) -> bool:
    """
    Check whether a value is a string holding a plain decimal number.

    Args:
        value: Any JSON value

    Returns:
        True for strings like "12", "12.5", ".5" or "12."; False for "",
        ".", "-1", "1e5" and non-strings
    """
    if not isinstance(value, str):
        return False
    if not NUMERIC_STRING.fullmatch(value):
        return False
    return any(ch.isdigit() for ch in value)


def normalize(value: Any) -> Any:
    """
    Convert decimal-looking strings inside a mapping to floats.

    Args:
        value: Parsed JSON value. Only mappings are transformed; any other
               value is returned unchanged.

    Returns:
        A new dict with the same keys and converted values, or the input
        itself when it is not a mapping
    """
    if not isinstance(value, Mapping):
        return value
    return {key: _normalize_value(item) for key, item in value.items()}


def _normalize_value(item: Any) -> Any:
    if isinstance(item, Mapping):
        return normalize(item)
    if is_numeric_string(item):
        return float(item)
    return item
