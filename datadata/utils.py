"""
Small type and conversion helpers shared by the loaders and strategies.
"""

import math
import re
from typing import Any, List, Mapping

_NUMBER_RE = re.compile(r'^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\s*$')
_INTEGER_RE = re.compile(r'^\s*[+-]?\d+\s*$')


def is_number(val: Any) -> bool:
    """Return True for int/float values (bools excluded)."""
    return isinstance(val, (int, float)) and not isinstance(val, bool)


def is_numeric(val: Any) -> bool:
    """
    Return True if val is a finite number or a strictly number-formatted string.

    Surrounding whitespace is allowed in strings, anything else is not:
    "1", " 0", ".1" and "-0.1" are numeric, "1B", "1.1.1" and " " are not.
    """
    if is_number(val):
        return not (isinstance(val, float) and not math.isfinite(val))
    if isinstance(val, str):
        return _NUMBER_RE.match(val) is not None
    return False


def to_number(val: str):
    """Convert a numeric string to int or float"""
    if _INTEGER_RE.match(val):
        return int(val)
    return float(val)


def to_array(val: Any) -> list:
    """
    Return a copy of val if it is a list or tuple, a single-element list
    otherwise. Falsy values give an empty list.
    """
    if not val:
        return []
    if isinstance(val, (list, tuple)):
        return list(val)
    return [val]


def merge(*objs: Mapping) -> dict:
    """Merge mappings left to right into a new dict."""
    merged = {}
    for obj in objs:
        merged.update(obj)
    return merged


def wildcards(spec) -> List[re.Pattern]:
    """
    Compile glob-style field patterns into prefix-anchored regular expressions.

    Args:
        spec: A pattern, a compiled regex, or a list of either

    Returns:
        List of compiled patterns; use .match() to test field names
    """
    patterns = []
    for item in to_array(spec):
        if isinstance(item, re.Pattern):
            patterns.append(item)
            continue
        expr = re.escape(item).replace(r'\*', '.*').replace(r'\?', '.')
        patterns.append(re.compile(expr))
    return patterns
