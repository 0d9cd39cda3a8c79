from __future__ import annotations

import json
import re
from decimal import Decimal
from typing import Any, List, Tuple

from .models import JsonValue

DEFAULT_INDENT = 2

_EXPONENT_RE = re.compile(r'e([+-])0*(\d)')


def number_text(value: float) -> str:
    """Render a number the way a JavaScript engine prints it.

    Integral floats drop the fraction (1.0 -> '1'). Plain decimal notation
    is used from 1e-6 up to 1e21, exponent notation outside that range
    ('1e-7', '1e+21').
    """
    if not isinstance(value, float):
        return str(value)
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))

    text = repr(value)
    if 'e' not in text:
        return text
    if 1e-6 <= abs(value) < 1e21:
        return format(Decimal(text), 'f')
    return _EXPONENT_RE.sub(r'e\1\2', text)


def primitive_text(value: JsonValue) -> str:
    """Unquoted text form of a primitive, used for searching."""
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, (int, float)):
        return number_text(value)
    return str(value)


def prettify(value: JsonValue, sort_keys: bool = False, indent: int = DEFAULT_INDENT) -> str:
    processed = sort_object_keys_deep(value) if sort_keys else value
    return json.dumps(processed, indent=indent, ensure_ascii=False, allow_nan=False)


def minify(value: JsonValue) -> str:
    return json.dumps(value, separators=(',', ':'), ensure_ascii=False, allow_nan=False)


def sort_object_keys_deep(value: JsonValue) -> JsonValue:
    """Return a copy of `value` with every object's keys in alphabetical order.

    Iterative, so any depth the parser accepts can be sorted.
    """
    if not isinstance(value, (dict, list)):
        return value

    result: Any = {} if isinstance(value, dict) else []
    stack: List[Tuple[Any, Any]] = [(value, result)]
    while stack:
        source, target = stack.pop()
        if isinstance(source, dict):
            pairs = ((key, source[key]) for key in sorted(source))
        else:
            pairs = enumerate(source)

        for key, child in pairs:
            if isinstance(child, (dict, list)):
                clone: Any = {} if isinstance(child, dict) else []
                stack.append((child, clone))
                child = clone
            if isinstance(target, dict):
                target[key] = child
            else:
                target.append(child)

    return result


def count_children(value: JsonValue) -> int:
    if isinstance(value, (dict, list)):
        return len(value)
    return 0


def format_primitive(value: JsonValue) -> str:
    if isinstance(value, str):
        return f'"{value}"'
    return primitive_text(value)


def truncate_string(text: str, max_length: int = 50) -> str:
    if len(text) <= max_length:
        return text
    return text[:max_length] + '...'
