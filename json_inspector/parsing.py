from __future__ import annotations

import json
import logging
import math
import re
import string
from typing import Optional, Tuple

from .config import LARGE_INPUT_BYTES
from .models import JsonValue, ParseOutcome

_LOG = logging.getLogger(__name__)

_POSITION_RE = re.compile(r'at position (\d+)', re.IGNORECASE)
_LINE_COLUMN_RE = re.compile(r'line (\d+) column (\d+)', re.IGNORECASE)

# Characters that continue a number or bare literal token.
_TOKEN_CHARS = frozenset(string.ascii_letters + string.digits + '+-._')


class LiteralError(ValueError):
    """A token the json module accepts but RFC 8259 does not allow."""

    def __init__(self, message: str, token: str):
        super().__init__(message)
        self.token = token


def _reject_constant(name: str):
    # The json module accepts NaN/Infinity by default; RFC 8259 does not.
    raise LiteralError(f"Unexpected token {name}: non-standard JSON constant", name)


def _finite_float(literal: str) -> float:
    value = float(literal)
    if math.isinf(value):
        raise LiteralError(f"Number out of range: {literal}", literal)
    return value


def find_literal(text: str, token: str) -> Optional[int]:
    """Offset of the first occurrence of `token` outside string literals."""
    in_string = False
    escape = False
    for i, ch in enumerate(text):
        if in_string:
            if escape:
                escape = False
            elif ch == '\\':
                escape = True
            elif ch == '"':
                in_string = False
            continue
        if ch == '"':
            in_string = True
        elif text.startswith(token, i) and (i == 0 or text[i - 1] not in _TOKEN_CHARS):
            end = i + len(token)
            if end == len(text) or text[end] not in _TOKEN_CHARS:
                return i
    return None


def parse_json(text: str) -> ParseOutcome:
    """Parse raw text into a JSON value, locating syntax errors when possible."""
    if not text or not text.strip():
        return ParseOutcome.failure('Input is empty')

    try:
        value = json.loads(text, parse_constant=_reject_constant, parse_float=_finite_float)
    except json.JSONDecodeError as e:
        line, column = extract_position(str(e), text)
        _LOG.debug("JSON syntax error: %s", e)
        return ParseOutcome.failure(str(e), line, column)
    except LiteralError as e:
        _LOG.debug("JSON literal rejected: %s", e)
        position = find_literal(text, e.token)
        if position is None:
            return ParseOutcome.failure(str(e))
        line, column = position_to_line_column(text, position)
        return ParseOutcome.failure(str(e), line, column)
    except (ValueError, RecursionError) as e:
        _LOG.debug("JSON parse failed: %s", e)
        return ParseOutcome.failure(str(e) or e.__class__.__name__)

    return ParseOutcome.success(value)


def extract_position(message: str, text: str) -> Tuple[Optional[int], Optional[int]]:
    """Recover a 1-based (line, column) from a parser error message.

    Offsets ('at position N') are translated against `text`; explicit
    'line L column C' pairs are used as-is. Returns (None, None) otherwise.
    """
    match = _POSITION_RE.search(message)
    if match:
        return position_to_line_column(text, int(match.group(1)))

    match = _LINE_COLUMN_RE.search(message)
    if match:
        return int(match.group(1)), int(match.group(2))

    return None, None


def position_to_line_column(text: str, position: int) -> Tuple[int, int]:
    prefix = text[:position]
    line = prefix.count('\n') + 1
    column = len(prefix) - (prefix.rfind('\n') + 1) + 1
    return line, column


def get_value_type(value: JsonValue) -> str:
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'boolean'
    if isinstance(value, (int, float)):
        return 'number'
    if isinstance(value, str):
        return 'string'
    if isinstance(value, list):
        return 'array'
    return 'object'


def estimate_size(text: str) -> int:
    """Size of `text` in bytes once encoded as UTF-8."""
    return len(text.encode('utf-8', errors='surrogatepass'))


def is_large_json(text: str, limit: Optional[int] = None) -> bool:
    if limit is None:
        limit = LARGE_INPUT_BYTES
    return estimate_size(text) > limit
