"""Bracket/brace balance checking for possibly malformed JSON text.

Works on raw text independently of the parser, so it can point at the
offending structural token even when the parser's error carries no location.
"""
from __future__ import annotations

from typing import List, Optional

from .models import BalanceResult, BracketInfo

_OPENERS = {'[': ']', '{': '}'}
_CLOSERS = {']': '[', '}': '{'}


def check_bracket_balance(text: str) -> BalanceResult:
    result = BalanceResult()
    stack: List[BracketInfo] = []
    in_string = False
    escape = False
    line = 1
    column = 1

    for i, ch in enumerate(text):
        if ch == '\n':
            line += 1
            column = 1
            escape = False
            continue

        if not escape and ch == '"':
            in_string = not in_string
        escape = in_string and not escape and ch == '\\'

        if not in_string and (ch in _OPENERS or ch in _CLOSERS):
            info = BracketInfo(char=ch, line=line, column=column, position=i)
            counts = result.brackets if ch in '[]' else result.braces

            if ch in _OPENERS:
                counts.open += 1
                stack.append(info)
            else:
                counts.close += 1
                if stack and stack[-1].char == _CLOSERS[ch]:
                    stack.pop()
                else:
                    result.unexpected.append(info)
                    result.is_balanced = False

        column += 1

    if stack:
        result.unclosed = stack
        result.is_balanced = False

    return result


def bracket_balance_message(balance: BalanceResult) -> Optional[str]:
    """Describe an imbalance in one line, or None when balanced."""
    if balance.is_balanced:
        return None

    messages: List[str] = []

    if balance.unclosed:
        messages.append('; '.join(
            f"Unclosed {b.char} at line {b.line}, column {b.column}" for b in balance.unclosed
        ))

    if balance.unexpected:
        messages.append('; '.join(
            f"Unexpected {b.char} at line {b.line}, column {b.column}" for b in balance.unexpected
        ))

    if balance.brackets.open != balance.brackets.close:
        messages.append(
            f'Square brackets: {balance.brackets.open}× "[" and {balance.brackets.close}× "]"'
        )
    if balance.braces.open != balance.braces.close:
        messages.append(
            f'Curly braces: {balance.braces.open}× "{{" and {balance.braces.close}× "}}"'
        )

    return '. '.join(messages)
