from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Union

JsonValue = Union[Dict[str, Any], List[Any], str, int, float, bool, None]


@dataclass
class ParseOutcome:
    """Result of parsing raw text: a value, or an error with optional location."""

    ok: bool
    value: JsonValue = None
    error: Optional[str] = None
    line: Optional[int] = None
    column: Optional[int] = None

    @classmethod
    def success(cls, value: JsonValue) -> 'ParseOutcome':
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str, line: Optional[int] = None, column: Optional[int] = None) -> 'ParseOutcome':
        return cls(ok=False, error=error, line=line, column=column)

    def to_dict(self) -> Dict[str, Any]:
        if self.ok:
            return {'ok': True, 'value': self.value}
        out: Dict[str, Any] = {'ok': False, 'error': self.error}
        if self.line is not None:
            out['line'] = self.line
        if self.column is not None:
            out['column'] = self.column
        return out


@dataclass
class BracketInfo:
    char: str
    line: int
    column: int
    position: int


@dataclass
class Counts:
    open: int = 0
    close: int = 0


@dataclass
class BalanceResult:
    is_balanced: bool = True
    brackets: Counts = field(default_factory=Counts)
    braces: Counts = field(default_factory=Counts)
    # Outermost first.
    unclosed: List[BracketInfo] = field(default_factory=list)
    # In scan order.
    unexpected: List[BracketInfo] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class SearchMatch:
    before: str
    match: str
    after: str


@dataclass
class TreeNode:
    key: str
    value: JsonValue
    path: str
    type: str
    children: Optional[List['TreeNode']] = None
    child_count: Optional[int] = None

    @property
    def is_container(self) -> bool:
        return self.children is not None
