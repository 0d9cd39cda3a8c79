"""Case-insensitive search over JSON trees.

A blank search term matches everything. Keys and primitive values are
compared as substrings; containers only match through their members.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Tuple, Union

from .formatting import primitive_text
from .models import JsonValue, SearchMatch, TreeNode
from .paths import ROOT, build_path


def _primitive_matches(value: JsonValue, term: str) -> bool:
    if isinstance(value, (dict, list)):
        return False
    return term in primitive_text(value).lower()


def matches_search(key: str, value: JsonValue, search_term: str) -> bool:
    if not search_term.strip():
        return True

    term = search_term.lower()
    if term in str(key).lower():
        return True
    return _primitive_matches(value, term)


def has_matching_descendant(value: JsonValue, search_term: str) -> bool:
    if not search_term.strip():
        return True
    return _descendant_matches(value, search_term.lower())


def _descendant_matches(value: JsonValue, term: str) -> bool:
    stack = [value]
    while stack:
        current = stack.pop()
        if isinstance(current, list):
            for index, item in enumerate(current):
                if term in str(index):
                    return True
                stack.append(item)
        elif isinstance(current, dict):
            for key, val in current.items():
                if term in key.lower():
                    return True
                stack.append(val)
        elif _primitive_matches(current, term):
            return True
    return False


def highlight_match(text: str, search_term: str) -> Optional[SearchMatch]:
    """Split `text` around the first case-insensitive hit of `search_term`."""
    if not search_term.strip():
        return None

    index = text.lower().find(search_term.lower())
    if index == -1:
        return None

    end = index + len(search_term)
    return SearchMatch(before=text[:index], match=text[index:end], after=text[end:])


def filter_tree(node: TreeNode, search_term: str) -> Optional[TreeNode]:
    """Prune `node` to the branches that contain a match.

    A matching node is kept whole; a non-matching container is kept only
    with its matching children.
    """
    if not search_term.strip():
        return node

    # Pre-order, so every node is listed before its children.
    visited: List[Tuple[TreeNode, bool]] = []
    stack = [node]
    while stack:
        current = stack.pop()
        matched = matches_search(current.key, current.value, search_term)
        visited.append((current, matched))
        if not matched and current.children:
            stack.extend(current.children)

    kept: Dict[int, Optional[TreeNode]] = {}
    for current, matched in reversed(visited):
        if matched:
            kept[id(current)] = current
            continue
        children = [kept[id(c)] for c in current.children or [] if kept.get(id(c)) is not None]
        if not children:
            kept[id(current)] = None
            continue
        kept[id(current)] = TreeNode(
            key=current.key,
            value=current.value,
            path=current.path,
            type=current.type,
            children=children,
            child_count=current.child_count,
        )
    return kept[id(node)]


def _child_items(value: JsonValue) -> List[Tuple[Union[str, int], JsonValue]]:
    if isinstance(value, list):
        return list(enumerate(value))
    if isinstance(value, dict):
        return list(value.items())
    return []


def collect_matching_paths(value: JsonValue, search_term: str, path: str = ROOT) -> List[str]:
    """Addresses of every node whose own key or primitive value matches, in document order."""
    if not search_term.strip():
        return []

    term = search_term.lower()
    found: List[str] = []
    if _primitive_matches(value, term):
        found.append(path)

    stack = [(key, child, path) for key, child in reversed(_child_items(value))]
    while stack:
        key, child, parent_path = stack.pop()
        child_path = build_path(parent_path, key)
        if term in str(key).lower() or _primitive_matches(child, term):
            found.append(child_path)
        stack.extend((k, c, child_path) for k, c in reversed(_child_items(child)))
    return found
