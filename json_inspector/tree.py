from __future__ import annotations

from typing import Iterator, List, Optional, Tuple, Union

from .formatting import format_primitive, truncate_string
from .models import JsonValue, TreeNode
from .parsing import get_value_type
from .paths import ROOT, build_path
from .search import filter_tree, highlight_match


def _make_node(value: JsonValue, key: Union[str, int], path: str) -> TreeNode:
    return TreeNode(key=str(key), value=value, path=path, type=get_value_type(value))


def build_tree(value: JsonValue, key: Union[str, int] = ROOT, parent_path: str = '') -> TreeNode:
    """Convert a JSON value into TreeNodes addressed with build_path.

    Containers get `children` and `child_count`; primitives are leaves.
    """
    root = _make_node(value, key, build_path(parent_path, key))
    stack = [root]
    while stack:
        node = stack.pop()
        if isinstance(node.value, dict):
            items = list(node.value.items())
        elif isinstance(node.value, list):
            items = list(enumerate(node.value))
        else:
            continue
        node.children = [_make_node(v, k, build_path(node.path, k)) for k, v in items]
        node.child_count = len(node.children)
        stack.extend(node.children)
    return root


def iter_tree_lines(node: TreeNode, depth: int = 0) -> Iterator[Tuple[int, TreeNode]]:
    """Yield (depth, node) pairs in document order."""
    stack = [(depth, node)]
    while stack:
        current_depth, current = stack.pop()
        yield current_depth, current
        for child in reversed(current.children or []):
            stack.append((current_depth + 1, child))


def _preview(node: TreeNode, truncate_length: int) -> str:
    if node.type == 'array':
        return f"[{node.child_count} items]"
    if node.type == 'object':
        return f"{{{node.child_count} keys}}"
    return truncate_string(format_primitive(node.value), truncate_length)


def _emphasize(text: str, term: str) -> str:
    hit = highlight_match(text, term)
    if hit is None:
        return text
    return f"{hit.before}**{hit.match}**{hit.after}"


def render_tree(
    node: TreeNode,
    search_term: str = '',
    max_lines: Optional[int] = None,
    truncate_length: int = 50,
) -> str:
    """Indented outline of a tree, one node per line: `key (type) preview`.

    With a search term, only matching branches are shown and the first hit
    in each key/preview is wrapped in `**`.
    """
    root = filter_tree(node, search_term)
    if root is None:
        return ''

    lines: List[str] = []
    for depth, current in iter_tree_lines(root):
        if max_lines is not None and len(lines) >= max_lines:
            lines.append('...')
            break
        label = _emphasize(current.key, search_term)
        preview = _emphasize(_preview(current, truncate_length), search_term)
        lines.append(f"{'  ' * depth}{label} ({current.type}) {preview}")
    return '\n'.join(lines)
