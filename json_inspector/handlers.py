from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import gradio as gr

from .balance import bracket_balance_message, check_bracket_balance
from .config import Settings, load_settings
from .formatting import minify, prettify
from .io_utils import read_text_content
from .models import ParseOutcome
from .parsing import estimate_size, is_large_json, parse_json
from .search import collect_matching_paths
from .tree import build_tree, render_tree

_LOG = logging.getLogger(__name__)

SETTINGS: Settings = load_settings()


def describe_parse_error(text: str, outcome: ParseOutcome) -> str:
    """Status line for a failed parse, with the balance diagnosis appended."""
    message = f"Invalid JSON: {outcome.error}"
    if outcome.line is not None and outcome.column is not None:
        message += f" (line {outcome.line}, column {outcome.column})"
    if not text.strip():
        return message

    balance_message = bracket_balance_message(check_bracket_balance(text))
    if balance_message:
        message += f"\nStructure: {balance_message}"
    return message


def load_file_handler(file_obj):
    if file_obj is None:
        return gr.update(), "No file uploaded."
    try:
        text = read_text_content(file_obj)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        _LOG.info("Could not read uploaded file: %s", e)
        return gr.update(), f"Error reading file: {str(e)}"
    return text, f"Loaded {estimate_size(text)} bytes."


def _format(text: str, render) -> Tuple[Optional[str], str]:
    outcome = parse_json(text)
    if not outcome.ok:
        return None, describe_parse_error(text, outcome)
    try:
        return render(outcome.value), "Valid JSON."
    except (ValueError, RecursionError) as e:
        _LOG.info("Could not serialize document: %s", e)
        return None, f"Could not format JSON: {str(e) or e.__class__.__name__}"


def prettify_handler(text: str, sort_keys: bool = False):
    output, status = _format(text or '', lambda v: prettify(v, sort_keys, SETTINGS.indent))
    return (output if output is not None else gr.update()), status


def minify_handler(text: str):
    output, status = _format(text or '', minify)
    return (output if output is not None else gr.update()), status


def validate_handler(text: str) -> Tuple[str, dict]:
    """Parse and balance-check `text`; returns (status, balance report)."""
    text = text or ''
    outcome = parse_json(text)
    balance = check_bracket_balance(text)
    if outcome.ok:
        status = "Valid JSON."
    else:
        status = describe_parse_error(text, outcome)
    return status, balance.to_dict()


def search_handler(text: str, search_term: str) -> Tuple[str, List[List[str]], str]:
    """Return (tree outline, matching paths table, status)."""
    text = text or ''
    search_term = search_term or ''

    if is_large_json(text, SETTINGS.large_input_bytes):
        _LOG.debug("Skipping tree view for %d byte input", estimate_size(text))
        return '', [], "Input too large for the tree view; use Prettify or Minify instead."

    outcome = parse_json(text)
    if not outcome.ok:
        return '', [], describe_parse_error(text, outcome)

    tree = build_tree(outcome.value)
    outline = render_tree(
        tree,
        search_term,
        max_lines=SETTINGS.max_tree_lines,
        truncate_length=SETTINGS.truncate_length,
    )
    if not search_term.strip():
        if tree.child_count is None:
            return outline, [], f"Single {tree.type} value."
        return outline, [], f"{tree.child_count} top-level entries."

    paths = collect_matching_paths(outcome.value, search_term)
    if not paths:
        return outline, [], f"No matches for '{search_term}'."
    return outline, [[p] for p in paths], f"{len(paths)} matches."
