"""Core logic for JSON Inspector.

The Gradio UI lives in `app.py`. This package contains pure functions that:
- parse JSON text and locate syntax errors by line/column
- check bracket/brace balance on raw, possibly malformed text
- search JSON trees and highlight matches
- build `$`-rooted node addresses and format documents
"""
