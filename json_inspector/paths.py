from __future__ import annotations

import re
from typing import Union

ROOT = '$'

IDENTIFIER_PATTERN = re.compile(r'^[A-Za-z_][A-Za-z0-9_]*$')


def build_path(parent_path: str, key: Union[str, int]) -> str:
    """Build the address of a child node from its parent's address.

    - An empty parent addresses the root node itself: always '$'.
    - Integer keys are array indices: '$.items[3]'.
    - Identifier-like keys use dot notation: '$.user.name'.
    - Anything else is bracket-quoted: '$["my-key"]'. Quotes inside the key
      are not escaped, so such addresses cannot be parsed back.
    """
    if not parent_path:
        return ROOT

    if isinstance(key, int) and not isinstance(key, bool):
        return f"{parent_path}[{key}]"

    key = str(key)
    if IDENTIFIER_PATTERN.match(key):
        return f"{parent_path}.{key}"

    return f'{parent_path}["{key}"]'
