from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

_LOG = logging.getLogger(__name__)

LARGE_INPUT_BYTES = 2 * 1024 * 1024

ENV_PREFIX = 'JSON_INSPECTOR_'


@dataclass(frozen=True)
class Settings:
    large_input_bytes: int = LARGE_INPUT_BYTES
    indent: int = 2
    truncate_length: int = 50
    max_tree_lines: int = 500
    log_level: str = 'INFO'


def _read_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        _LOG.warning("Ignoring %s%s=%r: not an integer", ENV_PREFIX, name, raw)
        return default
    if value < 0:
        _LOG.warning("Ignoring %s%s=%r: must not be negative", ENV_PREFIX, name, raw)
        return default
    return value


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from JSON_INSPECTOR_* environment variables."""
    if environ is None:
        environ = os.environ
    defaults = Settings()
    level = (environ.get(ENV_PREFIX + 'LOG_LEVEL') or defaults.log_level).strip().upper()
    return Settings(
        large_input_bytes=_read_int(environ, 'LARGE_INPUT_BYTES', defaults.large_input_bytes),
        indent=_read_int(environ, 'INDENT', defaults.indent),
        truncate_length=_read_int(environ, 'TRUNCATE_LENGTH', defaults.truncate_length),
        max_tree_lines=_read_int(environ, 'MAX_TREE_LINES', defaults.max_tree_lines),
        log_level=level,
    )
