from __future__ import annotations
import logging
import os


_TRUE_VALUES = {'1', 'true', 'yes', 'on'}


def flag_from_env(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUE_VALUES


def get_log_level() -> int:
    raw = os.environ.get('CONSLISP_LOG_LEVEL', 'WARNING').strip().upper()
    level = logging.getLevelName(raw)
    # getLevelName returns a "Level X" string for unknown names
    return level if isinstance(level, int) else logging.WARNING


def lenient_parse() -> bool:
    """Accept forms left open at end of input instead of raising ParseError."""
    return flag_from_env('CONSLISP_LENIENT_PARSE')


def get_recursion_limit() -> int:
    """Python recursion limit the CLI runs programs under."""
    raw = os.environ.get('CONSLISP_RECURSION_LIMIT', '').strip()
    return int(raw) if raw.isdigit() else 10000
