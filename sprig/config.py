from __future__ import annotations
import logging
import os
from typing import Optional


_DIALECTS = ("basic", "extended")

# Defaults
_DEFAULT_DIALECT = "extended"
_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_PROMPT = "sprig> "


def str_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw


def get_dialect() -> str:
    dialect = str_from_env('SPRIG_DIALECT', _DEFAULT_DIALECT).strip().lower()
    if dialect not in _DIALECTS:
        raise ValueError(f"SPRIG_DIALECT must be one of {', '.join(_DIALECTS)}, got {dialect!r}")
    return dialect


def is_extended_dialect() -> bool:
    return get_dialect() == "extended"


def get_log_level() -> int:
    name = str_from_env('SPRIG_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    # getLevelName returns "Level X" for unknown names
    if not isinstance(level, int):
        raise ValueError(f"Unknown SPRIG_LOG_LEVEL {name!r}")
    return level


def get_prompt() -> str:
    # whitespace is significant here, so no strip
    return os.environ.get('SPRIG_PROMPT', _DEFAULT_PROMPT)


def get_recursion_limit() -> Optional[int]:
    raw = os.environ.get('SPRIG_RECURSION_LIMIT')
    if not raw or not raw.strip():
        return None
    try:
        limit = int(raw)
    except ValueError:
        raise ValueError(f"SPRIG_RECURSION_LIMIT must be an integer, got {raw!r}")
    if limit <= 0:
        raise ValueError("SPRIG_RECURSION_LIMIT must be positive")
    return limit
