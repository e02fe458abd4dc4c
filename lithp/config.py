from __future__ import annotations
import logging
import os
from typing import Optional


def _from_env(var: str, default: Optional[str] = None) -> Optional[str]:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def get_log_level() -> int:
    name = _from_env('LITHP_LOG_LEVEL', 'WARNING').upper()
    level = logging.getLevelName(name)
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else logging.WARNING


def get_recursion_limit() -> Optional[int]:
    raw = _from_env('LITHP_RECURSION_LIMIT')
    if raw is None:
        return None
    try:
        limit = int(raw)
    except ValueError:
        raise ValueError(f"LITHP_RECURSION_LIMIT must be an integer, got {raw!r}") from None
    return limit if limit > 0 else None


def get_prompt() -> str:
    return os.environ.get('LITHP_PROMPT', '')
