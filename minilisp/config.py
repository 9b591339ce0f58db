from __future__ import annotations
import logging
import os
from typing import Optional


_DEFAULT_PROMPT = "minilisp> "
_DEFAULT_LOGLEVEL = logging.WARNING


def get_prompt() -> str:
    return os.environ.get("MINILISP_PROMPT", _DEFAULT_PROMPT)


def get_log_level() -> int:
    raw = os.environ.get("MINILISP_LOGLEVEL")
    if not raw:
        return _DEFAULT_LOGLEVEL
    return logging.getLevelNamesMapping().get(raw.strip().upper(), _DEFAULT_LOGLEVEL)


def get_recursion_limit() -> Optional[int]:
    raw = os.environ.get("MINILISP_RECURSION_LIMIT")
    if not raw:
        return None
    try:
        limit = int(raw)
    except ValueError:
        return None
    return limit if limit > 0 else None
