from __future__ import annotations
import os
from pathlib import Path


# Defaults
DEFAULT_MAX_DEPTH = 150
DEFAULT_HISTORY_FILE = Path('history.txt')
DEFAULT_LOG_LEVEL = 'WARNING'


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value > 0 else default


def get_max_depth() -> int:
    return int_from_env('TINYLISP_MAX_DEPTH', DEFAULT_MAX_DEPTH)


def get_history_file() -> Path:
    raw = os.environ.get('TINYLISP_HISTORY_FILE')
    return Path(raw.strip()) if raw and raw.strip() else DEFAULT_HISTORY_FILE


def get_log_level() -> str:
    raw = os.environ.get('TINYLISP_LOG_LEVEL')
    return raw.strip().upper() if raw and raw.strip() else DEFAULT_LOG_LEVEL
