#!/usr/bin/env python3
"""
Purpose:
    Provides common utility functions such as dictionary merge, truthiness
    parsing, and JSON file I/O helpers for eoldata.
"""

import json
from datetime import date, datetime
from pathlib import Path
from typing import Any, Dict

from eoldata.core.constants import DEFAULT_TEXT_ENCODING

_TRUTHY_STRINGS = frozenset({"1", "true", "yes", "on"})


# --- Generic Utilities --- #

def merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Recursively merge two dictionaries (values from 'override' take precedence).
    Non-dict values are overwritten; dict values are merged depth-first.
    """
    result = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = merge_dicts(result[k], v)
        else:
            result[k] = v
    return result


def parse_bool_env(value: str | None) -> bool:
    """Return True for '1', 'true', 'yes' or 'on' (case-insensitive, trimmed)."""
    if value is None:
        return False
    return value.strip().lower() in _TRUTHY_STRINGS


# --- File I/O Helpers --- #

def load_json_file(path: Path) -> Dict[str, Any]:
    """
    Load a JSON file from 'path'. Returns an empty dict if the file is missing.

    Raises:
        ValueError: if the file exists but contains invalid JSON.
    """
    if not path.exists():
        return {}
    try:
        with path.open("r", encoding=DEFAULT_TEXT_ENCODING) as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(
            f"Invalid JSON in {str(path)!r}: {e.msg} (line {e.lineno}, col {e.colno})"
        ) from e


def json_default(value: Any) -> Any:
    """`json.dumps` hook rendering dates as ISO strings (YYYY-MM-DD)."""
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def write_json_file(path: Path, payload: Any) -> Path:
    """
    Serialize 'payload' to 'path' (UTF-8, trailing newline), overwriting any existing file.

    Raises:
        OSError: if the file cannot be written.
    """
    text = json.dumps(payload, default=json_default, ensure_ascii=False)
    path.write_text(text + "\n", encoding=DEFAULT_TEXT_ENCODING)
    return path
