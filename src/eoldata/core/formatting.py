#!/usr/bin/env python3
"""
Formatting helpers for eoldata.

- Stable, minimal one-line formatting for Pydantic v2 `ValidationError`.
- One-line rendering of validation findings for the CLI report.
"""
from __future__ import annotations

from typing import Any, Iterable, List, Sequence


# --- Public API --- #

def format_pydantic_errors_simple(exc: Exception) -> List[str]:
    """
    Return stable one-line messages from a Pydantic v2 ValidationError.

    Example:
        url_check.ignored[1]: List should have at least 2 items

    Falls back to the first line of str(exc) if `exc.errors()` isn't available.
    """
    errors: Sequence[dict[str, Any]] | None = None

    if hasattr(exc, "errors") and callable(getattr(exc, "errors")):
        try:
            errors = exc.errors()  # type: ignore[assignment]
        except Exception:
            errors = None

    if not errors:
        return [str(exc).splitlines()[0]]

    msgs: List[str] = []
    for err in errors:
        loc = err.get("loc", ())
        msg = err.get("msg", "Validation error")
        path = _format_error_loc(loc)
        msgs.append(f"{path}: {msg}")
    return msgs


def format_findings(findings: Iterable[Any]) -> List[str]:
    """
    Render findings as report lines, errors first, keeping discovery order otherwise.

    Example:
        [error] Invalid category 'foo' for python.md, expecting one of app, db, ...
    """
    ordered = sorted(findings, key=lambda f: not f.is_error)
    return [f"[{f.severity.value}] {f.describe()}" for f in ordered]


# --- Internals --- #

def _format_error_loc(loc: Iterable[Any]) -> str:
    """
    Convert a Pydantic error `loc` tuple into a dotted path with index suffixes.

    Examples:
        ('url_check', 'ignored', 1) -> "url_check.ignored[1]"
        (0, 'items')                -> "[0].items"
        ()                          -> "<root>"
    """
    parts: List[str] = []
    for seg in loc:
        if isinstance(seg, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{seg}]"
            else:
                parts.append(f"[{seg}]")
        else:
            parts.append(str(seg))
    return ".".join(parts) if parts else "<root>"
