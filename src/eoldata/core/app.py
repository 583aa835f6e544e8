#!/usr/bin/env python3
"""
Purpose:
    Provides a module-level accessor for the eoldata AppContext, with optional
    reload and overrides for configuration and the URL-check switch.
"""
from typing import Any, Dict, Optional

from eoldata.core.app_context import AppContext, build_context

# --- Module state --- #

_CTX: Optional[AppContext] = None


# --- Public API --- #

def get_context(
    *,
    force_reload: bool = False,
    config_override: Optional[Dict[str, Any]] = None,
    check_urls_override: Optional[bool] = None,
) -> AppContext:
    """
    Return the process-wide `AppContext`.

    Args:
        force_reload:
            If True, rebuilds the context even if one is already cached.
        config_override:
            Optional configuration dict to use instead of `load_config()`.
        check_urls_override:
            Optional value replacing `config['url_check']['enabled']`.

    Returns:
        A built `AppContext` instance.
    """
    global _CTX
    if (
        _CTX is None
        or force_reload
        or config_override
        or check_urls_override is not None
    ):
        _CTX = build_context(
            config=config_override,
            check_urls=check_urls_override,
        )
    return _CTX
