#!/usr/bin/env python3
"""
Purpose:
    Wires together the eoldata application context: merged configuration,
    typed URL-check settings, and logging.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

from eoldata.core.config import load_config
from eoldata.core.formatting import format_pydantic_errors_simple
from eoldata.core.logging_config import setup_logging
from eoldata.core.urls.checker import UrlChecker
from eoldata.core.urls.settings import UrlCheckSettings


# --- Data model --- #

@dataclass(frozen=True)
class AppContext:
    """Immutable container for configuration and derived settings."""
    config: Dict[str, Any]
    url_settings: UrlCheckSettings

    @property
    def products_path(self) -> Path:
        return Path(self.config.get("products_path", "./products"))

    @property
    def api_path(self) -> Path:
        return Path(self.config.get("api_path", "./api"))

    @property
    def product_defaults(self) -> Dict[str, Any]:
        return dict(self.config.get("product_defaults", {}))

    @property
    def tolerance_days(self) -> int:
        return int(self.config.get("future_date_tolerance_days", 30))

    def url_checker(self) -> UrlChecker:
        """A new checker for this run; the caller closes it."""
        return UrlChecker(self.url_settings)


# --- Factory --- #

def build_context(
    *,
    config: Optional[Dict[str, Any]] = None,
    check_urls: Optional[bool] = None,
    configure_logging: bool = True,
) -> AppContext:
    """
    Build an `AppContext`.

    Args:
        config:
            Pre-merged configuration. If omitted, `load_config()` is used.
        check_urls:
            Optional override for `config['url_check']['enabled']`.
        configure_logging:
            If True, applies `config['logging']['level']` to the eoldata loggers.

    Returns:
        AppContext: immutable bundle of config and URL-check settings.

    Raises:
        ValueError: if the `url_check` block is invalid.
    """
    cfg = config or load_config()

    url_block = dict(cfg.get("url_check", {}))
    if check_urls is not None:
        url_block["enabled"] = check_urls
    try:
        url_settings = UrlCheckSettings.model_validate(url_block)
    except ValidationError as e:
        raise ValueError(
            "Invalid url_check configuration: " + "; ".join(format_pydantic_errors_simple(e))
        ) from e

    if configure_logging:
        setup_logging(cfg.get("logging", {}).get("level", "INFO"))

    return AppContext(config=cfg, url_settings=url_settings)
