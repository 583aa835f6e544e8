#!/usr/bin/env python3
"""
eoldata configuration loader.
"""

import copy
import os
from pathlib import Path
from typing import Any, Dict, Final

from eoldata.core.constants import (
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_FUTURE_TOLERANCE_DAYS,
    DEFAULT_READ_TIMEOUT,
    DEFAULT_USER_AGENT,
)
from eoldata.core.urls.prefixes import IGNORED_URL_PREFIXES, SUPPRESSED_URL_PREFIXES
from eoldata.core.utils import load_json_file, merge_dicts, parse_bool_env

# --- Defaults & locations --- #

# Front matter applied under every product document (authored keys win)
DEFAULT_PRODUCT_DEFAULTS: Final[Dict[str, Any]] = {
    "alternate_urls": [],
    "auto": [],
    "identifiers": [],
    "LTSLabel": "<abbr title=\"Long Term Support\">LTS</abbr>",
    "releaseColumn": True,
    "releaseDateColumn": True,
    "eolColumn": True,
    "activeSupportColumn": False,
    "discontinuedColumn": False,
    "extendedSupportColumn": False,
    "eolWarnThreshold": 121,
    "activeSupportWarnThreshold": 121,
    "discontinuedWarnThreshold": 121,
    "extendedSupportWarnThreshold": 121,
}

DEFAULT_CONFIG: Final[Dict[str, Any]] = {
    "products_path": str(Path("./products").resolve()),
    "api_path": str(Path("./api").resolve()),
    "logging": {"level": "INFO"},
    "future_date_tolerance_days": DEFAULT_FUTURE_TOLERANCE_DAYS,
    "product_defaults": DEFAULT_PRODUCT_DEFAULTS,
    "url_check": {
        "enabled": False,
        "connect_timeout": DEFAULT_CONNECT_TIMEOUT,
        "read_timeout": DEFAULT_READ_TIMEOUT,
        "user_agent": DEFAULT_USER_AGENT,
        "max_workers": 1,
        "ignored": IGNORED_URL_PREFIXES,
        "suppressed": SUPPRESSED_URL_PREFIXES,
    },
}

GLOBAL_CONFIG_PATH: Final[Path] = Path.home() / ".config" / "eoldata" / "config.json"


# --- Public API --- #

def load_config() -> Dict[str, Any]:
    """
    Load eoldata configuration with layered precedence.

    Order:
        1. Built-in defaults
        2. Global config (~/.config/eoldata/config.json)
        3. Project config (./eoldata.json)
        4. Environment overrides:
           - EOLDATA_PRODUCTS_PATH
           - EOLDATA_API_PATH
           - EOLDATA_LOG_LEVEL
           - EOLDATA_CHECK_URLS (or the legacy MUST_CHECK_URLS)

    Returns:
        A merged configuration dictionary.
    """
    # 1) start with defaults (deep copy, the tables are mutable lists)
    config = copy.deepcopy(DEFAULT_CONFIG)

    # 2) global config
    config = merge_dicts(config, load_json_file(GLOBAL_CONFIG_PATH))

    # 3) project config
    project_path = Path.cwd() / "eoldata.json"
    config = merge_dicts(config, load_json_file(project_path))

    # 4) environment overrides
    products_path_env = os.getenv("EOLDATA_PRODUCTS_PATH")
    if products_path_env:
        config["products_path"] = str(Path(products_path_env.strip()).expanduser())

    api_path_env = os.getenv("EOLDATA_API_PATH")
    if api_path_env:
        config["api_path"] = str(Path(api_path_env.strip()).expanduser())

    log_level_env = os.getenv("EOLDATA_LOG_LEVEL")
    if log_level_env:
        config.setdefault("logging", {})["level"] = log_level_env

    check_urls_env = os.getenv("EOLDATA_CHECK_URLS", os.getenv("MUST_CHECK_URLS"))
    if check_urls_env is not None:
        config.setdefault("url_check", {})["enabled"] = parse_bool_env(check_urls_env)

    return config
