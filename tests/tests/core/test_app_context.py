#!/usr/bin/env python3
import pytest
from pathlib import Path
from dataclasses import FrozenInstanceError

import eoldata.core.app_context as ac
from eoldata.core.urls.checker import UrlChecker


def _config(tmp_path: Path, **url_check):
    return {
        "products_path": str(tmp_path / "products"),
        "api_path": str(tmp_path / "api"),
        "logging": {"level": "INFO"},
        "future_date_tolerance_days": 45,
        "product_defaults": {"auto": []},
        "url_check": {"enabled": False, "ignored": [], "suppressed": [], **url_check},
    }


def test_build_context_uses_load_config_when_config_missing(tmp_path, monkeypatch):
    cfg = _config(tmp_path)
    monkeypatch.setattr(ac, "load_config", lambda: cfg)

    ctx = ac.build_context(configure_logging=False)

    assert ctx.config is cfg
    assert ctx.products_path == tmp_path / "products"
    assert ctx.api_path == tmp_path / "api"
    assert ctx.tolerance_days == 45
    assert ctx.product_defaults == {"auto": []}
    assert ctx.url_settings.enabled is False


def test_build_context_check_urls_override(tmp_path):
    ctx = ac.build_context(config=_config(tmp_path), check_urls=True, configure_logging=False)
    assert ctx.url_settings.enabled is True

    ctx = ac.build_context(config=_config(tmp_path, enabled=True), check_urls=False, configure_logging=False)
    assert ctx.url_settings.enabled is False


def test_build_context_invalid_url_check_block_raises(tmp_path):
    with pytest.raises(ValueError, match="Invalid url_check configuration: read_timeout"):
        ac.build_context(config=_config(tmp_path, read_timeout=0), configure_logging=False)


def test_build_context_configures_logging_level(tmp_path, monkeypatch):
    levels = []
    monkeypatch.setattr(ac, "setup_logging", lambda level: levels.append(level))

    cfg = _config(tmp_path)
    cfg["logging"]["level"] = "DEBUG"
    ac.build_context(config=cfg)

    assert levels == ["DEBUG"]


def test_context_is_frozen_and_builds_checkers(tmp_path):
    ctx = ac.build_context(config=_config(tmp_path, max_workers=4), configure_logging=False)

    with pytest.raises(FrozenInstanceError):
        ctx.config = {}  # type: ignore[misc]

    checker = ctx.url_checker()
    assert isinstance(checker, UrlChecker)
    assert checker.settings.max_workers == 4
    checker.close()
