#!/usr/bin/env python3
import eoldata.core.app as app


class _StubContext:
    def __init__(self, tag, **kwargs):
        self.tag = tag
        self.kwargs = kwargs


def _install_fake_builder(monkeypatch):
    calls = []

    def fake_build_context(**kwargs):
        calls.append(kwargs)
        return _StubContext(tag=len(calls), **kwargs)

    monkeypatch.setattr(app, "build_context", fake_build_context)
    return calls


def test_get_context_builds_once_and_caches(monkeypatch):
    app._CTX = None
    calls = _install_fake_builder(monkeypatch)

    ctx1 = app.get_context()
    assert ctx1.tag == 1
    assert calls[-1] == {"config": None, "check_urls": None}

    ctx2 = app.get_context()
    assert ctx2 is ctx1
    assert len(calls) == 1


def test_get_context_force_reload_triggers_rebuild(monkeypatch):
    app._CTX = None
    calls = _install_fake_builder(monkeypatch)

    first = app.get_context()
    second = app.get_context(force_reload=True)

    assert second is not first
    assert len(calls) == 2


def test_get_context_overrides_are_forwarded(monkeypatch):
    app._CTX = None
    calls = _install_fake_builder(monkeypatch)

    cfg = {"logging": {"level": "DEBUG"}}
    app.get_context(config_override=cfg, check_urls_override=False)

    assert calls[-1] == {"config": cfg, "check_urls": False}
    app._CTX = None
