#!/usr/bin/env python3
import pytest
from pydantic import ValidationError

from eoldata.core.urls.prefixes import IGNORED_URL_PREFIXES, SUPPRESSED_BECAUSE_TIMEOUT, SUPPRESSED_URL_PREFIXES
from eoldata.core.urls.settings import UrlCheckSettings


def test_defaults_carry_builtin_tables():
    s = UrlCheckSettings()
    assert s.enabled is False
    assert (s.connect_timeout, s.read_timeout) == (3, 10)
    assert s.max_workers == 1
    assert s.ignored == [tuple(p) for p in IGNORED_URL_PREFIXES]
    assert s.suppressed == [tuple(p) for p in SUPPRESSED_URL_PREFIXES]


def test_json_pairs_become_tuples():
    s = UrlCheckSettings.model_validate({"suppressed": [["https://a.test", "flaky"]]})
    assert s.suppressed == [("https://a.test", "flaky")]


def test_mapping_keeps_key_order():
    s = UrlCheckSettings.model_validate({"ignored": {"https://b.test": "x", "https://a.test": "y"}})
    assert s.ignored == [("https://b.test", "x"), ("https://a.test", "y")]


@pytest.mark.parametrize("payload", [
    {"ignored": [["https://a.test"]]},
    {"suppressed": [["  ", "blank prefix"]]},
    {"connect_timeout": 0},
    {"read_timeout": -1},
    {"max_workers": 0},
    {"user_agent": ""},
    {"unknown": True},
])
def test_invalid_settings_are_rejected(payload):
    with pytest.raises(ValidationError):
        UrlCheckSettings.model_validate(payload)


def test_builtin_prefixes_do_not_overlap_between_tables():
    ignored = {p for p, _ in IGNORED_URL_PREFIXES}
    suppressed = {p for p, _ in SUPPRESSED_URL_PREFIXES}
    assert not ignored & suppressed


def test_builtin_tables_keep_their_reasons():
    assert IGNORED_URL_PREFIXES == [["https://www.nokia.com", "always return a Net::ReadTimeout"]]
    assert dict(SUPPRESSED_URL_PREFIXES)["https://www.java.com/releases/"] == SUPPRESSED_BECAUSE_TIMEOUT
