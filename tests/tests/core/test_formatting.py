#!/usr/bin/env python3
import pytest
from pydantic import ValidationError

from eoldata.core.formatting import format_findings, format_pydantic_errors_simple, _format_error_loc
from eoldata.core.urls.settings import UrlCheckSettings
from eoldata.core.validation import Finding, Severity


# --- Unit tests for _format_error_loc --- #

@pytest.mark.parametrize("loc,expected", [
    (("url_check", "ignored", 1), "url_check.ignored[1]"),
    ((0, "items"), "[0].items"),
    ((), "<root>"),
    ((0, 1, "x"), "[0][1].x"),
])
def test_format_error_loc(loc, expected):
    assert _format_error_loc(loc) == expected


# --- format_pydantic_errors_simple --- #

def test_format_pydantic_errors_simple_with_real_validation_error():
    with pytest.raises(ValidationError) as exc_info:
        UrlCheckSettings.model_validate({"max_workers": 0})
    msgs = format_pydantic_errors_simple(exc_info.value)
    assert len(msgs) == 1
    assert msgs[0].startswith("max_workers: ")


def test_format_pydantic_errors_simple_fallback_uses_first_line():
    exc = ValueError("first line\nsecond line")
    assert format_pydantic_errors_simple(exc) == ["first line"]


# --- format_findings --- #

def test_format_findings_lists_errors_first():
    warning = Finding(Severity.WARNING, "link", "https://a.test", "a.md", "1.0", "got an error : 'x'")
    error = Finding(Severity.ERROR, "title", None, "a.md", None, "expecting a value of type String, got NoneType")

    lines = format_findings([warning, error])
    assert lines == [
        "[error] Invalid title 'None' for a.md, expecting a value of type String, got NoneType.",
        "[warning] Invalid link 'https://a.test' for a.md#1.0, got an error : 'x'.",
    ]
