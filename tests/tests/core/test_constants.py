#!/usr/bin/env python3

import pytest

import eoldata.core.constants as const


# --- Basic sanity checks on constants --- #

def test_categories_and_extensions():
    assert "lang" in const.VALID_CATEGORIES and "server-app" in const.VALID_CATEGORIES
    assert len(set(const.VALID_CATEGORIES)) == len(const.VALID_CATEGORIES)
    assert all(x.startswith(".") for x in const.SUPPORTED_DOCUMENT_EXT)
    assert const.ARTIFACT_EXT == ".json"


@pytest.mark.parametrize("value,ok", [("/python", True), ("/red-hat-9", True), ("/Python", False), ("python", False), ("/a_b", False)])
def test_permalink_pattern(value, ok):
    assert bool(const.PERMALINK_RE.fullmatch(value)) is ok


def test_alternate_url_allows_underscore():
    assert const.ALTERNATE_URL_RE.fullmatch("/py_3")
    assert not const.ALTERNATE_URL_RE.fullmatch("/py/3")


@pytest.mark.parametrize("value,ok", [("lang", True), ("lang python-family", True), ("lang  os", False), ("Lang", False), (" lang", False)])
def test_tags_pattern(value, ok):
    assert bool(const.TAGS_RE.fullmatch(value)) is ok


def test_url_pattern():
    assert const.URL_RE.fullmatch("https://endoflife.date")
    assert const.URL_RE.fullmatch("http://x")
    assert not const.URL_RE.fullmatch("ftp://x")
    assert not const.URL_RE.fullmatch("https://")


# --- Front matter --- #

def test_front_matter_pattern_splits_header_and_body():
    text = "---\ntitle: Demo\n---\n\nBody text\n"
    m = const.FRONT_MATTER_RE.match(text)
    assert m is not None
    assert m.group(1) == "title: Demo\n"
    assert text[m.end():] == "\nBody text\n"


def test_front_matter_pattern_requires_leading_marker():
    assert const.FRONT_MATTER_RE.match("intro\n---\ntitle: Demo\n---\n") is None
