#!/usr/bin/env python3
import json
import logging
from datetime import date
from pathlib import Path
import pytest

from eoldata.core.constants import DEFAULT_TEXT_ENCODING
from eoldata.core.model.product import Product
from eoldata.core.projection import project_dataset, project_product, release_filename, write_index


def _read_json(path: Path):
    return json.loads(path.read_text(encoding=DEFAULT_TEXT_ENCODING))


def _product(permalink: str, releases) -> Product:
    return Product(name=f"{permalink.strip('/')}.md", data={"permalink": permalink, "releases": releases})


# --- File names --- #

@pytest.mark.parametrize("cycle,expected", [
    ("1.0", "1.0.json"),
    ("1/2", "1-2.json"),
    ("a/b/c", "a-b-c.json"),
    (3.1, "3.1.json"),
])
def test_release_filename(cycle, expected):
    assert release_filename(cycle) == expected


# --- Per-release and aggregate files --- #

def test_project_product_round_trip(tmp_path: Path):
    api = tmp_path / "api"
    product = _product("/demo", [{"releaseCycle": "1.0", "eol": "2020-01-01"}])

    aggregate = project_product(product, api)

    assert _read_json(api / "demo" / "1.0.json") == {"eol": "2020-01-01"}
    assert _read_json(api / "demo.json") == [{"cycle": "1.0", "eol": "2020-01-01"}]
    assert aggregate == [{"cycle": "1.0", "eol": "2020-01-01"}]


def test_project_product_aggregate_keeps_release_order_and_dates(tmp_path: Path):
    api = tmp_path / "api"
    product = _product("/demo", [
        {"releaseCycle": "2", "releaseDate": date(2024, 1, 10), "eol": False, "latest": "2.0.1"},
        {"releaseCycle": "1/x", "releaseDate": date(2020, 1, 10), "eol": date(2023, 1, 1), "latest": "1.9"},
    ])

    project_product(product, api)

    assert sorted(p.name for p in (api / "demo").iterdir()) == ["1-x.json", "2.json"]
    assert _read_json(api / "demo" / "1-x.json") == {"releaseDate": "2020-01-10", "eol": "2023-01-01", "latest": "1.9"}
    aggregate = _read_json(api / "demo.json")
    assert [entry["cycle"] for entry in aggregate] == ["2", "1/x"]
    assert aggregate[0] == {"cycle": "2", "releaseDate": "2024-01-10", "eol": False, "latest": "2.0.1"}


def test_project_product_does_not_mutate_the_product(tmp_path: Path):
    product = _product("/demo", [{"releaseCycle": "1.0", "eol": True}])
    project_product(product, tmp_path)
    assert product.data["releases"] == [{"releaseCycle": "1.0", "eol": True}]


def test_project_product_is_idempotent_and_overwrites(tmp_path: Path):
    api = tmp_path / "api"
    project_product(_product("/demo", [{"releaseCycle": "1.0", "eol": False}]), api)
    project_product(_product("/demo", [{"releaseCycle": "1.0", "eol": True}]), api)

    assert _read_json(api / "demo" / "1.0.json") == {"eol": True}
    assert _read_json(api / "demo.json") == [{"cycle": "1.0", "eol": True}]


def test_project_product_write_failure_propagates(tmp_path: Path):
    api = tmp_path / "api"
    api.mkdir()
    (api / "demo").write_text("a file where a directory should be", encoding=DEFAULT_TEXT_ENCODING)

    with pytest.raises(OSError):
        project_product(_product("/demo", [{"releaseCycle": "1.0"}]), api)


# --- Global index --- #

def test_write_index_sorts_permalinks(tmp_path: Path):
    api = tmp_path / "api"
    assert write_index(["b", "a"], api) == ["a", "b"]
    assert _read_json(api / "all.json") == ["a", "b"]


def test_project_dataset_writes_everything(tmp_path: Path):
    api = tmp_path / "api"
    products = [
        _product("/b", [{"releaseCycle": "1", "eol": True}]),
        _product("/a", [{"releaseCycle": "2", "eol": False}]),
    ]

    index = project_dataset(products, api)

    assert index == ["a", "b"]
    assert _read_json(api / "all.json") == ["a", "b"]
    assert _read_json(api / "a" / "2.json") == {"eol": False}
    assert _read_json(api / "b.json") == [{"cycle": "1", "eol": True}]


# --- Invalid permalinks --- #

@pytest.mark.parametrize("permalink", ["/../escaped", "/a/b", "demo", "/Demo", ""])
def test_project_product_rejects_invalid_permalink(tmp_path: Path, permalink):
    api = tmp_path / "api"
    product = Product(name="bad.md", data={"permalink": permalink, "releases": [{"releaseCycle": "1"}]})

    with pytest.raises(ValueError, match="Invalid permalink"):
        project_product(product, api)
    assert not tmp_path.joinpath("escaped").exists()
    assert not api.exists()


def test_project_dataset_skips_invalid_permalinks(tmp_path: Path, caplog):
    api = tmp_path / "api"
    products = [
        _product("/../escaped", [{"releaseCycle": "1", "eol": True}]),
        _product("/a", [{"releaseCycle": "2", "eol": False}]),
    ]

    with caplog.at_level(logging.ERROR, logger="eoldata.projection"):
        index = project_dataset(products, api)

    assert index == ["a"]
    assert sorted(p.relative_to(tmp_path).as_posix() for p in tmp_path.rglob("*")) == [
        "api", "api/a", "api/a.json", "api/a/2.json", "api/all.json",
    ]
    assert "invalid permalink '/../escaped'" in caplog.text
