#!/usr/bin/env python3
"""
Purpose:
    Projects products into the JSON API:

        api/<permalink>/<cycle>.json   one file per release, without `releaseCycle`
        api/<permalink>.json           every release of the product, with `cycle`
        api/all.json                   sorted list of all product permalinks

    Directories are created as needed and existing files are overwritten.
    Filesystem errors propagate: a partially written API is never reported
    as a success.
"""
from __future__ import annotations

import threading
from collections import defaultdict
from pathlib import Path
from typing import Any, Dict, Iterable, List, Union

from eoldata.core.constants import AGGREGATE_CYCLE_KEY, ARTIFACT_EXT, INDEX_ARTIFACT_NAME, PERMALINK_RE
from eoldata.core.logging_config import get_logger
from eoldata.core.model.product import Product
from eoldata.core.utils import write_json_file

logger = get_logger("projection")

# One lock per product directory; a product's files have a single writer at a time
_PRODUCT_LOCKS: Dict[str, threading.Lock] = defaultdict(threading.Lock)
_PRODUCT_LOCKS_GUARD = threading.Lock()


def has_valid_permalink(product: Product) -> bool:
    """True if the permalink matches PERMALINK_RE and so can name artifacts under `api_dir`."""
    return isinstance(product.permalink, str) and PERMALINK_RE.fullmatch(product.permalink) is not None


def release_filename(cycle: Any) -> str:
    """Artifact file name for a release cycle; '/' becomes '-' (e.g. '1/2' -> '1-2.json')."""
    return str(cycle).replace("/", "-") + ARTIFACT_EXT


def project_product(product: Product, api_dir: Union[str, Path]) -> List[Dict[str, Any]]:
    """
    Write one file per release plus the product aggregate.

    Returns:
        The aggregate entries, in release order.

    Raises:
        ValueError: if the permalink is not a valid artifact name.
        OSError: if a directory or file cannot be written.
    """
    if not has_valid_permalink(product):
        raise ValueError(f"Invalid permalink {product.permalink!r} for {product.name}")
    api_dir = Path(api_dir)
    slug = product.slug
    output_dir = api_dir / slug

    with _product_lock(output_dir):
        output_dir.mkdir(parents=True, exist_ok=True)

        all_cycles: List[Dict[str, Any]] = []
        for release in product.releases:
            data = release.without_cycle()
            write_json_file(output_dir / release_filename(release.cycle), data)
            all_cycles.append({AGGREGATE_CYCLE_KEY: release.cycle, **data})

        write_json_file(api_dir / release_filename(slug), all_cycles)

    logger.debug(f"Wrote {len(all_cycles)} release files for '{product.name}' to {output_dir}.")
    return all_cycles


def write_index(permalinks: Iterable[str], api_dir: Union[str, Path]) -> List[str]:
    """Write the sorted list of product permalinks to `all.json`."""
    api_dir = Path(api_dir)
    api_dir.mkdir(parents=True, exist_ok=True)
    index = sorted(permalinks)
    write_json_file(api_dir / release_filename(INDEX_ARTIFACT_NAME), index)
    return index


def project_dataset(products: Iterable[Product], api_dir: Union[str, Path]) -> List[str]:
    """
    Project every product, then write the global index once.

    Returns:
        The sorted list of permalinks written to the index.
    """
    permalinks = []
    for product in products:
        if not has_valid_permalink(product):
            logger.error(f"Skipping '{product.name}': invalid permalink {product.permalink!r}.")
            continue
        project_product(product, api_dir)
        permalinks.append(product.slug)
    index = write_index(permalinks, api_dir)
    logger.info(f"Wrote API for {len(index)} products to {api_dir}.")
    return index


def _product_lock(output_dir: Path) -> threading.Lock:
    key = str(output_dir.resolve())
    with _PRODUCT_LOCKS_GUARD:
        return _PRODUCT_LOCKS[key]
