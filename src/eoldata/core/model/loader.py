#!/usr/bin/env python3
"""
Purpose:
    Discovers product documents on disk and loads them into `Product` records.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional

from eoldata.core.constants import SUPPORTED_DOCUMENT_EXT
from eoldata.core.logging_config import get_logger
from eoldata.core.model.product import Product

logger = get_logger("loader")


def _is_supported_document(p: Path) -> bool:
    return p.is_file() and p.suffix.lower() in SUPPORTED_DOCUMENT_EXT


def find_product_files(paths: Iterable[str | Path]) -> List[Path]:
    """
    Expand files and directories (non-recursive) into product documents.
    Returns a stable, de-duplicated, sorted list.
    """
    files: list[Path] = []
    for raw in paths:
        p = Path(raw)
        if _is_supported_document(p):
            files.append(p)
        elif p.is_dir():
            files.extend(c for c in p.iterdir() if _is_supported_document(c))
        else:
            logger.warning(f"Skipping {str(p)!r}: not a product document or directory.")
    return sorted(set(files))


def load_products(paths: Iterable[str | Path], defaults: Optional[Mapping[str, Any]] = None) -> List[Product]:
    """
    Load every product document found under `paths`.

    Raises:
        DocumentLoadError: on the first document that cannot be parsed
    """
    products = []
    for path in find_product_files(paths):
        logger.debug(f"Loading {path}...")
        products.append(Product.from_file(path, defaults=defaults))
    return products
