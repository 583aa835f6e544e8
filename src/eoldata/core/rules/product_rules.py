#!/usr/bin/env python3
"""
Purpose:
    The product validation rule set, split in two passes:

    - `validate_product` runs before enrichment and checks the properties
      authored in the document (types, formats, enumerations, dates).
    - `validate_urls` runs after enrichment and probes URLs, most of which
      are computed during enrichment (e.g. release links from
      `changelogTemplate`). It does nothing unless URL checking is enabled.
"""
from __future__ import annotations

import time
from datetime import date
from typing import Optional

from eoldata.core.constants import (
    ALTERNATE_URL_RE,
    DEFAULT_FUTURE_TOLERANCE_DAYS,
    PERMALINK_RE,
    TAGS_RE,
    VALID_CATEGORIES,
)
from eoldata.core.logging_config import get_logger
from eoldata.core.model.product import Product
from eoldata.core.rules.predicates import FieldValidator
from eoldata.core.urls.checker import UrlChecker
from eoldata.core.urls.markdown import extract_markdown_urls
from eoldata.core.validation import ValidationResult

logger = get_logger("validator")

# Column flag enabling validation of a boolean-or-date release field
LIFECYCLE_COLUMNS = (
    ("activeSupportColumn", "support"),
    ("eolColumn", "eol"),
    ("discontinuedColumn", "discontinued"),
    ("extendedSupportColumn", "extendedSupport"),
)

# Column flags paired with their warn threshold (None: no threshold)
COLUMN_FLAGS = (
    ("eolColumn", "eolWarnThreshold"),
    ("activeSupportColumn", "activeSupportWarnThreshold"),
    ("releaseColumn", None),
    ("releaseDateColumn", None),
    ("discontinuedColumn", "discontinuedWarnThreshold"),
    ("extendedSupportColumn", "extendedSupportWarnThreshold"),
)


def validate_product(
    product: Product,
    result: Optional[ValidationResult] = None,
    *,
    today: Optional[date] = None,
    tolerance_days: int = DEFAULT_FUTURE_TOLERANCE_DAYS,
) -> ValidationResult:
    """
    Check the authored properties of a product and of each of its releases.

    Args:
        product: the product, before enrichment.
        result: accumulator to record findings into (a new one if omitted).
        today: reference date for future-date checks (defaults to the current date).
        tolerance_days: how far in the future a release date may be.

    Returns:
        The accumulator, for chaining.
    """
    result = result if result is not None else ValidationResult()
    start = time.perf_counter()
    logger.debug(f"Validating '{product.name}'...")

    data = product.data
    error_if = FieldValidator(product, data, result)
    error_if.is_string("title")
    error_if.is_one_of("category", VALID_CATEGORIES)
    if product.has("tags"):
        error_if.matches("tags", TAGS_RE)
    error_if.matches("permalink", PERMALINK_RE)
    error_if.matches("alternate_urls", ALTERNATE_URL_RE)
    for prop in ("versionCommand", "releaseLabel"):
        if product.has(prop):
            error_if.is_string(prop)
    for prop in ("releasePolicyLink", "releaseImage", "changelogTemplate", "iconUrl"):
        if product.has(prop):
            error_if.is_url(prop)
    error_if.is_string("LTSLabel")
    for flag, threshold in COLUMN_FLAGS:
        error_if.is_boolean_or_string(flag)
        if threshold:
            error_if.is_number(threshold)
    error_if.is_array("auto")
    error_if.is_array("identifiers")
    if error_if.is_array("releases"):
        error_if.is_not_empty("releases")
        for entry in data["releases"]:
            error_if.is_mapping_entry("releases", entry)

    for release in product.releases:
        _validate_release(product, release.data, result, today=today, tolerance_days=tolerance_days)

    logger.debug(
        f"Product '{product.name}' successfully validated in {time.perf_counter() - start:.3f} seconds."
    )
    return result


def _validate_release(product: Product, release: dict, result: ValidationResult, *, today, tolerance_days) -> None:
    error_if = FieldValidator(product, release, result)
    error_if.is_string("releaseCycle")
    for prop in ("releaseLabel", "codename"):
        if prop in release:
            error_if.is_string(prop)

    if product.is_enabled("releaseDateColumn"):
        error_if.is_date("releaseDate")
        error_if.is_not_too_far_in_future("releaseDate", days=tolerance_days, today=today)

    for flag, prop in LIFECYCLE_COLUMNS:
        if product.is_enabled(flag):
            error_if.is_boolean_or_date(prop)
    if "lts" in release:
        error_if.is_boolean_or_date("lts")

    if product.is_enabled("releaseColumn"):
        error_if.is_string("latest")
        if "latestReleaseDate" in release:
            error_if.is_date("latestReleaseDate")

    if release.get("link"):
        error_if.is_url("link")


def validate_urls(
    product: Product,
    result: Optional[ValidationResult] = None,
    checker: Optional[UrlChecker] = None,
) -> ValidationResult:
    """
    Probe every URL of a product: link properties, URLs embedded in the
    markdown body, and release links. No-op unless `checker` is enabled.
    """
    result = result if result is not None else ValidationResult()
    if checker is None or not checker.enabled:
        return result

    start = time.perf_counter()
    logger.info(f"Validating urls for '{product.name}'...")

    error_if = FieldValidator(product, product.data, result)
    for prop in ("releasePolicyLink", "releaseImage", "iconUrl"):
        if product.get(prop):
            error_if.is_reachable_url(prop, checker)
    error_if.has_reachable_urls(extract_markdown_urls(product.content), checker)

    for release in product.releases:
        if release.get("link"):
            FieldValidator(product, release.data, result).is_reachable_url("link", checker)

    logger.info(
        f"Product '{product.name}' urls successfully validated in {time.perf_counter() - start:.3f} seconds."
    )
    return result
