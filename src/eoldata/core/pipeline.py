#!/usr/bin/env python3
"""
Purpose:
    Sequences a full run over a dataset:

        load -> validate (authored data) -> [enrich] -> validate URLs
             -> project JSON API -> gate on the accumulated error count

    Findings are collected across every product and the pass/fail decision is
    taken once, at the end.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Union

from eoldata.core.constants import DEFAULT_FUTURE_TOLERANCE_DAYS
from eoldata.core.logging_config import get_logger
from eoldata.core.model.product import Product
from eoldata.core.projection import project_dataset
from eoldata.core.rules.product_rules import validate_product, validate_urls
from eoldata.core.urls.checker import UrlChecker
from eoldata.core.validation import ValidationResult, gate

logger = get_logger("pipeline")

Enricher = Callable[[Product], None]


@dataclass(frozen=True)
class BuildReport:
    result: ValidationResult
    permalinks: List[str]


def validate_dataset(
    products: Iterable[Product],
    *,
    checker: Optional[UrlChecker] = None,
    enrich: Optional[Enricher] = None,
    today: Optional[date] = None,
    tolerance_days: int = DEFAULT_FUTURE_TOLERANCE_DAYS,
    result: Optional[ValidationResult] = None,
) -> ValidationResult:
    """
    Run both validation passes over every product.

    `enrich`, when given, is called between the two passes and may add
    derived properties (e.g. computed release links) to the product.
    """
    result = result if result is not None else ValidationResult()
    for product in products:
        validate_product(product, result, today=today, tolerance_days=tolerance_days)
        if enrich is not None:
            enrich(product)
        validate_urls(product, result, checker)
    return result


def build(
    products: List[Product],
    api_dir: Union[str, Path],
    *,
    checker: Optional[UrlChecker] = None,
    enrich: Optional[Enricher] = None,
    today: Optional[date] = None,
    tolerance_days: int = DEFAULT_FUTURE_TOLERANCE_DAYS,
) -> BuildReport:
    """
    Validate, project, then gate.

    Raises:
        BuildCanceledError: if any validation error was recorded (artifacts are already written).
        OSError: if an artifact cannot be written.
    """
    result = validate_dataset(
        products, checker=checker, enrich=enrich, today=today, tolerance_days=tolerance_days
    )
    permalinks = project_dataset(products, api_dir)
    logger.info(f"Validated {len(products)} products: {result.error_count} errors, {len(result.warnings)} warnings.")
    gate(result)
    return BuildReport(result=result, permalinks=permalinks)
