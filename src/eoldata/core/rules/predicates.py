#!/usr/bin/env python3
"""
Purpose:
    Field-level validation predicates bound to one product (or one of its
    releases). A failing predicate records a finding and returns False;
    nothing is raised, so every remaining property still gets checked.
"""
from __future__ import annotations

from datetime import date, timedelta
from typing import Any, Dict, Iterable, List, Optional

from eoldata.core.constants import DEFAULT_FUTURE_TOLERANCE_DAYS, RELEASE_CYCLE_KEY, URL_RE
from eoldata.core.logging_config import get_logger
from eoldata.core.model.product import Product
from eoldata.core.model.types import as_date, is_date_value, parse_bool_or_date
from eoldata.core.urls.checker import UrlCheckResult, UrlChecker, UrlStatus
from eoldata.core.validation import Finding, Severity, ValidationResult

logger = get_logger("validator")


def _type_name(value: Any) -> str:
    return type(value).__name__


class FieldValidator:
    """
    Validates properties of a product-level or release-level mapping.

    Example
    -------
    >>> result = ValidationResult()
    >>> error_if = FieldValidator(product, product.data, result)
    >>> error_if.is_one_of("category", VALID_CATEGORIES)
    True
    """

    def __init__(self, product: Product, data: Dict[str, Any], result: ValidationResult):
        self.product = product
        self.data = data
        self.result = result

    @property
    def release(self) -> Optional[str]:
        """Cycle of the release being validated, None at product level."""
        if RELEASE_CYCLE_KEY in self.data:
            return str(self.data[RELEASE_CYCLE_KEY])
        return None

    # --- Type predicates --- #

    def is_string(self, prop: str) -> bool:
        value = self.data.get(prop)
        if isinstance(value, str):
            return True
        return self._fail(prop, value, f"expecting a value of type String, got {_type_name(value)}")

    def is_number(self, prop: str) -> bool:
        value = self.data.get(prop)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return True
        return self._fail(prop, value, f"expecting a value of type numeric, got {_type_name(value)}")

    def is_array(self, prop: str) -> bool:
        value = self.data.get(prop)
        if isinstance(value, list):
            return True
        return self._fail(prop, value, f"expecting an Array, got {_type_name(value)}")

    def is_date(self, prop: str) -> bool:
        value = self.data.get(prop)
        if is_date_value(value):
            return True
        return self._fail(prop, value, f"expecting a value of type date, got {_type_name(value)}")

    def is_boolean_or_date(self, prop: str) -> bool:
        value = self.data.get(prop)
        if parse_bool_or_date(value) is not None:
            return True
        return self._fail(prop, value, f"expecting a value of type boolean or date, got {_type_name(value)}")

    def is_boolean_or_string(self, prop: str) -> bool:
        value = self.data.get(prop)
        if isinstance(value, (bool, str)):
            return True
        return self._fail(prop, value, f"expecting a value of type boolean or string, got {_type_name(value)}")

    # --- Value predicates --- #

    def is_one_of(self, prop: str, valid_values: Iterable[Any]) -> bool:
        value = self.data.get(prop)
        valid = list(valid_values)
        if value in valid:
            return True
        return self._fail(prop, value, f"expecting one of {', '.join(map(str, valid))}")

    def matches(self, prop: str, pattern) -> bool:
        """Scalar values must match; for a list, every element must match."""
        raw = self.data.get(prop)
        values = raw if isinstance(raw, list) else [raw]
        ok = True
        for value in values:
            if not (isinstance(value, str) and pattern.fullmatch(value)):
                ok = self._fail(prop, value, f"should match {pattern.pattern}")
        return ok

    def is_url(self, prop: str) -> bool:
        return self.matches(prop, URL_RE)

    def is_mapping_entry(self, prop: str, entry: Any) -> bool:
        """Check one element of a sequence property is a mapping."""
        if isinstance(entry, dict):
            return True
        return self._fail(prop, entry, f"expecting a mapping, got {_type_name(entry)}")

    def is_not_empty(self, prop: str) -> bool:
        value = self.data.get(prop)
        if value:
            return True
        return self._fail(prop, value, "expecting at least one element")

    def is_not_too_far_in_future(
        self, prop: str, days: int = DEFAULT_FUTURE_TOLERANCE_DAYS, today: Optional[date] = None
    ) -> bool:
        """
        Dates later than `today + days` fail; `today + days` itself passes.
        Values that are not dates are left to the type predicates.
        """
        value = self.data.get(prop)
        d = as_date(value)
        limit = (today or date.today()) + timedelta(days=days)
        if d is None or d <= limit:
            return True
        return self._fail(prop, value, f"expecting a value in the next {days} days, got {d.isoformat()}")

    # --- URL predicates --- #

    def is_reachable_url(self, prop: str, checker: UrlChecker) -> bool:
        url = str(self.data.get(prop)).strip()
        return self._record_url(prop, checker.check(url))

    def has_reachable_urls(self, urls: List[str], checker: UrlChecker) -> bool:
        """Check URLs found in the markdown body; failures are reported on 'content'."""
        ok = True
        for check in checker.check_many(urls):
            ok = self._record_url("content", check) and ok
        return ok

    # --- Reporting --- #

    def _record_url(self, prop: str, check: UrlCheckResult) -> bool:
        if not check.failed:
            return True
        details = f"got an error : '{check.reason}'"
        if check.status is UrlStatus.SUPPRESSED:
            details = f"{details} (suppressed: {check.suppressed_by})"
            finding = self.result.add(self._finding(Severity.WARNING, prop, check.url, details))
            logger.warning(finding.describe())
            return True
        return self._fail(prop, check.url, details)

    def _fail(self, prop: str, value: Any, details: str) -> bool:
        finding = self.result.add(self._finding(Severity.ERROR, prop, value, details))
        logger.error(finding.describe())
        return False

    def _finding(self, severity: Severity, prop: str, value: Any, details: str) -> Finding:
        return Finding(
            severity=severity,
            property=prop,
            value=value,
            product=self.product.name,
            release=self.release,
            message=details,
        )
