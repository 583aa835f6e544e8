#!/usr/bin/env python3
"""
Purpose:
    Tagged variant for lifecycle fields (support, eol, discontinued,
    extendedSupport, lts) which hold either a boolean or an exact date.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Optional, Union


@dataclass(frozen=True)
class BoolValue:
    """A literal yes/no for a lifecycle transition whose date is unknown."""
    value: bool


@dataclass(frozen=True)
class DateValue:
    """The exact date of a lifecycle transition."""
    value: date


BoolOrDate = Union[BoolValue, DateValue]


def is_date_value(raw: Any) -> bool:
    """True for `date` (and `datetime`) scalars; date-looking strings do not count."""
    return isinstance(raw, date)


def as_date(raw: Any) -> Optional[date]:
    """Return `raw` as a plain `date`, or None if it is not date-typed."""
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    return None


def parse_bool_or_date(raw: Any) -> Optional[BoolOrDate]:
    """
    Map a raw front matter scalar to the matching variant.

    Returns None when the scalar is neither a boolean nor a date
    (strings and numbers included; 0/1 are not booleans).

    Examples
    --------
    >>> parse_bool_or_date(True)
    BoolValue(value=True)
    >>> parse_bool_or_date(date(2020, 1, 1))
    DateValue(value=datetime.date(2020, 1, 1))
    >>> parse_bool_or_date("2020-01-01") is None
    True
    """
    if isinstance(raw, bool):
        return BoolValue(raw)
    d = as_date(raw)
    if d is not None:
        return DateValue(d)
    return None
