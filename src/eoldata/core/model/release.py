#!/usr/bin/env python3
"""
Pydantic model for a single release cycle of a product.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from eoldata.core.constants import RELEASE_CYCLE_KEY
from eoldata.core.model.types import BoolOrDate, parse_bool_or_date


class Release(BaseModel):
    """
    One entry of a product's `releases` list, kept as authored.

    Example
    -------
    >>> r = Release(data={"releaseCycle": "3.12", "eol": True})
    >>> r.cycle
    '3.12'
    >>> r.lifecycle("eol")
    BoolValue(value=True)
    >>> r.without_cycle()
    {'eol': True}
    """

    model_config = ConfigDict(extra="forbid")

    data: Dict[str, Any] = Field(default_factory=dict, description="Release fields as authored.")

    @property
    def cycle(self) -> Any:
        """The `releaseCycle` identifier (raw, may be invalid)."""
        return self.data.get(RELEASE_CYCLE_KEY)

    def has(self, key: str) -> bool:
        return key in self.data

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def lifecycle(self, key: str) -> Optional[BoolOrDate]:
        """Typed view of a boolean-or-date field; None if absent or ill-typed."""
        return parse_bool_or_date(self.data.get(key))

    def without_cycle(self) -> Dict[str, Any]:
        """All fields except `releaseCycle`, in authored order."""
        return {k: v for k, v in self.data.items() if k != RELEASE_CYCLE_KEY}
