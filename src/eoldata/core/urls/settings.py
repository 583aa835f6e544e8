#!/usr/bin/env python3
"""
Pydantic model for the `url_check` configuration block.
"""
from __future__ import annotations

from typing import Any, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from eoldata.core.constants import DEFAULT_CONNECT_TIMEOUT, DEFAULT_READ_TIMEOUT, DEFAULT_USER_AGENT
from eoldata.core.urls.prefixes import IGNORED_URL_PREFIXES, SUPPRESSED_URL_PREFIXES


class UrlCheckSettings(BaseModel):
    """
    Settings for URL reachability checks.

    Fields
    ------
    enabled:
        Whole-run switch; URL checks are skipped unless True.
    connect_timeout / read_timeout:
        Seconds, passed to the HTTP client as a ``(connect, read)`` tuple.
    max_workers:
        1 probes URLs sequentially; more runs a bounded thread pool.
    ignored / suppressed:
        Ordered ``(prefix, reason)`` pairs. A JSON object ``{prefix: reason}``
        is accepted too and keeps its key order.

    Example
    -------
    >>> s = UrlCheckSettings.model_validate({"enabled": True, "ignored": [["https://x.test", "flaky"]]})
    >>> s.ignored
    [('https://x.test', 'flaky')]
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    enabled: bool = Field(default=False, description="Probe URLs during post-enrichment validation.")
    connect_timeout: float = Field(default=DEFAULT_CONNECT_TIMEOUT, gt=0, description="Connect timeout (s).")
    read_timeout: float = Field(default=DEFAULT_READ_TIMEOUT, gt=0, description="Read timeout (s).")
    user_agent: str = Field(default=DEFAULT_USER_AGENT, min_length=1, description="User-Agent header.")
    max_workers: int = Field(default=1, ge=1, description="Concurrent probes.")
    ignored: List[Tuple[str, str]] = Field(
        default_factory=lambda: [tuple(p) for p in IGNORED_URL_PREFIXES],
        description="URL prefixes never probed.",
    )
    suppressed: List[Tuple[str, str]] = Field(
        default_factory=lambda: [tuple(p) for p in SUPPRESSED_URL_PREFIXES],
        description="URL prefixes whose failures are downgraded to warnings.",
    )

    # --- Validators --- #

    @field_validator("ignored", "suppressed", mode="before")
    @classmethod
    def _mapping_to_pairs(cls, v: Any) -> Any:
        """Accept a {prefix: reason} mapping as authoring sugar."""
        if isinstance(v, dict):
            return list(v.items())
        return v

    @field_validator("ignored", "suppressed")
    @classmethod
    def _validate_prefixes(cls, pairs: List[Tuple[str, str]]) -> List[Tuple[str, str]]:
        """Reject blank prefixes; a blank prefix would match every URL."""
        for prefix, _reason in pairs:
            if not prefix.strip():
                raise ValueError("URL prefixes must be non-empty strings")
        return pairs
