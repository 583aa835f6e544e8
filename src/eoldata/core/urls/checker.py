#!/usr/bin/env python3
"""
Purpose:
    Probes URL reachability, consulting the ignore and suppress prefix
    tables. A single failing probe is final: nothing is retried.
"""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple

import requests

from eoldata.core.logging_config import get_logger
from eoldata.core.urls.settings import UrlCheckSettings

logger = get_logger("urls")


class UrlStatus(str, Enum):
    REACHABLE = "reachable"
    UNREACHABLE = "unreachable"
    IGNORED = "ignored"
    SUPPRESSED = "suppressed"


@dataclass(frozen=True)
class UrlCheckResult:
    """
    Outcome of checking one URL.
    - reason: failure details (unreachable/suppressed) or the ignore reason
    - suppressed_by: suppression reason from the suppress table, if any
    """
    url: str
    status: UrlStatus
    reason: Optional[str] = None
    suppressed_by: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.status in (UrlStatus.UNREACHABLE, UrlStatus.SUPPRESSED)


class PrefixTable:
    """Ordered (prefix, reason) pairs; the first prefix matching a URL wins."""

    def __init__(self, pairs: Iterable[Tuple[str, str]]):
        self._pairs: List[Tuple[str, str]] = [(str(p), str(r)) for p, r in pairs]

    def lookup(self, url: str) -> Optional[str]:
        for prefix, reason in self._pairs:
            if url.startswith(prefix):
                return reason
        return None

    def __len__(self):
        return len(self._pairs)

    def __iter__(self):
        return iter(self._pairs)


def create_session(user_agent: str) -> requests.Session:
    """Create a requests Session sending the configured User-Agent."""
    session = requests.Session()
    session.headers.update({"User-Agent": user_agent})
    return session


class UrlChecker:
    """
    Checks URLs for reachability.

    Typical use:
        >>> with UrlChecker(UrlCheckSettings(enabled=True)) as checker:
        ...     result = checker.check("https://endoflife.date")
        >>> result.status
        <UrlStatus.REACHABLE: 'reachable'>
    """

    def __init__(self, settings: Optional[UrlCheckSettings] = None, session: Optional[requests.Session] = None):
        self.settings = settings or UrlCheckSettings()
        self.ignored = PrefixTable(self.settings.ignored)
        self.suppressed = PrefixTable(self.settings.suppressed)
        self._session = session
        self._owns_session = session is None

    @property
    def enabled(self) -> bool:
        return self.settings.enabled

    @property
    def session(self) -> requests.Session:
        if self._session is None:
            self._session = create_session(self.settings.user_agent)
        return self._session

    # --- Checking --- #

    def check(self, url: str) -> UrlCheckResult:
        """Check a single URL; surrounding whitespace is stripped first."""
        url = url.strip()

        ignored_reason = self.ignored.lookup(url)
        if ignored_reason is not None:
            logger.warning(f"Ignore URL {url} : {ignored_reason}.")
            return UrlCheckResult(url, UrlStatus.IGNORED, ignored_reason)

        logger.debug(f"Checking URL {url}.")
        failure = self._probe(url)
        if failure is None:
            return UrlCheckResult(url, UrlStatus.REACHABLE)

        suppressed_reason = self.suppressed.lookup(url)
        if suppressed_reason is not None:
            return UrlCheckResult(url, UrlStatus.SUPPRESSED, failure, suppressed_reason)
        return UrlCheckResult(url, UrlStatus.UNREACHABLE, failure)

    def check_many(self, urls: Sequence[str]) -> List[UrlCheckResult]:
        """Check several URLs; results are returned in input order."""
        if self.settings.max_workers <= 1 or len(urls) <= 1:
            return [self.check(u) for u in urls]
        self.session  # created once, before worker threads share it
        with ThreadPoolExecutor(max_workers=self.settings.max_workers) as pool:
            return list(pool.map(self.check, urls))

    def _probe(self, url: str) -> Optional[str]:
        """Return None if reachable, else the failure reason."""
        timeout = (self.settings.connect_timeout, self.settings.read_timeout)
        try:
            response = self.session.get(url, timeout=timeout)
        except (requests.RequestException, ValueError) as e:
            # urllib3 raises LocationParseError (a ValueError) for malformed hosts
            return str(e)
        try:
            if response.status_code >= 400:
                return f"response code is {response.status_code}"
        finally:
            response.close()
        return None

    # --- Resources --- #

    def close(self) -> None:
        if self._owns_session and self._session is not None:
            self._session.close()
            self._session = None

    def __enter__(self) -> "UrlChecker":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
