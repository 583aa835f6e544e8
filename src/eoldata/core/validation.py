#!/usr/bin/env python3
"""
Purpose:
    Accumulates validation findings across a whole dataset and decides,
    once at the end, whether the dataset may be published.
"""
from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Iterator, List, Optional


class Severity(str, Enum):
    """Finding severity. Only errors count against the dataset."""

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Finding:
    """
    One validation outcome worth reporting.
    - property: offending property name ('content' for URLs found in the markdown body)
    - value: offending value, as authored or computed
    - product: product name
    - release: release cycle, or None for product-level findings
    - message: human-readable details
    """
    severity: Severity
    property: str
    value: Any
    product: str
    release: Optional[str]
    message: str

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def location(self) -> str:
        """'<product>' or '<product>#<releaseCycle>'."""
        return self.product if self.release is None else f"{self.product}#{self.release}"

    def describe(self) -> str:
        return f"Invalid {self.property} '{self.value}' for {self.location}, {self.message}."


class BuildCanceledError(RuntimeError):
    """Raised by the final gate when the dataset holds at least one error."""

    def __init__(self, error_count: int, errors: Optional[List[Finding]] = None):
        self.error_count = error_count
        self.errors: List[Finding] = list(errors or [])
        super().__init__(f"Build canceled: {error_count} errors detected")


class ValidationResult:
    """
    Thread-safe accumulator of findings (the run's error aggregator).

    The error count only ever grows; warnings are kept for reporting but never
    counted.
    """

    def __init__(self):
        self._findings: List[Finding] = []
        self._error_count = 0
        self._lock = threading.Lock()

    def add(self, finding: Finding) -> Finding:
        with self._lock:
            self._findings.append(finding)
            if finding.is_error:
                self._error_count += 1
        return finding

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        for finding in other.findings:
            self.add(finding)
        return self

    @property
    def error_count(self) -> int:
        return self._error_count

    @property
    def findings(self) -> List[Finding]:
        with self._lock:
            return list(self._findings)

    @property
    def errors(self) -> List[Finding]:
        return [f for f in self.findings if f.is_error]

    @property
    def warnings(self) -> List[Finding]:
        return [f for f in self.findings if not f.is_error]

    def is_valid(self) -> bool:
        return self._error_count == 0

    def __len__(self):
        return len(self._findings)

    def __iter__(self) -> Iterator[Finding]:
        return iter(self.findings)

    def __repr__(self):
        return f"<ValidationResult valid={self.is_valid()} errors={self._error_count} warnings={len(self.warnings)}>"


# --- Decision --- #

def decide(findings: Iterable[Finding]) -> bool:
    """Return True if the findings allow publishing (no error-severity finding)."""
    return not any(f.is_error for f in findings)


def gate(result: ValidationResult) -> None:
    """
    Final build gate.

    Raises:
        BuildCanceledError: if any error was accumulated.
    """
    if not decide(result):
        raise BuildCanceledError(result.error_count, result.errors)
