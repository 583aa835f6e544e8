#!/usr/bin/env python3
"""
Core constants used across eoldata.

- Product vocabulary: the fixed set of product categories.
- URL checking: default user agent and timeouts for reachability probes.
- File handling: document/artifact extensions and default text encoding.
- Regular expressions: compiled patterns used by the validation rules.
"""

import re
from typing import Final

# --- Product constants --- #

# Categories a product may be filed under
VALID_CATEGORIES: Final[tuple[str, ...]] = (
    "app", "db", "device", "framework", "lang", "library", "os", "server-app", "service", "standard",
)

# Release key holding the cycle identifier, and the key re-added in aggregate artifacts
RELEASE_CYCLE_KEY: Final[str] = "releaseCycle"
AGGREGATE_CYCLE_KEY: Final[str] = "cycle"

# Number of days a release date may lie in the future
DEFAULT_FUTURE_TOLERANCE_DAYS: Final[int] = 30


# --- URL checking --- #

DEFAULT_USER_AGENT: Final[str] = (
    "Mozilla/5.0 (Windows NT 6.1; Win64; x64; rv:47.0) Gecko/20100101 Firefox/47.0"
)
DEFAULT_CONNECT_TIMEOUT: Final[float] = 3
DEFAULT_READ_TIMEOUT: Final[float] = 10


# --- File handling --- #

# Product documents are markdown files with a YAML front matter block
SUPPORTED_DOCUMENT_EXT: Final[frozenset[str]] = frozenset({".md"})

# Artifact extension and the name of the global product index
ARTIFACT_EXT: Final[str] = ".json"
INDEX_ARTIFACT_NAME: Final[str] = "all"

# Default text encoding
DEFAULT_TEXT_ENCODING: Final[str] = "utf-8"


# --- Regular Expressions --- #

# Product permalink, e.g. "/python"
PERMALINK_RE: re.Pattern[str] = re.compile(r"^/[a-z0-9-]+$")

# Alternate permalinks redirecting to the product, e.g. "/py"
ALTERNATE_URL_RE: re.Pattern[str] = re.compile(r"^/[a-z0-9\-_]+$")

# Space-separated list of lowercase tags, e.g. "lang python-family"
TAGS_RE: re.Pattern[str] = re.compile(r"^[a-z0-9\-]+( [a-z0-9\-]+)*$")

# Absolute http(s) URL
URL_RE: re.Pattern[str] = re.compile(r"^https?://.+$")

# Markdown URL patterns: [text](url "title"), <url>, and [id]: url "title"
MARKDOWN_INLINE_LINK_RE: re.Pattern[str] = re.compile(r"\]\((http[^)\"]+)")
MARKDOWN_AUTOLINK_RE: re.Pattern[str] = re.compile(r"<(http[^>]+)")
MARKDOWN_REFERENCE_LINK_RE: re.Pattern[str] = re.compile(r": (http[^\"\n]+)")

# Front matter block at the top of a product document
FRONT_MATTER_RE: re.Pattern[str] = re.compile(r"\A---[ \t]*\r?\n(.*?)^---[ \t]*\r?$\n?", re.DOTALL | re.MULTILINE)
