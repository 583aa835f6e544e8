#!/usr/bin/env python3
"""
Extracts absolute URLs embedded in a product's markdown body.
"""

from typing import List

from eoldata.core.constants import (
    MARKDOWN_AUTOLINK_RE,
    MARKDOWN_INLINE_LINK_RE,
    MARKDOWN_REFERENCE_LINK_RE,
)

_PATTERNS = (MARKDOWN_INLINE_LINK_RE, MARKDOWN_AUTOLINK_RE, MARKDOWN_REFERENCE_LINK_RE)


def extract_markdown_urls(markdown: str) -> List[str]:
    """
    Return the URLs of `[text](url)`, `[text](url "title")`, `<url>` and
    `[id]: url "title"` constructs, grouped by pattern in that order, trimmed.

    Example:
        >>> extract_markdown_urls('See [docs](https://a.test "A") and <https://b.test>.')
        ['https://a.test', 'https://b.test']
    """
    if not markdown:
        return []
    urls: List[str] = []
    for pattern in _PATTERNS:
        urls.extend(m.strip() for m in pattern.findall(markdown))
    return urls
