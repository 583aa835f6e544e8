#!/usr/bin/env python3
from __future__ import annotations

from eoldata.core.app_context import AppContext
from eoldata.core.urls.checker import UrlStatus


def check_urls(args, ctx: AppContext) -> int:
    with ctx.url_checker() as checker:
        results = checker.check_many(args.urls)

    failures = 0
    for r in results:
        detail = f" ({r.reason})" if r.reason else ""
        if r.suppressed_by:
            detail += f" [suppressed: {r.suppressed_by}]"
        print(f"  - {r.url:60} {r.status.value}{detail}")
        if r.status is UrlStatus.UNREACHABLE:
            failures += 1
    return 0 if failures == 0 else 1


def register(subparser):
    parser = subparser.add_parser("check-url", help="Check URLs using the ignore/suppress tables.")
    parser.add_argument("urls", nargs="+", help="Absolute URLs to check.")
    parser.set_defaults(func=check_urls)
