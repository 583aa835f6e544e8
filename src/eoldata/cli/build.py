#!/usr/bin/env python3
from __future__ import annotations

from pathlib import Path

from eoldata.cli.validate import add_paths_argument, print_report, products_for_run
from eoldata.core.app_context import AppContext
from eoldata.core.model.product import DocumentLoadError
from eoldata.core.pipeline import build as run_build
from eoldata.core.validation import BuildCanceledError


def build(args, ctx: AppContext) -> int:
    try:
        products = products_for_run(args, ctx)
    except (DocumentLoadError, FileNotFoundError) as e:
        print(f"Failed to load products: {e}")
        return 1

    api_dir = Path(args.api_dir) if args.api_dir else ctx.api_path
    try:
        with ctx.url_checker() as checker:
            report = run_build(products, api_dir, checker=checker, tolerance_days=ctx.tolerance_days)
    except BuildCanceledError as e:
        print("\nErrors:")
        for finding in e.errors:
            print(f"  - {finding.describe()}")
        print(f"\n{e}")
        return 1

    print_report(report.result)
    print(f"\nBuild complete: {len(report.permalinks)} products written to {api_dir}")
    return 0


def register(subparser):
    parser = subparser.add_parser("build", help="Validate products, then write the JSON API.")
    add_paths_argument(parser)
    parser.add_argument("--api-dir", default=None, help="Output directory (default: configured api_path).")
    parser.add_argument("--check-urls", action="store_true", help="Also check URL reachability (slow).")
    parser.set_defaults(func=build)
