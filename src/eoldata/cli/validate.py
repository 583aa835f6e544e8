#!/usr/bin/env python3
from __future__ import annotations

from typing import List

from eoldata.core.app_context import AppContext
from eoldata.core.formatting import format_findings
from eoldata.core.model.loader import load_products
from eoldata.core.model.product import DocumentLoadError, Product
from eoldata.core.pipeline import validate_dataset
from eoldata.core.validation import ValidationResult, decide


def products_for_run(args, ctx: AppContext) -> List[Product]:
    """
    Load the products named on the command line, or every product under the
    configured `products_path` when no path is given.
    """
    paths = args.paths or [ctx.products_path]
    return load_products(paths, defaults=ctx.product_defaults)


def print_report(result: ValidationResult) -> None:
    for line in format_findings(result):
        print(f"  - {line}")


def validate(args, ctx: AppContext) -> int:
    try:
        products = products_for_run(args, ctx)
    except (DocumentLoadError, FileNotFoundError) as e:
        print(f"Failed to load products: {e}")
        return 1
    if not products:
        print("No product documents found.")
        return 1

    with ctx.url_checker() as checker:
        result = validate_dataset(products, checker=checker, tolerance_days=ctx.tolerance_days)

    print_report(result)
    passed = decide(result)
    status = "passed" if passed else "failed"
    print(
        f"\nValidation {status}: {len(products)} products, "
        f"{result.error_count} errors, {len(result.warnings)} warnings."
    )
    return 0 if passed else 1


def add_paths_argument(parser) -> None:
    parser.add_argument(
        "paths",
        nargs="*",
        help="Product documents or directories (default: configured products_path).",
    )


def register(subparser):
    parser = subparser.add_parser("validate", help="Validate product documents.")
    add_paths_argument(parser)
    parser.add_argument("--check-urls", action="store_true", help="Also check URL reachability (slow).")
    parser.set_defaults(func=validate)
