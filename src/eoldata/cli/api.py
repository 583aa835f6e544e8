#!/usr/bin/env python3
from __future__ import annotations

from pathlib import Path

from eoldata.cli.validate import add_paths_argument, products_for_run
from eoldata.core.app_context import AppContext
from eoldata.core.model.product import DocumentLoadError
from eoldata.core.projection import project_dataset


def generate_api(args, ctx: AppContext) -> int:
    try:
        products = products_for_run(args, ctx)
    except (DocumentLoadError, FileNotFoundError) as e:
        print(f"Failed to load products: {e}")
        return 1

    api_dir = Path(args.api_dir) if args.api_dir else ctx.api_path
    index = project_dataset(products, api_dir)
    print(f"Wrote API for {len(index)} products to {api_dir}")
    return 0


def register(subparser):
    parser = subparser.add_parser("api", help="Write the JSON API without validating.")
    add_paths_argument(parser)
    parser.add_argument("--api-dir", default=None, help="Output directory (default: configured api_path).")
    parser.set_defaults(func=generate_api)
