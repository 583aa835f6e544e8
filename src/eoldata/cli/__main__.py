#!/usr/bin/env python3

import argparse
from eoldata.core.app import get_context
from eoldata.cli import api, build, check_url, config, validate

def main():
    parser = argparse.ArgumentParser(prog="eoldata", description="Product lifecycle data toolkit")
    subparsers = parser.add_subparsers(dest="command")

    # Register subcommands (they should accept ctx)
    validate.register(subparsers)
    api.register(subparsers)
    build.register(subparsers)
    check_url.register(subparsers)
    config.register(subparsers)

    args = parser.parse_args()
    if hasattr(args, "func"):
        # --check-urls forces URL checks on; otherwise the configured switch applies
        override = True if getattr(args, "check_urls", False) else None
        ctx = get_context(check_urls_override=override)  # built once
        exit(args.func(args, ctx))
    parser.print_help()
    exit(1)

if __name__ == "__main__":
    main()
