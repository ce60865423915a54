#!/usr/bin/env python3
"""
xcassets-sync — refresh Xcode asset catalogs from a folder of exported images.

Walks every .xcassets catalog in the destination folder, matches each
image set entry against the exported PNGs, copies new or changed files
in and rewrites Contents.json where filenames changed.

Usage:
    python3 sync_assets.py -s ~/Exports -d MyApp/Resources
    python3 sync_assets.py -s ~/Exports -d MyApp/Resources --report sync.json
"""

import argparse
import json
import os
import sys

from assetsync.errors import SyncError
from assetsync.report import format_summary, summarize, summary_to_dict
from assetsync.synchronize import sync_destination


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xcassets-sync",
        description="Synchronize Xcode asset catalogs with exported images",
    )
    parser.add_argument(
        "-s", "--source", required=True, metavar="PATH",
        help="New asset location exported from Sketch",
    )
    parser.add_argument(
        "-d", "--destination", required=True, metavar="PATH",
        help="Xcode folder asset root (contains .xcassets catalogs)",
    )
    parser.add_argument(
        "--report", metavar="PATH",
        help="Also write the summary as JSON to PATH",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)

    for path in (args.source, args.destination):
        if not os.path.isdir(path):
            print(f"Error: not a directory: {path}", file=sys.stderr)
            sys.exit(1)

    try:
        results = sync_destination(args.destination, args.source)
    except SyncError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    summary = summarize(results)
    print(format_summary(summary))

    if args.report:
        with open(args.report, "w", encoding="utf-8") as f:
            json.dump(summary_to_dict(summary, args.source, args.destination), f, indent=2)
        print(f"\nReport written to {args.report}")


if __name__ == "__main__":
    main()
