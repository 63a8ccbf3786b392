#!/usr/bin/env python3
"""build_site.py – pre-generate location pages and sitemap.xml.

Reads site.json and locations.json from the data directory and writes
locations/<slug>.html plus sitemap.xml under the site root.

Usage:
    python scripts/build_site.py [--root DIR] [--data-dir DIR] [--origin URL]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from cafelatte.config import Settings
from cafelatte.generator import generate

logger = logging.getLogger("build_site")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    settings = Settings.from_env()
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--root", type=Path, default=settings.site_root)
    parser.add_argument("--data-dir", type=Path, default=settings.data_dir)
    parser.add_argument("--origin", default=settings.site_origin)
    parser.add_argument("-v", "--verbose", action="store_true", default=settings.verbose)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    pages, sitemap = generate(args.root, args.data_dir, args.origin)
    print(f"✓ Wrote {len(pages)} location page(s) and {sitemap}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
