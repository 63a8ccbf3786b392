#!/usr/bin/env python3
"""Render a site page offline by running the page projector over it.

Content comes from a local data directory by default, or with --remote from
the site at --base-url (CAFELATTE_BASE_URL). The rendered HTML goes to
--output (stdout if omitted).

Usage:
    python scripts/render_page.py locations/downtown.html --data-dir data -o out.html
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

import httpx

from cafelatte.config import Settings
from cafelatte.document import HostDocument
from cafelatte.loader import ContentLoader, DirectorySource, HttpSource
from cafelatte.projector import init


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    settings = Settings.from_env()
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("page", type=Path, help="HTML page to render")
    parser.add_argument("--url-path", help="URL path the page is served at")
    parser.add_argument("--data-dir", type=Path, default=settings.data_dir)
    parser.add_argument(
        "--remote", action="store_true", help="fetch content over HTTP instead of --data-dir"
    )
    parser.add_argument("--base-url", default=settings.base_url)
    parser.add_argument("--data-path", default=settings.data_path)
    parser.add_argument("--timeout", type=float, default=settings.http_timeout)
    parser.add_argument("-o", "--output", type=Path)
    parser.add_argument("-v", "--verbose", action="store_true", default=settings.verbose)
    return parser.parse_args(argv)


async def render(args: argparse.Namespace) -> tuple[bool, str]:
    document = HostDocument.from_file(args.page, url_path=args.url_path)
    if args.remote:
        async with httpx.AsyncClient(timeout=args.timeout) as client:
            loader = ContentLoader(HttpSource(args.base_url, args.data_path, client=client))
            ok = await init(document, loader)
    else:
        ok = await init(document, ContentLoader(DirectorySource(args.data_dir)))
    return ok, document.render()


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ok, html = asyncio.run(render(args))
    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(html, encoding="utf-8")
        print(f"✓ Wrote {args.output}")
    else:
        sys.stdout.write(html)
    return 0 if ok else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
