"""Build-time generation of per-location pages and the sitemap.

Reads the ``site`` and ``locations`` documents straight from disk. Write
errors are not caught: a failed build should stop the deploy.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from . import fragments
from .config import DEFAULT_SITE_ORIGIN, LOCATIONS_DIR, SITEMAP_FILE
from .loader import read_document
from .models import Location, SiteConfig

logger = logging.getLogger(__name__)

STATIC_ROUTES = (
    "",
    "about/",
    "locations/",
    "events/",
    "order/",
    "contact/",
    "privacy/",
    "careers/",
)


def location_route(location: Location) -> str:
    return f"{LOCATIONS_DIR}/{location.slug}.html"


def build_locations(root: Path, site: SiteConfig, locations: Iterable[Location]) -> list[Path]:
    out_dir = Path(root) / LOCATIONS_DIR
    out_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for location in locations:
        file_path = out_dir / f"{location.slug}.html"
        file_path.write_text(fragments.render_location_page(site, location) + "\n", encoding="utf-8")
        logger.info("Generated %s", file_path)
        written.append(file_path)
    return written


def sitemap_urls(locations: Iterable[Location], origin: str = DEFAULT_SITE_ORIGIN) -> list[str]:
    origin = origin if origin.endswith("/") else origin + "/"
    routes = [*STATIC_ROUTES, *(location_route(location) for location in locations)]
    return [f"{origin}{route}" for route in routes]


def build_sitemap(
    root: Path, locations: Sequence[Location], origin: str = DEFAULT_SITE_ORIGIN
) -> Path:
    root = Path(root)
    root.mkdir(parents=True, exist_ok=True)
    path = root / SITEMAP_FILE
    path.write_text(fragments.sitemap(sitemap_urls(locations, origin)) + "\n", encoding="utf-8")
    logger.info("%s updated", path)
    return path


def generate(
    root: Path, data_dir: Path, origin: str = DEFAULT_SITE_ORIGIN
) -> tuple[list[Path], Path]:
    site = read_document(data_dir, "site")
    locations = read_document(data_dir, "locations")
    pages = build_locations(root, site, locations)
    sitemap = build_sitemap(root, locations, origin)
    return pages, sitemap
