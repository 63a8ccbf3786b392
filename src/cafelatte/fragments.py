"""Pure projections from content records to HTML fragments.

Every function here takes validated records and returns markup; nothing
touches a document. The projector decides where the markup goes.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, NamedTuple

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .config import IMAGES_PATH, SCRIPT_PATH, STYLESHEET_PATH
from .models import Announcement, Event, Location, SiteConfig

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"

PREVIEW_LIMIT = 3
PHOTO_GRID_LIMIT = 12
ALL_LOCATIONS_LABEL = "All locations"
NOT_FOUND_MARKUP = "<p>Location not found.</p>"

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


class ImageSource(NamedTuple):
    webp: str
    fallback: str


@dataclass(frozen=True)
class NavRoute:
    id: str
    label: str
    href: str
    external: bool = False


@dataclass(frozen=True)
class EventRow:
    event: Event
    location_name: str | None


def image_source(name: str, base_path: str = "./") -> ImageSource:
    stem = f"{base_path}{IMAGES_PATH}/{name}"
    return ImageSource(webp=f"{stem}.webp", fallback=f"{stem}.jpg")


def format_date(value: Any) -> Any:
    """Show an ISO 8601 date as ``Jan 5, 2025``; anything unparsable is returned as given."""
    try:
        parsed = datetime.fromisoformat(value)
    except (TypeError, ValueError):
        return value
    return f"{_MONTHS[parsed.month - 1]} {parsed.day}, {parsed.year}"


def _environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(TEMPLATE_DIR),
        autoescape=select_autoescape(["html", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.globals["image_source"] = image_source
    env.filters["format_date"] = format_date
    return env


ENV = _environment()


def render_template(name: str, **context: Any) -> str:
    context.setdefault("base_path", "./")
    return ENV.get_template(name).render(context)


def nav_routes(site: SiteConfig, base_path: str) -> list[NavRoute]:
    return [
        NavRoute("about", "About", f"{base_path}about/"),
        NavRoute("locations", "Locations", f"{base_path}locations/"),
        NavRoute("events", "Events", f"{base_path}events/"),
        NavRoute("contact", "Contact", f"{base_path}contact/"),
        NavRoute("shop", "Shop", site.shop_href, external=True),
        NavRoute("order", "Order", f"{base_path}order/"),
    ]


def nav(site: SiteConfig, page: str, base_path: str = "./") -> str:
    """Primary navigation; the route whose id equals ``page`` is marked current."""
    return render_template(
        "nav.html",
        site=site,
        page=page,
        routes=nav_routes(site, base_path),
        home_href=base_path,
        base_path=base_path,
    )


def footer(site: SiteConfig, base_path: str = "./") -> str:
    return render_template("footer.html", site=site, base_path=base_path)


def hero(site: SiteConfig, base_path: str = "./") -> str:
    return render_template("hero.html", site=site, base_path=base_path)


def render_picture(name: str, alt: str = "", base_path: str = "./") -> str:
    module = ENV.get_template("macros.html").make_module({"base_path": base_path})
    return str(module.picture(name, alt))


def location_card(location: Location, base_path: str = "./") -> str:
    module = ENV.get_template("macros.html").make_module({"base_path": base_path})
    return str(module.location_card(location))


def locations_preview(locations: Sequence[Location], base_path: str = "./") -> str:
    return render_template(
        "locations_preview.html",
        locations=list(locations[:PREVIEW_LIMIT]),
        base_path=base_path,
    )


def locations_list(locations: Iterable[Location], base_path: str = "./") -> str:
    return render_template("locations_list.html", locations=list(locations), base_path=base_path)


def announcements(items: Iterable[Announcement], base_path: str = "./") -> str:
    return render_template("announcements.html", announcements=list(items), base_path=base_path)


def gallery_images(locations: Iterable[Location], limit: int = PHOTO_GRID_LIMIT) -> list[str]:
    """Distinct gallery images across locations in first-seen order."""
    seen: dict[str, None] = {}
    for location in locations:
        for image in location.gallery_images:
            seen.setdefault(image, None)
    return list(seen)[:limit]


def photo_grid(
    locations: Iterable[Location], brand_name: str, base_path: str = "./"
) -> str:
    return render_template(
        "photo_grid.html",
        images=gallery_images(locations),
        brand_name=brand_name,
        base_path=base_path,
    )


def find_location(locations: Iterable[Location], slug: str | None) -> Location | None:
    if not slug:
        return None
    return next((location for location in locations if location.slug == slug), None)


def location_detail(location: Location, base_path: str = "./") -> str:
    return render_template("location_detail.html", location=location, base_path=base_path)


def event_rows(events: Iterable[Event], locations: Iterable[Location]) -> list[EventRow]:
    """Pair each event with its location label.

    No slug means the event runs everywhere. A slug that matches no location
    yields ``None`` and the label is left out.
    """
    lookup = {location.slug: location.name for location in locations}
    rows = []
    for event in events:
        if event.location_slug:
            name = lookup.get(event.location_slug)
        else:
            name = ALL_LOCATIONS_LABEL
        rows.append(EventRow(event=event, location_name=name))
    return rows


def events_list(
    events: Iterable[Event], locations: Iterable[Location], base_path: str = "./"
) -> str:
    return render_template(
        "events_list.html", rows=event_rows(events, locations), base_path=base_path
    )


def unavailable_count(locations: Iterable[Location]) -> int:
    return sum(1 for location in locations if not location.order_url)


def order_list(locations: Iterable[Location], base_path: str = "./") -> str:
    return render_template("order_list.html", locations=list(locations), base_path=base_path)


def order_note(unavailable: int) -> str:
    if unavailable <= 0:
        return ""
    return (
        f'<div class="alert">Not available for {unavailable} location(s) yet. '
        "Coming soon.</div>"
    )


def render_location_page(site: SiteConfig, location: Location, base_path: str = "../") -> str:
    """Standalone document shell for one location, resolved at runtime by slug."""
    return render_template(
        "location_page.html",
        site=site,
        location=location,
        base_path=base_path,
        stylesheet=STYLESHEET_PATH,
        script=SCRIPT_PATH,
    )


def sitemap(urls: Iterable[str]) -> str:
    return render_template("sitemap.xml", urls=list(urls))
