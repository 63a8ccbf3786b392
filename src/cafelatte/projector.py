"""Write content fragments into a hosting page, one entry point per page type.

Each ``render_*``/``build_*`` function replaces its mount point wholesale, so
calling it again is safe. A page without the mount point is left alone.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from urllib.parse import quote

from . import fragments
from .commands import CONTACT_SUBMIT, NAV_TOGGLE
from .document import HostDocument
from .loader import ContentLoader, LoadError
from .models import Announcement, Event, Location, SiteConfig

logger = logging.getLogger(__name__)

DEFAULT_PAGE = "home"

# Characters encodeURIComponent leaves alone besides alphanumerics.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_uri_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def tel_href(phone: str) -> str:
    return "tel:" + re.sub(r"[^0-9]", "", phone)


def contact_mailto(site: SiteConfig, name: str, message: str, email: str) -> str:
    subject = encode_uri_component(f"{site.brand_name} inquiry from {name}")
    body = encode_uri_component(f"{message}\n\nReply to: {email}")
    return f"mailto:{site.contact_email}?subject={subject}&body={body}"


def toggle_drawer(document: HostDocument) -> bool:
    """Flip the mobile drawer open/closed and return the new state."""
    drawer = document.soup.select_one("[data-mobile-drawer]")
    if drawer is None:
        return False
    classes = list(drawer.get("class", []))
    if "open" in classes:
        classes.remove("open")
        is_open = False
    else:
        classes.append("open")
        is_open = True
    drawer["class"] = classes
    return is_open


def build_nav(document: HostDocument, site: SiteConfig) -> None:
    markup = fragments.nav(site, document.page, document.base_path)
    if document.replace("nav", markup):
        document.commands.register(NAV_TOGGLE, lambda: toggle_drawer(document))


def build_footer(document: HostDocument, site: SiteConfig) -> None:
    document.replace("footer", fragments.footer(site, document.base_path))


def render_hero(document: HostDocument, site: SiteConfig) -> None:
    document.replace("home-hero", fragments.hero(site, document.base_path))


def render_locations_preview(document: HostDocument, locations: Sequence[Location]) -> None:
    document.replace(
        "locations-preview", fragments.locations_preview(locations, document.base_path)
    )


def render_announcements(document: HostDocument, announcements: Sequence[Announcement]) -> None:
    document.replace("announcements", fragments.announcements(announcements, document.base_path))


def render_photo_grid(
    document: HostDocument, locations: Sequence[Location], site: SiteConfig
) -> None:
    document.replace(
        "photo-grid", fragments.photo_grid(locations, site.brand_name, document.base_path)
    )


def render_locations_page(document: HostDocument, locations: Sequence[Location]) -> None:
    document.replace("locations-list", fragments.locations_list(locations, document.base_path))


def render_location_detail(
    document: HostDocument, locations: Sequence[Location], site: SiteConfig
) -> Location | None:
    """Render the location named by the page metadata or, failing that, the URL.

    Returns the resolved location, or ``None`` after rendering the not-found
    placeholder. Only a hit updates the title and meta description.
    """
    if document.mount("location-detail") is None:
        return None
    slug = document.location_slug or document.slug_from_path()
    location = fragments.find_location(locations, slug)
    if location is None:
        logger.info("No location matches slug %r", slug)
        document.replace("location-detail", fragments.NOT_FOUND_MARKUP)
        return None

    document.title = f"{location.name} | {site.brand_name}"
    document.set_meta_description(
        f"Details, hours, and ordering for {location.name} at {site.brand_in_sentence}."
    )
    document.replace("location-detail", fragments.location_detail(location, document.base_path))
    return location


def render_events_page(
    document: HostDocument, events: Sequence[Event], locations: Sequence[Location]
) -> None:
    document.replace("events-list", fragments.events_list(events, locations, document.base_path))


def render_order_page(document: HostDocument, locations: Sequence[Location]) -> int:
    """Render order rows and the advisory; returns how many locations lack an order link."""
    if not document.replace("order-list", fragments.order_list(locations, document.base_path)):
        return 0
    unavailable = fragments.unavailable_count(locations)
    document.replace("order-note", fragments.order_note(unavailable))
    return unavailable


def render_contact_page(document: HostDocument, site: SiteConfig) -> None:
    target = document.mount("contact")
    if target is None:
        return
    mailto = f"mailto:{site.contact_email}"
    email_link = target.select_one("[data-contact-email]")
    if email_link is not None:
        email_link.string = site.contact_email
        email_link["href"] = mailto

    phone_link = target.select_one("[data-contact-phone]")
    if phone_link is not None and site.contact_phone:
        phone_link.string = site.contact_phone
        phone_link["href"] = tel_href(site.contact_phone)

    press_link = target.select_one("[data-press-email]")
    if press_link is not None and site.press_email:
        press_link.string = site.press_email
        press_link["href"] = f"mailto:{site.press_email}"

    if target.find("form") is None:
        return

    def submit(name: str = "", message: str = "", email: str = "") -> str:
        url = contact_mailto(site, name, message, email)
        document.navigate(url)
        return url

    document.commands.register(CONTACT_SUBMIT, submit)


async def init(document: HostDocument, loader: ContentLoader) -> bool:
    """Populate every mount the page type needs.

    Returns ``False`` when a content document failed to load; the failure is
    logged and whatever was already rendered stays in place.
    """
    try:
        site = await loader.load("site")
        build_nav(document, site)
        build_footer(document, site)

        page = document.page or DEFAULT_PAGE
        logger.debug("Projecting page %s", page)
        if page == "home":
            render_hero(document, site)
            locations, announcements = await loader.load_many("locations", "announcements")
            render_locations_preview(document, locations)
            render_announcements(document, announcements)
            render_photo_grid(document, locations, site)
        elif page == "about":
            locations = await loader.load("locations")
            render_photo_grid(document, locations, site)
        elif page == "locations":
            locations = await loader.load("locations")
            render_locations_page(document, locations)
        elif page == "location-detail":
            locations = await loader.load("locations")
            render_location_detail(document, locations, site)
        elif page == "events":
            events, locations = await loader.load_many("events", "locations")
            render_events_page(document, events, locations)
        elif page == "order":
            locations = await loader.load("locations")
            render_order_page(document, locations)
        elif page == "contact":
            render_contact_page(document, site)
        else:
            logger.debug("No page-specific sections for %s", page)
    except LoadError:
        logger.exception("Content load failed for page %r", document.page or DEFAULT_PAGE)
        return False
    return True
