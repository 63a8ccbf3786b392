"""Typed records for the four content documents.

JSON keys are camelCase; attributes are snake_case. Optional fields default to
``None`` so templates can test for presence instead of trusting the shape.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic.alias_generators import to_camel

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"


class ContentModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class SocialLinks(ContentModel):
    instagram: str | None = None
    facebook: str | None = None


class SiteConfig(ContentModel):
    brand_name: str
    tagline: str
    hero_headline: str
    hero_subhead: str
    primary_cta_label: str
    primary_cta_href: str
    secondary_cta_label: str
    secondary_cta_href: str
    shop_href: str
    social: SocialLinks = Field(default_factory=SocialLinks)
    contact_email: str
    contact_phone: str | None = None
    press_email: str | None = None

    @property
    def brand_in_sentence(self) -> str:
        """Brand name without a trailing period, for use mid-sentence."""
        return self.brand_name.rstrip(".")


class LocationLinks(ContentModel):
    menu_url: str | None = None
    order_url: str | None = None
    delivery_url: str | None = None
    directions_url: str | None = None


class Location(ContentModel):
    slug: str = Field(pattern=SLUG_PATTERN)
    name: str
    address_lines: list[str]
    status: Literal["open", "comingSoon"]
    hours_short: str
    hours_long: str | None = None
    phone: str | None = None
    notes: str | None = None
    hero_image: str
    gallery_images: list[str] = Field(default_factory=list)
    links: LocationLinks | None = None

    @property
    def coming_soon(self) -> bool:
        return self.status == "comingSoon"

    @property
    def order_url(self) -> str | None:
        return self.links.order_url if self.links else None


class Event(ContentModel):
    title: str
    description: str
    location_slug: str | None = None
    # Kept as the raw string; format_date decides how to show it.
    date_start_iso: str = Field(alias="dateStartISO")
    time_display: str
    image: str
    cta_url: str | None = None
    cta_label: str | None = None
    directions_url: str | None = None


class Announcement(ContentModel):
    headline: str
    body: str
    image: str
    cta_href: str
    cta_label: str


class LocationList(ContentModel):
    """Wrapper used only to validate slug uniqueness across the document."""

    items: list[Location]

    @field_validator("items")
    @classmethod
    def _unique_slugs(cls, items: list[Location]) -> list[Location]:
        seen: set[str] = set()
        for location in items:
            if location.slug in seen:
                raise ValueError(f"duplicate location slug {location.slug!r}")
            seen.add(location.slug)
        return items


SiteAdapter = TypeAdapter(SiteConfig)
LocationsAdapter = TypeAdapter(list[Location])
EventsAdapter = TypeAdapter(list[Event])
AnnouncementsAdapter = TypeAdapter(list[Announcement])

ADAPTERS: dict[str, TypeAdapter] = {
    "site": SiteAdapter,
    "locations": LocationsAdapter,
    "events": EventsAdapter,
    "announcements": AnnouncementsAdapter,
}


def parse_document(name: str, raw: object) -> object:
    """Validate an already-decoded JSON value as the named document.

    Raises ``KeyError`` for unknown names and ``pydantic.ValidationError`` for
    shape problems, including duplicate location slugs.
    """
    adapter = ADAPTERS[name]
    document = adapter.validate_python(raw)
    if name == "locations":
        LocationList(items=document)
    return document
