"""Runtime and build settings.

Defaults live at module level; each can be overridden through an environment
variable, and the CLI scripts override both with their flags.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_SITE_ORIGIN = "https://diamondgeezer.github.io/cafelatteco/"
DEFAULT_BASE_URL = "http://localhost:8000/"
DEFAULT_DATA_PATH = "src/data"
DEFAULT_DATA_DIR = "data"
DEFAULT_SITE_ROOT = "."
DEFAULT_HTTP_TIMEOUT = 10.0

# Site-relative locations shared by the projector and the generator.
IMAGES_PATH = "assets/images"
STYLESHEET_PATH = "assets/css/styles.css"
SCRIPT_PATH = "assets/js/main.js"
LOCATIONS_DIR = "locations"
SITEMAP_FILE = "sitemap.xml"

DOCUMENT_NAMES = ("site", "locations", "events", "announcements")


def _truthy(value: str | None) -> bool:
    if value is None:
        return False
    return value.lower() in {"1", "true", "yes", "on"}


def _with_trailing_slash(url: str) -> str:
    return url if url.endswith("/") else url + "/"


@dataclass(frozen=True)
class Settings:
    site_origin: str = DEFAULT_SITE_ORIGIN
    base_url: str = DEFAULT_BASE_URL
    data_path: str = DEFAULT_DATA_PATH
    data_dir: Path = Path(DEFAULT_DATA_DIR)
    site_root: Path = Path(DEFAULT_SITE_ROOT)
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    verbose: bool = False

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            site_origin=_with_trailing_slash(
                os.environ.get("CAFELATTE_SITE_ORIGIN", DEFAULT_SITE_ORIGIN)
            ),
            base_url=_with_trailing_slash(
                os.environ.get("CAFELATTE_BASE_URL", DEFAULT_BASE_URL)
            ),
            data_path=os.environ.get("CAFELATTE_DATA_PATH", DEFAULT_DATA_PATH).strip("/"),
            data_dir=Path(os.environ.get("CAFELATTE_DATA_DIR", DEFAULT_DATA_DIR)),
            site_root=Path(os.environ.get("CAFELATTE_SITE_ROOT", DEFAULT_SITE_ROOT)),
            http_timeout=float(
                os.environ.get("CAFELATTE_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT)
            ),
            verbose=_truthy(os.environ.get("CAFELATTE_VERBOSE")),
        )
