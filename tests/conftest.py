from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_PATH = ROOT_DIR / "src"
if SRC_PATH.exists():
    sys.path.insert(0, str(SRC_PATH))
# Lets tests import the CLI modules as ``scripts.<name>``.
if str(ROOT_DIR) not in sys.path:
    sys.path.append(str(ROOT_DIR))

DATA_DIR = ROOT_DIR / "data"


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def raw_site() -> dict:
    return json.loads((DATA_DIR / "site.json").read_text(encoding="utf-8"))


@pytest.fixture
def raw_locations() -> list:
    return json.loads((DATA_DIR / "locations.json").read_text(encoding="utf-8"))


@pytest.fixture
def site(raw_site):
    from cafelatte.models import SiteConfig

    return SiteConfig.model_validate(raw_site)


@pytest.fixture
def locations(raw_locations):
    from cafelatte.models import parse_document

    return parse_document("locations", raw_locations)


@pytest.fixture
def events():
    from cafelatte.models import parse_document

    raw = json.loads((DATA_DIR / "events.json").read_text(encoding="utf-8"))
    return parse_document("events", raw)


@pytest.fixture
def announcements():
    from cafelatte.models import parse_document

    raw = json.loads((DATA_DIR / "announcements.json").read_text(encoding="utf-8"))
    return parse_document("announcements", raw)
