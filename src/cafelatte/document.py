"""The hosting page: mount points, page metadata and navigation target."""

from __future__ import annotations

import re
from pathlib import Path

from bs4 import BeautifulSoup, Tag

from .commands import CommandDispatcher

_BASE_PATH_RE = re.compile(r"""window\.__BASE_PATH__\s*=\s*["']([^"']*)["']""")
_EXTENSION_RE = re.compile(r"\.[^./]+$")


class HostDocument:
    """A parsed HTML page that fragments are written into.

    Mount points are elements carrying a ``data-<name>`` attribute. Writing a
    mount replaces everything inside it.
    """

    def __init__(self, markup: str, path: str = "/", base_path: str | None = None) -> None:
        self.soup = BeautifulSoup(markup, "html.parser")
        self.path = path
        self.base_path = base_path if base_path is not None else self._detect_base_path()
        self.location_href: str | None = None
        self.commands = CommandDispatcher()

    @classmethod
    def from_file(cls, path: Path | str, url_path: str | None = None, base_path: str | None = None) -> HostDocument:
        path = Path(path)
        return cls(
            path.read_text(encoding="utf-8"),
            path=url_path if url_path is not None else "/" + path.name,
            base_path=base_path,
        )

    def _detect_base_path(self) -> str:
        for script in self.soup.find_all("script"):
            match = _BASE_PATH_RE.search(script.string or "")
            if match:
                return match.group(1) or "./"
        return "./"

    @property
    def body(self) -> Tag | None:
        return self.soup.body

    def _body_attr(self, name: str) -> str | None:
        body = self.body
        if body is None:
            return None
        value = body.get(name)
        return value if isinstance(value, str) and value else None

    @property
    def page(self) -> str:
        return self._body_attr("data-page") or ""

    @property
    def location_slug(self) -> str | None:
        return self._body_attr("data-location-slug")

    def slug_from_path(self) -> str:
        """Last path segment with any trailing file extension removed."""
        segment = self.path.split("?", 1)[0].split("#", 1)[0].split("/")[-1]
        return _EXTENSION_RE.sub("", segment)

    def mount(self, name: str) -> Tag | None:
        return self.soup.select_one(f"[data-{name}]")

    def replace(self, name: str, markup: str) -> bool:
        """Swap the contents of a mount; ``False`` when the page has no such mount."""
        target = self.mount(name)
        if target is None:
            return False
        target.clear()
        if markup:
            fragment = BeautifulSoup(markup, "html.parser")
            for node in list(fragment.contents):
                target.append(node.extract())
        return True

    @property
    def title(self) -> str:
        tag = self.soup.title
        return tag.get_text() if tag is not None else ""

    @title.setter
    def title(self, value: str) -> None:
        tag = self.soup.title
        if tag is None:
            tag = self.soup.new_tag("title")
            head = self.soup.head
            if head is None:
                head = self.soup.new_tag("head")
                self.soup.insert(0, head)
            head.append(tag)
        tag.string = value

    @property
    def meta_description(self) -> str | None:
        tag = self.soup.find("meta", attrs={"name": "description"})
        return tag.get("content") if tag is not None else None

    def set_meta_description(self, content: str) -> bool:
        tag = self.soup.find("meta", attrs={"name": "description"})
        if tag is None:
            return False
        tag["content"] = content
        return True

    def navigate(self, url: str) -> None:
        self.location_href = url

    def dispatch(self, command: str, /, **payload):
        return self.commands.dispatch(command, **payload)

    def render(self) -> str:
        return str(self.soup)
