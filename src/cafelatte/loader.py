"""Load named content documents with a per-session cache.

Usage:
    async with httpx.AsyncClient() as client:
        loader = ContentLoader(HttpSource("https://example.org/", client=client))
        site, locations = await loader.load_many("site", "locations")

A failed load raises ``LoadError``; nothing is cached for it and no default
document is substituted.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Protocol

import httpx
from pydantic import ValidationError

from .config import DEFAULT_DATA_PATH, DEFAULT_HTTP_TIMEOUT, DOCUMENT_NAMES
from .models import parse_document

logger = logging.getLogger(__name__)


class LoadError(RuntimeError):
    """A content document could not be retrieved, decoded or validated."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"Unable to load {name} data: {reason}")
        self.name = name
        self.reason = reason


class Source(Protocol):
    async def fetch(self, name: str) -> bytes: ...


class HttpSource:
    """Fetch ``{base_url}{data_path}/{name}.json`` over HTTP."""

    def __init__(
        self,
        base_url: str,
        data_path: str = DEFAULT_DATA_PATH,
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
    ) -> None:
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.data_path = data_path.strip("/")
        self._client = client
        self._timeout = timeout

    def url_for(self, name: str) -> str:
        prefix = f"{self.data_path}/" if self.data_path else ""
        return f"{self.base_url}{prefix}{name}.json"

    async def fetch(self, name: str) -> bytes:
        url = self.url_for(name)
        logger.debug("Fetching %s", url)
        try:
            if self._client is not None:
                response = await self._client.get(url)
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await client.get(url)
        except httpx.HTTPError as exc:
            raise LoadError(name, f"request to {url} failed: {exc}") from exc
        if not response.is_success:
            raise LoadError(name, f"{url} returned HTTP {response.status_code}")
        return response.content


class DirectorySource:
    """Read ``{data_dir}/{name}.json`` from the local filesystem."""

    def __init__(self, data_dir: Path | str) -> None:
        self.data_dir = Path(data_dir)

    async def fetch(self, name: str) -> bytes:
        return _read_bytes(self.data_dir, name)


def _read_bytes(data_dir: Path, name: str) -> bytes:
    path = data_dir / f"{name}.json"
    try:
        return path.read_bytes()
    except OSError as exc:
        raise LoadError(name, f"cannot read {path}: {exc}") from exc


def decode_document(name: str, body: bytes) -> Any:
    """Decode and validate a raw document body."""
    if name not in DOCUMENT_NAMES:
        raise LoadError(name, "unknown document")
    try:
        raw = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise LoadError(name, f"body is not valid JSON: {exc}") from exc
    try:
        return parse_document(name, raw)
    except ValidationError as exc:
        raise LoadError(name, f"unexpected shape: {exc}") from exc


def read_document(data_dir: Path | str, name: str) -> Any:
    """Synchronous filesystem load used at build time."""
    return decode_document(name, _read_bytes(Path(data_dir), name))


class DocumentCache:
    """Successfully loaded documents keyed by name, for one session."""

    def __init__(self) -> None:
        self._documents: dict[str, Any] = {}

    def get(self, name: str) -> Any | None:
        return self._documents.get(name)

    def put(self, name: str, document: Any) -> None:
        self._documents[name] = document

    def __contains__(self, name: object) -> bool:
        return name in self._documents

    def __len__(self) -> int:
        return len(self._documents)


class ContentLoader:
    def __init__(self, source: Source, cache: DocumentCache | None = None) -> None:
        self.source = source
        self.cache = cache if cache is not None else DocumentCache()

    async def load(self, name: str) -> Any:
        if name in self.cache:
            logger.debug("Cache hit for %s", name)
            return self.cache.get(name)
        if name not in DOCUMENT_NAMES:
            raise LoadError(name, "unknown document")
        body = await self.source.fetch(name)
        document = decode_document(name, body)
        # Two concurrent loads of the same name both land here; the values
        # are identical so the second write is harmless.
        self.cache.put(name, document)
        return document

    async def load_many(self, *names: str) -> list[Any]:
        return list(await asyncio.gather(*(self.load(name) for name in names)))
