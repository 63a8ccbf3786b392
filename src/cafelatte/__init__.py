"""Content pipeline for the Cafe Latte Co. marketing site."""

from .loader import ContentLoader, DirectorySource, DocumentCache, HttpSource, LoadError

__all__ = [
    "ContentLoader",
    "DirectorySource",
    "DocumentCache",
    "HttpSource",
    "LoadError",
]
