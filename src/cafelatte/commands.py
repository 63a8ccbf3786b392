"""Named UI commands in place of DOM event listeners."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

NAV_TOGGLE = "nav-toggle"
CONTACT_SUBMIT = "contact-submit"

Handler = Callable[..., Any]


class CommandDispatcher:
    """One handler per command name.

    Registering again replaces the previous handler, so re-rendering a
    section never stacks duplicate handlers.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, Handler] = {}

    def register(self, name: str, handler: Handler) -> None:
        self._handlers[name] = handler

    def unregister(self, name: str) -> None:
        self._handlers.pop(name, None)

    def __contains__(self, name: object) -> bool:
        return name in self._handlers

    def dispatch(self, name: str, /, **payload: Any) -> Any:
        try:
            handler = self._handlers[name]
        except KeyError:
            raise KeyError(f"no handler registered for command {name!r}") from None
        logger.debug("Dispatching %s", name)
        return handler(**payload)
