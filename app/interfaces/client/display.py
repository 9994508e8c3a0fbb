"""Display component showing the backend message."""

from __future__ import annotations

import logging
from typing import Any

from .fetcher import MessageFetchError, MessageFetcher

logger = logging.getLogger(__name__)

LOADING_TEXT = "Loading..."
ERROR_TEXT = "Error fetching data"
PAGE_TITLE = "Simple Python Message App"


class DisplayState:
    """Holds the text shown by the display.

    Starts on the loading placeholder and accepts exactly one update.
    """

    def __init__(self) -> None:
        self._text = LOADING_TEXT
        self._resolved = False

    @property
    def text(self) -> str:
        return self._text

    @property
    def resolved(self) -> bool:
        return self._resolved

    def resolve(self, text: str) -> None:
        if self._resolved:
            raise RuntimeError("Display state has already been resolved")
        self._text = text
        self._resolved = True


def _extract_message(data: Any) -> str:
    """Return the ``message`` field rendered as text.

    A missing field, a boolean, or a body that is not an object renders as
    an empty string.
    """

    if not isinstance(data, dict):
        return ""
    value = data.get("message")
    if value is None or isinstance(value, bool):
        return ""
    return str(value)


class MessageDisplay:
    """Fetches the backend message once and keeps the text to render."""

    def __init__(self, fetcher: MessageFetcher) -> None:
        self.fetcher = fetcher
        self.state = DisplayState()
        self._activated = False

    @property
    def text(self) -> str:
        return self.state.text

    async def activate(self) -> str:
        """Issue the request on first activation and return the displayed text.

        Subsequent calls do not fetch again.
        """

        if self._activated:
            return self.state.text
        self._activated = True

        try:
            data = await self.fetcher.fetch()
        except MessageFetchError as exc:
            logger.debug("Falling back to error text: %s", exc)
            self.state.resolve(ERROR_TEXT)
        else:
            self.state.resolve(_extract_message(data))
        return self.state.text

    def render(self) -> str:
        return render_page(self.state.text)


def render_page(text: str) -> str:
    """Render the page as plain text: a heading followed by the message."""

    return f"{PAGE_TITLE}\n\n{text}"


__all__ = [
    "DisplayState",
    "ERROR_TEXT",
    "LOADING_TEXT",
    "MessageDisplay",
    "PAGE_TITLE",
    "render_page",
]
