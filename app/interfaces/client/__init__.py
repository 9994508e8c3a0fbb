"""Display client for the backend message."""

from .display import (
    ERROR_TEXT,
    LOADING_TEXT,
    PAGE_TITLE,
    DisplayState,
    MessageDisplay,
    render_page,
)
from .fetcher import MessageFetchError, MessageFetcher

__all__ = [
    "DisplayState",
    "ERROR_TEXT",
    "LOADING_TEXT",
    "MessageDisplay",
    "MessageFetchError",
    "MessageFetcher",
    "PAGE_TITLE",
    "render_page",
]
