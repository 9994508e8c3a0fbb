"""Domain entities exposed by the application."""

from .message import MessagePayload

__all__ = ["MessagePayload"]
