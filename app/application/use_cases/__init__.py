"""Aggregate application use cases."""

from .get_backend_message import BACKEND_MESSAGE, get_backend_message

__all__ = [
    "BACKEND_MESSAGE",
    "get_backend_message",
]
