"""Use case producing the backend message payload."""

from app.domain.entities.message import MessagePayload


BACKEND_MESSAGE = "Hello from Backend!"


def get_backend_message() -> MessagePayload:
    """Return a fresh payload carrying the fixed backend message.

    The payload is rebuilt on every call; nothing is cached or shared
    between requests.
    """

    return MessagePayload(message=BACKEND_MESSAGE)
