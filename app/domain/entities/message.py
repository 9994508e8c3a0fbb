from dataclasses import dataclass


@dataclass(frozen=True)
class MessagePayload:
    """Represents the message returned by the API responder."""

    message: str
