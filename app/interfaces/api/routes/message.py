"""Route serving the backend message."""

from fastapi import APIRouter

from app.application.use_cases.get_backend_message import get_backend_message
from app.interfaces.api.schemas import MessageRead

router = APIRouter(prefix="/api", tags=["message"])


@router.get("", response_model=MessageRead)
async def read_message() -> MessageRead:
    """Return the fixed backend message."""

    payload = get_backend_message()
    return MessageRead.model_validate(payload)


__all__ = ["router"]
