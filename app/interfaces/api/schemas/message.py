"""Pydantic schemas for the message endpoint."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class MessageRead(BaseModel):
    message: str = Field(..., description="Text produced by the backend")

    model_config = ConfigDict(from_attributes=True)


__all__ = ["MessageRead"]
