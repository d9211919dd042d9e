"""Response envelope shared by every endpoint."""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class MessageResponse(BaseModel):
    """Envelope without a payload (delete success and every failure)."""

    success: bool
    message: str


class DataResponse(MessageResponse, Generic[T]):
    """Envelope carrying a payload under ``data``."""

    success: bool = True
    data: T
