"""Shared response envelope"""
from pydantic import BaseModel
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Envelope wrapping every API response

    Failures use the same keys with success=False, data=None and an extra
    "error" key carrying the underlying detail (see app.api.responses).
    """
    success: bool
    message: str
    data: Optional[T] = None
