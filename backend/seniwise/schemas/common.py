"""Common API response schemas."""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApiError(BaseModel):
    """Structured error carried by a failed response."""

    code: int
    message: str


class ApiResponse(BaseModel, Generic[T]):
    """Consistent `{success, error, result}` JSON envelope for API responses."""

    success: bool = True
    error: ApiError | None = None
    result: T | None = None


def error_envelope(code: int, message: str, result: object | None = None) -> dict[str, object]:
    """Serialize a failure envelope for use outside response models."""

    return {
        "success": False,
        "error": ApiError(code=code, message=message).model_dump(),
        "result": result,
    }
