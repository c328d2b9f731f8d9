from typing import Generic, Literal, TypeVar

from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


class ApiResponse(BaseModel, Generic[T]):
    status: Literal["ok"] = "ok"
    data: T


class ApiError(BaseModel):
    status: Literal["error"] = "error"
    message: str
