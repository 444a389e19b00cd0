from typing import Any, Dict, TypeVar

from fastapi import HTTPException
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_409_CONFLICT,
)

from ..domain import Err, ErrorKind, Result
from ..middlewares.request_id import request_id_ctx

T = TypeVar("T")

STATUS_BY_KIND: Dict[ErrorKind, int] = {
    ErrorKind.INVALID_ARGUMENT: HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: HTTP_409_CONFLICT,
}


def err(
    code: int | str,
    message: str,
    details: Dict[str, Any] | None = None,
) -> Dict[str, Any]:
    """Return an error envelope."""
    error: Dict[str, Any] = {"code": code, "message": message}
    if details:
        error["details"] = details

    return {"ok": False, "request_id": request_id_ctx.get(None), "error": error}


def unwrap(result: Result[T]) -> T:
    """Return the value of an ``Ok`` result or raise the matching HTTP error."""
    if isinstance(result, Err):
        raise HTTPException(
            status_code=STATUS_BY_KIND[result.kind], detail=result.message
        )
    return result.value
