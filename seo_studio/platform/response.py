from typing import Any, Optional

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def error_response(
    *,
    error: str,
    details: Optional[Any] = None,
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
) -> JSONResponse:
    """
    Every failure leaves the service in this shape: {"error": ...} and,
    when there is something to add, {"details": ...}.
    """
    content = {"error": error}
    if details is not None:
        content["details"] = jsonable_encoder(details)

    return JSONResponse(status_code=status_code, content=content)
