from typing import Any

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def success_response(
    *,
    message: str,
    status_code: int = status.HTTP_200_OK,
    **extra: Any,
) -> JSONResponse:
    """
    Success envelope: {"success": true, "message": ..., **extra}
    """
    content = {"success": True, "message": message}
    content.update(jsonable_encoder(extra))
    return JSONResponse(status_code=status_code, content=content)


def error_response(
    *,
    error: str,
    status_code: int = status.HTTP_400_BAD_REQUEST,
) -> JSONResponse:
    """
    Every failure leaves the API as {"error": "<reason>"}.
    """
    return JSONResponse(status_code=status_code, content={"error": error})
