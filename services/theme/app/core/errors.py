# app/core/errors.py
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse


class ApiError(Exception):
    """Erro de API renderizado como ``{"error": ..., "details": ...}``."""

    def __init__(self, status_code: int, error: str, details: Optional[str] = None):
        self.status_code = status_code
        self.error = error
        self.details = details
        super().__init__(error)

    def to_dict(self) -> dict:
        body = {"error": self.error}
        if self.details is not None:
            body["details"] = self.details
        return body


def storage_error(error: str, exc: Exception) -> ApiError:
    # POC: a mensagem do driver vai para o cliente sem redação
    driver_error = getattr(exc, "orig", None) or exc
    return ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, error, details=str(driver_error))


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
