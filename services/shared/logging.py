"""Structured logging helpers shared across services.

Logs saem em JSON (uma linha por evento) no stdout. Cada requisição HTTP
recebe um contexto com request_id, trace_id e tenant_id, que é anexado a
todo log emitido enquanto ela é processada.
"""

from __future__ import annotations

import logging
import os
import sys
import time
from typing import Dict, List, Optional, Union
from uuid import uuid4

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
import structlog

REQUEST_ID_HEADER = "X-Request-ID"
TRACE_ID_HEADER = "X-Trace-ID"
TENANT_HEADER = "X-Tenant-ID"


def _resolve_level(level: Optional[Union[int, str]]) -> int:
    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO")
    if isinstance(level, int):
        return level
    resolved = getattr(logging, level.upper(), None)
    return resolved if isinstance(resolved, int) else logging.INFO


def _json_processors() -> List:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]


def configure_logging(
    service_name: str, level: Optional[Union[int, str]] = None
) -> structlog.stdlib.BoundLogger:
    """Configura structlog sobre o logging da stdlib e devolve um logger do serviço.

    O nível vem de ``level`` ou, se omitido, de LOG_LEVEL (padrão INFO).
    """
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=_resolve_level(level))

    structlog.configure(
        processors=_json_processors(),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    return structlog.get_logger().bind(service=service_name)


def request_context(request: Request) -> Dict[str, Optional[str]]:
    """Extrai os identificadores de correlação dos headers da requisição."""
    request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
    return {
        "request_id": request_id,
        "trace_id": request.headers.get(TRACE_ID_HEADER) or request_id,
        "tenant_id": request.headers.get(TENANT_HEADER),
        "path": request.url.path,
        "method": request.method,
    }


class RequestContextLogMiddleware(BaseHTTPMiddleware):
    """Registra ``request_completed``/``request_failed`` com o contexto da requisição.

    O ``X-Request-ID`` (recebido ou gerado) volta no header da resposta.
    """

    def __init__(self, app, *, logger: Optional[structlog.stdlib.BoundLogger] = None) -> None:
        super().__init__(app)
        self._logger = logger or structlog.get_logger()

    async def dispatch(self, request: Request, call_next) -> Response:
        context = request_context(request)
        inicio = time.perf_counter()

        with structlog.contextvars.bound_contextvars(**context):
            try:
                response = await call_next(request)
            except Exception:
                self._logger.exception("request_failed")
                raise

            duracao_ms = round((time.perf_counter() - inicio) * 1000, 2)
            log = self._logger.error if response.status_code >= 500 else self._logger.info
            log("request_completed", status_code=response.status_code, duration_ms=duracao_ms)

        response.headers[REQUEST_ID_HEADER] = context["request_id"]
        return response
