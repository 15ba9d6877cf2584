"""Health check utilities for FastAPI services.

Provides endpoints /health and /ready for Docker/Kubernetes monitoring.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def check_database_health(engine: Optional[Engine]) -> bool:
    """Verifica se o banco de dados está disponível.

    Args:
        engine: SQLAlchemy engine para conexão com banco

    Returns:
        True se banco está disponível, False caso contrário
    """
    if engine is None:
        return False

    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1")).fetchone()
        return True
    except SQLAlchemyError:
        return False


def create_health_router(
    service_name: str,
    database_engine: Optional[Engine] = None,
) -> APIRouter:
    """Cria router FastAPI com endpoints /health e /ready.

    Args:
        service_name: Nome reportado pelos endpoints
        database_engine: Engine SQLAlchemy para verificação de banco

    Returns:
        APIRouter configurado com endpoints de health check
    """
    router = APIRouter(tags=["Health"])

    @router.get("/health", status_code=status.HTTP_200_OK)
    def health():
        """Endpoint básico de saúde.

        Sempre retorna 200 OK se o serviço está rodando.
        Não verifica dependências - use /ready para isso.
        """
        return {
            "ok": True,
            "service": service_name,
            "timestamp": _timestamp(),
        }

    @router.get("/ready", status_code=status.HTTP_200_OK)
    def ready():
        """Endpoint de readiness.

        Retorna 200 se o banco responde, 503 caso contrário.
        """
        db_healthy = check_database_health(database_engine)
        response_data = {
            "status": "ready" if db_healthy else "not_ready",
            "service": service_name,
            "timestamp": _timestamp(),
            "checks": {"database": db_healthy},
        }
        return JSONResponse(
            content=response_data,
            status_code=status.HTTP_200_OK if db_healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    return router
