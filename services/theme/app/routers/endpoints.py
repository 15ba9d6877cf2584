import structlog
from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.core.database import get_db
from app.core.errors import ApiError, storage_error
from app.schemas.theme_schema import ErrorOut, TenantListOut, ThemeConfigOut
from . import crud, validators

router = APIRouter()
logger = structlog.get_logger(__name__)


@router.get(
    "/tenants",
    response_model=TenantListOut,
    tags=["Tenants"],
    responses={500: {"model": ErrorOut}},
)
def listar_tenants(db: Session = Depends(get_db)):
    try:
        tenants = crud.listar_tenants(db)
    except SQLAlchemyError as exc:
        logger.error("storage_error", operation="listar_tenants", error=str(exc))
        raise storage_error("Failed to fetch tenants", exc) from exc
    return TenantListOut(tenants=tenants)


@router.get(
    "/theme-config/{tenant_id}",
    response_model=ThemeConfigOut,
    tags=["Themes"],
    responses={400: {"model": ErrorOut}, 404: {"model": ErrorOut}, 500: {"model": ErrorOut}},
)
def buscar_configuracao_tema(tenant_id: str, db: Session = Depends(get_db)):
    tenant_id_int = validators.validar_tenant_id(tenant_id)

    try:
        configuracao = crud.resolver_configuracao_tema(db, tenant_id_int)
    except SQLAlchemyError as exc:
        logger.error("storage_error", operation="resolver_configuracao_tema", error=str(exc))
        raise storage_error("Failed to fetch theme config", exc) from exc

    if configuracao is None:
        raise ApiError(status.HTTP_404_NOT_FOUND, f"No tenant found for id={tenant_id_int}")
    return configuracao
