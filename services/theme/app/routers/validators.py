import re

from fastapi import status
from app.core.errors import ApiError

# só dígitos ASCII; int() aceitaria "0_1" e dígitos unicode
_TENANT_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def validar_tenant_id(raw_tenant_id: str) -> int:
    valor = raw_tenant_id.strip()
    if not _TENANT_ID_PATTERN.fullmatch(valor):
        raise ApiError(status.HTTP_400_BAD_REQUEST, "tenantId must be a valid number")
    return int(valor)
