"""Configuration helpers reused by microservices."""

from __future__ import annotations

from dataclasses import dataclass
import os
import warnings
from typing import Optional

from sqlalchemy.engine import URL, make_url

# Valores padrão apenas para desenvolvimento local
# ⚠️ AVISO: a senha padrão é insegura e deve ser usada APENAS em desenvolvimento
_DEFAULT_DB_HOST = "127.0.0.1"
_DEFAULT_DB_PORT = 3306
_DEFAULT_DB_USER = "root"
_DEFAULT_DB_PASSWORD = "password"
_DEFAULT_DB_NAME = "tenant_theme_poc"
_DEFAULT_DB_DRIVER = "mysql+pymysql"
_DEFAULT_POOL_SIZE = 10
_DEFAULT_MAX_OVERFLOW = 5

_DEFAULT_HOST = "0.0.0.0"
_DEFAULT_PORT = 4000
_DEFAULT_SERVICE_NAME = "tenant-theme-poc-backend"

# Valores inseguros que não devem ser usados em produção
_INSECURE_PASSWORDS = {"password", "123456", "admin", "root", "test", ""}


@dataclass(frozen=True)
class DatabaseConfig:
    url: str
    pool_size: int = _DEFAULT_POOL_SIZE
    max_overflow: int = _DEFAULT_MAX_OVERFLOW

    @property
    def name(self) -> Optional[str]:
        return make_url(self.url).database


@dataclass(frozen=True)
class ServiceConfig:
    name: str
    service_name: str
    host: str
    port: int
    api_prefix: str
    database: DatabaseConfig


def _is_production() -> bool:
    env = os.getenv("ENVIRONMENT", os.getenv("ENV", "development")).lower()
    return env in ("production", "prod")


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} deve ser um número inteiro, recebido {raw!r}.") from exc


def _validate_no_insecure_password(password: Optional[str], context: str = "") -> None:
    """Valida que uma senha não é um valor padrão inseguro."""
    if password is not None and password.lower() in _INSECURE_PASSWORDS:
        if _is_production():
            raise ValueError(
                f"Senha insegura detectada em {context}. "
                "Use uma senha forte em produção."
            )
        warnings.warn(
            f"Senha insegura detectada em {context}. "
            "Use uma senha forte em produção.",
            UserWarning,
            stacklevel=3
        )


def _build_database_url() -> str:
    """Monta a URL do MySQL a partir de DB_HOST, DB_PORT, DB_USER, DB_PASSWORD e DB_NAME."""
    password = os.getenv("DB_PASSWORD", _DEFAULT_DB_PASSWORD)
    _validate_no_insecure_password(password, "DB_PASSWORD")

    url = URL.create(
        _DEFAULT_DB_DRIVER,
        username=os.getenv("DB_USER", _DEFAULT_DB_USER),
        password=password,
        host=os.getenv("DB_HOST", _DEFAULT_DB_HOST),
        port=_int_env("DB_PORT", _DEFAULT_DB_PORT),
        database=os.getenv("DB_NAME", _DEFAULT_DB_NAME),
    )
    return url.render_as_string(hide_password=False)


def _lookup_database_url(service_name: str) -> str:
    """Lookup database URL from environment variables with fallback to DB_* parts.

    A URL completa (``<SERVICE>_DATABASE_URL`` ou ``DATABASE_URL``) tem
    precedência sobre as variáveis individuais.
    """
    service_env = f"{service_name.upper()}_DATABASE_URL"
    db_url = os.getenv(service_env) or os.getenv("DATABASE_URL")
    if db_url:
        return db_url
    return _build_database_url()


def _normalize_prefix(prefix: str) -> str:
    prefix = prefix.strip().rstrip("/")
    if prefix and not prefix.startswith("/"):
        prefix = "/" + prefix
    return prefix


def load_service_config(service_name: str) -> ServiceConfig:
    """Aggregate configuration for a given service using env vars with sane fallbacks.

    ⚠️ AVISO: Valores padrão são apenas para desenvolvimento.
    Em produção, defina todas as variáveis de ambiente necessárias.

    Args:
        service_name: Nome do serviço (ex: theme)

    Returns:
        ServiceConfig: Configuração do serviço

    Raises:
        ValueError: Se alguma variável numérica for inválida ou se valores
                   inseguros forem detectados em produção
    """

    normalized_name = service_name.lower()
    db_url = _lookup_database_url(normalized_name)

    host = os.getenv("APP_HOST", _DEFAULT_HOST)
    port = _int_env("PORT", _int_env("APP_PORT", _DEFAULT_PORT))

    return ServiceConfig(
        name=normalized_name,
        service_name=os.getenv("SERVICE_NAME", _DEFAULT_SERVICE_NAME),
        host=host,
        port=port,
        api_prefix=_normalize_prefix(os.getenv("API_PREFIX", "")),
        database=DatabaseConfig(
            url=db_url,
            pool_size=_int_env("DB_POOL_SIZE", _DEFAULT_POOL_SIZE),
            max_overflow=_int_env("DB_MAX_OVERFLOW", _DEFAULT_MAX_OVERFLOW),
        ),
    )
