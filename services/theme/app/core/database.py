# app/core/database.py
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from shared import DatabaseConfig

Base = declarative_base()


class Database:
    """Engine + session factory de um serviço.

    Criado pela raiz de composição (``create_app``) e guardado em
    ``app.state.database``; as rotas recebem sessões via ``get_db``.
    """

    def __init__(self, config: DatabaseConfig):
        self._config = config
        self._url = make_url(config.url)
        self._engine = create_engine(self._url, future=True, **self._engine_options())
        self._session_factory = sessionmaker(
            bind=self._engine, autoflush=False, autocommit=False, future=True
        )

    def _engine_options(self) -> dict:
        if self._url.get_backend_name() == "sqlite":
            options = {"connect_args": {"check_same_thread": False}}
            if self._url.database in (None, "", ":memory:"):
                options["poolclass"] = StaticPool
            return options
        return {
            "pool_pre_ping": True,
            "pool_size": self._config.pool_size,
            "max_overflow": self._config.max_overflow,
        }

    @property
    def engine(self) -> Engine:
        return self._engine

    def session(self) -> Session:
        return self._session_factory()

    def ensure_database_exists(self) -> None:
        """Cria o schema alvo no servidor MySQL se ainda não existir.

        SQLite cria o arquivo na primeira conexão, então não há nada a fazer.
        """
        if self._url.get_backend_name() != "mysql" or not self._url.database:
            return

        name = self._url.database.replace("`", "``")
        server_engine = create_engine(self._url.set(database=None), future=True)
        try:
            with server_engine.begin() as conn:
                conn.execute(text(f"CREATE DATABASE IF NOT EXISTS `{name}`"))
        finally:
            server_engine.dispose()

    def dispose(self) -> None:
        self._engine.dispose()


def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
