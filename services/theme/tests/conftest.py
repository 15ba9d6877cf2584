import os
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

SERVICE_DIR = Path(__file__).resolve().parents[1]
ROOT_DIR = SERVICE_DIR.parent.parent

service_path = str(SERVICE_DIR)
shared_path = str(ROOT_DIR / "services")
for path in (service_path, shared_path):
    if path in sys.path:
        sys.path.remove(path)
    sys.path.insert(0, path)

for module_name in list(sys.modules):
    if module_name == "app" or module_name.startswith("app."):
        sys.modules.pop(module_name)

# app.main cria um app no import; aponta para SQLite para não exigir MySQL
os.environ.setdefault("THEME_DATABASE_URL", "sqlite://")

from app.core.database import Database  # noqa: E402
from app.main import create_app  # noqa: E402
from app.seed import initialize_database  # noqa: E402
from shared import DatabaseConfig, ServiceConfig  # noqa: E402


def build_config(database_url: str, api_prefix: str = "") -> ServiceConfig:
    return ServiceConfig(
        name="theme",
        service_name="tenant-theme-poc-backend",
        host="127.0.0.1",
        port=4000,
        api_prefix=api_prefix,
        database=DatabaseConfig(url=database_url),
    )


@pytest.fixture
def make_config():
    return build_config


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'test_theme.db'}"


@pytest.fixture
def config(database_url):
    return build_config(database_url)


@pytest.fixture
def database(config):
    database = Database(config.database)
    yield database
    database.dispose()


@pytest.fixture
def seeded_db(database):
    initialize_database(database)
    with database.session() as db:
        yield db


@pytest.fixture
def app(config):
    return create_app(config)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
