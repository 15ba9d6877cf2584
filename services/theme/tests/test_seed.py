import pytest
from sqlalchemy.exc import OperationalError

from app.core.database import Database
from app.models.theme import Component, Tenant, Theme
from app.seed import COMPONENTS, TENANTS, THEMES, contar_linhas, initialize_database, seed_database
from shared import DatabaseConfig


def _counts(db):
    return {model.__tablename__: contar_linhas(db, model) for model in (Theme, Tenant, Component)}


def test_initialize_creates_schema_and_seeds_every_table(database):
    inserted = initialize_database(database)

    assert inserted == {"theme": 3, "tenant": 3, "component": 10}
    with database.session() as db:
        assert _counts(db) == {"theme": 3, "tenant": 3, "component": 10}


def test_initialize_twice_does_not_duplicate_rows(database):
    initialize_database(database)
    second = initialize_database(database)

    assert second == {"theme": 0, "tenant": 0, "component": 0}
    with database.session() as db:
        assert _counts(db) == {"theme": len(THEMES), "tenant": len(TENANTS), "component": len(COMPONENTS)}


def test_each_table_is_seeded_independently(database):
    initialize_database(database)
    with database.session() as db:
        db.query(Component).delete()
        db.commit()

    inserted = initialize_database(database)

    assert inserted == {"theme": 0, "tenant": 0, "component": 10}


def test_seed_skips_table_with_existing_rows(seeded_db):
    seeded_db.add(
        Theme(
            name="Custom",
            primary_color="#000000",
            secondary_color="#111111",
            base_color="#FFFFFF",
            heading_font="Arial",
            body_font="Arial",
            mono_font="Courier",
        )
    )
    seeded_db.commit()

    assert seed_database(seeded_db)["theme"] == 0
    assert contar_linhas(seeded_db, Theme) == 4


def test_component_order_and_flags(seeded_db):
    componentes = seeded_db.query(Component).order_by(Component.id).all()

    assert [c.component_key for c in componentes] == [row["component_key"] for row in COMPONENTS]
    flags = {c.component_key: c.is_theme_customizable for c in componentes}
    assert flags["app_header"] is True
    assert flags["search_bar"] is False
    assert flags["recent_table"] is False
    assert flags["tabs_panel"] is False


def test_ensure_database_is_noop_for_sqlite(database):
    database.ensure_database_exists()


def test_initialize_fails_fast_when_database_is_unreachable():
    database = Database(DatabaseConfig(url="sqlite:////nonexistent-dir/theme/test.db"))

    with pytest.raises(OperationalError):
        initialize_database(database)
