"""Criação do schema e carga inicial (seed) do serviço de temas.

``initialize_database`` roda a cada start do processo: garante o banco e as
tabelas e, para cada tabela vazia, insere as linhas fixas abaixo. Tabelas
que já têm dados não são tocadas.
"""

from typing import Dict, Iterable, Type

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.core.database import Base, Database
from app.models.theme import Component, Tenant, Theme

THEMES = (
    {
        "name": "Aurora Retail",
        "primary_color": "#2D6A4F",
        "secondary_color": "#FF9F1C",
        "base_color": "#F1FAEE",
        "heading_font": "Poppins",
        "body_font": "Inter",
        "mono_font": "Fira Code",
    },
    {
        "name": "Nebula Health",
        "primary_color": "#005F73",
        "secondary_color": "#EE6C4D",
        "base_color": "#F8F9FA",
        "heading_font": "Montserrat",
        "body_font": "Lato",
        "mono_font": "Source Code Pro",
    },
    {
        "name": "Summit Finance",
        "primary_color": "#3A0CA3",
        "secondary_color": "#F72585",
        "base_color": "#F5F3FF",
        "heading_font": "Roboto Slab",
        "body_font": "Nunito Sans",
        "mono_font": "JetBrains Mono",
    },
)

TENANTS = (
    {"name": "Acme Retail", "slug": "acme-retail", "theme_id": 1},
    {"name": "Bluebird Clinics", "slug": "bluebird-clinics", "theme_id": 2},
    {"name": "Summit Capital", "slug": "summit-capital", "theme_id": 3},
)

COMPONENTS = (
    {"component_key": "app_header", "label": "Application Header", "is_theme_customizable": True},
    {"component_key": "kpi_cards", "label": "KPI Cards", "is_theme_customizable": True},
    {"component_key": "quick_actions", "label": "Quick Action Buttons", "is_theme_customizable": True},
    {"component_key": "search_bar", "label": "Search and Filters", "is_theme_customizable": False},
    {"component_key": "alerts_panel", "label": "Alerts Panel", "is_theme_customizable": True},
    {"component_key": "recent_table", "label": "Recent Activity Table", "is_theme_customizable": False},
    {"component_key": "status_chips", "label": "Status Chips", "is_theme_customizable": True},
    {"component_key": "tabs_panel", "label": "Tabbed Insights", "is_theme_customizable": False},
    {"component_key": "announcement_list", "label": "Announcements List", "is_theme_customizable": True},
    {"component_key": "footer", "label": "Footer Section", "is_theme_customizable": True},
)

# ordem importa: tenant referencia theme
SEED_PLAN = (
    (Theme, THEMES),
    (Tenant, TENANTS),
    (Component, COMPONENTS),
)


def contar_linhas(db: Session, model: Type[Base]) -> int:
    return db.scalar(select(func.count()).select_from(model))


def _seed_if_empty(db: Session, model: Type[Base], rows: Iterable[dict]) -> int:
    if contar_linhas(db, model) > 0:
        return 0
    objetos = [model(**row) for row in rows]
    db.add_all(objetos)
    db.flush()
    return len(objetos)


def seed_database(db: Session) -> Dict[str, int]:
    """Insere as linhas fixas em cada tabela vazia e retorna quantas entraram por tabela."""
    inserted = {}
    for model, rows in SEED_PLAN:
        inserted[model.__tablename__] = _seed_if_empty(db, model, rows)
    db.commit()
    return inserted


def initialize_database(database: Database) -> Dict[str, int]:
    database.ensure_database_exists()
    Base.metadata.create_all(bind=database.engine)

    with database.session() as db:
        return seed_database(db)
