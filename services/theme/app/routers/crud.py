from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.orm import Session
from app.models.theme import Component, Tenant, Theme
from app.schemas.theme_schema import (
    ComponentOut,
    TenantRef,
    TenantSummaryOut,
    ThemeColors,
    ThemeConfigOut,
    ThemeFonts,
    ThemeOut,
)

# limites de uma coluna INT com sinal (MySQL)
_INT_MIN = -(2 ** 31)
_INT_MAX = 2 ** 31 - 1


def listar_tenants(db: Session) -> List[TenantSummaryOut]:
    # outer join: um tenant sem tema ainda aparece, com theme_name nulo
    rows = db.execute(
        select(Tenant, Theme.name)
        .outerjoin(Theme, Tenant.theme_id == Theme.id)
        .order_by(Tenant.id.asc())
    ).all()

    return [
        TenantSummaryOut(
            id=tenant.id,
            name=tenant.name,
            slug=tenant.slug,
            theme_id=tenant.theme_id,
            theme_name=theme_name,
        )
        for tenant, theme_name in rows
    ]


def listar_componentes(db: Session) -> List[ComponentOut]:
    componentes = db.scalars(select(Component).order_by(Component.id.asc())).all()
    return [
        ComponentOut(
            id=componente.id,
            key=componente.component_key,
            label=componente.label,
            is_theme_customizable=componente.is_theme_customizable,
        )
        for componente in componentes
    ]


def resolver_configuracao_tema(db: Session, tenant_id: int) -> Optional[ThemeConfigOut]:
    """Resolve tenant + tema + catálogo de componentes.

    Retorna None quando o tenant não existe ou quando o tema referenciado
    sumiu; nunca devolve uma configuração parcial.
    """
    if not _INT_MIN <= tenant_id <= _INT_MAX:
        return None

    row = db.execute(
        select(Tenant, Theme)
        .join(Theme, Tenant.theme_id == Theme.id)
        .where(Tenant.id == tenant_id)
    ).first()
    if row is None:
        return None

    tenant, theme = row
    return ThemeConfigOut(
        tenant=TenantRef(id=tenant.id, name=tenant.name, slug=tenant.slug),
        theme=ThemeOut(
            id=theme.id,
            name=theme.name,
            colors=ThemeColors(
                primary=theme.primary_color,
                secondary=theme.secondary_color,
                base=theme.base_color,
            ),
            fonts=ThemeFonts(
                heading=theme.heading_font,
                body=theme.body_font,
                mono=theme.mono_font,
            ),
        ),
        components=listar_componentes(db),
    )
