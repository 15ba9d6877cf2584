# app/models/theme.py
from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.sql import func, expression
from app.core.database import Base


class Theme(Base):
    __tablename__ = "theme"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(80), nullable=False)
    primary_color = Column(String(20), nullable=False)
    secondary_color = Column(String(20), nullable=False)
    base_color = Column(String(20), nullable=False)
    heading_font = Column(String(80), nullable=False)
    body_font = Column(String(80), nullable=False)
    mono_font = Column(String(80), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())


class Tenant(Base):
    __tablename__ = "tenant"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), unique=True, nullable=False)
    # reservado para rotas por slug; nenhum endpoint usa ainda
    slug = Column(String(80), unique=True, nullable=False)
    theme_id = Column(
        Integer,
        ForeignKey("theme.id", ondelete="RESTRICT", onupdate="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())


class Component(Base):
    __tablename__ = "component"

    id = Column(Integer, primary_key=True, autoincrement=True)
    component_key = Column(String(120), unique=True, nullable=False)
    label = Column(String(120), nullable=False)
    is_theme_customizable = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
