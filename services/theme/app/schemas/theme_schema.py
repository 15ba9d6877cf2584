from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class TenantSummaryOut(BaseModel):
    id: int = Field(..., examples=[1])
    name: str = Field(..., examples=["Acme Retail"])
    slug: str = Field(..., examples=["acme-retail"])
    theme_id: int = Field(..., examples=[1])
    theme_name: Optional[str] = Field(default=None, examples=["Aurora Retail"])


class TenantListOut(BaseModel):
    tenants: List[TenantSummaryOut]


class TenantRef(BaseModel):
    id: int
    name: str
    slug: str


class ThemeColors(BaseModel):
    primary: str = Field(..., examples=["#2D6A4F"])
    secondary: str = Field(..., examples=["#FF9F1C"])
    base: str = Field(..., examples=["#F1FAEE"])


class ThemeFonts(BaseModel):
    heading: str = Field(..., examples=["Poppins"])
    body: str = Field(..., examples=["Inter"])
    mono: str = Field(..., examples=["Fira Code"])


class ThemeOut(BaseModel):
    id: int
    name: str = Field(..., examples=["Aurora Retail"])
    colors: ThemeColors
    fonts: ThemeFonts


class ComponentOut(BaseModel):
    id: int
    key: str = Field(..., examples=["app_header"])
    label: str = Field(..., examples=["Application Header"])
    is_theme_customizable: bool = Field(..., alias="isThemeCustomizable", examples=[True])

    model_config = ConfigDict(populate_by_name=True)


class ThemeConfigOut(BaseModel):
    tenant: TenantRef
    theme: ThemeOut
    components: List[ComponentOut]


class ErrorOut(BaseModel):
    error: str = Field(..., examples=["No tenant found for id=9999"])
    details: Optional[str] = None
