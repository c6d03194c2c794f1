from typing import Optional
from pydantic import Field
from schemas.common import CamelModel

COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"


class CategoryCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    icon: str = Field("", max_length=50)
    color: str = Field("#000000", pattern=COLOR_PATTERN)


class CategoryUpdate(CamelModel):
    name: Optional[str] = Field(None, max_length=100)
    icon: Optional[str] = Field(None, max_length=50)
    color: Optional[str] = Field(None, pattern=COLOR_PATTERN)


class CategoryOut(CamelModel):
    id: int
    name: str
    icon: str
    color: str
    is_system: bool
