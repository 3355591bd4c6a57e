from pydantic import BaseModel, Field
from datetime import datetime
from typing import List, Literal, Optional

Difficulty = Literal['Beginner', 'Intermediate', 'Advanced']

DEFAULT_LIMIT = 10
DEFAULT_OFFSET = 0
# Máximo entero que SQLite puede enlazar como INTEGER
MAX_OFFSET = 2**63 - 1

class GuideBase(BaseModel):
    slug: str = Field(min_length=1, max_length=255, pattern=r'^[a-z0-9]+(?:-[a-z0-9]+)*$')
    title: str = Field(min_length=1, max_length=255)
    description: str = ''
    content: str = ''
    category: str = Field(min_length=1, max_length=100)
    tags: List[str] = Field(default_factory=list)

class GuideCreate(GuideBase):
    difficulty: Difficulty
    created_at: Optional[datetime] = None

class GuideOut(GuideBase):
    id: int
    # Se devuelve tal cual esté almacenada; no se re-valida contra Difficulty
    difficulty: str
    created_at: datetime
    updated_at: datetime

class TipCreate(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    content: str
    category: str
    difficulty: Difficulty


def _parse_non_negative(raw: object, default: int) -> int:
    if raw is None or isinstance(raw, bool):
        return default
    try:
        value = int(str(raw).strip())
    except ValueError:
        return default
    return value if value >= 0 else default


def _blank_to_none(raw: Optional[str]) -> Optional[str]:
    if raw is None:
        return None
    stripped = raw.strip()
    return stripped or None


class GuideQuery(BaseModel):
    """Filtro de listado, construido por petición y descartado tras responder."""

    category: Optional[str] = None
    difficulty: Optional[str] = None
    search: Optional[str] = None
    limit: int = Field(default=DEFAULT_LIMIT, ge=0)
    offset: int = Field(default=DEFAULT_OFFSET, ge=0, le=MAX_OFFSET)

    @classmethod
    def from_params(
        cls,
        category: Optional[str] = None,
        difficulty: Optional[str] = None,
        search: Optional[str] = None,
        limit: object = None,
        offset: object = None,
        default_limit: int = DEFAULT_LIMIT,
        max_limit: Optional[int] = None,
    ) -> "GuideQuery":
        """Convierte parámetros crudos de la query string en un filtro tipado.

        limit/offset no numéricos o negativos caen a sus valores por defecto en
        lugar de producir un error; limit se recorta a max_limit si se indica y
        offset a MAX_OFFSET.
        """
        parsed_limit = _parse_non_negative(limit, default_limit)
        if max_limit is not None:
            parsed_limit = min(parsed_limit, max_limit)
        return cls(
            category=_blank_to_none(category),
            difficulty=_blank_to_none(difficulty),
            search=_blank_to_none(search),
            limit=parsed_limit,
            offset=min(_parse_non_negative(offset, DEFAULT_OFFSET), MAX_OFFSET),
        )

class Pagination(BaseModel):
    total: int
    limit: int
    offset: int
    has_more: bool = Field(serialization_alias='hasMore')

    @classmethod
    def for_window(cls, total: int, limit: int, offset: int) -> "Pagination":
        return cls(total=total, limit=limit, offset=offset, has_more=offset + limit < total)

class GuidePage(BaseModel):
    guides: List[GuideOut]
    pagination: Pagination
