"""Consulta de guías: listado filtrado/paginado y búsqueda por slug."""
from typing import Any, Dict, List, Optional
import json
import logging
import pydantic
from ..core.errors import NotFound, StorageError, ValidationError
from ..db.database import GuideStore
from ..models.guide import GuideOut, GuidePage, GuideQuery, Pagination

logger = logging.getLogger("guides")


def decode_tags(raw: Any) -> List[str]:
    """Decodifica la columna tags (array JSON serializado) a lista ordenada.

    Vacío o ausente -> []. Un valor que no sea un array JSON de strings es un
    problema de integridad de datos y se reporta como StorageError.
    """
    if raw is None or raw == '':
        return []
    if isinstance(raw, list):
        decoded: Any = raw
    else:
        try:
            decoded = json.loads(raw)
        except (TypeError, ValueError) as e:
            raise StorageError("Stored tags are not valid JSON", e) from e
    if not isinstance(decoded, list) or not all(isinstance(t, str) for t in decoded):
        raise StorageError("Stored tags must be a JSON array of strings")
    return decoded


def _to_guide(row: Dict[str, Any]) -> GuideOut:
    try:
        tags = decode_tags(row.get('tags'))
    except StorageError:
        logger.error("Tags corruptos en la guía id=%s slug=%s", row.get('id'), row.get('slug'))
        raise
    try:
        return GuideOut(**{**row, 'tags': tags})
    except pydantic.ValidationError as e:
        logger.error("Registro de guía inválido id=%s slug=%s: %s", row.get('id'), row.get('slug'), e)
        raise StorageError("Stored guide does not match the guide schema", e) from e


class GuideQueryService:
    def __init__(self, store: GuideStore) -> None:
        self.store = store

    async def list_guides(self, query: Optional[GuideQuery] = None) -> GuidePage:
        query = query or GuideQuery()
        rows, total = await self.store.fetch_guides(query)
        guides = [_to_guide(r) for r in rows]
        return GuidePage(
            guides=guides,
            pagination=Pagination.for_window(total=total, limit=query.limit, offset=query.offset),
        )

    async def get_guide_by_slug(self, slug: Optional[str]) -> GuideOut:
        if slug is None or not slug.strip():
            raise ValidationError("Guide slug is required")
        row = await self.store.fetch_guide_by_slug(slug.strip())
        if not row:
            raise NotFound("Guide not found")
        return _to_guide(row)
