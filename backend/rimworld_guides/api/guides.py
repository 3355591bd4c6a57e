from fastapi import APIRouter, Depends, HTTPException, Query
from typing import Optional
import logging
from ..core.config import get_settings
from ..core.errors import NotFound, ValidationError
from ..db.database import get_db, GuideStore
from ..models.guide import GuideOut, GuidePage, GuideQuery
from ..services.guides import GuideQueryService

router = APIRouter(prefix="/guides", tags=["guides"])
logger = logging.getLogger("guides")

async def get_guide_service(db: GuideStore = Depends(get_db)) -> GuideQueryService:
    return GuideQueryService(db)

# limit/offset se reciben como texto: valores no numéricos caen al default en vez de dar 422
@router.get('', response_model=GuidePage, summary="List guides with filters and pagination")
async def list_guides(
    category: Optional[str] = Query(None),
    difficulty: Optional[str] = Query(None),
    search: Optional[str] = Query(None, description="Substring of title, description or content (case-insensitive)"),
    limit: Optional[str] = Query(None, description="Page size, default 10"),
    offset: Optional[str] = Query(None, description="Items to skip, default 0"),
    service: GuideQueryService = Depends(get_guide_service),
):
    settings = get_settings()
    query = GuideQuery.from_params(
        category=category,
        difficulty=difficulty,
        search=search,
        limit=limit,
        offset=offset,
        default_limit=settings.DEFAULT_PAGE_LIMIT,
        max_limit=settings.MAX_PAGE_LIMIT,
    )
    try:
        return await service.list_guides(query)
    except Exception:
        logger.exception("Error listando guías (filtro=%s)", query.model_dump())
        raise HTTPException(status_code=500, detail="Failed to fetch guides")

@router.get('/{slug}', response_model=GuideOut, summary="Get a guide by slug")
async def get_guide(slug: str, service: GuideQueryService = Depends(get_guide_service)):
    try:
        return await service.get_guide_by_slug(slug)
    except (ValidationError, NotFound) as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception:
        logger.exception("Error obteniendo guía slug=%s", slug)
        raise HTTPException(status_code=500, detail="Failed to fetch guide")
