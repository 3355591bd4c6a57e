from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
import logging
from ..core.security import require_admin
from ..db.database import get_db, GuideStore

router = APIRouter(prefix="/db", tags=["admin"])
logger = logging.getLogger("db")

class InitResult(BaseModel):
    success: bool
    message: str
    seeded: bool
    guides: int
    tips: int

@router.post('/init', response_model=InitResult, dependencies=[Depends(require_admin)], summary="Initialize and seed the store (idempotent)")
async def init_database(db: GuideStore = Depends(get_db)):
    try:
        seeded = await db.initialize()
        guides = await db.count_guides()
        tips = await db.count_tips()
    except Exception:
        logger.exception("Fallo inicializando el almacén")
        raise HTTPException(status_code=500, detail="Failed to initialize database")
    message = "Database initialized with sample data" if seeded else "Database already initialized"
    return InitResult(success=True, message=message, seeded=seeded, guides=guides, tips=tips)
