from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List
from ..core.errors import ValidationError
from ..models.colonist import Colonist, ColonyEvent, ColonyReference
from ..services.colonists import COLONIST_NAMES, ColonistGenerator, get_colonist_generator

router = APIRouter(prefix="/colonists", tags=["colonists"])

@router.get('', response_model=List[Colonist], summary="Random colonists with distinct names")
async def random_colonists(
    count: int = Query(1, description=f"Number of colonists, 1 to {len(COLONIST_NAMES)}"),
    generator: ColonistGenerator = Depends(get_colonist_generator),
):
    try:
        # El generador admite 0; el endpoint siempre devuelve al menos uno
        if count < 1:
            raise ValidationError(f"count must be between 1 and {len(COLONIST_NAMES)}")
        return generator.generate_colonists(count)
    except ValidationError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

@router.get('/incident', response_model=ColonyEvent, summary="Random incident and base name")
async def random_incident(generator: ColonistGenerator = Depends(get_colonist_generator)):
    return generator.random_event()

@router.get('/reference', response_model=ColonyReference, summary="Static lists used by the generator")
async def reference_data():
    return ColonistGenerator.reference()
