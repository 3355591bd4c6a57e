"""Datos de ejemplo para poblar un almacén vacío."""
from datetime import datetime, timezone
from typing import List
from ..models.guide import GuideCreate, TipCreate

def _ts(day: int, hour: int = 12) -> datetime:
    return datetime(2024, 1, day, hour, 0, 0, tzinfo=timezone.utc)

SEED_GUIDES: List[GuideCreate] = [
    GuideCreate(
        slug='getting-started',
        title='Getting Started with RimWorld',
        description='Your first days on the rim: landing site, first shelter and priorities.',
        content=(
            '# Getting Started\n\n'
            'Pick a temperate landing site, draft your colonists and build a small '
            'wooden shelter before nightfall. Set up a stockpile zone for food and '
            'medicine, then queue a research project.'
        ),
        difficulty='Beginner',
        category='Basics',
        tags=['beginner', 'setup', 'first-day'],
        created_at=_ts(1),
    ),
    GuideCreate(
        slug='base-defense',
        title='Base Defense Fundamentals',
        description='Killboxes, sandbags and turret placement for surviving raids.',
        content=(
            '# Base Defense\n\n'
            'Funnel raiders through a single entrance lined with sandbags. Mini-turrets '
            'draw fire but explode when destroyed, so keep them away from walls you care '
            'about. Assign your best shooters to cover positions.'
        ),
        difficulty='Intermediate',
        category='Combat',
        tags=['defense', 'raids', 'turrets'],
        created_at=_ts(2),
    ),
    GuideCreate(
        slug='food-production',
        title='Food Production and Storage',
        description='Growing zones, hydroponics and keeping meals from spoiling.',
        content=(
            '# Food Production\n\n'
            'Rice grows fast, corn keeps long. Build a freezer early: a walled room with '
            'a cooler venting outside. Simple meals are fine, fine meals keep moods up.'
        ),
        difficulty='Beginner',
        category='Farming',
        tags=['food', 'farming', 'freezer'],
        created_at=_ts(3),
    ),
    GuideCreate(
        slug='mechanoid-clusters',
        title='Dealing with Mechanoid Clusters',
        description='How to scout, bait and dismantle a mechanoid cluster safely.',
        content=(
            '# Mechanoid Clusters\n\n'
            'Never wake a cluster before your defense is ready. Destroy the power '
            'generators first, use EMP grenades against centipedes and retreat to cover '
            'when the mortars start firing.'
        ),
        difficulty='Advanced',
        category='Combat',
        tags=['mechanoids', 'emp', 'late-game'],
        created_at=_ts(4),
    ),
    GuideCreate(
        slug='medicine-basics',
        title='Medicine and Surgery Basics',
        description='Treating wounds, infections and planning your first surgeries.',
        content=(
            '# Medicine\n\n'
            'Keep a hospital room clean and well lit. Herbal medicine works for minor '
            'wounds; save industrial medicine for infections and surgery.'
        ),
        difficulty='Intermediate',
        category='Medicine',
        tags=['medicine', 'surgery', 'health'],
        created_at=_ts(5),
    ),
    GuideCreate(
        slug='power-grid',
        title='Building a Reliable Power Grid',
        description='Solar, wind, geothermal and batteries that survive solar flares.',
        content=(
            '# Power Grid\n\n'
            'Mix generator types to smooth output. Batteries hold charge through the '
            'night, but put a switch on them so a zzztt event cannot drain the whole grid.'
        ),
        difficulty='Advanced',
        category='Infrastructure',
        tags=['power', 'batteries', 'solar-flare'],
        created_at=_ts(6),
    ),
]

SEED_TIPS: List[TipCreate] = [
    TipCreate(
        title='Cook in a clean kitchen',
        content='A sterile tile floor lowers the chance of food poisoning.',
        category='Basics',
        difficulty='Beginner',
    ),
    TipCreate(
        title='Prisoners make colonists',
        content='Capture downed raiders and recruit them with your best social colonist.',
        category='Colony Management',
        difficulty='Intermediate',
    ),
    TipCreate(
        title='Double walls for fire safety',
        content='Stone walls around the freezer stop a fire from spreading to food stores.',
        category='Infrastructure',
        difficulty='Intermediate',
    ),
    TipCreate(
        title='Shield belts and melee',
        content='Pair shield belts with melee fighters to close the distance on gunners.',
        category='Combat',
        difficulty='Advanced',
    ),
]
