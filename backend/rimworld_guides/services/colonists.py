"""Generador aleatorio de colonos para contenido decorativo de la UI."""
from typing import List, Optional
import random
import uuid
from ..core.errors import ValidationError
from ..models.colonist import Colonist, ColonistSkill, ColonyEvent, ColonyReference

COLONIST_NAMES = [
    'Maya', 'Lucas', 'Zara', 'Rex', 'Nova', 'Kai', 'Luna', 'Phoenix',
    'Sage', 'Raven', 'Echo', 'Storm', 'Vale', 'Quinn', 'Zoe', 'Ash',
]

SKILLS = [
    'Mining', 'Growing', 'Construction', 'Animals', 'Cooking',
    'Hunting', 'Medicine', 'Artistic', 'Crafting', 'Intellectual',
    'Social', 'Melee', 'Shooting',
]

TRAITS = [
    'Hard Worker', 'Lazy', 'Bloodlust', 'Pacifist', 'Kind', 'Abrasive',
    'Psychopath', 'Cannibal', 'Night Owl', 'Early Bird', 'Fast Learner',
    'Slow Learner', 'Iron-Willed', 'Neurotic', 'Optimist', 'Pessimist',
]

MOODS = ['Happy', 'Content', 'Stressed', 'Breaking']

INCIDENTS = [
    'Raid incoming!', 'Solar flare detected', 'Trader caravan arrived',
    'Wild animals manhunting', 'Toxic fallout', 'Volcanic winter',
    'Ancient danger awakened', 'Mechanoid cluster landed',
    'Prisoner escape attempt', 'Blight destroyed crops',
]

BASE_NAMES = [
    'New Haven', 'Sanctuary', 'Haven Ridge', 'Last Stand', 'Hope Valley',
    'Steel Fortress', 'Greenlands', "Survivor's Rest", 'Phoenix Base',
    'Unity Station', 'Freedom Point', 'Safe Harbor',
]

MIN_AGE, MAX_AGE = 18, 77
MIN_HEALTH, MAX_HEALTH = 60, 99


class ColonistGenerator:
    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()

    def generate_colonist(self, name: Optional[str] = None) -> Colonist:
        rng = self.rng
        # 3-5 habilidades y 1-3 rasgos, sin repetir dentro del mismo colono
        skills = [
            ColonistSkill(name=skill, level=rng.randint(1, 10))
            for skill in rng.sample(SKILLS, rng.randint(3, 5))
        ]
        return Colonist(
            id=str(uuid.UUID(int=rng.getrandbits(128), version=4)),
            name=name or rng.choice(COLONIST_NAMES),
            age=rng.randint(MIN_AGE, MAX_AGE),
            health=rng.randint(MIN_HEALTH, MAX_HEALTH),
            mood=rng.choice(MOODS),
            skills=skills,
            traits=rng.sample(TRAITS, rng.randint(1, 3)),
        )

    def generate_colonists(self, count: int) -> List[Colonist]:
        """Genera count colonos con nombres distintos entre sí.

        Los nombres se muestrean sin reemplazo, así que count no puede superar
        la cantidad de nombres disponibles.
        """
        if count < 0 or count > len(COLONIST_NAMES):
            raise ValidationError(f"count must be between 0 and {len(COLONIST_NAMES)}")
        names = self.rng.sample(COLONIST_NAMES, count)
        return [self.generate_colonist(name=n) for n in names]

    def random_incident(self) -> str:
        return self.rng.choice(INCIDENTS)

    def random_base_name(self) -> str:
        return self.rng.choice(BASE_NAMES)

    def random_event(self) -> ColonyEvent:
        return ColonyEvent(incident=self.random_incident(), base_name=self.random_base_name())

    @staticmethod
    def reference() -> ColonyReference:
        return ColonyReference(
            colonist_names=list(COLONIST_NAMES),
            skills=list(SKILLS),
            traits=list(TRAITS),
            moods=list(MOODS),
            incidents=list(INCIDENTS),
            base_names=list(BASE_NAMES),
        )

_generator: Optional[ColonistGenerator] = None

def get_colonist_generator() -> ColonistGenerator:
    global _generator
    if _generator is None:
        _generator = ColonistGenerator()
    return _generator
