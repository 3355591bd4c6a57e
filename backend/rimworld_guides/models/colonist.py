from pydantic import BaseModel, Field
from typing import List, Literal

Mood = Literal['Happy', 'Content', 'Stressed', 'Breaking']

class ColonistSkill(BaseModel):
    name: str
    level: int = Field(ge=1, le=10)

class Colonist(BaseModel):
    id: str
    name: str
    age: int = Field(ge=18, le=77)
    health: int = Field(ge=60, le=99)
    mood: Mood
    skills: List[ColonistSkill]
    traits: List[str]

class ColonyEvent(BaseModel):
    incident: str
    base_name: str

class ColonyReference(BaseModel):
    colonist_names: List[str]
    skills: List[str]
    traits: List[str]
    moods: List[str]
    incidents: List[str]
    base_names: List[str]
