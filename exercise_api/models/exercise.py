from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class Exercise(BaseModel):
    id: str = Field(..., description="Catalog ID, e.g., Reverse_Grip_Triceps_Pushdown")
    name: str
    force: Optional[str] = None
    level: Optional[str] = None
    mechanic: Optional[str] = None
    equipment: Optional[str] = None
    primary_muscles: Tuple[str, ...] = ()
    secondary_muscles: Tuple[str, ...] = ()
    instructions: Tuple[str, ...] = ()
    category: Optional[str] = None
    images: Tuple[str, ...] = ()

    model_config = {
        "frozen": True,
        "extra": "allow",
        "alias_generator": to_camel,
        "populate_by_name": True,
        "json_schema_extra": {
            "examples": [
                {
                    "id": "Pushups",
                    "name": "Pushups",
                    "force": "push",
                    "level": "beginner",
                    "mechanic": "compound",
                    "equipment": "body only",
                    "primaryMuscles": ["chest"],
                    "secondaryMuscles": ["shoulders", "triceps"],
                    "instructions": ["Lie on the floor face down..."],
                    "category": "strength",
                    "images": ["Pushups/0.jpg", "Pushups/1.jpg"],
                }
            ]
        },
    }

    @property
    def primary_muscle(self) -> Optional[str]:
        return self.primary_muscles[0] if self.primary_muscles else None


@dataclass(frozen=True)
class CatalogSnapshot:
    """One immutable, timestamped copy of the catalog.

    ``fetched_at`` is a reading of the store's clock, not wall time.
    """

    exercises: Tuple[Exercise, ...]
    fetched_at: float
    _by_id: Dict[str, Exercise] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_by_id", {ex.id: ex for ex in self.exercises})

    def __len__(self) -> int:
        return len(self.exercises)

    def get(self, exercise_id: str) -> Optional[Exercise]:
        return self._by_id.get(exercise_id)
