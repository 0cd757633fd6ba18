from __future__ import annotations

import random
from typing import List, Optional

from exercise_api.models.exercise import CatalogSnapshot, Exercise


class ExerciseNotFound(LookupError):
    pass


def get_by_id(snapshot: CatalogSnapshot, exercise_id: str) -> Exercise:
    ex = snapshot.get(exercise_id)
    if ex is None:
        raise ExerciseNotFound(exercise_id)
    return ex


def sample(snapshot: CatalogSnapshot, n: int = 5, rng: Optional[random.Random] = None) -> List[Exercise]:
    """Pick n exercises uniformly at random, with replacement (duplicates allowed)."""
    if n <= 0 or not snapshot.exercises:
        return []
    chooser = rng or random
    return chooser.choices(snapshot.exercises, k=n)


def recommend(
    snapshot: CatalogSnapshot,
    equipment: Optional[str],
    primary_muscle: Optional[str],
    limit: int = 5,
) -> List[Exercise]:
    """Exercises using exactly this equipment whose first primary muscle is primary_muscle."""
    if equipment is None or primary_muscle is None:
        return []
    out: List[Exercise] = []
    for ex in snapshot.exercises:
        if len(out) >= limit:
            break
        if ex.equipment == equipment and ex.primary_muscle == primary_muscle:
            out.append(ex)
    return out
