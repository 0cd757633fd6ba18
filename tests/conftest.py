from __future__ import annotations

from typing import Any, Dict, List

import pytest
from fastapi.testclient import TestClient

from exercise_api.main import app, get_store
from exercise_api.models import CatalogSnapshot, Exercise
from exercise_api.services import CatalogFetchError, CatalogStore


def make_exercise(exercise_id: str, name: str, equipment: str | None = None,
                  primary_muscles: List[str] | None = None, **extra: Any) -> Exercise:
    data: Dict[str, Any] = {
        "id": exercise_id,
        "name": name,
        "equipment": equipment,
        "primaryMuscles": primary_muscles or [],
    }
    data.update(extra)
    return Exercise.model_validate(data)


SAMPLE = [
    make_exercise("Pushup", "Push Up", None, ["Chest"]),
    make_exercise("Barbell_Bench_Press", "Barbell Bench Press", "barbell", ["chest"]),
    make_exercise("Barbell_Squat", "Barbell Squat", "barbell", ["quadriceps"]),
    make_exercise("Dumbbell_Curl", "Dumbbell Curl", "dumbbell", ["biceps"]),
    make_exercise("Incline_Push_Up", "Incline Push Up", "body only", ["chest"]),
    make_exercise("Kettlebell_Swing", "Kettlebell Swing", "kettlebells", ["hamstrings"]),
    make_exercise("Kettlebell_Press", "Kettlebell Press", "kettlebells", ["shoulders"]),
    make_exercise("Reverse_Grip_Triceps_Pushdown", "Reverse Grip Triceps Pushdown", "cable", ["triceps"]),
]


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeFetcher:
    """Serves a fixed payload; flip `fail` to simulate an upstream outage."""

    def __init__(self, exercises: List[Exercise]) -> None:
        self.exercises = list(exercises)
        self.fail = False
        self.calls = 0

    def __call__(self, url: str, timeout: float) -> List[Exercise]:
        self.calls += 1
        if self.fail:
            raise CatalogFetchError("upstream is down")
        return list(self.exercises)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fetcher() -> FakeFetcher:
    return FakeFetcher(SAMPLE)


@pytest.fixture
def store(fetcher: FakeFetcher, clock: FakeClock) -> CatalogStore:
    return CatalogStore("https://example.test/exercises.json", ttl_seconds=60, fetcher=fetcher, clock=clock)


@pytest.fixture
def snapshot() -> CatalogSnapshot:
    return CatalogSnapshot(exercises=tuple(SAMPLE), fetched_at=0.0)


@pytest.fixture
def client(store: CatalogStore):
    app.dependency_overrides[get_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
