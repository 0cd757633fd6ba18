from __future__ import annotations

import logging
from functools import lru_cache
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from exercise_api.config import Settings, get_settings
from exercise_api.models import Exercise, SearchPage
from exercise_api.services import (
    CatalogStore,
    ExerciseNotFound,
    UpstreamUnavailable,
    get_by_id,
    paginated_search,
    recommend,
    sample,
)

log = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_store() -> CatalogStore:
    settings = get_settings()
    return CatalogStore(
        settings.DATASET_URL,
        ttl_seconds=settings.CATALOG_TTL_SECONDS,
        timeout_seconds=settings.FETCH_TIMEOUT_SECONDS,
    )


app = FastAPI(title="Exercise API")


@app.exception_handler(UpstreamUnavailable)
async def _upstream_unavailable(request: Request, exc: UpstreamUnavailable) -> JSONResponse:
    log.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


@app.get("/", response_class=PlainTextResponse)
def root() -> str:
    return "All working fine!"


@app.get("/exercise/{exercise_id}", response_model=Exercise)
def get_exercise(exercise_id: str, store: CatalogStore = Depends(get_store)) -> Exercise:
    snapshot = store.get_catalog()
    try:
        return get_by_id(snapshot, exercise_id)
    except ExerciseNotFound:
        raise HTTPException(status_code=404, detail="Exercise not found")


@app.get("/search", response_model=SearchPage)
def search_exercises(
    name: Optional[str] = None,
    page: Optional[str] = None,
    store: CatalogStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> SearchPage:
    # page stays a raw string so malformed values fall back to 1 instead of a 422
    return paginated_search(
        store.get_catalog(),
        name,
        page,
        page_size=settings.PAGE_SIZE,
        threshold=settings.SEARCH_THRESHOLD,
    )


@app.get("/random", response_model=List[Exercise])
def random_exercises(
    store: CatalogStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> List[Exercise]:
    return sample(store.get_catalog(), settings.RANDOM_SAMPLE_SIZE)


@app.get("/recommendations", response_model=List[Exercise])
def recommendations(
    equipment: Optional[str] = None,
    primaryMuscle: Optional[str] = None,
    store: CatalogStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> List[Exercise]:
    return recommend(store.get_catalog(), equipment, primaryMuscle, limit=settings.RECOMMENDATION_LIMIT)
