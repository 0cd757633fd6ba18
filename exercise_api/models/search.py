from __future__ import annotations

from typing import List
from pydantic import BaseModel, Field

from .exercise import Exercise


class MatchResult(BaseModel):
    item: Exercise
    ref_index: int = Field(..., ge=0, alias="refIndex")
    score: float = Field(..., ge=0)

    model_config = {"frozen": True, "populate_by_name": True}


class SearchPage(BaseModel):
    results: int = Field(..., ge=0)
    page: int = Field(..., ge=1)
    total_pages: int = Field(..., ge=0)
    data: List[MatchResult] = Field(default_factory=list)
