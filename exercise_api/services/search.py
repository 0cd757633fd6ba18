from __future__ import annotations

import math
from typing import Any, Optional

from exercise_api.models.exercise import CatalogSnapshot
from exercise_api.models.search import SearchPage
from .fuzzy import DEFAULT_THRESHOLD, search

PAGE_SIZE = 10


def parse_page(raw: Any) -> int:
    """Coerce a raw page parameter to a 1-based page number.
    Missing, non-numeric and non-positive values all mean page 1.
    """
    if raw is None or isinstance(raw, bool):
        return 1
    if isinstance(raw, int):
        page = raw
    else:
        try:
            page = int(str(raw).strip())
        except ValueError:
            return 1
    return max(page, 1)


def paginated_search(
    snapshot: CatalogSnapshot,
    query: Optional[str],
    page: Any = 1,
    *,
    page_size: int = PAGE_SIZE,
    threshold: float = DEFAULT_THRESHOLD,
) -> SearchPage:
    matches = search(snapshot, query, threshold=threshold)
    current = parse_page(page)
    start = (current - 1) * page_size
    end = start + page_size
    return SearchPage(
        results=len(matches),
        page=current,
        total_pages=math.ceil(len(matches) / page_size),
        data=matches[start:end],
    )
