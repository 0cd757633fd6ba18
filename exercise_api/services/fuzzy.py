from __future__ import annotations

from typing import List, Optional, Sequence, Tuple, Union

from exercise_api.models.exercise import CatalogSnapshot, Exercise
from exercise_api.models.search import MatchResult

DEFAULT_THRESHOLD = 0.6
# How many characters into the name a match may start before the offset
# alone costs a full point.
LOCATION_DISTANCE = 100


def normalize(text: str) -> str:
    return text.casefold()


def _span_from(name: str, query: str, start: int) -> Optional[int]:
    """Leftmost alignment of query in name beginning at start.
    Returns the index one past the last matched character, or None.
    """
    pos = start
    for ch in query:
        pos = name.find(ch, pos)
        if pos < 0:
            return None
        pos += 1
    return pos


def score_name(name: str, query: str) -> Optional[float]:
    """Best subsequence score of an already-normalized query against a name.

    Every query character must appear in the name in order. For a fixed start
    the greedy alignment has the shortest span, so trying each start position
    that holds the first query character finds the optimum.
    score = skipped characters / len(query) + start offset / LOCATION_DISTANCE
    """
    if not query:
        return None
    name = normalize(name)
    first = query[0]
    best: Optional[float] = None
    start = name.find(first)
    while start >= 0:
        end = _span_from(name, query, start)
        if end is None:
            # Later starts cannot succeed if this one ran out of characters
            break
        gaps = (end - start) - len(query)
        score = gaps / len(query) + start / LOCATION_DISTANCE
        if best is None or score < best:
            best = score
        if best == 0:
            break
        start = name.find(first, start + 1)
    return best


def search(
    catalog: Union[CatalogSnapshot, Sequence[Exercise]],
    query: Optional[str],
    *,
    threshold: float = DEFAULT_THRESHOLD,
) -> List[MatchResult]:
    """Rank catalog entries by how well their name matches query.

    Returns every record scoring at or below threshold, best first; equal
    scores keep catalog order.
    """
    # Blank queries match nothing; otherwise spaces are matched like any other character
    if not isinstance(query, str) or not query.strip():
        return []
    q = normalize(query)

    exercises = catalog.exercises if isinstance(catalog, CatalogSnapshot) else catalog
    scored: List[Tuple[float, int, Exercise]] = []
    for i, ex in enumerate(exercises):
        s = score_name(ex.name, q)
        if s is None or s > threshold:
            continue
        scored.append((s, i, ex))

    scored.sort(key=lambda t: (t[0], t[1]))
    return [MatchResult(item=ex, ref_index=i, score=round(s, 6)) for s, i, ex in scored]
