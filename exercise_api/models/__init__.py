from .exercise import Exercise, CatalogSnapshot
from .search import MatchResult, SearchPage

__all__ = [
    "Exercise",
    "CatalogSnapshot",
    "MatchResult",
    "SearchPage",
]
