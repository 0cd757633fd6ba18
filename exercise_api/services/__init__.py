from .catalog import CatalogStore, CatalogFetchError, UpstreamUnavailable, fetch_catalog
from .fuzzy import search, score_name
from .search import paginated_search, parse_page
from .lookup import ExerciseNotFound, get_by_id, sample, recommend

__all__ = [
    "CatalogStore",
    "CatalogFetchError",
    "UpstreamUnavailable",
    "fetch_catalog",
    "search",
    "score_name",
    "paginated_search",
    "parse_page",
    "ExerciseNotFound",
    "get_by_id",
    "sample",
    "recommend",
]
