from __future__ import annotations

import logging
import threading
import time
from typing import Any, Callable, List, Optional, Sequence, Tuple

import requests
from pydantic import ValidationError

from exercise_api.models.exercise import CatalogSnapshot, Exercise

logger = logging.getLogger(__name__)

Fetcher = Callable[[str, float], Sequence[Exercise]]


class CatalogFetchError(RuntimeError):
    pass


class UpstreamUnavailable(RuntimeError):
    pass


def _decode_catalog(raw: Any) -> Tuple[Exercise, ...]:
    if not isinstance(raw, list):
        raise CatalogFetchError(f"Expected a JSON array of exercises, got {type(raw).__name__}.")
    out: List[Exercise] = []
    seen: set[str] = set()
    for i, item in enumerate(raw):
        try:
            ex = Exercise.model_validate(item)
        except ValidationError as e:
            raise CatalogFetchError(f"Invalid exercise record at index {i}: {e}") from e
        if ex.id in seen:
            raise CatalogFetchError(f"Duplicate exercise id '{ex.id}' at index {i}.")
        seen.add(ex.id)
        out.append(ex)
    return tuple(out)


def fetch_catalog(url: str, *, timeout: float, session: Optional[requests.Session] = None) -> Tuple[Exercise, ...]:
    """Download and decode the remote dataset.

    Anything short of a 200 response carrying a JSON array of valid records
    raises CatalogFetchError.
    """
    http = session or requests
    try:
        resp = http.get(url, timeout=timeout)
    except requests.RequestException as e:
        raise CatalogFetchError(f"Request to {url} failed: {e}") from e
    if resp.status_code != 200:
        raise CatalogFetchError(f"Unexpected status {resp.status_code} from {url}.")
    try:
        raw = resp.json()
    except ValueError as e:
        raise CatalogFetchError(f"Malformed JSON from {url}: {e}") from e
    return _decode_catalog(raw)


class CatalogStore:
    """Freshness-bounded in-memory copy of the remote catalog.

    Readers get the current snapshot without locking. A stale or missing
    snapshot triggers a synchronous refresh; once one fetch has succeeded a
    failing refresh serves the previous snapshot instead of raising. Only one
    refresh runs at a time, and while it runs readers holding a stale snapshot
    are served that snapshot instead of waiting.
    """

    def __init__(
        self,
        url: str,
        *,
        ttl_seconds: float,
        timeout_seconds: float = 10.0,
        fetcher: Optional[Fetcher] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.url = url
        self.ttl_seconds = ttl_seconds
        self.timeout_seconds = timeout_seconds
        self._fetcher: Fetcher = fetcher or (lambda u, t: fetch_catalog(u, timeout=t))
        self._clock = clock
        self._snapshot: Optional[CatalogSnapshot] = None
        self._lock = threading.Lock()

    @property
    def snapshot(self) -> Optional[CatalogSnapshot]:
        return self._snapshot

    def _is_fresh(self, snap: Optional[CatalogSnapshot]) -> bool:
        if snap is None:
            return False
        return (self._clock() - snap.fetched_at) < self.ttl_seconds

    def get_catalog(self) -> CatalogSnapshot:
        snap = self._snapshot
        if self._is_fresh(snap):
            return snap  # type: ignore[return-value]

        if snap is None:
            # Nothing to fall back to: wait for whoever is fetching
            with self._lock:
                current = self._snapshot
                if self._is_fresh(current):
                    return current  # type: ignore[return-value]
                return self._refresh_locked()

        if not self._lock.acquire(blocking=False):
            return snap
        try:
            current = self._snapshot
            if self._is_fresh(current):
                return current  # type: ignore[return-value]
            return self._refresh_locked()
        finally:
            self._lock.release()

    def _refresh_locked(self) -> CatalogSnapshot:
        previous = self._snapshot
        try:
            exercises = tuple(self._fetcher(self.url, self.timeout_seconds))
        except Exception as e:
            if previous is not None:
                logger.warning("Catalog refresh failed, serving stale snapshot (%d exercises): %s", len(previous), e)
                return previous
            logger.error("Catalog fetch failed and no snapshot is cached: %s", e)
            raise UpstreamUnavailable(f"Could not fetch exercise catalog from {self.url}") from e

        snap = CatalogSnapshot(exercises=exercises, fetched_at=self._clock())
        self._snapshot = snap
        logger.info("Catalog refreshed: %d exercises from %s", len(snap), self.url)
        return snap
