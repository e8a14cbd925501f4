"""
Catalogue store — lifecycle state and the canonical dataset.

The store fetches once, normalizes once, and then only serves reads.  The
dataset is a tuple of frozen records, so readers never need the lock; it
guards the single ``pending -> loading -> ready | error`` transition.

Usage::

    store = CatalogStore(make_fetcher(url))
    store.load()                      # at application startup
    result = store.view("mar", "planet")
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from catalog.errors import CatalogUnavailableError, FetchError
from catalog.models import CategoryFilter, CelestialObject, FilterResult
from catalog.normalizer import normalize
from catalog.view_filter import filter_and_aggregate

logger = logging.getLogger(__name__)


class LoadStatus(str, Enum):
    PENDING = "pending"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


@dataclass(frozen=True)
class CatalogSnapshot:
    """Immutable view of the store handed to the presentation layer."""

    status: LoadStatus
    dataset: tuple[CelestialObject, ...] = field(default_factory=tuple)
    error: str | None = None
    loaded_at: datetime | None = None
    source_url: str | None = None

    @property
    def ready(self) -> bool:
        return self.status is LoadStatus.READY


class CatalogStore:
    """Holds the canonical dataset for one application lifecycle."""

    def __init__(self, fetch: Callable[[], Sequence[Mapping[str, Any]]],
                 source_url: str | None = None) -> None:
        """
        Args:
            fetch:      Zero-argument callable returning the raw ``bodies``
                        array; must raise FetchError on failure.
            source_url: Catalogue URL, reported in summaries only.
        """
        self._fetch = fetch
        self.source_url = source_url
        self._lock = threading.Lock()
        self._status = LoadStatus.PENDING
        self._dataset: tuple[CelestialObject, ...] = ()
        self._error: str | None = None
        self._loaded_at: datetime | None = None

    def load(self) -> CatalogSnapshot:
        """Fetch and normalize the catalogue, once.

        Later calls return the current snapshot without fetching again.
        A FetchError leaves the store in the terminal ``error`` state with
        an empty dataset.
        """
        with self._lock:
            if self._status is not LoadStatus.PENDING:
                return self._snapshot()
            self._status = LoadStatus.LOADING

        try:
            raw_bodies = self._fetch()
        except FetchError as exc:
            self._fail(f"Failed to fetch data: {exc.message}")
            return self.snapshot()
        except Exception:
            self._fail("Failed to fetch data: unexpected error")
            raise

        dataset = normalize(raw_bodies)
        with self._lock:
            self._dataset = dataset
            self._status = LoadStatus.READY
            self._loaded_at = datetime.now(timezone.utc)
            logger.info("catalogue ready bodies=%d", len(dataset))
            return self._snapshot()

    def _fail(self, message: str) -> None:
        with self._lock:
            self._status = LoadStatus.ERROR
            self._error = message
            self._dataset = ()
        logger.error("catalogue unavailable: %s", message)

    def _snapshot(self) -> CatalogSnapshot:
        return CatalogSnapshot(
            status=self._status,
            dataset=self._dataset,
            error=self._error,
            loaded_at=self._loaded_at,
            source_url=self.source_url,
        )

    def snapshot(self) -> CatalogSnapshot:
        with self._lock:
            return self._snapshot()

    def require_ready(self) -> CatalogSnapshot:
        """Return the snapshot, or raise CatalogUnavailableError."""
        snap = self.snapshot()
        if snap.status is LoadStatus.READY:
            return snap
        if snap.status is LoadStatus.ERROR:
            raise CatalogUnavailableError(snap.status.value, snap.error or "Catalogue unavailable")
        raise CatalogUnavailableError(snap.status.value, "Catalogue is still loading")

    def view(self, search: str = "",
             category: CategoryFilter | str = CategoryFilter.ALL) -> FilterResult:
        """Filter the canonical dataset for display."""
        return filter_and_aggregate(self.require_ready().dataset, search, category)

    def get(self, object_id: int) -> CelestialObject | None:
        """Look up one object by id."""
        for obj in self.require_ready().dataset:
            if obj.id == object_id:
                return obj
        return None
