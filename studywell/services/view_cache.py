"""Cache of pre-rendered view payloads.

The dashboard and the task list are rendered on demand and cached until a
mutation invalidates them (or the TTL passes, since scores drift with time).
"""

import logging
import os
import threading
import time
from typing import Any, Callable, Dict, Iterable, Optional, Tuple
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

DASHBOARD_VIEW = "dashboard"
TASK_LIST_VIEW = "task-list"

# Views that list tasks; every task mutation invalidates these.
TASK_VIEWS = (DASHBOARD_VIEW, TASK_LIST_VIEW)


class ViewCache:
    """Thread-safe map of view key -> (rendered payload, render time)."""

    def __init__(self, ttl_seconds: Optional[float] = None, clock: Callable[[], float] = time.monotonic):
        if ttl_seconds is None:
            ttl_seconds = float(os.getenv("VIEW_CACHE_TTL_SEC", "60"))
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, Tuple[Any, float]] = {}
        # Bumped by invalidate(); a render started under an older generation is not stored.
        self._generations: Dict[str, int] = {}
        self._lock = threading.Lock()

    @staticmethod
    def key(view: str, variant: str = "") -> str:
        return f"{view}:{variant}" if variant else view

    def get_or_render(self, view: str, render: Callable[[], Any], variant: str = "") -> Any:
        """Return the cached payload for a view, rendering it if missing or expired."""
        cache_key = self.key(view, variant)
        now = self._clock()
        with self._lock:
            entry = self._entries.get(cache_key)
            if entry is not None and now - entry[1] < self.ttl_seconds:
                return entry[0]
            generation = self._generations.get(view, 0)

        payload = render()
        with self._lock:
            if self._generations.get(view, 0) == generation:
                self._entries[cache_key] = (payload, now)
        return payload

    def invalidate(self, views: Iterable[str]) -> None:
        """Drop every cached variant of the given views."""
        views = set(views)
        with self._lock:
            for view in views:
                self._generations[view] = self._generations.get(view, 0) + 1
            stale = [k for k in self._entries if k.split(":", 1)[0] in views]
            for cache_key in stale:
                del self._entries[cache_key]
        logger.debug(f"Invalidated views {sorted(views)} ({len(stale)} entries)")

    def is_cached(self, view: str, variant: str = "") -> bool:
        with self._lock:
            return self.key(view, variant) in self._entries
