# invoicing/cache.py

import logging
import threading
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class ViewCache:
    """
    Cached renderings of read-only views, keyed by logical path.

    Mutations never update an entry in place; they call `invalidate` and the
    next read of that path rebuilds it. Every invalidation bumps the path's
    generation, and a rendering is only stored if no invalidation happened
    since the reader took its generation:

        generation = cache.generation(path)
        value = build()
        cache.put(path, value, generation)
    """

    def __init__(self):
        self._entries: Dict[str, Any] = {}
        self._generations: Dict[str, int] = {}
        self._lock = threading.Lock()

    def generation(self, path: str) -> int:
        with self._lock:
            return self._generations.get(path, 0)

    def get(self, path: str) -> Optional[Any]:
        with self._lock:
            return self._entries.get(path)

    def put(self, path: str, value: Any, generation: int) -> bool:
        """
        Store `value` for `path` unless the path was invalidated after
        `generation` was read. Returns whether it was stored.
        """
        with self._lock:
            if self._generations.get(path, 0) != generation:
                logger.debug("Dropped stale rendering of %s", path)
                return False
            self._entries[path] = value
            return True

    def is_cached(self, path: str) -> bool:
        with self._lock:
            return path in self._entries

    def invalidate(self, path: str) -> None:
        with self._lock:
            self._entries.pop(path, None)
            self._generations[path] = self._generations.get(path, 0) + 1
        logger.info("Invalidated cached view %s", path)


_view_cache = ViewCache()


def get_view_cache() -> ViewCache:
    return _view_cache
