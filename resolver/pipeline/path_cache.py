"""Bounded least-recently-used cache for derived module paths."""

import logging
import threading
from collections import OrderedDict
from typing import Callable, Hashable, Optional, Sequence

from resolver.domain.correlation_id import CorrelationLoggerAdapter
from resolver.domain.entities import Directory, Module

CACHE_LOGGER = CorrelationLoggerAdapter(logging.getLogger("path_resolver.cache"), {})

DEFAULT_CACHE_SIZE = 1024

Fingerprint = tuple[tuple[str, str, str, Optional[str]], ...]


def tree_fingerprint(
    modules: Sequence[Module], directories: Sequence[Directory]
) -> Fingerprint:
    """Summarize every entity's structural fields.

    Any rename or move in either collection yields a different fingerprint.
    """
    return tuple(
        ("module", module.id, module.title, module.directory_shortid)
        for module in modules
    ) + tuple(
        ("directory", directory.id, directory.title, directory.directory_shortid)
        for directory in directories
    )


def cache_key(
    module_id: str,
    modules: Sequence[Module],
    directories: Sequence[Directory],
    version: Optional[Hashable] = None,
) -> tuple[str, Hashable]:
    """Key a lookup by id plus a caller version, or the tree fingerprint."""
    if version is not None:
        return module_id, ("version", version)
    return module_id, tree_fingerprint(modules, directories)


class ModulePathCache:
    """Thread-safe LRU mapping of lookup keys to module paths."""

    def __init__(self, max_entries: int = DEFAULT_CACHE_SIZE) -> None:
        self._max_entries = max(1, max_entries)
        self._lock = threading.Lock()
        self._entries: OrderedDict[Hashable, str] = OrderedDict()
        self.hits = 0
        self.misses = 0

    @property
    def max_entries(self) -> int:
        """Maximum number of cached paths before eviction."""
        return self._max_entries

    def get_or_compute(self, key: Hashable, compute: Callable[[], str]) -> str:
        """Return the cached value for ``key``, computing and storing it on a miss."""
        with self._lock:
            cached = self._entries.get(key)
            if cached is not None:
                self._entries.move_to_end(key)
                self.hits += 1
                return cached

            self.misses += 1
            value = compute()
            self._entries[key] = value
            if len(self._entries) > self._max_entries:
                self._entries.popitem(last=False)
                CACHE_LOGGER.debug(
                    "Evicted cached module path",
                    extra={"cache_size": self._max_entries},
                )
            return value

    def clear(self) -> None:
        """Drop every cached path and reset counters."""
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
