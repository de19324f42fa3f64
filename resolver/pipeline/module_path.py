"""Reverse lookup from a module id to its canonical path."""

import logging
from typing import Hashable, Optional, Sequence

from resolver.domain.correlation_id import CorrelationLoggerAdapter
from resolver.domain.entities import Directory, Module
from resolver.domain.errors import CorruptTree
from resolver.pipeline.lookup import find_by_id, find_by_shortid
from resolver.pipeline.path_cache import ModulePathCache, cache_key

PATH_LOGGER = CorrelationLoggerAdapter(
    logging.getLogger("path_resolver.module_path"), {}
)

DEFAULT_PATH_CACHE = ModulePathCache()


def compute_module_path(
    modules: Sequence[Module], directories: Sequence[Directory], module_id: str
) -> str:
    """Build ``/a/b/c.js`` for ``module_id`` without caching.

    Returns an empty string when the module is unknown or one of its ancestor
    directories no longer exists.

    Raises:
        CorruptTree: The ancestor chain is longer than the directory count.
    """
    module = find_by_id(modules, module_id)
    if module is None:
        return ""

    directory = find_by_shortid(directories, module.directory_shortid)
    if directory is None and module.directory_shortid is not None:
        PATH_LOGGER.debug(
            "Parent directory missing",
            extra={"module_id": module_id, "directory_shortid": module.directory_shortid},
        )
        return ""

    path = "/"
    limit = len(directories)
    depth = 0
    while directory is not None:
        depth += 1
        if depth > limit:
            raise CorruptTree(module.directory_shortid or "", limit)

        path = f"/{directory.title}{path}"
        parent_shortid = directory.directory_shortid
        directory = find_by_shortid(directories, parent_shortid)
        if directory is None and parent_shortid is not None:
            PATH_LOGGER.debug(
                "Ancestor directory missing",
                extra={"module_id": module_id, "directory_shortid": parent_shortid},
            )
            return ""

    return f"{path}{module.title}"


def get_module_path(
    modules: Sequence[Module],
    directories: Sequence[Directory],
    module_id: str,
    *,
    version: Optional[Hashable] = None,
    cache: Optional[ModulePathCache] = None,
) -> str:
    """Return the memoized canonical path of ``module_id``.

    Entries are keyed by the id and a fingerprint of both collections, so
    edits to either invalidate them. Callers that track their own mutation
    counter can pass it as ``version`` to skip fingerprinting.
    """
    path_cache = cache if cache is not None else DEFAULT_PATH_CACHE
    key = cache_key(module_id, modules, directories, version)
    return path_cache.get_or_compute(
        key, lambda: compute_module_path(modules, directories, module_id)
    )
