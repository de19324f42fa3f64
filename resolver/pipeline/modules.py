"""Module resolution by path."""

import logging
from typing import Iterable, Optional, Sequence

from resolver.domain.correlation_id import CorrelationLoggerAdapter
from resolver.domain.entities import Directory, Module
from resolver.domain.errors import PathNotFound, raise_not_found
from resolver.domain.resolution import Resolution
from resolver.domain.titles import DEFAULT_IGNORED_EXTENSIONS, compare_title
from resolver.pipeline.directories import get_modules_in_directory
from resolver.pipeline.lookup import children_of

RESOLVE_LOGGER = CorrelationLoggerAdapter(
    logging.getLogger("path_resolver.resolve"), {}
)

INDEX_TITLE = "index"


def _find_index(
    candidates: Iterable[Module], ignored_extensions: Sequence[str]
) -> Optional[Module]:
    return next(
        (
            module
            for module in candidates
            if compare_title(module.title, INDEX_TITLE, ignored_extensions)
        ),
        None,
    )


def resolve_module(
    path: Optional[str],
    modules: Sequence[Module],
    directories: Sequence[Directory],
    start_directory_shortid: Optional[str] = None,
    ignored_extensions: Sequence[str] = DEFAULT_IGNORED_EXTENSIONS,
) -> Module:
    """Convert an import-style path to a module.

    Lookup order: a sibling module matching the last segment (extensions in
    ``ignored_extensions`` may be omitted), then the ``index`` module of a
    sibling directory with that name, then, for paths ending in ``/``, an
    ``index`` module in the containing directory.

    Raises:
        PathNotFound: No module matches.
    """
    listing = get_modules_in_directory(
        path, modules, directories, start_directory_shortid
    )

    for module in listing.modules:
        if compare_title(module.title, listing.last_path, ignored_extensions):
            return module

    subdirectory = next(
        (
            directory
            for directory in children_of(directories, listing.found_directory_shortid)
            if compare_title(directory.title, listing.last_path, ignored_extensions)
        ),
        None,
    )
    if subdirectory is not None:
        index_module = _find_index(
            children_of(modules, subdirectory.shortid), ignored_extensions
        )
        if index_module is None:
            RESOLVE_LOGGER.debug(
                "Directory has no index module",
                extra={"path": path, "directory_shortid": subdirectory.shortid},
            )
            raise_not_found(path)
        return index_module

    # Only paths with no last segment, such as "/" or "./", get here. The
    # trailing slash is read from the raw path, so they resolve to the index
    # module of the start directory instead of failing.
    if listing.trailing_slash:
        index_module = _find_index(listing.modules, ignored_extensions)
        if index_module is not None:
            return index_module

    raise_not_found(path)


def try_resolve_module(
    path: Optional[str],
    modules: Sequence[Module],
    directories: Sequence[Directory],
    start_directory_shortid: Optional[str] = None,
    ignored_extensions: Sequence[str] = DEFAULT_IGNORED_EXTENSIONS,
) -> Resolution:
    """Resolve like ``resolve_module`` but report failure as a Resolution."""
    try:
        module = resolve_module(
            path, modules, directories, start_directory_shortid, ignored_extensions
        )
    except PathNotFound as error:
        return Resolution(path=path, error=error)
    return Resolution(path=path, module=module)
