"""Selection of a sandbox's main and current modules."""

import logging
import urllib.parse
from typing import Optional, Sequence

from resolver.domain.correlation_id import CorrelationLoggerAdapter
from resolver.domain.entities import Directory, Module
from resolver.pipeline.module_path import get_module_path
from resolver.pipeline.modules import try_resolve_module

POLICY_LOGGER = CorrelationLoggerAdapter(logging.getLogger("path_resolver.policy"), {})

DEFAULT_ENTRY = "index.js"


def is_main_module(
    module: Module,
    modules: Sequence[Module],
    directories: Sequence[Directory],
    entry: str = DEFAULT_ENTRY,
) -> bool:
    """Return True if ``module`` is the top-level file named ``entry``."""
    path = get_module_path(modules, directories, module.id)
    return path.replace("/", "", 1) == entry


def find_main_module(
    modules: Sequence[Module],
    directories: Sequence[Directory],
    entry: str = DEFAULT_ENTRY,
) -> Optional[Module]:
    """Resolve the entry module, falling back to the first module.

    Returns None only when ``modules`` is empty.
    """
    resolution = try_resolve_module(entry, modules, directories)
    if resolution.ok:
        return resolution.module

    POLICY_LOGGER.debug(
        "Entry module not found, using first module",
        extra={"entry": entry, "fallback": "first_module"},
    )
    return modules[0] if modules else None


def find_current_module(
    modules: Sequence[Module],
    directories: Sequence[Directory],
    module_path: str = "",
    main_module: Optional[Module] = None,
) -> Optional[Module]:
    """Pick the module a caller is viewing.

    ``module_path`` may be a URL-encoded path, a module id or a module
    shortid; ids are supported for deep links. Falls back to ``main_module``.
    """
    clean_path = urllib.parse.unquote(module_path)
    if clean_path.startswith("/"):
        clean_path = clean_path[1:]

    resolution = try_resolve_module(clean_path, modules, directories)
    if resolution.ok:
        return resolution.module

    for module in modules:
        if module.id == module_path:
            return module
    for module in modules:
        if module.shortid == module_path:
            return module

    POLICY_LOGGER.debug(
        "Current module not found, using main module",
        extra={"path": module_path, "fallback": "main_module"},
    )
    return main_module
