"""Command-line diagnostics for resolving paths in a tree snapshot."""

import argparse
import json
import logging
import sys
from typing import Any, Optional, Union

from resolver.bootstrap.config import ResolverConfig, parse_cli_args
from resolver.bootstrap.logging_setup import configure_logging
from resolver.bootstrap.snapshot import SnapshotError, TreeSnapshot, load_snapshot
from resolver.domain.correlation_id import CorrelationLoggerAdapter, correlation_scope
from resolver.domain.entities import Directory, Module
from resolver.domain.errors import CorruptTree, PathNotFound
from resolver.pipeline.directories import resolve_directory
from resolver.pipeline.module_path import get_module_path
from resolver.pipeline.modules import resolve_module
from resolver.pipeline.path_cache import ModulePathCache
from resolver.policy.main_module import (
    find_current_module,
    find_main_module,
    is_main_module,
)

CLI_LOGGER = CorrelationLoggerAdapter(logging.getLogger("path_resolver.cli"), {})

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_BAD_SNAPSHOT = 2
EXIT_CORRUPT_TREE = 3


def entity_payload(entity: Optional[Union[Module, Directory]]) -> Optional[dict]:
    """Serialize an entity back to the store's camelCase shape."""
    if entity is None:
        return None
    return {
        "id": entity.id,
        "shortid": entity.shortid,
        "title": entity.title,
        "directoryShortid": entity.directory_shortid,
    }


def run_command(
    args: argparse.Namespace,
    config: ResolverConfig,
    snapshot: TreeSnapshot,
    cache: ModulePathCache,
) -> dict[str, Any]:
    """Execute one resolver command and return its JSON-ready result."""
    modules, directories = snapshot.modules, snapshot.directories

    if args.command == "resolve":
        module = resolve_module(
            args.target, modules, directories, args.start, config.ignored_extensions
        )
        return {
            "module": entity_payload(module),
            "path": get_module_path(modules, directories, module.id, cache=cache),
        }

    if args.command == "directory":
        directory = resolve_directory(args.target, modules, directories, args.start)
        return {"directory": entity_payload(directory)}

    if args.command == "path":
        return {
            "id": args.target,
            "path": get_module_path(modules, directories, args.target, cache=cache),
        }

    main_module = find_main_module(modules, directories, config.entry)
    if args.command == "main":
        return {
            "module": entity_payload(main_module),
            "isMain": main_module is not None
            and is_main_module(main_module, modules, directories, config.entry),
        }

    current = find_current_module(modules, directories, args.target, main_module)
    return {"module": entity_payload(current)}


def _emit(payload: dict[str, Any]) -> None:
    sys.stdout.write(json.dumps(payload, sort_keys=True) + "\n")


def _execute(args: argparse.Namespace, config: ResolverConfig) -> int:
    CLI_LOGGER.info(
        "Running resolver command",
        extra={
            "command": args.command,
            "target": args.target,
            "snapshot": args.snapshot,
            "start_directory_shortid": args.start,
            "log_level": args.log_level,
            "log_destination": args.log_destination,
        },
    )
    try:
        snapshot = load_snapshot(args.snapshot)
        CLI_LOGGER.debug(
            "Snapshot loaded",
            extra={
                "modules": len(snapshot.modules),
                "directories": len(snapshot.directories),
            },
        )
        cache = ModulePathCache(config.cache_size)
        _emit(run_command(args, config, snapshot, cache))
        CLI_LOGGER.debug(
            "Command finished",
            extra={"cache_hits": cache.hits, "cache_misses": cache.misses},
        )
        return EXIT_OK
    except SnapshotError as exc:
        CLI_LOGGER.error(
            "Snapshot rejected",
            extra={"snapshot": args.snapshot, "error_type": type(exc).__name__},
        )
        _emit({"error": "SnapshotError", "message": str(exc)})
        return EXIT_BAD_SNAPSHOT
    except PathNotFound as exc:
        CLI_LOGGER.info(
            "Path not found",
            extra={"path": exc.path, "exit_code": EXIT_NOT_FOUND},
        )
        _emit({"error": "PathNotFound", "path": exc.path})
        return EXIT_NOT_FOUND
    except CorruptTree as exc:
        CLI_LOGGER.error(
            "Directory parent pointers form a cycle",
            extra={"directory_shortid": exc.shortid, "exit_code": EXIT_CORRUPT_TREE},
        )
        _emit({"error": "CorruptTree", "message": str(exc)})
        return EXIT_CORRUPT_TREE


def main(argv: Optional[list[str]] = None) -> int:
    """Run the CLI and return a process exit code."""
    args = parse_cli_args(sys.argv[1:] if argv is None else argv)
    configure_logging(args.log_level, args.log_destination, args.log_json)
    config = ResolverConfig.from_args(args)
    with correlation_scope():
        return _execute(args, config)


if __name__ == "__main__":
    sys.exit(main())
