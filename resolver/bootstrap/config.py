"""Resolver configuration and CLI argument parsing."""

import argparse
import os
from dataclasses import dataclass

from resolver.domain.titles import (
    DEFAULT_IGNORED_EXTENSIONS as CORE_IGNORED_EXTENSIONS,
)
from resolver.pipeline.path_cache import DEFAULT_CACHE_SIZE as CORE_CACHE_SIZE
from resolver.policy.main_module import DEFAULT_ENTRY as CORE_ENTRY


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    return int(value) if value is not None else default


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() in {"1", "true", "yes", "on"}


def _env_list(name: str, default: list[str]) -> list[str]:
    value = os.getenv(name)
    if value is None:
        return default
    return [item.strip() for item in value.split(",") if item.strip()]


DEFAULT_IGNORED_EXTENSIONS = _env_list(
    "PATH_RESOLVER_IGNORED_EXTENSIONS", list(CORE_IGNORED_EXTENSIONS)
)
DEFAULT_ENTRY = os.getenv("PATH_RESOLVER_ENTRY", CORE_ENTRY)
DEFAULT_CACHE_SIZE = _env_int("PATH_RESOLVER_CACHE_SIZE", CORE_CACHE_SIZE)
DEFAULT_LOG_JSON = _env_bool("PATH_RESOLVER_LOG_JSON", True)

COMMANDS = ("resolve", "directory", "path", "main", "current")


@dataclass
class ResolverConfig:
    """Settings applied to a single CLI invocation."""

    ignored_extensions: list[str]
    entry: str
    cache_size: int

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "ResolverConfig":
        """Build a config from parsed CLI arguments."""
        return cls(
            ignored_extensions=[
                item.strip()
                for item in args.ignored_extensions.split(",")
                if item.strip()
            ],
            entry=args.entry,
            cache_size=args.cache_size,
        )


def parse_cli_args(argv: list[str]) -> argparse.Namespace:
    """Return parsed CLI arguments for a resolver invocation."""
    parser = argparse.ArgumentParser(
        description="Resolve paths against a virtual file tree snapshot"
    )
    parser.add_argument("command", choices=COMMANDS)
    parser.add_argument(
        "target",
        nargs="?",
        default="",
        help="Path, module id or shortid depending on the command",
    )
    parser.add_argument(
        "--snapshot",
        required=True,
        help="JSON file with 'modules' and 'directories' arrays",
    )
    parser.add_argument(
        "--start",
        default=None,
        help="Shortid of the directory relative paths start from",
    )
    parser.add_argument("--entry", default=DEFAULT_ENTRY)
    parser.add_argument(
        "--ignored-extensions",
        default=",".join(DEFAULT_IGNORED_EXTENSIONS),
        help="Comma-separated extensions that may be omitted from module paths",
    )
    parser.add_argument(
        "--cache-size",
        type=int,
        default=DEFAULT_CACHE_SIZE,
        help="Maximum number of cached module paths",
    )
    default_log_level = os.getenv("PATH_RESOLVER_LOG_LEVEL", "WARNING").upper()
    default_destination = os.getenv("PATH_RESOLVER_LOG_DESTINATION", "stderr")
    parser.add_argument(
        "--log-level",
        default=default_log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
    )
    parser.add_argument(
        "--log-destination",
        default=default_destination,
        help="stderr, stdout or a file path",
    )
    parser.add_argument(
        "--log-json",
        action=argparse.BooleanOptionalAction,
        default=DEFAULT_LOG_JSON,
        help="Emit structured JSON log lines",
    )
    return parser.parse_args(argv)
