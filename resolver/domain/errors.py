"""Errors raised by path resolution."""

from typing import NoReturn


class PathNotFound(Exception):
    """Raised when a path cannot be resolved against the tree."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Cannot find module in {path}")
        self.path = path


class CorruptTree(Exception):
    """Raised when parent pointers loop instead of reaching the root."""

    def __init__(self, shortid: str, limit: int) -> None:
        super().__init__(
            f"Directory chain starting at {shortid} exceeds {limit} ancestors"
        )
        self.shortid = shortid
        self.limit = limit


def raise_not_found(path: str) -> NoReturn:
    """Raise PathNotFound for the given path."""
    raise PathNotFound(path)
