"""Title matching and path splitting helpers."""

from typing import Iterable, Optional

SANDBOX_ROOT_MARKER = "{{sandboxRoot}}"
DEFAULT_IGNORED_EXTENSIONS = ("js", "jsx", "json")


def compare_title(
    original: str, test: Optional[str], ignored_extensions: Iterable[str]
) -> bool:
    """Return True if ``test`` names ``original``, optionally minus an extension."""
    if test is None:
        return False
    if original == test:
        return True
    return any(original == f"{test}.{ext}" for ext in ignored_extensions)


def strip_root_marker(path: str) -> tuple[str, bool]:
    """Rewrite a leading root marker to ``./`` and report whether one was found."""
    if not path.startswith(SANDBOX_ROOT_MARKER):
        return path, False
    return path.replace(f"{SANDBOX_ROOT_MARKER}/", "./", 1), True


def split_path(path: str) -> list[str]:
    """Split a path into its non-empty segments."""
    if path.startswith("./"):
        path = path[2:]
    return [segment for segment in path.split("/") if segment]
