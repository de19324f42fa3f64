"""Directory resolution by path."""

from dataclasses import dataclass
from typing import Optional, Sequence

from resolver.domain.entities import Directory, Module
from resolver.domain.errors import raise_not_found
from resolver.domain.titles import compare_title, split_path, strip_root_marker
from resolver.pipeline.lookup import children_of, find_by_shortid


@dataclass(frozen=True)
class DirectoryListing:
    """Modules sharing the directory that contains a path's last segment."""

    modules: list[Module]
    found_directory_shortid: Optional[str]
    last_path: Optional[str]
    split_path: list[str]
    trailing_slash: bool


def _walk(
    segments: Sequence[str],
    directories: Sequence[Directory],
    start_directory_shortid: Optional[str],
    path: str,
) -> Optional[str]:
    """Fold segments into the shortid of the directory they lead to."""
    current = start_directory_shortid
    for segment in segments:
        if segment == "..":
            directory = find_by_shortid(directories, current)
            if directory is None:
                raise_not_found(path)
            current = directory.directory_shortid
            continue

        next_directory = next(
            (
                directory
                for directory in children_of(directories, current)
                if compare_title(directory.title, segment, ())
            ),
            None,
        )
        if next_directory is None:
            raise_not_found(path)
        current = next_directory.shortid
    return current


def resolve_directory(
    path: Optional[str],
    modules: Sequence[Module],
    directories: Sequence[Directory],
    start_directory_shortid: Optional[str] = None,
) -> Optional[Directory]:
    """Resolve ``path`` to a directory.

    Every segment is treated as a directory name. Paths starting with the
    sandbox root marker ignore ``start_directory_shortid``. Returns None when
    the path leads to the tree root, which has no directory entity.

    Raises:
        PathNotFound: The path is empty or a segment cannot be followed.
    """
    if not path:
        raise_not_found("")

    rewritten, from_root = strip_root_marker(path)
    if from_root:
        start_directory_shortid = None

    found_shortid = _walk(
        split_path(rewritten), directories, start_directory_shortid, path
    )
    return find_by_shortid(directories, found_shortid)


def get_modules_in_directory(
    path: Optional[str],
    modules: Sequence[Module],
    directories: Sequence[Directory],
    start_directory_shortid: Optional[str] = None,
) -> DirectoryListing:
    """Locate the directory holding the last segment of ``path`` and its modules."""
    if not path:
        raise_not_found("")

    rewritten, from_root = strip_root_marker(path)
    if from_root:
        start_directory_shortid = None

    segments = split_path(rewritten)
    found_shortid = _walk(segments[:-1], directories, start_directory_shortid, path)
    directory = find_by_shortid(directories, found_shortid)
    found_directory_shortid = directory.shortid if directory is not None else None

    return DirectoryListing(
        modules=children_of(modules, found_directory_shortid),
        found_directory_shortid=found_directory_shortid,
        last_path=segments[-1] if segments else None,
        split_path=segments,
        trailing_slash=rewritten.endswith("/"),
    )
