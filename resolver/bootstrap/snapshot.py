"""Loading of serialized tree snapshots."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Union

from resolver.domain.entities import Directory, Module


class SnapshotError(Exception):
    """Raised when a snapshot document cannot be read or is malformed."""


@dataclass
class TreeSnapshot:
    """Modules and directories captured from the owning store."""

    modules: list[Module] = field(default_factory=list)
    directories: list[Directory] = field(default_factory=list)


def parse_snapshot(document: Mapping[str, Any]) -> TreeSnapshot:
    """Build a snapshot from an already decoded JSON document."""
    if not isinstance(document, Mapping):
        raise SnapshotError("Snapshot must be a JSON object")

    try:
        modules = [Module.from_mapping(item) for item in document.get("modules", [])]
        directories = [
            Directory.from_mapping(item) for item in document.get("directories", [])
        ]
    except (KeyError, TypeError, AttributeError) as exc:
        raise SnapshotError(f"Malformed snapshot entity: {exc}") from exc

    return TreeSnapshot(modules=modules, directories=directories)


def load_snapshot(path: Union[str, Path]) -> TreeSnapshot:
    """Read a JSON snapshot file with ``modules`` and ``directories`` arrays."""
    try:
        document = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise SnapshotError(f"Cannot read snapshot {path}: {exc}") from exc
    return parse_snapshot(document)
