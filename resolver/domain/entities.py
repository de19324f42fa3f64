"""Flat tree entity definitions shared by every resolver layer."""

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class Module:
    """A file in the virtual tree; ``title`` carries the extension."""

    id: str
    shortid: str
    title: str
    directory_shortid: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Module":
        """Build a module from the store's camelCase JSON shape."""
        return cls(
            id=str(data["id"]),
            shortid=str(data["shortid"]),
            title=str(data["title"]),
            directory_shortid=data.get("directoryShortid"),
        )


@dataclass(frozen=True)
class Directory:
    """A folder in the virtual tree."""

    id: str
    shortid: str
    title: str
    directory_shortid: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Directory":
        """Build a directory from the store's camelCase JSON shape."""
        return cls(
            id=str(data["id"]),
            shortid=str(data["shortid"]),
            title=str(data["title"]),
            directory_shortid=data.get("directoryShortid"),
        )
