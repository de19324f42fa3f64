"""Linear lookups over flat entity collections."""

from typing import Optional, Sequence, TypeVar, Union

from resolver.domain.entities import Directory, Module

Entity = TypeVar("Entity", bound=Union[Module, Directory])


def find_by_id(entities: Sequence[Entity], entity_id: str) -> Optional[Entity]:
    """Return the first entity with the given id."""
    return next((entity for entity in entities if entity.id == entity_id), None)


def find_by_shortid(
    entities: Sequence[Entity], shortid: Optional[str]
) -> Optional[Entity]:
    """Return the first entity with the given shortid; root has none."""
    if shortid is None:
        return None
    return next((entity for entity in entities if entity.shortid == shortid), None)


def children_of(
    entities: Sequence[Entity], directory_shortid: Optional[str]
) -> list[Entity]:
    """Return entities whose parent pointer equals ``directory_shortid``."""
    return [
        entity for entity in entities if entity.directory_shortid == directory_shortid
    ]
