"""
World Model for Gloomwood.

The World is the entity store: one list of Entities addressed by their
position. It owns every piece of mutable containment state and is passed
explicitly to whatever needs to read or change it.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, model_validator

from gloomwood.models.entity import Entity


class GameStatus(str, Enum):
    """Whether the session is still running."""

    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class World(BaseModel):
    """
    Arena of entities plus the identity of the player.

    Only ``contained_in`` and ``health`` change during play. Entities are
    never removed, so ids stay valid for the whole session.
    """

    entities: list[Entity] = Field(default_factory=list)
    player_id: int = Field(ge=0, description="Index of the player entity")

    @model_validator(mode="after")
    def _check_references(self) -> World:
        count = len(self.entities)
        for index, entity in enumerate(self.entities):
            if entity.id != index:
                raise ValueError(f"Entity at position {index} has id {entity.id}")
            for field_name in ("contained_in", "destination"):
                ref = getattr(entity, field_name)
                if ref is not None and not 0 <= ref < count:
                    raise ValueError(
                        f"Entity {index} ({entity.name}) has {field_name}={ref}, "
                        f"which does not exist"
                    )
            if entity.destination is not None:
                target = self.entities[entity.destination]
                if target.contained_in is not None:
                    raise ValueError(
                        f"Passage {index} ({entity.name}) leads to {target.name}, "
                        f"which is not a room"
                    )

        if not 0 <= self.player_id < count:
            raise ValueError(f"Player id {self.player_id} does not exist")
        player = self.entities[self.player_id]
        if player.contained_in is None:
            raise ValueError("The player must start inside a room")
        if player.health is None:
            raise ValueError("The player must have a health value")
        return self

    def exists(self, entity_id: int | None) -> bool:
        """Check if an id refers to an entity in this world."""
        return entity_id is not None and 0 <= entity_id < len(self.entities)

    def get(self, entity_id: int) -> Entity:
        """Get an entity by id. Unknown ids are a programming error."""
        if not self.exists(entity_id):
            raise IndexError(f"No entity with id {entity_id}")
        return self.entities[entity_id]

    @property
    def player(self) -> Entity:
        return self.entities[self.player_id]

    @property
    def player_location(self) -> int | None:
        return self.player.contained_in

    def contents(self, container_id: int | None) -> list[Entity]:
        """Entities directly inside a container, in creation order."""
        if container_id is None:
            return []
        return [e for e in self.entities if e.contained_in == container_id]

    def find(self, label: str) -> list[int]:
        """Ids of every entity carrying ``label``, regardless of distance."""
        return [e.id for e in self.entities if e.matches(label)]

    def is_room(self, entity_id: int) -> bool:
        """Rooms have no container and are neither items nor passages."""
        entity = self.get(entity_id)
        return entity.contained_in is None and not entity.is_item and not entity.is_passage()

    def rooms(self) -> list[Entity]:
        return [e for e in self.entities if self.is_room(e.id)]

    def passage_between(self, room_id: int | None, destination_id: int) -> Entity | None:
        """First passage in ``room_id`` that leads to ``destination_id``."""
        if room_id is None:
            return None
        for entity in self.contents(room_id):
            if entity.destination == destination_id:
                return entity
        return None

    def passages_from(self, room_id: int) -> list[Entity]:
        """Passages in a room that actually lead somewhere."""
        return [e for e in self.contents(room_id) if e.is_passage()]

    def actor_here(self) -> Entity | None:
        """
        First living, non-hostile actor sharing the player's room.

        This is whoever the player is talking to when they ask for or
        hand over an item.
        """
        for entity in self.contents(self.player_location):
            if entity.id == self.player_id or entity.is_enemy or entity.is_item:
                continue
            if entity.is_alive():
                return entity
        return None

    def enemies(self) -> list[Entity]:
        return [e for e in self.entities if e.is_enemy]

    def status(self) -> GameStatus:
        """
        Check the end-of-game condition.

        The game is lost when the player has no health left and won once
        every enemy in the world has been defeated.
        """
        if not self.player.is_alive():
            return GameStatus.LOST
        enemies = self.enemies()
        if enemies and all(not e.is_alive() for e in enemies):
            return GameStatus.WON
        return GameStatus.PLAYING
