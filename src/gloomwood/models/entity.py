"""
Entity Models for Gloomwood.

Defines the single domain object of the game world. Rooms, passages,
items, and actors are all Entities distinguished only by which
attributes and capability flags they carry.
"""

from __future__ import annotations

from enum import IntEnum

from pydantic import BaseModel, Field, field_validator


class Distance(IntEnum):
    """
    How reachable one entity is from another.

    Ordered from nearest to farthest; handlers bound lookups with
    ``classify(...) <= ceiling`` so the order must not change.
    """

    PLAYER = 0
    HELD = 1
    LOCATION = 2
    HERE = 3
    OVER_THERE = 4
    NOT_HERE = 5
    UNKNOWN = 6


class Entity(BaseModel):
    """
    Core entity model - the fundamental game object.

    Containment is expressed only through ``contained_in``; an entity with
    no container is a room (or something taken out of play).
    """

    id: int = Field(ge=0, description="Position in the entity store")
    labels: list[str] = Field(min_length=1, description="Case-insensitive aliases")
    description: str = Field(default="", description="Narrative text")

    contained_in: int | None = Field(default=None, description="Immediate container")
    destination: int | None = Field(default=None, description="Room a passage leads to")

    is_item: bool = False
    is_enemy: bool = False
    is_consumable: bool = False

    health: int | None = Field(default=None, ge=0)
    attack_power: int | None = Field(default=None, ge=0)

    @field_validator("labels")
    @classmethod
    def _strip_labels(cls, labels: list[str]) -> list[str]:
        stripped = [label.strip() for label in labels]
        if any(not label for label in stripped):
            raise ValueError("Entity labels must not be blank")
        return stripped

    @property
    def name(self) -> str:
        """Primary label, used when the entity is mentioned in a report."""
        return self.labels[0]

    def matches(self, label: str) -> bool:
        """Check whether any alias equals ``label``, ignoring case."""
        wanted = label.strip().lower()
        return any(alias.lower() == wanted for alias in self.labels)

    def is_passage(self) -> bool:
        """Check if this entity leads somewhere."""
        return self.destination is not None

    def is_scenery(self) -> bool:
        """Scenery carries several aliases and is never listed by look."""
        return len(self.labels) > 1

    def is_alive(self) -> bool:
        """Check if this entity is an actor with health left."""
        return self.health is not None and self.health > 0


def create_room(entity_id: int, label: str, description: str = "") -> Entity:
    """Factory function to create a room entity."""
    return Entity(id=entity_id, labels=[label], description=description)


def create_passage(
    entity_id: int,
    labels: list[str],
    location_id: int,
    description: str = "",
    destination_id: int | None = None,
) -> Entity:
    """
    Factory function to create a passage entity.

    A passage without a destination is a dead end: its description is
    shown instead of moving the player.
    """
    return Entity(
        id=entity_id,
        labels=labels,
        description=description,
        contained_in=location_id,
        destination=destination_id,
    )


def create_item(
    entity_id: int,
    label: str,
    location_id: int,
    description: str = "",
    attack_power: int | None = None,
    consumable_health: int | None = None,
) -> Entity:
    """Factory function to create an item, optionally a weapon or consumable."""
    return Entity(
        id=entity_id,
        labels=[label],
        description=description,
        contained_in=location_id,
        is_item=True,
        is_consumable=consumable_health is not None,
        health=consumable_health,
        attack_power=attack_power,
    )


def create_actor(
    entity_id: int,
    labels: list[str],
    location_id: int,
    description: str = "",
    health: int = 100,
    attack_power: int | None = None,
    is_enemy: bool = False,
) -> Entity:
    """Factory function to create an actor (player, NPC, or enemy)."""
    return Entity(
        id=entity_id,
        labels=labels,
        description=description,
        contained_in=location_id,
        is_enemy=is_enemy,
        health=health,
        attack_power=attack_power,
    )
