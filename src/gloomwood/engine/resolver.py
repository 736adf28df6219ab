"""
Disambiguator for Gloomwood.

Turns a typed noun into a concrete entity, bounded by how far away the
entity may be. Ambiguity and absence are normal outcomes carrying a
message for the player, never exceptions.
"""

from __future__ import annotations

from gloomwood.engine.distance import classify
from gloomwood.engine.models import Lookup, LookupOutcome, Resolution, ResolutionKind
from gloomwood.models.entity import Distance
from gloomwood.models.world import World


def resolve(world: World, label: str, origin_id: int | None, ceiling: Distance) -> Resolution:
    """
    Find the single entity carrying ``label`` within ``ceiling`` of the origin.

    Entities are scanned in creation order. Two or more matches are
    always reported as AMBIGUOUS; a caller never gets to pick one.
    """
    if not label.strip():
        return Resolution(kind=ResolutionKind.NONE)

    found: int | None = None
    for entity in world.entities:
        if not entity.matches(label):
            continue
        if classify(world, origin_id, entity.id) > ceiling:
            continue
        if found is not None:
            return Resolution(kind=ResolutionKind.AMBIGUOUS)
        found = entity.id

    if found is None:
        return Resolution(kind=ResolutionKind.NONE)
    return Resolution(kind=ResolutionKind.FOUND, entity_id=found)


def ambiguous_message(noun: str) -> str:
    return f"Please be more specific about which {noun} you mean."


def resolve_visible(world: World, noun: str, purpose: str) -> Lookup:
    """
    Resolve a noun the player can see or walk to.

    Runs two passes from the player, one bounded at OVER_THERE and one at
    NOT_HERE, so a word the game has never heard of can be told apart
    from something that exists somewhere else.

    Args:
        world: The entity store
        noun: What the player typed after the verb
        purpose: Completes "I don't understand ..." e.g. "where you want to go"
    """
    near = resolve(world, noun, world.player_id, Distance.OVER_THERE)
    if near.found:
        return Lookup(outcome=LookupOutcome.RESOLVED, entity_id=near.entity_id)
    if near.kind == ResolutionKind.AMBIGUOUS:
        return Lookup(outcome=LookupOutcome.AMBIGUOUS, message=ambiguous_message(noun))

    anywhere = resolve(world, noun, world.player_id, Distance.NOT_HERE)
    if anywhere.kind == ResolutionKind.NONE:
        return Lookup(
            outcome=LookupOutcome.UNKNOWN_WORD,
            message=f"I don't understand {purpose}.",
        )
    return Lookup(outcome=LookupOutcome.NOT_HERE, message=f"You don't see any {noun} here.")


def resolve_possession(world: World, origin_id: int | None, noun: str, verb: str) -> Lookup:
    """
    Resolve something carried by ``origin_id``.

    Used for dropping and consuming (origin is the player) and for asking
    or giving (origin is whoever shares the player's room).
    """
    if not world.exists(origin_id):
        return Lookup(
            outcome=LookupOutcome.NOBODY,
            message=f"There is nobody here to {verb}.",
        )

    origin = world.get(origin_id)
    held = resolve(world, noun, origin_id, Distance.HELD)

    if held.found:
        if held.entity_id == origin_id:
            target = "yourself" if origin_id == world.player_id else origin.name
            return Lookup(
                outcome=LookupOutcome.SELF,
                message=f"You should not be doing that to {target}.",
            )
        return Lookup(outcome=LookupOutcome.RESOLVED, entity_id=held.entity_id)
    if held.kind == ResolutionKind.AMBIGUOUS:
        return Lookup(outcome=LookupOutcome.AMBIGUOUS, message=ambiguous_message(noun))

    anywhere = resolve(world, noun, origin_id, Distance.NOT_HERE)
    if anywhere.kind == ResolutionKind.NONE:
        return Lookup(
            outcome=LookupOutcome.UNKNOWN_WORD,
            message=f"I don't understand what you want to {verb}.",
        )
    if origin_id == world.player_id:
        message = f"You are not holding any {noun}."
    else:
        message = f"There appears to be no {noun} you can get from {origin.name}."
    return Lookup(outcome=LookupOutcome.NOT_HERE, message=message)
