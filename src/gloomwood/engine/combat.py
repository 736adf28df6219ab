"""
Combat Engine for Gloomwood.

A fight is a nested loop inside a single ``attack`` command. Each round
reads a sub-command through the InputPort, applies the player's blow,
and lets the enemy strike back:

    ENGAGING -> PLAYER_ACTING <-> ENEMY_COUNTER -> RESOLVED

The loop ends in victory, in flight, or when the player has no health
left. Deciding that the whole game is over is left to the caller.
"""

from __future__ import annotations

import logging
import random

from gloomwood.engine.intent import parse_combat_command
from gloomwood.engine.models import (
    CombatAction,
    CombatOutcome,
    CombatPhase,
    CombatResult,
    ResolutionKind,
)
from gloomwood.engine.ports import InputPort
from gloomwood.engine.reports import describe_inventory
from gloomwood.engine.resolver import ambiguous_message, resolve
from gloomwood.models.entity import Distance, Entity
from gloomwood.models.world import World

logger = logging.getLogger(__name__)

COMBAT_HELP = (
    "In a fight you can:\n"
    "  use <weapon>  - strike with something you carry\n"
    "  inventory     - check what you carry\n"
    "  run           - flee from the fight"
)


class CombatEngine:
    """Runs one encounter between the player and an enemy."""

    def __init__(
        self,
        world: World,
        port: InputPort,
        rng: random.Random,
        prompt: str = "combat> ",
    ) -> None:
        self.world = world
        self.port = port
        self.rng = rng
        self.prompt = prompt
        self.phase = CombatPhase.ENGAGING

    def _enter(self, phase: CombatPhase) -> None:
        logger.debug("Combat phase %s -> %s", self.phase.value, phase.value)
        self.phase = phase

    def engage(self, enemy_id: int) -> CombatResult:
        """
        Fight an enemy until it dies, the player flees, or the player falls.

        The caller must already have checked that the target is a living
        enemy in the player's room.

        Args:
            enemy_id: The entity being fought

        Returns:
            CombatResult with the outcome and a closing report
        """
        enemy = self.world.get(enemy_id)
        player = self.world.player
        self.phase = CombatPhase.ENGAGING
        logger.info("Combat started with %s (health %s)", enemy.name, enemy.health)

        self.port.write(
            f"You attack the {enemy.name}! The {enemy.name} has {enemy.health} health.\n"
            "Type 'use <weapon>' to strike, 'inventory' to check your pack, or 'run' to flee."
        )

        rounds = 0
        while True:
            if not player.is_alive():
                outcome = CombatOutcome.PLAYER_DEFEATED
                report = f"The {enemy.name} has defeated you."
                break

            self._enter(CombatPhase.PLAYER_ACTING)
            command = parse_combat_command(self.port.read_line(self.prompt))

            if command.action == CombatAction.FLEE:
                outcome = CombatOutcome.FLED
                report = f"You run away from the {enemy.name}."
                break
            if command.action == CombatAction.INVENTORY:
                self.port.write(describe_inventory(self.world))
                continue
            if command.action == CombatAction.HELP:
                self.port.write(COMBAT_HELP)
                continue
            if command.action == CombatAction.UNKNOWN:
                self.port.write(
                    f"You can't '{command.original_input}' in the middle of a fight. "
                    "Type 'help' for your options."
                )
                continue

            weapon, problem = self._find_weapon(command.noun)
            if weapon is None:
                self.port.write(problem)
                continue

            rounds += 1
            hit = self._strike(enemy, weapon)
            if not enemy.is_alive():
                outcome = CombatOutcome.VICTORY
                report = "\n".join([hit, f"You have killed the {enemy.name}!", *self._drop_loot(enemy)])
                break
            self.port.write(hit)

            self._enter(CombatPhase.ENEMY_COUNTER)
            self.port.write(self._counter(enemy, player))

        self._enter(CombatPhase.RESOLVED)
        logger.info("Combat with %s ended: %s after %d rounds", enemy.name, outcome.value, rounds)
        return CombatResult(enemy_id=enemy_id, outcome=outcome, rounds=rounds, report=report)

    def _find_weapon(self, noun: str) -> tuple[Entity | None, str]:
        """A carried entity with attack power, or the reason there is none."""
        if not noun:
            return None, "Use what? Type 'use <weapon>'."

        held = resolve(self.world, noun, self.world.player_id, Distance.HELD)
        if held.kind == ResolutionKind.AMBIGUOUS:
            return None, ambiguous_message(noun)
        if held.kind == ResolutionKind.NONE:
            return None, f"You are not carrying any {noun}."

        entity = self.world.get(held.entity_id)
        if entity.id == self.world.player_id or not entity.attack_power:
            return None, f"The {entity.name} is not a weapon."
        return entity, ""

    def _strike(self, enemy: Entity, weapon: Entity) -> str:
        damage = weapon.attack_power or 0
        enemy.health = max(0, (enemy.health or 0) - damage)
        return (
            f"You hit the {enemy.name} with the {weapon.name} for {damage} damage. "
            f"The {enemy.name} has {enemy.health} health left."
        )

    def _counter(self, enemy: Entity, player: Entity) -> str:
        """Enemy strikes back with a roll in [0, attack_power); 0 is a dodge."""
        power = enemy.attack_power or 0
        roll = self.rng.randrange(power) if power > 0 else 0
        if roll == 0:
            return f"The {enemy.name} attacks, but you dodge!"

        player.health = max(0, (player.health or 0) - roll)
        return f"The {enemy.name} hits you for {roll} damage. Your health: {player.health}."

    def _drop_loot(self, enemy: Entity) -> list[str]:
        """Whatever the enemy carried falls to the floor of its room."""
        lines = []
        for entity in self.world.contents(enemy.id):
            entity.contained_in = enemy.contained_in
            lines.append(f"The {enemy.name} drops the {entity.name}.")
        return lines
