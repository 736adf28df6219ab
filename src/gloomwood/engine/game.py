"""
Game Engine for Gloomwood.

The orchestration layer that processes player turns: parse the line,
dispatch the intent to its handler, and report the result together with
the state of the game.
"""

from __future__ import annotations

import logging
import random
import secrets
from collections.abc import Callable

from gloomwood.engine.actions import ActionHandlers
from gloomwood.engine.intent import CommandParser
from gloomwood.engine.models import EngineConfig, Intent, IntentType, TurnResult
from gloomwood.engine.ports import ConsolePort, InputPort
from gloomwood.models.world import GameStatus, World

logger = logging.getLogger(__name__)


def make_rng(seed: int | None = None) -> random.Random:
    """Seeded generator for reproducible runs, operating-system entropy otherwise."""
    if seed is None:
        return secrets.SystemRandom()
    return random.Random(seed)


class GameEngine:
    """
    Main game engine for Gloomwood.

    Owns no state of its own beyond the world it was given; every turn
    reads and mutates that world through the action handlers.
    """

    def __init__(
        self,
        world: World,
        port: InputPort | None = None,
        rng: random.Random | None = None,
        config: EngineConfig | None = None,
    ) -> None:
        self.world = world
        self.config = config or EngineConfig()
        self.port = port if port is not None else ConsolePort()
        self.rng = rng if rng is not None else make_rng(self.config.seed)
        self.parser = CommandParser()
        self.actions = ActionHandlers(
            world,
            self.port,
            self.rng,
            combat_prompt=self.config.combat_prompt,
        )
        self.handlers: dict[IntentType, Callable[[Intent], str]] = {
            IntentType.LOOK: lambda i: self.actions.look(i.noun),
            IntentType.GO: lambda i: self.actions.go(i.noun),
            IntentType.MAP: lambda i: self.actions.map(),
            IntentType.GET: lambda i: self.actions.get(i.noun),
            IntentType.DROP: lambda i: self.actions.drop(i.noun),
            IntentType.GIVE: lambda i: self.actions.give(i.noun),
            IntentType.ASK: lambda i: self.actions.ask(i.noun),
            IntentType.INVENTORY: lambda i: self.actions.inventory(),
            IntentType.CONSUME: lambda i: self.actions.consume(i.noun),
            IntentType.ATTACK: lambda i: self.actions.attack(i.noun),
            IntentType.HELP: lambda i: self.actions.help(),
            IntentType.QUIT: lambda i: self.actions.quit(),
            IntentType.UNKNOWN: lambda i: self.actions.unknown(i.original_input),
        }
        missing = set(IntentType) - set(self.handlers)
        if missing:
            raise ValueError(f"No handler for intents: {sorted(m.value for m in missing)}")

    def process(self, player_input: str) -> TurnResult:
        """
        Process a single line of player input.

        Args:
            player_input: Raw text from the player

        Returns:
            TurnResult with the report and whether the game has ended
        """
        intent = self.parser.parse(player_input)
        logger.debug("Parsed %r as %s (noun=%r)", player_input, intent.type.value, intent.noun)

        output = self.handlers[intent.type](intent)
        status = self.world.status()
        if status != GameStatus.PLAYING:
            logger.info("Game over: %s", status.value)

        return TurnResult(
            intent=intent,
            output=output,
            status=status,
            quit=intent.type == IntentType.QUIT,
        )
