"""
Engine Data Models for Gloomwood.

Defines the core data structures for the game loop:
- Intent: Parsed player command
- Resolution / Lookup: Outcome of turning a noun into an entity
- CombatResult: Outcome of a fight
- TurnResult: Response to the player
- EngineConfig: Runtime settings
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from gloomwood.models.world import GameStatus


class IntentType(str, Enum):
    """Categories of player command."""

    # Exploration
    LOOK = "look"
    GO = "go"
    MAP = "map"

    # Items
    GET = "get"
    DROP = "drop"
    GIVE = "give"
    ASK = "ask"
    INVENTORY = "inventory"
    CONSUME = "consume"

    # Combat
    ATTACK = "attack"

    # Meta
    HELP = "help"
    QUIT = "quit"
    UNKNOWN = "unknown"


class Intent(BaseModel):
    """Parsed player command."""

    type: IntentType
    noun: str = Field(default="", description="Everything after the verb")
    original_input: str = Field(description="The player's trimmed input")


class ResolutionKind(str, Enum):
    """How many entities matched a label within a distance ceiling."""

    NONE = "none"
    FOUND = "found"
    AMBIGUOUS = "ambiguous"


class Resolution(BaseModel):
    """Result of disambiguating a label."""

    kind: ResolutionKind
    entity_id: int | None = Field(default=None, description="Set only when FOUND")

    @property
    def found(self) -> bool:
        return self.kind == ResolutionKind.FOUND


class LookupOutcome(str, Enum):
    """Why a noun did or did not resolve for the player."""

    RESOLVED = "resolved"
    AMBIGUOUS = "ambiguous"
    NOT_HERE = "not_here"
    UNKNOWN_WORD = "unknown_word"
    SELF = "self"
    NOBODY = "nobody"


class Lookup(BaseModel):
    """A resolved entity, or the message explaining why there is none."""

    outcome: LookupOutcome
    entity_id: int | None = None
    message: str = ""

    @property
    def resolved(self) -> bool:
        return self.outcome == LookupOutcome.RESOLVED


class CombatAction(str, Enum):
    """Sub-commands accepted inside a fight."""

    USE = "use"
    FLEE = "flee"
    INVENTORY = "inventory"
    HELP = "help"
    UNKNOWN = "unknown"


class CombatCommand(BaseModel):
    """Parsed combat sub-command."""

    action: CombatAction
    noun: str = ""
    original_input: str = ""


class CombatPhase(str, Enum):
    """Where an encounter currently is."""

    ENGAGING = "engaging"
    PLAYER_ACTING = "player_acting"
    ENEMY_COUNTER = "enemy_counter"
    RESOLVED = "resolved"


class CombatOutcome(str, Enum):
    """How an encounter ended."""

    VICTORY = "victory"
    FLED = "fled"
    PLAYER_DEFEATED = "player_defeated"


class CombatResult(BaseModel):
    """Summary of a finished encounter."""

    enemy_id: int
    outcome: CombatOutcome
    rounds: int = Field(default=0, ge=0, description="Rounds in which blows were exchanged")
    report: str = Field(default="", description="Closing message for the player")


class TurnResult(BaseModel):
    """Result of processing one line of player input."""

    intent: Intent
    output: str
    status: GameStatus = GameStatus.PLAYING
    quit: bool = False

    @property
    def game_over(self) -> bool:
        return self.status != GameStatus.PLAYING


class EngineConfig(BaseModel):
    """Engine configuration."""

    # World source; None means the built-in world
    world_path: Path | None = None

    # Randomness; None draws from the operating system
    seed: int | None = None

    # Presentation
    prompt: str = "> "
    combat_prompt: str = "combat> "
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> EngineConfig:
        """Build a config from GLOOMWOOD_* environment variables."""
        values: dict[str, object] = {}
        world = os.getenv("GLOOMWOOD_WORLD")
        if world:
            values["world_path"] = Path(world)
        seed = os.getenv("GLOOMWOOD_SEED")
        if seed:
            try:
                values["seed"] = int(seed)
            except ValueError as e:
                raise ValueError(f"GLOOMWOOD_SEED must be an integer, got {seed!r}") from e
        log_level = os.getenv("GLOOMWOOD_LOG_LEVEL")
        if log_level:
            values["log_level"] = log_level.upper()
        return cls(**values)
