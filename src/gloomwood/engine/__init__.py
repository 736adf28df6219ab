"""
Core Engine for Gloomwood.

The engine orchestrates:
- Command parsing (verb + noun phrase)
- Distance classification and disambiguation
- Action handlers that mutate the world
- The nested combat loop
"""

from __future__ import annotations

from gloomwood.engine.actions import ActionHandlers
from gloomwood.engine.combat import CombatEngine
from gloomwood.engine.distance import classify
from gloomwood.engine.game import GameEngine, make_rng
from gloomwood.engine.intent import CommandParser, parse_combat_command
from gloomwood.engine.models import (
    CombatAction,
    CombatCommand,
    CombatOutcome,
    CombatPhase,
    CombatResult,
    EngineConfig,
    Intent,
    IntentType,
    Lookup,
    LookupOutcome,
    Resolution,
    ResolutionKind,
    TurnResult,
)
from gloomwood.engine.ports import ConsolePort, InputPort, ScriptedInput
from gloomwood.engine.resolver import resolve, resolve_possession, resolve_visible

__all__ = [
    # Main engine
    "GameEngine",
    "make_rng",
    "ActionHandlers",
    "CombatEngine",
    # Resolution
    "classify",
    "resolve",
    "resolve_possession",
    "resolve_visible",
    # Parsing
    "CommandParser",
    "parse_combat_command",
    # Ports
    "ConsolePort",
    "InputPort",
    "ScriptedInput",
    # Models
    "CombatAction",
    "CombatCommand",
    "CombatOutcome",
    "CombatPhase",
    "CombatResult",
    "EngineConfig",
    "Intent",
    "IntentType",
    "Lookup",
    "LookupOutcome",
    "Resolution",
    "ResolutionKind",
    "TurnResult",
]
