"""
Command Interpreter for Gloomwood.

Splits a line of player input into a verb and the noun phrase that
follows it, and maps the verb onto a fixed vocabulary.
"""

from __future__ import annotations

from gloomwood.engine.models import CombatAction, CombatCommand, Intent, IntentType

# Verb -> intent. Anything not listed here is UNKNOWN.
VERBS: dict[str, IntentType] = {
    "look": IntentType.LOOK,
    "go": IntentType.GO,
    "get": IntentType.GET,
    "drop": IntentType.DROP,
    "give": IntentType.GIVE,
    "ask": IntentType.ASK,
    "attack": IntentType.ATTACK,
    "eat": IntentType.CONSUME,
    "drink": IntentType.CONSUME,
    "consume": IntentType.CONSUME,
    "inventory": IntentType.INVENTORY,
    "help": IntentType.HELP,
    "map": IntentType.MAP,
    "quit": IntentType.QUIT,
}

# These ignore whatever follows the verb
NO_ARGUMENT: frozenset[IntentType] = frozenset(
    {IntentType.INVENTORY, IntentType.HELP, IntentType.MAP, IntentType.QUIT}
)

COMBAT_VERBS: dict[str, CombatAction] = {
    "use": CombatAction.USE,
    "run": CombatAction.FLEE,
    "flee": CombatAction.FLEE,
    "inventory": CombatAction.INVENTORY,
    "help": CombatAction.HELP,
}


def split_command(line: str) -> tuple[str, str]:
    """
    Split input into (verb, noun phrase), both lower-cased.

    The noun phrase keeps every remaining word, so "get rusty sword"
    yields ("get", "rusty sword").
    """
    words = line.lower().split()
    if not words:
        return "", ""
    return words[0], " ".join(words[1:])


class CommandParser:
    """Fixed-vocabulary parser for top-level commands."""

    def parse(self, player_input: str) -> Intent:
        """
        Parse player input into an Intent.

        Args:
            player_input: Raw text from the player

        Returns:
            Intent with the verb's type and the remaining noun phrase
        """
        text = player_input.strip()
        verb, noun = split_command(text)

        intent_type = VERBS.get(verb)
        if intent_type is None:
            return Intent(type=IntentType.UNKNOWN, original_input=text)
        if intent_type in NO_ARGUMENT:
            noun = ""
        return Intent(type=intent_type, noun=noun, original_input=text)


def parse_combat_command(player_input: str) -> CombatCommand:
    """Parse a sub-command typed at the combat prompt."""
    text = player_input.strip()
    verb, noun = split_command(text)
    action = COMBAT_VERBS.get(verb, CombatAction.UNKNOWN)
    if action != CombatAction.USE:
        noun = ""
    return CombatCommand(action=action, noun=noun, original_input=text)
