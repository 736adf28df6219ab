"""
Interactive REPL for Gloomwood.

Provides a text-based interface for playing the game: the start prompt,
the main command loop, and the try-again prompt after the game ends.
"""

from __future__ import annotations

import argparse
import logging
import re
from pathlib import Path

from gloomwood.content import INTRO, WorldLoadError, initial_world
from gloomwood.engine import ConsolePort, EngineConfig, GameEngine, InputPort
from gloomwood.models import GameStatus, World

logger = logging.getLogger(__name__)

NO_PATTERN = re.compile(r"^(n|no)$", re.I)
YES_PATTERN = re.compile(r"^(y|yes)$", re.I)

BANNER = r"""
   ____ _                                              _
  / ___| | ___   ___  _ __ ___  __      _____   ___  __| |
 | |  _| |/ _ \ / _ \| '_ ` _ \ \ \ /\ / / _ \ / _ \/ _` |
 | |_| | | (_) | (_) | | | | | | \ V  V / (_) | (_) | (_| |
  \____|_|\___/ \___/|_| |_| |_|  \_/\_/ \___/ \___/\__,_|
"""

END_MESSAGES = {
    GameStatus.WON: "You have defeated every enemy in the land. You win!",
    GameStatus.LOST: "You have died. Game over.",
}


class GameREPL:
    """
    Interactive REPL for playing Gloomwood.

    Handles the prompts around the game; every command itself goes
    through GameEngine.
    """

    def __init__(self, config: EngineConfig | None = None, port: InputPort | None = None) -> None:
        self.config = config or EngineConfig()
        self.port = port or ConsolePort()

    def _load_world(self) -> World:
        return initial_world(self.config.world_path)

    def _ask_yes(self, question: str) -> bool:
        answer = self.port.read_line(f"{question}\n> ").strip()
        return bool(YES_PATTERN.match(answer))

    def run(self) -> int:
        """
        Run the interactive session.

        Returns:
            Process exit code: 0 on a normal exit, 1 if the world failed to load
        """
        try:
            world = self._load_world()
        except WorldLoadError as e:
            self.port.write(f"Error: {e}")
            return 1

        self.port.write(BANNER)
        self.port.write("Hello, Player!\nWelcome to Gloomwood.\n")
        try:
            answer = self.port.read_line("Would you like to start the game? (Y/N)\n> ").strip()
            if NO_PATTERN.match(answer):
                self.port.write("Goodbye!")
                return 0

            while True:
                status = self._play(world)
                if status is None:
                    self.port.write("\nGoodbye!")
                    return 0

                self.port.write(END_MESSAGES[status])
                if not self._ask_yes("\nWould you like to try again? (Y/N)"):
                    self.port.write("Goodbye!")
                    return 0
                try:
                    world = self._load_world()
                except WorldLoadError as e:
                    self.port.write(f"Error: {e}")
                    return 1
        except (KeyboardInterrupt, EOFError):
            self.port.write("\nThanks for playing!")
            return 0

    def _play(self, world: World) -> GameStatus | None:
        """Play one game. Returns the final status, or None if the player quit."""
        engine = GameEngine(world, port=self.port, config=self.config)

        if self.config.world_path is None:
            self.port.write(INTRO)
        self.port.write("Hint: Enter <help> to display the commands available\n")
        self.port.write(engine.actions.look())

        while True:
            user_input = self.port.read_line(self.config.prompt).strip()
            if not user_input:
                continue

            result = engine.process(user_input)
            self.port.write(result.output)

            if result.quit:
                return None
            if result.game_over:
                return result.status


def main(argv: list[str] | None = None) -> int:
    """Console entry point."""
    parser = argparse.ArgumentParser(description="Gloomwood Text Adventure")
    parser.add_argument("--world", type=Path, help="Path to a JSON world description")
    parser.add_argument("--seed", type=int, help="Seed for combat rolls")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default from GLOOMWOOD_LOG_LEVEL or WARNING)",
    )
    args = parser.parse_args(argv)

    try:
        config = EngineConfig.from_env()
    except ValueError as e:
        parser.error(str(e))
    overrides = {
        "world_path": args.world,
        "seed": args.seed,
        "log_level": args.log_level,
    }
    config = config.model_copy(update={k: v for k, v in overrides.items() if v is not None})

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.debug("Starting with %s", config)

    return GameREPL(config).run()


if __name__ == "__main__":
    raise SystemExit(main())
