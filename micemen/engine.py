"""The game loop tying rules, display and input together."""

from __future__ import annotations

import argparse
import sys

from .game import MicemenGame
from .keyboard import InputError, KeyboardHandler
from .render import TerminalRenderer
from .types import Action, InputHandler, Renderer

FAREWELL = "Thanks for playing Micemen!"


class GameEngine:
    """Runs a game until a player quits."""

    def __init__(
        self,
        game: MicemenGame | None = None,
        renderer: Renderer | None = None,
        input_handler: InputHandler | None = None,
    ) -> None:
        self.game = game if game is not None else MicemenGame()
        self.renderer = renderer if renderer is not None else TerminalRenderer(self.game)
        self.input = input_handler if input_handler is not None else KeyboardHandler()

    def run(self) -> None:
        """Play until the game is over; raises InputError when input fails."""
        try:
            self.input.initialize()
        except InputError as exc:
            raise InputError(f"failed to initialize input: {exc}") from exc
        try:
            terminal = self.renderer if isinstance(self.renderer, TerminalRenderer) else None
            if terminal is not None:
                terminal.hide_cursor()
            try:
                self._loop()
            finally:
                if terminal is not None:
                    terminal.show_cursor()
                    terminal.clear()
        finally:
            self.input.close()

    def _loop(self) -> None:
        self.renderer.render(self.game.get_state())
        while not self.game.is_game_over():
            try:
                action = self.input.next_action()
            except InputError as exc:
                raise InputError(f"input error: {exc}") from exc
            if action is Action.NONE:
                continue
            self.game.process_action(action)
            if not self.game.is_game_over():
                self.renderer.render(self.game.get_state())
        self.renderer.show_message(FAREWELL)


def main(argv: list[str] | None = None) -> int:
    """Run the game in the terminal; returns the exit status."""
    parser = argparse.ArgumentParser(
        prog="micemen", description="Play Micemen in the terminal."
    )
    parser.parse_args(argv)
    try:
        GameEngine().run()
    except InputError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())