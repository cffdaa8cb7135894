"""Terminal display of the game board using emoji cells."""

from __future__ import annotations

import sys
from typing import TextIO

from .game import MicemenGame
from .types import (
    GRID_HEIGHT,
    GRID_WIDTH,
    CellType,
    GameState,
    PlayerColor,
    Position,
)

CLEAR_SCREEN = "\033[2J\033[H"
HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"

_CONTROLS = (
    "",
    "Controls:",
    "← → (or A/D or H/L) : Select column with your mice",
    "↑ ↓ (or W/S or K/J)  : Move your column up/down",
    "q                    : Quit",
    "",
    "Legend:",
    "🔺 Red mice    🔹 Blue mice    🟠 Mixed",
    "🟫 Wall        ⬛ Empty        ✓ Valid column",
)


class TerminalRenderer:
    """Draws the game state to a text stream with ANSI escape codes."""

    def __init__(self, game: MicemenGame, out: TextIO | None = None) -> None:
        self._game = game
        self._out = out if out is not None else sys.stdout

    def _write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def clear(self) -> None:
        """Clear the screen and move the cursor home."""
        self._write(CLEAR_SCREEN)

    def hide_cursor(self) -> None:
        self._write(HIDE_CURSOR)

    def show_cursor(self) -> None:
        self._write(SHOW_CURSOR)

    def show_message(self, msg: str) -> None:
        """Print a message on its own line."""
        self._write(msg + "\n")

    def render(self, state: GameState) -> None:
        """Clear the screen and draw the whole game frame."""
        self.clear()
        player = state.current_player
        icon = "🔹" if player is PlayerColor.BLUE else "🔺"
        lines = [f"{icon} {player} Player's Turn {icon}"]

        markers = []
        for col in range(GRID_WIDTH):
            valid = self._game.can_player_move_column(player, col)
            if col == state.selected_column:
                markers.append("🔽" if valid else "❌")
            else:
                markers.append("✓ " if valid else "  ")
        lines.append("  " + "".join(markers))

        for row in range(GRID_HEIGHT):
            cells = (self.cell_display(state, Position(row, col)) for col in range(GRID_WIDTH))
            lines.append("  " + "".join(cells))

        lines.extend(self._player_stats(state))
        lines.extend(self._turn_info(state))
        lines.extend(_CONTROLS)
        self._write("\n".join(lines) + "\n")

    def cell_display(self, state: GameState, pos: Position) -> str:
        """Return the emoji that represents the cell at pos."""
        colors = {m.player for m in state.mice if m.position == pos}
        selected = pos.col == state.selected_column
        valid = self._game.can_player_move_column(state.current_player, pos.col)

        if colors:
            if len(colors) > 1:
                return "🟡" if selected else "🟠"
            if PlayerColor.RED in colors:
                if selected:
                    return "🔴" if valid else "🟤"
                return "🔺"
            if selected:
                return "🔵" if valid else "🟦"
            return "🔹"

        cell = state.grid[pos.row][pos.col]
        if cell is CellType.WALL:
            if selected and valid:
                return "🟨"
            return "🟫"
        if cell is CellType.EMPTY:
            if selected:
                return "🔳" if valid else "⬜"
            return "⬛"
        return "❓"

    def valid_columns_display(self, player: PlayerColor) -> str:
        """Comma separated, 1-based list of the player's movable columns."""
        columns = self._game.valid_columns_for_player(player)
        if not columns:
            return "None"
        return ", ".join(str(col + 1) for col in columns)

    def _player_stats(self, state: GameState) -> list[str]:
        red = sum(1 for m in state.mice if m.player is PlayerColor.RED)
        blue = sum(1 for m in state.mice if m.player is PlayerColor.BLUE)
        return [
            "",
            "Player Stats:",
            f"🔺 Red:  {red} mice | Valid columns: "
            f"{self.valid_columns_display(PlayerColor.RED)}",
            f"🔹 Blue: {blue} mice | Valid columns: "
            f"{self.valid_columns_display(PlayerColor.BLUE)}",
        ]

    def _turn_info(self, state: GameState) -> list[str]:
        column = state.selected_column + 1
        lines = ["", "Turn Info:"]
        if self._game.can_player_move_column(state.current_player, state.selected_column):
            lines.append(f"✅ Column {column} is ready to move!")
            lines.append("   Use ↑/↓ (or W/S or K/J) to move this column")
        else:
            lines.append(f"❌ Column {column} has no {state.current_player} mice")
            lines.append("   Use ←/→ (or A/D or H/L) to find a valid column")
        return lines