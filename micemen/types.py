"""Core data types and constants for the Micemen game."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Protocol

GRID_WIDTH = 19
GRID_HEIGHT = 13
MIN_WALLS = 5
MAX_WALLS = 8
MICE_PER_PLAYER = 12
PLAYER1_COLUMNS = 9  # left-most columns for the red player
PLAYER2_COLUMNS = 9  # right-most columns for the blue player


class CellType(enum.Enum):
    """What occupies a grid cell."""

    EMPTY = 0
    WALL = 1


class PlayerColor(enum.Enum):
    """The two sides of the game."""

    RED = 0
    BLUE = 1

    def __str__(self) -> str:
        return self.name.capitalize()

    def opponent(self) -> PlayerColor:
        """Return the other player's color."""
        return PlayerColor.BLUE if self is PlayerColor.RED else PlayerColor.RED


@dataclass(frozen=True)
class Position:
    """A cell coordinate on the grid."""

    row: int
    col: int


@dataclass(frozen=True)
class Mouse:
    """A mouse and the player that owns it."""

    position: Position
    player: PlayerColor


class Action(enum.Enum):
    """Actions a player can take."""

    NONE = 0
    MOVE_LEFT = 1
    MOVE_RIGHT = 2
    MOVE_COLUMN_UP = 3
    MOVE_COLUMN_DOWN = 4
    QUIT = 5


def _empty_grid() -> list[list[CellType]]:
    return [[CellType.EMPTY] * GRID_WIDTH for _ in range(GRID_HEIGHT)]


@dataclass
class GameState:
    """The complete state of a game; the grid is indexed as grid[row][col]."""

    grid: list[list[CellType]] = field(default_factory=_empty_grid)
    selected_column: int = GRID_WIDTH // 2
    game_over: bool = False
    current_player: PlayerColor = PlayerColor.RED
    mice: list[Mouse] = field(default_factory=list)

    def copy(self) -> GameState:
        """Return an independent copy of this state."""
        return GameState(
            grid=[list(row) for row in self.grid],
            selected_column=self.selected_column,
            game_over=self.game_over,
            current_player=self.current_player,
            mice=list(self.mice),
        )


@dataclass
class Player:
    """A player's color together with the mice it owns."""

    color: PlayerColor
    mice: list[Mouse] = field(default_factory=list)


class Renderer(Protocol):
    """Something that can display the game."""

    def render(self, state: GameState) -> None: ...

    def clear(self) -> None: ...

    def show_message(self, msg: str) -> None: ...


class InputHandler(Protocol):
    """Something that yields player actions."""

    def initialize(self) -> None: ...

    def next_action(self) -> Action: ...

    def close(self) -> None: ...