"""Game rules: board generation, column shifting and turn handling."""

from __future__ import annotations

import random

from .types import (
    GRID_HEIGHT,
    GRID_WIDTH,
    MAX_WALLS,
    MICE_PER_PLAYER,
    MIN_WALLS,
    PLAYER1_COLUMNS,
    PLAYER2_COLUMNS,
    Action,
    CellType,
    GameState,
    Mouse,
    Player,
    PlayerColor,
    Position,
)

_MAX_PLACEMENT_ATTEMPTS = 1000


class MicemenGame:
    """A game of Micemen on a randomly generated board."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.state = GameState()
        self.reset()

    def reset(self) -> None:
        """Start a new game with fresh walls and mice."""
        self.state = GameState()
        self._generate_walls()
        self._place_mice()
        self._move_to_valid_column()

    def get_state(self) -> GameState:
        """Return a copy of the current state."""
        return self.state.copy()

    def is_game_over(self) -> bool:
        return self.state.game_over

    def get_player(self, color: PlayerColor) -> Player:
        """Return the player of the given color with its mice."""
        return Player(color, [m for m in self.state.mice if m.player is color])

    def mice_at(self, pos: Position) -> list[Mouse]:
        """Return every mouse standing at the given position."""
        return [m for m in self.state.mice if m.position == pos]

    def process_action(self, action: Action) -> None:
        """Apply a player action; ignored once the game is over."""
        if self.state.game_over:
            return
        if action is Action.MOVE_LEFT:
            self.move_selection(-1)
        elif action is Action.MOVE_RIGHT:
            self.move_selection(1)
        elif action in (Action.MOVE_COLUMN_UP, Action.MOVE_COLUMN_DOWN):
            col = self.state.selected_column
            if self.can_player_move_column(self.state.current_player, col):
                self._shift_column(col, up=action is Action.MOVE_COLUMN_UP)
                self.switch_player()
        elif action is Action.QUIT:
            self.state.game_over = True

    def can_player_move_column(self, player: PlayerColor, col: int) -> bool:
        """Whether the player has at least one mouse in the column."""
        if not 0 <= col < GRID_WIDTH:
            return False
        return any(m.position.col == col and m.player is player for m in self.state.mice)

    def valid_columns_for_player(self, player: PlayerColor) -> list[int]:
        """Sorted columns holding at least one of the player's mice."""
        return sorted({m.position.col for m in self.state.mice if m.player is player})

    def is_valid_mouse_position(self, pos: Position) -> bool:
        """Whether a mouse may stand at pos: in bounds and resting on a wall or mouse."""
        if not (0 <= pos.row < GRID_HEIGHT and 0 <= pos.col < GRID_WIDTH):
            return False
        grid = self.state.grid
        if pos.row == GRID_HEIGHT - 1:
            return grid[pos.row][pos.col] is CellType.WALL
        below = Position(pos.row + 1, pos.col)
        if grid[below.row][below.col] is CellType.WALL:
            return True
        return bool(self.mice_at(below))

    def move_selection(self, direction: int) -> None:
        """Move the selection to the next valid column, wrapping around."""
        columns = self.valid_columns_for_player(self.state.current_player)
        if not columns:
            return
        current = self.state.selected_column
        if direction > 0:
            target = next((c for c in columns if c > current), columns[0])
        else:
            target = next((c for c in reversed(columns) if c < current), columns[-1])
        self.state.selected_column = target

    def switch_player(self) -> None:
        """Hand the turn to the other player and select a column they can move."""
        self.state.current_player = self.state.current_player.opponent()
        self._move_to_valid_column()

    def _move_to_valid_column(self) -> None:
        columns = self.valid_columns_for_player(self.state.current_player)
        if not columns:
            return
        current = self.state.selected_column
        self.state.selected_column = min(columns, key=lambda c: abs(current - c))

    def _generate_walls(self) -> None:
        for col in range(GRID_WIDTH):
            count = self._rng.randint(MIN_WALLS, MAX_WALLS)
            walls = set(self._rng.sample(range(GRID_HEIGHT), count))
            for row in range(GRID_HEIGHT):
                self.state.grid[row][col] = CellType.WALL if row in walls else CellType.EMPTY

    def _place_mice(self) -> None:
        areas = (
            (PlayerColor.RED, range(0, PLAYER1_COLUMNS)),
            (PlayerColor.BLUE, range(GRID_WIDTH - PLAYER2_COLUMNS, GRID_WIDTH)),
        )
        for player, columns in areas:
            for _ in range(MICE_PER_PLAYER):
                pos = self._find_mouse_position(columns)
                if pos is not None:
                    self.state.mice.append(Mouse(pos, player))

    def _find_mouse_position(self, columns: range) -> Position | None:
        for _ in range(_MAX_PLACEMENT_ATTEMPTS):
            col = self._rng.choice(columns)
            rows = [
                row
                for row in range(GRID_HEIGHT)
                if self.is_valid_mouse_position(Position(row, col))
            ]
            if rows:
                return Position(self._rng.choice(rows), col)
        return None

    def _shift_column(self, col: int, up: bool) -> None:
        if not 0 <= col < GRID_WIDTH:
            return
        cells = [row[col] for row in self.state.grid]
        shifted = cells[1:] + cells[:1] if up else cells[-1:] + cells[:-1]
        for row, cell in zip(self.state.grid, shifted):
            row[col] = cell
        step = -1 if up else 1
        self.state.mice = [
            Mouse(Position((m.position.row + step) % GRID_HEIGHT, col), m.player)
            if m.position.col == col
            else m
            for m in self.state.mice
        ]