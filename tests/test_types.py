import dataclasses

import pytest

from micemen.types import (
    GRID_HEIGHT,
    GRID_WIDTH,
    CellType,
    GameState,
    Mouse,
    Player,
    PlayerColor,
    Position,
)


def test_player_color_strings():
    assert str(PlayerColor.BLUE.opponent()) == "Red"
    assert str(PlayerColor.RED.opponent()) == "Blue"


def test_opponent():
    assert PlayerColor.RED.opponent() is PlayerColor.BLUE
    assert PlayerColor.BLUE.opponent() is PlayerColor.RED


def test_default_state_dimensions_and_values():
    state = GameState()
    assert len(state.grid) == GRID_HEIGHT
    assert all(len(row) == GRID_WIDTH for row in state.grid)
    assert all(cell is CellType.EMPTY for row in state.grid for cell in row)
    assert state.selected_column == GRID_WIDTH // 2
    assert state.game_over is False
    assert state.current_player is PlayerColor.RED
    assert state.mice == []


def test_default_grid_rows_are_independent():
    state = GameState()
    state.grid[0][0] = CellType.WALL
    assert state.grid[1][0] is CellType.EMPTY


def test_copy_is_independent():
    state = GameState()
    state.mice.append(Mouse(Position(1, 2), PlayerColor.RED))
    clone = state.copy()
    clone.grid[3][4] = CellType.WALL
    clone.mice.append(Mouse(Position(5, 6), PlayerColor.BLUE))
    clone.selected_column = 0
    assert state.grid[3][4] is CellType.EMPTY
    assert len(state.mice) == 1
    assert state.selected_column == GRID_WIDTH // 2
    assert clone.mice[0] == state.mice[0]


def test_position_equality_and_hash():
    assert Position(2, 3) == Position(row=2, col=3)
    assert len({Position(2, 3), Position(2, 3), Position(3, 2)}) == 2


def test_mouse_is_immutable():
    mouse = Mouse(Position(0, 0), PlayerColor.RED)
    with pytest.raises(dataclasses.FrozenInstanceError):
        mouse.player = PlayerColor.BLUE  # type: ignore[misc]
    assert mouse.player is PlayerColor.RED
    moved = dataclasses.replace(mouse, player=PlayerColor.BLUE)
    assert moved.player is PlayerColor.BLUE
    assert moved.position == Position(0, 0)
    assert mouse.player is PlayerColor.RED


def test_player_defaults_to_no_mice():
    player = Player(PlayerColor.BLUE)
    assert player.color is PlayerColor.BLUE
    assert player.mice == []