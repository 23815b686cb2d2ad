"""Weather 2048: merge clouds into storms until a rainbow appears."""

from .game_env import (
    GRID_SIZE,
    WIN_LEVEL,
    Direction,
    Game,
    GameState,
    MoveResult,
    apply_move,
    is_terminal,
    new_game,
    resolve_move,
    rotate_grid,
    slide_row,
    spawn_random_tile,
)

__version__ = "0.1.0"
