"""
Weather 2048 Game Engine - Pure Python Implementation

This module holds the grid transform engine: sliding and merging rows,
spawning level-1 tiles, win and terminal detection. Every function takes a
grid (list of rows) and returns a fresh one, so callers can keep snapshots.

Randomness is injected as a ``pick(n)`` callable returning an index in
``[0, n)``. The stateful :class:`Game` wrapper uses ``random.Random(seed)``.
"""

import random
from dataclasses import dataclass, field, replace
from enum import IntEnum
from typing import Callable, List, NamedTuple, Optional, Sequence, Tuple

GRID_SIZE = 4
WIN_LEVEL = 8
SPAWN_LEVEL = 1

Grid = List[List[int]]
Pick = Callable[[int], int]


class Direction(IntEnum):
    """Move directions. The value is the number of counter-clockwise
    quarter turns that turn the move into a left slide."""
    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3


@dataclass(frozen=True)
class GameState:
    """Snapshot of one game. Replaced, never mutated, by :func:`apply_move`."""
    grid: Grid = field(default_factory=lambda: empty_grid())
    score: int = 0
    game_over: bool = False
    has_won: bool = False
    win_already_signaled: bool = False

    @classmethod
    def from_grid(cls, grid: Sequence[Sequence[int]], score: int = 0) -> "GameState":
        """Build a state from an externally supplied grid, checking invariants."""
        rows = [list(row) for row in grid]
        if len(rows) != GRID_SIZE:
            raise ValueError(f"grid must have {GRID_SIZE} rows, got {len(rows)}")
        for row in rows:
            if len(row) != GRID_SIZE:
                raise ValueError(f"grid must be {GRID_SIZE}x{GRID_SIZE}, got a row of {len(row)}")
            for level in row:
                if not 0 <= level <= WIN_LEVEL:
                    raise ValueError(f"level {level} outside [0, {WIN_LEVEL}]")
        if score < 0:
            raise ValueError(f"score must be non-negative, got {score}")
        return cls(grid=rows, score=score, game_over=is_terminal(rows))


class MoveResult(NamedTuple):
    """Outcome of one move as seen by the shell."""
    state: GameState
    moved: bool
    score_delta: int
    merges: int
    won: bool
    game_over: bool


class RowSlide(NamedTuple):
    row: List[int]
    score_delta: int
    merges: int
    reached_win: bool


def empty_grid(size: int = GRID_SIZE) -> Grid:
    return [[0] * size for _ in range(size)]


def copy_grid(grid: Sequence[Sequence[int]]) -> Grid:
    return [list(row) for row in grid]


def rotate_grid(grid: Sequence[Sequence[int]], times: int = 1) -> Grid:
    """Rotate a square grid 90 degrees counter-clockwise ``times`` times."""
    size = len(grid)
    result = copy_grid(grid)
    for _ in range(times % 4):
        result = [[result[j][size - 1 - i] for j in range(size)] for i in range(size)]
    return result


def merge_score(level: int) -> int:
    """Points awarded for creating a tile of ``level`` by merging."""
    return level * level * 10


def slide_row(row: Sequence[int]) -> RowSlide:
    """
    Compress and merge one row towards index 0.

    A tile produced by a merge is never merged again in the same pass, and
    tiles at WIN_LEVEL never merge.
    """
    size = len(row)
    tiles = [v for v in row if v != 0]
    merged: List[int] = []
    score = 0
    merges = 0
    reached_win = False

    i = 0
    while i < len(tiles):
        level = tiles[i]
        if i + 1 < len(tiles) and tiles[i + 1] == level and level < WIN_LEVEL:
            level += 1
            score += merge_score(level)
            merges += 1
            if level == WIN_LEVEL:
                reached_win = True
            i += 2
        else:
            i += 1
        merged.append(level)

    merged += [0] * (size - len(merged))
    return RowSlide(merged, score, merges, reached_win)


def slide_grid(grid: Sequence[Sequence[int]], direction: Direction) -> Tuple[Grid, int, int, bool, bool]:
    """
    Slide the whole grid in ``direction`` without spawning.

    Returns:
        (grid, score_delta, merges, reached_win, moved)
    """
    turns = int(direction)
    rotated = rotate_grid(grid, turns)
    score = 0
    merges = 0
    reached_win = False
    moved = False

    for r, row in enumerate(rotated):
        result = slide_row(row)
        if result.merges or result.row != row:
            moved = True
        rotated[r] = result.row
        score += result.score_delta
        merges += result.merges
        reached_win = reached_win or result.reached_win

    return rotate_grid(rotated, (4 - turns) % 4), score, merges, reached_win, moved


def empty_cells(grid: Sequence[Sequence[int]]) -> List[Tuple[int, int]]:
    """Empty (row, col) positions in row-major order."""
    return [(r, c) for r, row in enumerate(grid) for c, v in enumerate(row) if v == 0]


def spawn_random_tile(grid: Sequence[Sequence[int]], pick: Pick) -> Grid:
    """Place a level-1 tile on a random empty cell. A full grid is returned
    unchanged and ``pick`` is not called."""
    result = copy_grid(grid)
    cells = empty_cells(result)
    if not cells:
        return result
    r, c = cells[pick(len(cells))]
    result[r][c] = SPAWN_LEVEL
    return result


def is_terminal(grid: Sequence[Sequence[int]]) -> bool:
    """
    True when no move is possible.

    Cells holding WIN_LEVEL are skipped when looking for equal neighbours,
    so two adjacent WIN_LEVEL tiles do not keep the game alive.
    """
    size = len(grid)
    for row in grid:
        if 0 in row:
            return False

    for r in range(size):
        for c in range(size):
            level = grid[r][c]
            if level == WIN_LEVEL:
                continue
            if r < size - 1 and grid[r + 1][c] == level:
                return False
            if c < size - 1 and grid[r][c + 1] == level:
                return False
    return True


def can_move(grid: Sequence[Sequence[int]], direction: Direction) -> bool:
    """Check if a move would change the grid."""
    return slide_grid(grid, direction)[4]


def legal_directions(grid: Sequence[Sequence[int]]) -> List[Direction]:
    return [d for d in Direction if can_move(grid, d)]


def new_game(pick: Pick, size: int = GRID_SIZE) -> GameState:
    """Fresh state: empty grid seeded with two level-1 tiles."""
    grid = spawn_random_tile(empty_grid(size), pick)
    grid = spawn_random_tile(grid, pick)
    return GameState(grid=grid)


def resolve_move(state: GameState, direction: Direction, pick: Pick) -> MoveResult:
    """
    Apply a move and report what happened.

    A move that changes nothing returns the same state object, awards no
    points and does not draw from ``pick``. A finished game is left alone.
    """
    if state.game_over:
        return MoveResult(state, False, 0, 0, False, True)

    grid, score_delta, merges, reached_win, moved = slide_grid(state.grid, Direction(direction))
    if not moved:
        return MoveResult(state, False, 0, 0, False, state.game_over)

    grid = spawn_random_tile(grid, pick)
    won = reached_win and not state.win_already_signaled
    new_state = replace(
        state,
        grid=grid,
        score=state.score + score_delta,
        has_won=state.has_won or won,
        win_already_signaled=state.win_already_signaled or won,
        game_over=is_terminal(grid),
    )
    return MoveResult(new_state, True, score_delta, merges, won, new_state.game_over)


def apply_move(state: GameState, direction: Direction, pick: Pick) -> Tuple[GameState, bool]:
    result = resolve_move(state, direction, pick)
    return result.state, result.moved


class Game:
    """
    Weather 2048 game with deterministic, seedable RNG.

    Holds the current :class:`GameState` and feeds ``random.Random(seed)``
    into the pure engine functions.
    """

    # Action constants
    LEFT = Direction.LEFT
    UP = Direction.UP
    RIGHT = Direction.RIGHT
    DOWN = Direction.DOWN
    ACTION_NAMES = [d.name.capitalize() for d in Direction]

    def __init__(self, seed: Optional[int] = None):
        """Create a new game with the given seed (None seeds from the OS)."""
        self._seed = seed
        self._rng = random.Random(seed)
        self.state = new_game(self._rng.randrange)

    def reset(self, seed: Optional[int] = None) -> GameState:
        """Start over, reseeding the RNG when ``seed`` is given."""
        if seed is not None:
            self._seed = seed
            self._rng = random.Random(seed)
        self.state = new_game(self._rng.randrange)
        return self.state

    def step(self, direction: Direction) -> MoveResult:
        """Execute a move in the given direction."""
        result = resolve_move(self.state, direction, self._rng.randrange)
        self.state = result.state
        return result

    @property
    def grid(self) -> Grid:
        return copy_grid(self.state.grid)

    @property
    def score(self) -> int:
        return self.state.score

    def is_done(self) -> bool:
        """Check if the game is over."""
        return self.state.game_over

    def legal_actions(self) -> List[bool]:
        """Get legal actions as booleans in Direction order."""
        return [can_move(self.state.grid, d) for d in Direction]

    def max_tile(self) -> int:
        """Get the highest level on the grid."""
        return max(max(row) for row in self.state.grid)

    def empty_count(self) -> int:
        """Get the number of empty cells."""
        return len(empty_cells(self.state.grid))

    def __repr__(self) -> str:
        return f"Game(score={self.score}, max_tile={self.max_tile()}, done={self.is_done()})"

    def __str__(self) -> str:
        size = len(self.state.grid)
        border = "+" + "+".join(["------"] * size) + "+"
        lines = [f"Score: {self.score}", border]
        for row in self.state.grid:
            cells = ["      " if v == 0 else f"{v:^6}" for v in row]
            lines.append("|" + "|".join(cells) + "|")
            lines.append(border)
        return "\n".join(lines)


if __name__ == "__main__":
    # Quick test
    game = Game(seed=42)
    print(game)

    for action in [Game.LEFT, Game.UP, Game.RIGHT, Game.DOWN]:
        result = game.step(action)
        print(f"\nAction: {Game.ACTION_NAMES[action]}")
        print(f"Score delta: {result.score_delta}, Moved: {result.moved}")
        print(game)

        if game.is_done():
            print("Game Over!")
            break
