"""
Terminal shell for Weather 2048.

Usage:
    weather2048-play
    weather2048-play --seed 7 --best-score-file /tmp/best.json --ascii

Commands (one per line): w/a/s/d, up/down/left/right, n for a new game,
q to quit.
"""

import argparse
from typing import Callable, List, Optional

from .best_score import DEFAULT_BEST_SCORE_FILE, BestScoreStore
from .controls import direction_for_key
from .game_env import Game, GameState
from .levels import WEATHER_LEVELS, glyph

WIN_MESSAGE = "You made a rainbow! Congratulations! 🌈"
HELP = "Move: w/a/s/d or up/down/left/right   n: new game   q: quit"


def render(state: GameState, best_score: int, ascii_only: bool = False) -> str:
    """Grid plus score line, as printed after every move."""
    size = len(state.grid)
    width = 6
    border = "+" + "+".join(["-" * width] * size) + "+"
    lines = [f"Score: {state.score}   Best: {best_score}", border]
    for row in state.grid:
        if ascii_only:
            cells = ["" if v == 0 else str(v) for v in row]
        else:
            cells = [glyph(v) for v in row]
        lines.append("|" + "|".join(cell.center(width) for cell in cells) + "|")
        lines.append(border)
    return "\n".join(lines)


def render_game_over(state: GameState) -> str:
    return "\n".join([
        "=" * 30,
        "GAME OVER".center(30),
        f"Final score: {state.score}".center(30),
        "Press n to try again, q to quit".center(30),
        "=" * 30,
    ])


def legend() -> str:
    return "  ".join(f"{level}={tile.emoji} {tile.name}" for level, tile in WEATHER_LEVELS.items())


class Shell:
    """Forwards commands to a :class:`Game` and prints what happened."""

    def __init__(self, game: Game, store: BestScoreStore, ascii_only: bool = False,
                 write: Callable[[str], None] = print):
        self.game = game
        self.store = store
        self.ascii_only = ascii_only
        self.write = write
        self.best_score = store.load()

    def show(self) -> None:
        self.write(render(self.game.state, self.best_score, self.ascii_only))
        if self.game.is_done():
            self.write(render_game_over(self.game.state))

    def new_game(self) -> None:
        self.game.reset()
        self.show()

    def handle(self, command: str) -> bool:
        """Process one command. Returns False when the player quits."""
        command = command.strip().lower()
        if command in ('q', 'quit', 'exit'):
            return False
        if command in ('n', 'new', 'r', 'restart'):
            self.new_game()
            return True

        direction = direction_for_key(command)
        if direction is None:
            self.write(HELP)
            return True
        if self.game.is_done():
            self.write(render_game_over(self.game.state))
            return True

        result = self.game.step(direction)
        if not result.moved:
            return True
        if result.state.score > self.best_score:
            self.best_score = self.store.update(result.state.score)
        self.show()
        if result.won:
            self.write(WIN_MESSAGE)
        return True

    def run(self, read: Optional[Callable[[str], str]] = None) -> None:
        read = read or input
        self.write(HELP)
        self.write(legend())
        self.show()
        while True:
            try:
                command = read("> ")
            except EOFError:
                break
            if not self.handle(command):
                break
        self.write(f"Bye! Best score: {self.best_score}")


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description='Play Weather 2048 in the terminal')
    parser.add_argument('--seed', type=int, default=None, help='Random seed')
    parser.add_argument('--best-score-file', type=str, default=DEFAULT_BEST_SCORE_FILE,
                        help='JSON file holding the best score')
    parser.add_argument('--ascii', action='store_true', help='Show level numbers instead of emoji')
    args = parser.parse_args(argv)

    shell = Shell(Game(seed=args.seed), BestScoreStore(args.best_score_file), ascii_only=args.ascii)
    try:
        shell.run()
    except KeyboardInterrupt:
        print()


if __name__ == "__main__":
    main()
