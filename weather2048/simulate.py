"""
Random-play simulator for the Weather 2048 engine.

Plays seeded games choosing uniformly among legal directions and reports
score and level statistics.

Usage:
    weather2048-simulate --games 1000 --seed 42
    python -m weather2048.simulate --games 100 --verbose
"""

import argparse
import random
import time
from typing import Dict, List

import numpy as np
from tqdm import tqdm

from .game_env import WIN_LEVEL, Direction, Game


def play_random_game(seed: int, max_steps: int = 10000) -> Dict:
    """
    Play one game with a uniformly random legal move each step.

    Returns:
        Dict with game statistics
    """
    game = Game(seed=seed)
    policy = random.Random(seed)
    steps = 0
    won_at = None

    while not game.is_done() and steps < max_steps:
        valid_actions = [d for d, legal in zip(Direction, game.legal_actions()) if legal]
        if not valid_actions:
            break
        result = game.step(policy.choice(valid_actions))
        steps += 1
        if result.won:
            won_at = steps

    return {
        'score': game.score,
        'max_tile': game.max_tile(),
        'steps': steps,
        'won': game.state.has_won,
        'won_at': won_at,
        'done': game.is_done(),
    }


def simulate_random(num_games: int = 100, seed: int = 0, max_steps: int = 10000,
                    verbose: bool = False, progress: bool = True) -> Dict:
    """
    Simulate ``num_games`` random games, seeded ``seed``, ``seed + 1``, ...

    Returns:
        Dict with aggregate statistics
    """
    if num_games < 1:
        raise ValueError(f"num_games must be at least 1, got {num_games}")

    scores: List[int] = []
    max_tiles: List[int] = []
    steps_list: List[int] = []
    wins = 0

    games = tqdm(range(num_games), desc="Simulating", disable=not progress)
    for i in games:
        stats = play_random_game(seed + i, max_steps=max_steps)
        scores.append(stats['score'])
        max_tiles.append(stats['max_tile'])
        steps_list.append(stats['steps'])
        wins += stats['won']

        games.set_postfix({
            'score': stats['score'],
            'avg': f"{np.mean(scores):.0f}",
            'max_tile': stats['max_tile'],
        })
        if verbose:
            tqdm.write(f"Game {i + 1}: Score={stats['score']}, MaxTile={stats['max_tile']}, "
                       f"Steps={stats['steps']}, Won={stats['won']}")

    # Tile distribution
    tile_counts: Dict[int, int] = {}
    for tile in max_tiles:
        tile_counts[tile] = tile_counts.get(tile, 0) + 1

    percentiles = np.percentile(scores, [25, 50, 75, 90, 95])

    return {
        'num_games': num_games,
        'avg_score': float(np.mean(scores)),
        'std_score': float(np.std(scores)),
        'max_score': int(np.max(scores)),
        'min_score': int(np.min(scores)),
        'median_score': float(np.median(scores)),
        'p25_score': float(percentiles[0]),
        'p75_score': float(percentiles[2]),
        'p90_score': float(percentiles[3]),
        'p95_score': float(percentiles[4]),
        'avg_max_tile': float(np.mean(max_tiles)),
        'avg_steps': float(np.mean(steps_list)),
        'win_rate': wins / num_games,
        'tile_distribution': tile_counts,
        'scores': scores,
        'max_tiles': max_tiles,
    }


def print_report(stats: Dict) -> None:
    print("\n" + "=" * 50)
    print("SIMULATION RESULTS")
    print("=" * 50)
    print(f"Games:         {stats['num_games']}")
    print(f"Average Score: {stats['avg_score']:.1f} ± {stats['std_score']:.1f}")
    print(f"Median Score:  {stats['median_score']:.1f}")
    print(f"Min/Max Score: {stats['min_score']} / {stats['max_score']}")
    print(f"Percentiles:   25th={stats['p25_score']:.0f}, 75th={stats['p75_score']:.0f}, "
          f"90th={stats['p90_score']:.0f}")
    print(f"Avg Max Level: {stats['avg_max_tile']:.2f}")
    print(f"Avg Steps:     {stats['avg_steps']:.1f}")
    print(f"Win Rate:      {stats['win_rate'] * 100:.1f}% (level {WIN_LEVEL})")
    print("\nMax Level Distribution:")
    for tile in sorted(stats['tile_distribution'].keys()):
        count = stats['tile_distribution'][tile]
        pct = count / stats['num_games'] * 100
        print(f"  {tile:5d}: {count:4d} ({pct:5.1f}%)")


def main(argv=None):
    parser = argparse.ArgumentParser(description='Simulate random Weather 2048 games')
    parser.add_argument('--games', type=int, default=100, help='Number of games to play')
    parser.add_argument('--seed', type=int, default=12345, help='Seed of the first game')
    parser.add_argument('--max-steps', type=int, default=10000, help='Max moves per game')
    parser.add_argument('--verbose', action='store_true', help='Print each game')
    parser.add_argument('--no-progress', action='store_true', help='Hide the progress bar')
    args = parser.parse_args(argv)

    print(f"Simulating {args.games} games from seed {args.seed}...")
    start_time = time.time()
    stats = simulate_random(num_games=args.games, seed=args.seed, max_steps=args.max_steps,
                            verbose=args.verbose, progress=not args.no_progress)
    elapsed = time.time() - start_time

    print_report(stats)
    print(f"\nSimulation complete in {elapsed:.1f}s")


if __name__ == "__main__":
    main()
