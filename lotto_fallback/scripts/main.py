#!/usr/bin/env python3
"""
Offline Lottery Predictor - Command Line Entry Point

Generates lottery entries with the local frequency-based fallback. No remote
service is contacted.

Usage:
    lottery-predict --game "UK Lotto" --history draws.txt --entries 3 --lucky 7,11 --unwanted 13

Options:
    --game NAME          Game from the built-in catalog (see --list-games)
    --history FILE       Text file with past draws
    --demo-history       Use generated placeholder draws instead of a file
    --entries INT        Number of entries to generate (default: 1)
    --lucky LIST         Comma-separated numbers to include in every entry
    --unwanted LIST      Comma-separated numbers to exclude
    --system INT         Numbers per entry for system play
    --seed INT           Random seed for reproducibility
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import numpy as np

from ..config.game_config import DEFAULT_GAME, USER_ERROR_MESSAGE
from ..models.game import PredictionRequest
from ..utils.exceptions import PredictionError
from .analyze_data import analyze, frequency_table, visualize_frequency
from .fetch_data import load_history, generate_demo_history
from .games import get_game_rules, list_games
from .predictions import generate, save_predictions, format_entries
from .utils import setup_logging

logger = logging.getLogger(__name__)


def parse_number_list(value: Optional[str]) -> List[int]:
    """
    Parse '7, 11,22' into [7, 11, 22].

    Raises:
        ValueError: If a part is not an integer
    """
    numbers = []
    for part in (value or '').split(','):
        part = part.strip()
        if not part:
            continue
        try:
            numbers.append(int(part))
        except ValueError:
            raise ValueError(f"'{part}' is not an integer") from None
    return numbers


class ArgumentParser(argparse.ArgumentParser):
    """Exits with status 1 on usage errors; status 2 is kept for prediction failures."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = ArgumentParser(description='Offline Lottery Predictor')
    parser.add_argument('--game', default=DEFAULT_GAME,
                        help=f'Game name (default: {DEFAULT_GAME})')
    parser.add_argument('--list-games', action='store_true',
                        help='List built-in games and exit')
    history = parser.add_mutually_exclusive_group()
    history.add_argument('--history', type=Path,
                         help='Text file containing past draws')
    history.add_argument('--demo-history', action='store_true',
                         help='Use generated placeholder draws')
    parser.add_argument('--entries', type=int, default=1,
                        help='Number of entries to generate (default: 1)')
    parser.add_argument('--lucky', default='',
                        help='Comma-separated numbers to include')
    parser.add_argument('--unwanted', default='',
                        help='Comma-separated numbers to exclude')
    parser.add_argument('--system', type=int,
                        help='Numbers per entry for system play')
    parser.add_argument('--main-count', type=int, help='Override main numbers per entry')
    parser.add_argument('--main-range', type=int, help='Override largest main number')
    parser.add_argument('--bonus-count', type=int, help='Override bonus numbers per entry')
    parser.add_argument('--bonus-range', type=int, help='Override largest bonus number')
    parser.add_argument('--seed', type=int, help='Random seed for reproducibility')
    parser.add_argument('--output-dir', type=Path,
                        help='Directory for JSON/text output (not saved if omitted)')
    parser.add_argument('--plot', action='store_true',
                        help='Save a frequency chart to the output directory')
    parser.add_argument('--show-frequency', action='store_true',
                        help='Print the frequency table')
    parser.add_argument('--log-dir', type=Path, default=Path('logs'),
                        help='Directory for lottery.log (default: logs)')
    parser.add_argument('--log-level', default='INFO',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level (default: INFO)')
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_dir, getattr(logging, args.log_level))

    if args.list_games:
        for name in list_games():
            rules = get_game_rules(name)
            print(f"{name}: {rules.description}")
        return 0

    rng = np.random.default_rng(args.seed)

    try:
        rules = get_game_rules(args.game,
                               main_count=args.main_count,
                               main_range=args.main_range,
                               bonus_count=args.bonus_count,
                               bonus_range=args.bonus_range)
        request = PredictionRequest(entry_count=args.entries,
                                    lucky_numbers=parse_number_list(args.lucky),
                                    unwanted_numbers=parse_number_list(args.unwanted),
                                    system_number=args.system)
    except ValueError as e:
        logger.error(f"Invalid input: {e}")
        print(f"Error: {e}")
        return 1

    if args.history is not None:
        try:
            history_text = load_history(args.history)
        except OSError as e:
            logger.error(f"Cannot read history: {e}")
            print(f"Error: {e}")
            return 1
    elif args.demo_history:
        history_text = generate_demo_history(rules, rng=rng)
    else:
        history_text = ''

    profile = analyze(history_text, rules.main_range)

    try:
        result = generate(rules, profile, request, rng=rng)
    except PredictionError as e:
        logger.error(f"Local prediction failed: {e}")
        print(USER_ERROR_MESSAGE)
        return 2

    if args.show_frequency:
        print(frequency_table(profile).to_string(index=False))

    print("\n" + "=" * 50)
    print(f"{rules.name.upper()} - {result.system_label}")
    print("=" * 50 + "\n")
    print(format_entries(result))
    print("\n" + "=" * 50)
    print(result.narrative)
    print(f"Display score (cosmetic, not a probability): {result.confidence_score}")
    print(f"Methods: {', '.join(result.method_tags)}")
    print("=" * 50 + "\n")

    if args.plot and args.output_dir is None:
        logger.warning("--plot ignored: no --output-dir given for the chart")

    if args.output_dir is not None:
        json_path, text_path = save_predictions(result, args.output_dir, game=rules.name)
        print(f"Predictions saved to {text_path}")
        if args.plot:
            viz_path = visualize_frequency(profile, args.output_dir / 'frequency.png')
            print(f"Frequency chart saved to {viz_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
