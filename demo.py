"""
demo caller for seqops: builds two random integer lists and prints one line per
operation. press enter to regenerate, q to quit.
"""
import argparse
import logging
from dataclasses import dataclass, asdict
from typing import List, Optional, Tuple

import numpy as np

from seqops import P, OutOfRangeError

logger = logging.getLogger(__name__)


@dataclass
class DemoConfig:
    """configuration for the random lists"""
    min_value: int = 0
    max_value: int = 50  # exclusive
    list_size: int = 10
    seed: Optional[int] = None


def generate_lists(config: DemoConfig, rng: Optional[np.random.Generator] = None) -> Tuple[List[int], List[int]]:
    """two random integer lists in [min_value, max_value)"""
    if config.max_value <= config.min_value:
        raise ValueError(f"max_value ({config.max_value}) must be greater than min_value ({config.min_value})")
    if config.list_size < 0:
        raise ValueError(f"list_size must not be negative, got {config.list_size}")

    rng = rng if rng is not None else np.random.default_rng(config.seed)
    ints = rng.integers(config.min_value, config.max_value, size=config.list_size)
    ints2 = rng.integers(config.min_value, config.max_value, size=config.list_size)
    # convert numpy integers to native python ints
    return ints.tolist(), ints2.tolist()


def run_report(ints: List[int], ints2: List[int]) -> List[str]:
    """run every operation against the two lists and render each result as a line"""
    first = P(ints)

    try:
        element_3 = str(first.to.element_at(3))
    except OutOfRangeError:
        element_3 = "out of range"

    return [
        f"List 1: {first.to.join()}",
        f"List 2: {P(ints2).to.join()}",
        f"All > 10: {first.to.all(lambda x: x > 10)}",
        f"Any > 40: {first.to.any(lambda x: x > 40)}",
        f"Contains 25: {first.to.contains(25)}",
        f"Distinct: {first.set.distinct().to.join()}",
        f"ElementAt(3): {element_3}",
        f"Except List2: {first.set.except_(ints2).to.join()}",
        f"First > 20: {first.to.first_or_default(lambda x: x > 20, 'none')}",
        f"Last < 30: {first.to.last_or_default(lambda x: x < 30, 'none')}",
        f"Intersect with List2: {first.set.intersect(ints2).to.join()}",
        f"Count > 15: {first.to.count(lambda x: x > 15)}",
        f"SkipWhile < 20: {first.skip_while(lambda x: x < 20).to.join()}",
        f"Union with List2: {first.set.union(ints2).to.join()}",
        f"Where > 25: {first.where(lambda x: x > 25).to.join()}",
        f"SequenceEqual with List2: {first.to.sequence_equal(ints2)}",
    ]


def create_cli_interface():
    """create command line interface for the demo"""
    parser = argparse.ArgumentParser(description='seqops demo - run every operation on two random integer lists')
    parser.add_argument('--size', type=int, default=10, help='Elements per list (default: 10)')
    parser.add_argument('--min', dest='min_value', type=int, default=0, help='Smallest value (default: 0)')
    parser.add_argument('--max', dest='max_value', type=int, default=50, help='Upper bound, exclusive (default: 50)')
    parser.add_argument('--seed', type=int, default=None, help='Random seed')
    parser.add_argument('--verbose', action='store_true', help='Verbose logging')
    return parser


def main():
    """main entry point for the demo"""
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(message)s')
    args = create_cli_interface().parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    config = DemoConfig(
        min_value=args.min_value,
        max_value=args.max_value,
        list_size=args.size,
        seed=args.seed,
    )
    logger.info(f"config: {asdict(config)}")
    rng = np.random.default_rng(config.seed)

    while True:
        ints, ints2 = generate_lists(config, rng)
        for line in run_report(ints, ints2):
            print(line)
        try:
            command = input("\n[enter] regenerate, [q] quit > ").strip().lower()
        except (KeyboardInterrupt, EOFError):
            print()
            break
        if command == 'q':
            break


if __name__ == "__main__":
    main()
