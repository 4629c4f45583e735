#!/usr/bin/env python3
"""Time a single stochastic universal sampling call.

Weights are drawn uniformly from [0, 1).

Usage: python scripts/benchmark.py [--amount N] [--num-weights N] [--seed S]
"""

import argparse
import logging
import random
import sys
import time

from stochastic_universal_sampling import choose_multiple_weighted


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--amount", type=int, default=1000)
    parser.add_argument("--num-weights", type=int, default=1_000_000)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    rng = random.Random(args.seed)
    weights = [rng.random() for _ in range(args.num_weights)]

    print(
        f"Running SUS(amount: {args.amount}, num_weights: {args.num_weights}) ..."
    )
    start = time.perf_counter()
    result = choose_multiple_weighted(rng, args.amount, weights)
    elapsed = time.perf_counter() - start
    print(f"Elapsed time: {elapsed * 1000:.3f} ms ({len(result)} indices)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
