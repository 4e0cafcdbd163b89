"""
simrand demo - prints the first draws for a seed.

Usage:
    python main.py [--seed <n>] [--count <n>]

A seed of 0 (the default, unless RNG_SEED is set) generates a fresh seed and prints it,
so any run can be replayed with --seed.
"""
import sys
import argparse

from simrand.config import RNG_SEED
from simrand import get_rng


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="simrand - print reproducible draws for a seed"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=RNG_SEED,
        help="rng seed; 0 generates one (default: RNG_SEED or 0)"
    )
    parser.add_argument(
        "--count",
        type=int,
        default=3,
        help="number of draws per line (default: 3)"
    )
    parser.add_argument(
        "--perlin",
        type=int,
        default=24,
        help="length of the pseudo-Perlin sample (default: 24)"
    )
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    rng = get_rng()
    seed = rng.set_seed_if_not_zero(args.seed)

    print("=" * 50)
    print(f"  simrand - seed {seed}")
    print("=" * 50)
    print()
    print(f"i(0, 10)         : {[rng.i(0, 10) for _ in range(args.count)]}")
    print(f"f(0, 1)          : {[round(rng.f(0.0, 1.0), 6) for _ in range(args.count)]}")
    print(f"gaussian(0, 1)   : {[round(rng.gaussian(), 6) for _ in range(args.count)]}")
    print(f"pick_any A/B 1:3 : {[rng.pick_any(['A', 'B'], [1, 3]) for _ in range(args.count)]}")
    print(f"pseudo-Perlin    : {rng.pseudo_perlin_int(0, 20, args.perlin, 2)}")
    print()
    print(f"Replay with: python main.py --seed {seed}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
