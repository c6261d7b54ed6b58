#!/usr/bin/env python3
"""
Generate a CSV fixture of random dates.

**Purpose**: Produce a file of random calendar dates for seeding test
databases or parametrizing tests. Each row carries the epoch day, the year and
the ISO rendering of one generated date.

**Usage**:
    # 100 dates anywhere in the supported range
    python actions/generate_random_dates.py --count 100

    # 50 birth dates of adults (age of majority 18) as of today, reproducible
    python actions/generate_random_dates.py --kind adult --age-of-majority 18 --count 50 --seed 7

    # Dates in the 21st century, written to a custom path
    python actions/generate_random_dates.py --kind century --century 21 --output data/fixtures/c21.csv

**Kinds**:
    any, bce, ce, before-now, after-now, century, adult, minor

**Seeding**:
    --seed overrides DATEJUGGLER_SEED. Without either, output differs per run.
"""

import argparse
import sys
from pathlib import Path

# Add project root to Python path so we can import src modules
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.config.settings import get_settings
from src.dates.batch import generate_dates, write_dates_csv
from src.dates.sampling import (
    random_adult_birth_date_from_now,
    random_bce_date,
    random_ce_date,
    random_date,
    random_date_after_now,
    random_date_before_now,
    random_date_in_century,
    random_minor_birth_date_from_now,
)
from src.utils.logger import setup_logger
from src.utils.rng import RangeSampler

GENERATORS = {
    "any": random_date,
    "bce": random_bce_date,
    "ce": random_ce_date,
    "before-now": random_date_before_now,
    "after-now": random_date_after_now,
    "century": random_date_in_century,
    "adult": random_adult_birth_date_from_now,
    "minor": random_minor_birth_date_from_now,
}

DEFAULT_OUTPUT = project_root / "data" / "fixtures" / "random_dates.csv"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a CSV fixture of random dates.")
    parser.add_argument("--kind", choices=sorted(GENERATORS), default="any",
                        help="Which constraint the dates satisfy (default: any).")
    parser.add_argument("--count", type=int, default=10,
                        help="Number of dates to generate (default: 10).")
    parser.add_argument("--century", type=int, default=None,
                        help="Century for --kind century (e.g. 21).")
    parser.add_argument("--age-of-majority", type=int, default=18,
                        help="Age of majority for --kind adult/minor (default: 18).")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for reproducible output (overrides DATEJUGGLER_SEED).")
    parser.add_argument("--output", type=Path, default=DEFAULT_OUTPUT,
                        help=f"Destination CSV (default: {DEFAULT_OUTPUT}).")
    return parser


def parse_args(argv=None) -> argparse.Namespace:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.kind == "century" and args.century is None:
        parser.error("--century is required for --kind century")
    return args


def build_generator_args(args: argparse.Namespace) -> tuple:
    """Positional arguments the chosen generator needs."""
    if args.kind == "century":
        return (args.century,)
    if args.kind in ("adult", "minor"):
        return (args.age_of_majority,)
    return ()


def main(argv=None) -> int:
    """
    Main entrypoint.

    Steps:
      1. Parse arguments and configure logging.
      2. Build a sampler from --seed (or DATEJUGGLER_SEED).
      3. Generate the dates and write them to CSV.

    Returns:
        Process exit code (0 on success, 1 on invalid input or a failed write).
    """
    args = parse_args(argv)
    setup_logger()

    seed = args.seed if args.seed is not None else get_settings().seed
    sampler = RangeSampler(seed=seed)

    print("=" * 80)
    print("Random Date Fixture Generation")
    print("=" * 80)
    print(f"Kind:   {args.kind}")
    print(f"Count:  {args.count}")
    print(f"Seed:   {seed if seed is not None else '(unseeded)'}")
    print()

    try:
        generator_args = build_generator_args(args)
        df = generate_dates(GENERATORS[args.kind], args.count, *generator_args, sampler=sampler)
    except ValueError as e:  # includes ValidationError
        print(f"ERROR: {e}")
        return 1

    try:
        write_dates_csv(df, args.output)
    except OSError as e:
        print(f"ERROR: {e}")
        return 1

    print(f"Wrote {len(df)} dates to {args.output}")
    if not df.empty:
        print(f"  Earliest: {df.loc[df['epoch_day'].idxmin(), 'date']}")
        print(f"  Latest:   {df.loc[df['epoch_day'].idxmax(), 'date']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
