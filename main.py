"""
datejuggler – Main entry point.

Minimal bootstrap script that prints one date of each kind to verify the
project is wired together.
"""

from src.dates.calendar import format_date
from src.dates.sampling import (
    random_adult_birth_date_from_now,
    random_bce_date,
    random_ce_date,
    random_date,
    random_minor_birth_date_from_now,
)


def main() -> None:
    """Print a handful of sample dates."""
    print(f"Any date:          {format_date(random_date())}")
    print(f"BCE date:          {format_date(random_bce_date())}")
    print(f"CE date:           {format_date(random_ce_date())}")
    print(f"Adult birth date:  {format_date(random_adult_birth_date_from_now(18))}")
    print(f"Minor birth date:  {format_date(random_minor_birth_date_from_now(18))}")


if __name__ == "__main__":
    main()
