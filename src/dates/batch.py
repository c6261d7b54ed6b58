"""
Batch generation of random dates into pandas DataFrames and CSV fixtures.

**Conceptual**: The sampling functions return one date per call. Test suites
usually need a table of them (a column of birth dates, a set of historical
events). This module calls any sampling function repeatedly and collects the
results into a DataFrame with a fixed, tool-friendly layout.

**Layout**:
  - epoch_day (int64): days since 1970-01-01, exact and sortable.
  - year (int64): astronomical year of the date.
  - date (str): extended ISO-8601 rendering from format_date().

Dates are stored as strings rather than pandas timestamps because pandas
timestamps cannot hold most of the supported range (years far beyond 1677-2262).
"""

from pathlib import Path
from typing import Callable, Optional

import numpy as np
import pandas as pd

from src.dates.calendar import format_date, to_epoch_day, year_of
from src.utils.logger import get_logger
from src.utils.rng import RangeSampler, get_default_sampler

DATE_COLUMNS = ["epoch_day", "year", "date"]

logger = get_logger("batch")


def generate_dates(
    generator: Callable[..., np.datetime64],
    count: int,
    *args,
    sampler: Optional[RangeSampler] = None,
    **kwargs,
) -> pd.DataFrame:
    """
    Draw `count` dates from a sampling function into a DataFrame.

    Args:
        generator: Any function from src.dates.sampling (or compatible) that
                   accepts a keyword-only `sampler`.
        count: Number of dates to draw (>= 0).
        *args: Positional arguments forwarded to the generator.
        sampler: Randomness source shared by all draws (default: process-wide
                 sampler). A seeded sampler makes the whole frame reproducible.
        **kwargs: Keyword arguments forwarded to the generator (e.g. clock).

    Returns:
        DataFrame with columns DATE_COLUMNS, one row per draw, in draw order.

    Raises:
        ValueError: If count is negative.
        ValidationError: Propagated from the generator on invalid arguments
                         (raised on the first draw, before anything is collected).

    Example:
        >>> from src.dates.sampling import random_date_in_century
        >>> df = generate_dates(random_date_in_century, 3, 21)
        >>> df.columns.tolist()
        ['epoch_day', 'year', 'date']
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got: {count}")

    if sampler is None:
        sampler = get_default_sampler()

    dates = [generator(*args, sampler=sampler, **kwargs) for _ in range(count)]
    logger.debug("Generated %d dates with %s", count, getattr(generator, "__name__", generator))

    return pd.DataFrame(
        {
            "epoch_day": pd.Series([to_epoch_day(d) for d in dates], dtype="int64"),
            "year": pd.Series([year_of(d) for d in dates], dtype="int64"),
            "date": pd.Series([format_date(d) for d in dates], dtype="object"),
        },
        columns=DATE_COLUMNS,
    )


def write_dates_csv(df: pd.DataFrame, path: Path | str) -> None:
    """
    Write a generated date frame to CSV.

    Creates the parent directory if needed and writes without the index.

    Args:
        df: Frame produced by generate_dates().
        path: Destination file.

    Raises:
        KeyError: If df lacks any of DATE_COLUMNS.
        OSError: If the file can't be written.
    """
    missing = [col for col in DATE_COLUMNS if col not in df.columns]
    if missing:
        raise KeyError(f"Date frame is missing columns: {missing}")

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    try:
        df[DATE_COLUMNS].to_csv(path, index=False)
    except Exception as e:
        raise OSError(
            f"Failed to write CSV to {path}. Error: {e}"
        )
