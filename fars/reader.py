"""
Reading yearly FARS accident files

One compressed CSV per year (accident_<year>.csv.bz2). Every call reads
from disk again; nothing is cached between calls.

Usage:
    from fars.reader import fars_read, make_filename, fars_read_years

    df = fars_read(make_filename(2013))
    per_year = fars_read_years([2013, 2014, 2015])
"""

import sys
import warnings
from pathlib import Path
from typing import List, Optional, Union

import pandas as pd
from pandera.errors import SchemaError

from config.settings import FILENAME_TEMPLATE, MONTH_COL, YEAR_COL
from fars.validation import validate_columns

PathLike = Union[str, Path]

# Anything that can go wrong with one year's file; reported as a warning
YEAR_ERRORS = (OSError, ValueError, TypeError, KeyError, SchemaError)


def fars_read(filename: PathLike) -> pd.DataFrame:
    """
    Read one accident file into a DataFrame

    Args:
        filename: Path to a (possibly compressed) CSV file with a header row

    Returns:
        DataFrame with one row per accident

    Raises:
        FileNotFoundError: If the file does not exist
    """
    if not Path(filename).exists():
        raise FileNotFoundError(f"file '{filename}' does not exist")

    # low_memory=False: type each column from the whole file, no DtypeWarning
    return pd.read_csv(filename, low_memory=False)


def make_filename(year) -> str:
    """accident_<year>.csv.bz2 for an int or integer string year"""
    return FILENAME_TEMPLATE.format(year=int(year))


def year_path(year, data_dir: Optional[PathLike] = None) -> PathLike:
    """make_filename(year), under data_dir when one is given"""
    filename = make_filename(year)
    if data_dir is None:
        return filename
    return Path(data_dir) / filename


def _read_year(year, data_dir: Optional[PathLike]) -> pd.DataFrame:
    df = validate_columns(fars_read(year_path(year, data_dir)), [MONTH_COL])
    # The label is the caller's value, not re-derived from the file name
    return df.assign(**{YEAR_COL: year})[[MONTH_COL, YEAR_COL]]


def _warn_invalid_year(year) -> None:
    # Fresh registry per warning: every failed year is reported, even when the
    # same message comes from the same call site again. Filters still apply.
    caller = sys._getframe(2)
    warnings.warn_explicit(
        f'invalid year: {year}',
        UserWarning,
        caller.f_code.co_filename,
        caller.f_lineno,
        module=caller.f_globals.get('__name__'),
        registry=None,
    )


def fars_read_years(years, data_dir: Optional[PathLike] = None) -> List[Optional[pd.DataFrame]]:
    """
    Read MONTH and year for several years

    A year whose file is missing or unreadable does not stop the others:
    it triggers a warning ("invalid year: <year>") and its slot is None.
    Each failed year warns, including repeats of the same year.

    Args:
        years: Year values (ints or integer strings), in output order
        data_dir: Directory holding the yearly files (default: working directory)

    Returns:
        One entry per requested year: a DataFrame with columns MONTH and
        year, or None if that year could not be read
    """
    results = []
    for year in years:
        try:
            results.append(_read_year(year, data_dir))
        except YEAR_ERRORS:
            _warn_invalid_year(year)
            results.append(None)
    return results
