"""
Column checks for FARS accident tables

Uses pandera to confirm that the columns an operation relies on are
present and coercible to their published types. Values are not range
checked: out-of-range coordinates are meaningful sentinels in FARS.

Usage:
    from fars.validation import validate_columns

    months = validate_columns(df, ['MONTH'])
"""

from typing import Iterable

import pandas as pd
import pandera as pa
from pandera import Column

from config.settings import LATITUDE_COL, LONGITUDE_COL, MONTH_COL, STATE_COL


# ============================================================================
# ACCIDENT TABLE COLUMNS
# ============================================================================

ACCIDENT_COLUMNS = {
    MONTH_COL: Column(int, nullable=False, description='Month of the accident (1-12)'),
    STATE_COL: Column(int, nullable=False, description='FIPS state code'),
    LONGITUDE_COL: Column(float, nullable=True,
                          description='Longitude, values above 900 mean unknown'),
    LATITUDE_COL: Column(float, nullable=True,
                         description='Latitude, values above 90 mean unknown'),
}

MAPPING_COLUMNS = [STATE_COL, LONGITUDE_COL, LATITUDE_COL]


def accident_schema(columns: Iterable[str]) -> pa.DataFrameSchema:
    """Schema requiring only ``columns``; everything else passes through"""
    return pa.DataFrameSchema(
        {name: ACCIDENT_COLUMNS[name] for name in columns},
        strict=False,  # FARS files carry ~50 other columns
        coerce=True,
        description='FARS accident table'
    )


def validate_columns(df: pd.DataFrame, columns: Iterable[str]) -> pd.DataFrame:
    """
    Check that ``df`` carries ``columns`` with coercible types

    Args:
        df: Accident table as read from a yearly file
        columns: Required column names (keys of ACCIDENT_COLUMNS)

    Returns:
        The table with the required columns coerced

    Raises:
        pandera.errors.SchemaError: If a column is missing or not coercible
    """
    return accident_schema(columns).validate(df)
