"""
Month x year accident counts

Usage:
    from fars.summary import fars_summarize_years, plot_monthly_summary

    summary = fars_summarize_years([2013, 2014, 2015])
    ax = plot_monthly_summary(summary)
"""

from typing import Optional

import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns

from config.settings import HEATMAP_CMAP, HEATMAP_FIGSIZE, MONTH_COL, YEAR_COL
from fars.reader import fars_read_years


def _empty_summary() -> pd.DataFrame:
    return pd.DataFrame(
        index=pd.Index([], name=MONTH_COL, dtype='int64'),
        columns=pd.Index([], name=YEAR_COL),
    )


def fars_summarize_years(years, data_dir=None) -> pd.DataFrame:
    """
    Count accidents per month for each year

    Years that fail to load (see fars_read_years) are left out. Month/year
    combinations with no accidents stay <NA> rather than 0.

    Args:
        years: Year values (ints or integer strings)
        data_dir: Directory holding the yearly files (default: working directory)

    Returns:
        DataFrame indexed by MONTH (ascending) with one Int64 column per
        loaded year label (ascending)

    Raises:
        ValueError: If the loaded year labels mix ints and strings
    """
    frames = [df for df in fars_read_years(years, data_dir=data_dir) if df is not None]
    if not frames:
        return _empty_summary()

    labels = [df[YEAR_COL].iloc[0] for df in frames if len(df)]
    if len({type(label) for label in labels}) > 1:
        raise ValueError(
            f'year labels must all be ints or all be strings, got {labels}'
        )

    counts = (
        pd.concat(frames, ignore_index=True)
        .groupby([YEAR_COL, MONTH_COL])
        .size()
    )
    # year -> month -> count, reshaped with months as rows
    summary = counts.unstack(YEAR_COL).sort_index().sort_index(axis=1)
    return summary.astype('Int64')


def plot_monthly_summary(summary: pd.DataFrame, ax: Optional[plt.Axes] = None) -> plt.Axes:
    """
    Heatmap of a month x year summary; absent cells are left blank

    Args:
        summary: Output of fars_summarize_years
        ax: Axes to draw on (a new figure is created if None)

    Returns:
        The matplotlib Axes
    """
    if ax is None:
        _, ax = plt.subplots(figsize=HEATMAP_FIGSIZE)

    values = summary.astype('float64')
    sns.heatmap(values, ax=ax, cmap=HEATMAP_CMAP, annot=True, fmt='.0f',
                linewidths=0.5, cbar_kws={'label': 'Accidents'})
    ax.set_title('Accidents by Month and Year', fontsize=13, fontweight='bold', pad=15)
    ax.set_xlabel('Year', fontsize=11)
    ax.set_ylabel('Month', fontsize=11)
    return ax
