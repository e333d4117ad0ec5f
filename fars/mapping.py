"""
State maps of accident locations

Plots one point per accident of a state in a given year, over state
boundary outlines when a boundary layer is available.

Usage:
    from fars.mapping import fars_map_state

    ax = fars_map_state(13, 2014)                    # Georgia, 2014
    ax = fars_map_state('48', '2015', boundaries='cb_2018_us_state_20m.shp')
"""

from pathlib import Path
from typing import Optional, Tuple, Union

import geopandas as gpd
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from config.paths import DEFAULT_STATE_BOUNDARIES
from config.settings import (
    BOUNDARY_COLOR,
    BOUNDARY_LINEWIDTH,
    LATITUDE_COL,
    LATITUDE_SENTINEL,
    LONGITUDE_COL,
    LONGITUDE_SENTINEL,
    MAP_FIGSIZE,
    MARKER_COLOR,
    MARKER_SIZE,
    STATE_COL,
)
from fars.errors import InvalidStateError
from fars.reader import fars_read, year_path
from fars.states import state_name
from fars.validation import MAPPING_COLUMNS, validate_columns

Boundaries = Union[gpd.GeoDataFrame, str, Path, None]

ACCIDENT_POINTS_GID = 'accident-points'


def mask_sentinel_coordinates(df: pd.DataFrame) -> pd.DataFrame:
    """Copy of ``df`` with unknown-location codes replaced by NaN"""
    df = df.copy()
    df[LONGITUDE_COL] = df[LONGITUDE_COL].where(df[LONGITUDE_COL] <= LONGITUDE_SENTINEL)
    df[LATITUDE_COL] = df[LATITUDE_COL].where(df[LATITUDE_COL] <= LATITUDE_SENTINEL)
    return df


def coordinate_extent(df: pd.DataFrame) -> Optional[Tuple[Tuple[float, float], Tuple[float, float]]]:
    """
    ((lon_min, lon_max), (lat_min, lat_max)) over known coordinates

    Each range skips missing values independently. Returns None when
    either column has no known value at all.
    """
    lon = df[LONGITUDE_COL].to_numpy(dtype=float)
    lat = df[LATITUDE_COL].to_numpy(dtype=float)
    if np.isnan(lon).all() or np.isnan(lat).all():
        return None
    return (np.nanmin(lon), np.nanmax(lon)), (np.nanmin(lat), np.nanmax(lat))


def load_boundaries(boundaries: Boundaries = None) -> Optional[gpd.GeoDataFrame]:
    """
    Resolve the base map layer

    Accepts a GeoDataFrame, a path readable by geopandas, or None to use
    DEFAULT_STATE_BOUNDARIES when that file exists.
    """
    if isinstance(boundaries, gpd.GeoDataFrame):
        layer = boundaries
    else:
        path = Path(boundaries) if boundaries is not None else DEFAULT_STATE_BOUNDARIES
        if not path.exists():
            if boundaries is not None:
                raise FileNotFoundError(f"boundary file '{path}' does not exist")
            print(f'⚠️  No state boundaries at {path}, drawing accident points only')
            return None
        layer = gpd.read_file(path)

    # Accident coordinates are plain lon/lat
    if layer.crs is not None and layer.crs != 'EPSG:4326':
        layer = layer.to_crs('EPSG:4326')
    return layer


def _draw_boundaries(ax: plt.Axes, layer: gpd.GeoDataFrame, extent) -> None:
    (lon_min, lon_max), (lat_min, lat_max) = extent
    visible = layer.cx[lon_min:lon_max, lat_min:lat_max]
    if len(visible) == 0:
        return
    visible.boundary.plot(ax=ax, color=BOUNDARY_COLOR, linewidth=BOUNDARY_LINEWIDTH)


def plot_state_accidents(state_data: pd.DataFrame, state_id,
                         boundaries: Boundaries = None,
                         ax: Optional[plt.Axes] = None) -> Optional[plt.Axes]:
    """
    Scatter map of accidents already filtered to one state

    Args:
        state_data: Accident rows for the state (STATE, LONGITUD, LATITUDE)
        state_id: State code, used for the title
        boundaries: Base map layer (see load_boundaries)
        ax: Axes to draw on (a new figure is created if None)

    Returns:
        The matplotlib Axes, or None if there is nothing to plot
    """
    if len(state_data) == 0:
        print('no accidents to plot')
        return None

    data = mask_sentinel_coordinates(state_data)
    points = data.dropna(subset=[LONGITUDE_COL, LATITUDE_COL])
    extent = coordinate_extent(data)

    if ax is None:
        _, ax = plt.subplots(figsize=MAP_FIGSIZE)

    layer = load_boundaries(boundaries)
    if layer is not None and extent is not None:
        _draw_boundaries(ax, layer, extent)

    ax.scatter(points[LONGITUDE_COL], points[LATITUDE_COL], s=MARKER_SIZE,
               c=MARKER_COLOR, marker='.', gid=ACCIDENT_POINTS_GID)

    if extent is not None:
        ax.set_xlim(*extent[0])
        ax.set_ylim(*extent[1])

    ax.set_title(f'{state_name(state_id)}: {len(points):,} accidents',
                 fontsize=13, fontweight='bold', pad=15)
    ax.set_xlabel('Longitude', fontsize=11)
    ax.set_ylabel('Latitude', fontsize=11)
    return ax


def fars_map_state(state_id, year, data_dir=None, boundaries: Boundaries = None,
                   ax: Optional[plt.Axes] = None) -> Optional[plt.Axes]:
    """
    Map accident locations of one state in one year

    Args:
        state_id: FARS STATE code (int or integer string)
        year: Year (int or integer string)
        data_dir: Directory holding the yearly files (default: working directory)
        boundaries: Base map layer (see load_boundaries)
        ax: Axes to draw on (a new figure is created if None)

    Returns:
        The matplotlib Axes, or None if the state had no accidents

    Raises:
        FileNotFoundError: If the year's file does not exist
        ValueError: If state_id or year is not an integer
        InvalidStateError: If the state does not occur in that year's data
    """
    data = validate_columns(fars_read(year_path(year, data_dir)), MAPPING_COLUMNS)
    state_id = int(state_id)

    if state_id not in set(data[STATE_COL].unique()):
        raise InvalidStateError(state_id)

    state_data = data[data[STATE_COL] == state_id]
    return plot_state_accidents(state_data, state_id, boundaries=boundaries, ax=ax)
