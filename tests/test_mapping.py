import geopandas as gpd
import numpy as np
import pandas as pd
import pytest
from matplotlib.collections import LineCollection
from shapely.geometry import box

from fars.errors import InvalidStateError
from fars.mapping import (
    ACCIDENT_POINTS_GID,
    coordinate_extent,
    fars_map_state,
    load_boundaries,
    mask_sentinel_coordinates,
    plot_state_accidents,
)


def _points(ax):
    [points] = [c for c in ax.collections if c.get_gid() == ACCIDENT_POINTS_GID]
    return points.get_offsets()


@pytest.fixture
def states_layer():
    return gpd.GeoDataFrame(
        {'NAME': ['Georgia', 'Texas']},
        geometry=[box(-85.6, 30.4, -80.8, 35.0), box(-106.6, 25.8, -93.5, 36.5)],
        crs='EPSG:4326',
    )


class TestSentinels:

    def test_out_of_range_coordinates_become_missing(self):
        df = pd.DataFrame({'LONGITUD': [-84.0, 999.99, 900.0], 'LATITUDE': [33.0, 99.99, 90.0]})
        masked = mask_sentinel_coordinates(df)
        assert masked['LONGITUD'].isna().tolist() == [False, True, False]
        assert masked['LATITUDE'].isna().tolist() == [False, True, False]
        # input untouched
        assert df['LONGITUD'].tolist() == [-84.0, 999.99, 900.0]

    def test_extent_skips_missing_values_per_column(self):
        df = mask_sentinel_coordinates(pd.DataFrame({
            'LONGITUD': [-84.0, 999.99, -82.0],
            'LATITUDE': [33.0, 31.0, 99.99],
        }))
        assert coordinate_extent(df) == ((-84.0, -82.0), (31.0, 33.0))

    def test_no_known_coordinates_has_no_extent(self):
        df = mask_sentinel_coordinates(pd.DataFrame({'LONGITUD': [999.0], 'LATITUDE': [99.0]}))
        assert coordinate_extent(df) is None


class TestPlotStateAccidents:

    def test_sentinel_row_gives_no_marker(self, no_default_boundaries):
        state_data = pd.DataFrame({
            'STATE': [13, 13, 13],
            'LONGITUD': [999.9999, -84.39, -83.0],
            'LATITUDE': [99.9999, 33.75, 99.9999],
        })
        ax = plot_state_accidents(state_data, 13)
        offsets = _points(ax)
        assert len(offsets) == 1
        assert np.allclose(offsets[0], (-84.39, 33.75))
        # longitude -83.0 is known even though its latitude is not
        assert ax.get_xlim() == (-84.39, -83.0)

    def test_empty_state_prints_and_returns_none(self, capsys):
        empty = pd.DataFrame({'STATE': [], 'LONGITUD': [], 'LATITUDE': []})
        assert plot_state_accidents(empty, 13) is None
        assert 'no accidents to plot' in capsys.readouterr().out

    def test_title_uses_state_name(self, no_default_boundaries):
        state_data = pd.DataFrame({'STATE': [48, 48], 'LONGITUD': [-97.7, -96.8], 'LATITUDE': [30.3, 32.8]})
        ax = plot_state_accidents(state_data, 48)
        assert ax.get_title() == 'Texas: 2 accidents'

    def test_boundaries_drawn_under_points(self, states_layer):
        state_data = pd.DataFrame({'STATE': [13, 13], 'LONGITUD': [-84.4, -81.1], 'LATITUDE': [33.7, 32.1]})
        ax = plot_state_accidents(state_data, 13, boundaries=states_layer)
        assert any(isinstance(c, LineCollection) for c in ax.collections)
        assert len(_points(ax)) == 2


class TestLoadBoundaries:

    def test_missing_default_draws_points_only(self, no_default_boundaries, capsys):
        assert load_boundaries() is None
        assert 'drawing accident points only' in capsys.readouterr().out

    def test_missing_explicit_file_fails(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_boundaries(tmp_path / 'nowhere.shp')

    def test_reads_file_and_reprojects(self, tmp_path, states_layer):
        path = tmp_path / 'states.gpkg'
        states_layer.to_crs('EPSG:3857').to_file(path, driver='GPKG')
        layer = load_boundaries(path)
        assert layer.crs == 'EPSG:4326'
        assert layer['NAME'].tolist() == ['Georgia', 'Texas']


class TestFarsMapState:

    def test_plots_one_marker_per_located_accident(self, in_fars_dir, no_default_boundaries):
        ax = fars_map_state('13', '2013')
        offsets = _points(ax)
        # second Georgia accident has sentinel coordinates
        assert len(offsets) == 1
        assert np.allclose(offsets[0], (-84.39, 33.75))

    def test_data_dir_and_boundaries(self, fars_dir, states_layer):
        ax = fars_map_state(48, 2014, data_dir=fars_dir, boundaries=states_layer)
        assert len(_points(ax)) == 2
        assert ax.get_ylim() == (30.27, 32.78)

    def test_unknown_state_fails(self, in_fars_dir):
        with pytest.raises(InvalidStateError, match='invalid STATE number: 6') as excinfo:
            fars_map_state(6, 2013)
        assert excinfo.value.state == 6

    def test_missing_year_fails(self, in_fars_dir):
        with pytest.raises(FileNotFoundError, match="accident_2010.csv.bz2"):
            fars_map_state(13, 2010)

    def test_non_numeric_state_fails(self, in_fars_dir):
        with pytest.raises(ValueError):
            fars_map_state('Georgia', 2013)

    def test_draws_on_given_axes(self, in_fars_dir, no_default_boundaries):
        import matplotlib.pyplot as plt

        _, ax = plt.subplots()
        assert fars_map_state(1, 2013, ax=ax) is ax
