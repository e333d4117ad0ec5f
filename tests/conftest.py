"""
Shared fixtures: small synthetic FARS accident files
"""

import matplotlib
matplotlib.use('Agg')

import matplotlib.pyplot as plt
import pandas as pd
import pytest

# 2013: Georgia (13) x2, Texas (48), Alabama (1)
ACCIDENTS_2013 = pd.DataFrame({
    'ST_CASE': [10001, 10002, 480001, 10003],
    'STATE': [13, 13, 48, 1],
    'MONTH': [1, 1, 2, 3],
    'DAY': [4, 17, 9, 30],
    'LATITUDE': [33.75, 99.9999, 29.76, 32.36],
    'LONGITUD': [-84.39, 999.9999, -95.37, -86.30],
})

# 2014: Georgia x1, Texas x3
ACCIDENTS_2014 = pd.DataFrame({
    'ST_CASE': [130001, 480002, 480003, 480004],
    'STATE': [13, 48, 48, 48],
    'MONTH': [1, 2, 2, 12],
    'DAY': [1, 14, 15, 25],
    'LATITUDE': [31.58, 30.27, 32.78, 99.9999],
    'LONGITUD': [-84.16, -97.74, -96.80, 999.9999],
})


@pytest.fixture
def fars_dir(tmp_path):
    """Directory with accident_2013.csv.bz2 and accident_2014.csv.bz2"""
    ACCIDENTS_2013.to_csv(tmp_path / 'accident_2013.csv.bz2', index=False)
    ACCIDENTS_2014.to_csv(tmp_path / 'accident_2014.csv.bz2', index=False)
    return tmp_path


@pytest.fixture
def in_fars_dir(fars_dir, monkeypatch):
    """Run the test from inside the data directory"""
    monkeypatch.chdir(fars_dir)
    return fars_dir


@pytest.fixture
def no_default_boundaries(tmp_path, monkeypatch):
    """Point the default boundary layer at a file that does not exist"""
    missing = tmp_path / 'no_boundaries' / 'states.shp'
    monkeypatch.setattr('fars.mapping.DEFAULT_STATE_BOUNDARIES', missing)
    return missing


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close('all')
