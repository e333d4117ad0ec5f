"""
Project Path Configuration

Centralized path definitions for FARS source files and rendered outputs
Bronze layer: yearly files and boundary layers exactly as published
"""

from pathlib import Path

# Project root
PROJECT_ROOT = Path(__file__).parent.parent

# ==============================================================================
# DATA (Bronze Layer)
# ==============================================================================

DATA_ROOT = PROJECT_ROOT / "data"
BRONZE = DATA_ROOT / "bronze"

# accident_<year>.csv.bz2 files
BRONZE_FARS = BRONZE / "fars"

# Census cartographic boundary file (any format geopandas can read works)
BRONZE_BOUNDARIES = BRONZE / "boundaries"
DEFAULT_STATE_BOUNDARIES = BRONZE_BOUNDARIES / "cb_2018_us_state_20m.shp"

# ==============================================================================
# OUTPUTS
# ==============================================================================

OUTPUTS_ROOT = PROJECT_ROOT / "outputs"
MAPS = OUTPUTS_ROOT / "maps"


def default_map_path(state_id, year) -> Path:
    """Where the CLI writes a state map when no --output is given"""
    return MAPS / f"state_{int(state_id)}_{int(year)}.png"
