"""
Configuration for FARS accident analysis
File naming, sentinel thresholds, and plot settings
"""

# Yearly source files: accident_2013.csv.bz2, accident_2014.csv.bz2, ...
FILENAME_TEMPLATE = 'accident_{year:d}.csv.bz2'

# Column names as published in the FARS accident files
MONTH_COL = 'MONTH'
STATE_COL = 'STATE'
LONGITUDE_COL = 'LONGITUD'
LATITUDE_COL = 'LATITUDE'
YEAR_COL = 'year'

# Coordinates above these values are "unknown" codes, not locations
LONGITUDE_SENTINEL = 900
LATITUDE_SENTINEL = 90

# Map Settings
MARKER_SIZE = 1            # points, like a single-pixel dot
MARKER_COLOR = '#34495e'   # Dark gray
BOUNDARY_COLOR = '#7f8c8d'
BOUNDARY_LINEWIDTH = 0.6
MAP_FIGSIZE = (8, 8)

# Summary heatmap
HEATMAP_CMAP = 'Reds'
HEATMAP_FIGSIZE = (10, 6)

# Figure output
FIGURE_DPI = 300
