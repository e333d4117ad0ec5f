"""
FARS accident analysis

Read yearly FARS accident files, count accidents by month and year, and
map accident locations for a state.
"""

from .reader import (
    fars_read,
    make_filename,
    fars_read_years
)

from .summary import (
    fars_summarize_years,
    plot_monthly_summary
)

from .mapping import (
    fars_map_state,
    plot_state_accidents
)

from .errors import InvalidStateError
from .states import state_name
from .figures import save_figure

__version__ = "1.0.0"

__all__ = [
    'fars_read',
    'make_filename',
    'fars_read_years',
    'fars_summarize_years',
    'plot_monthly_summary',
    'fars_map_state',
    'plot_state_accidents',
    'InvalidStateError',
    'state_name',
    'save_figure',
]
