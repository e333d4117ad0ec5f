"""
Saving rendered figures
"""

from pathlib import Path

import matplotlib.pyplot as plt

from config.settings import FIGURE_DPI


def save_figure(ax_or_fig, path) -> Path:
    """Write the figure owning ``ax_or_fig`` as an image, then close it"""
    fig = ax_or_fig if isinstance(ax_or_fig, plt.Figure) else ax_or_fig.get_figure()
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fig.tight_layout()
    fig.savefig(path, dpi=FIGURE_DPI, bbox_inches='tight')
    plt.close(fig)
    return path
