# burn_severity/legend.py
from matplotlib.colors import BoundaryNorm, ListedColormap

from .config import CLASS_NAMES, N_CLASSES

# Legend rows, top to bottom
DISPLAY_ORDER = [7, 6, 5, 4, 3, 2, 1, 0]
DISPLAY_PALETTE = ['#7a8737', '#acbe4d', '#0ae042', '#fff70b',
                   '#ffaf38', '#ff641b', '#a41fd6', '#ffffff']


def legend_entries():
    """(class index, class name, hex colour) tuples in legend display order."""
    return [(i, CLASS_NAMES[i], color) for i, color in zip(DISPLAY_ORDER, DISPLAY_PALETTE)]


def severity_colormap():
    """
    Colormap and norm for a classified raster, indexed by class value 0-7.
    Use together with ticks at [i + 0.5 for i in range(8)] for a colorbar.
    """
    colors = [None] * N_CLASSES
    for class_index, _, color in legend_entries():
        colors[class_index] = color

    cmap = ListedColormap(colors, name='burn_severity')
    bounds = list(range(N_CLASSES + 1))
    norm = BoundaryNorm(bounds, cmap.N)
    return cmap, norm
