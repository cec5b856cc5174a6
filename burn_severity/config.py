# burn_severity/config.py
"""Fixed classification tables and the analysis configuration."""

from dataclasses import dataclass

import numpy as np

# dNBR scaled to USGS standards
DNBR_SCALE = 1000

# Landsat pixel = 30m x 30m
PIXEL_SIZE = 30

# Same ceiling as the hosted reduceRegion default
MAX_PIXELS = 10_000_000

# Upper bounds of classes 0-7 (strict less-than)
DEFAULT_THRESHOLDS = (-1000, -251, -101, 99, 269, 439, 659, np.inf)

N_CLASSES = 8

# Fill value of masked pixels in a classified raster
NODATA_CLASS = 255

CLASS_NAMES = (
    'NA',
    'High Severity',
    'Moderate-high Severity',
    'Moderate-low Severity',
    'Low Severity',
    'Unburned',
    'Enhanced Regrowth, Low',
    'Enhanced Regrowth, High',
)

# (NIR, SWIR2) band names and native resolution in meters
PLATFORMS = {
    'L8': {'name': 'Landsat 8', 'bands': ('B5', 'B7'), 'resolution': 30},
    'S2': {'name': 'Sentinel-2', 'bands': ('B8', 'B12'), 'resolution': 10},
}


def platform_info(platform):
    """Look up band names and resolution for 'L8' or 'S2' (any case)."""
    try:
        return PLATFORMS[platform.upper()]
    except KeyError:
        raise ValueError(
            f"Unknown platform {platform!r}, expected one of {sorted(PLATFORMS)}"
        ) from None


@dataclass(frozen=True)
class AnalysisConfig:
    """Parameters of one burn severity run."""
    thresholds: tuple = DEFAULT_THRESHOLDS
    scale: float = DNBR_SCALE
    pixel_size: float = PIXEL_SIZE  # Nominal pixel side in meters, used for hectares
    max_pixels: int | None = MAX_PIXELS  # None disables the region size guard
