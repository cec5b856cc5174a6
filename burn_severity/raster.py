# burn_severity/raster.py
from dataclasses import dataclass

import numpy as np
import rasterio
from affine import Affine

from .errors import ShapeMismatchError


@dataclass(frozen=True)
class Raster:
    """
    A single band grid with its georeference.

    - data (np.ma.MaskedArray): 2-D values, mask True marks invalid pixels.
    - transform (Affine): pixel to CRS coordinates.
    - crs (rasterio.crs.CRS or None): reference frame of the grid.
    """
    data: np.ma.MaskedArray
    transform: Affine
    crs: object = None

    @property
    def shape(self):
        return self.data.shape

    @property
    def resolution(self):
        return abs(self.transform.a), abs(self.transform.e)

    @property
    def valid_mask(self):
        return ~np.ma.getmaskarray(self.data)


def read_raster(path, band=1, as_float=True):
    """
    Reads one band of a GeoTIFF using Rasterio. Nodata, NaN and inf pixels are masked.
    """
    with rasterio.open(path) as src:
        data = src.read(band, masked=True)
        transform = src.transform
        crs = src.crs

    if as_float:
        data = np.ma.masked_invalid(data.astype(np.float32))

    print(f"Raster read from: {path} ({data.shape[0]}x{data.shape[1]}, {data.count()} valid pixels)")
    return Raster(data, transform, crs)


def check_coregistered(a, b):
    """Raise ShapeMismatchError unless a and b share shape, transform and CRS."""
    if a.shape != b.shape:
        raise ShapeMismatchError(f"Image size mismatch: {a.shape} vs {b.shape}")

    if not np.allclose(a.resolution, b.resolution):
        raise ShapeMismatchError(f"Pixel resolution mismatch: {a.resolution} vs {b.resolution}")

    if not a.transform.almost_equals(b.transform):
        raise ShapeMismatchError(f"Extent mismatch: {tuple(a.transform)} vs {tuple(b.transform)}")

    if a.crs != b.crs:
        raise ShapeMismatchError(f"Reference frame mismatch: {a.crs} vs {b.crs}")
