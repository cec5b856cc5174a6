# burn_severity/local_analysis.py
import math
from dataclasses import dataclass

import numpy as np
import rasterio

from .config import (CLASS_NAMES, DEFAULT_THRESHOLDS, DNBR_SCALE, MAX_PIXELS,
                     N_CLASSES, NODATA_CLASS, PIXEL_SIZE, platform_info)
from .errors import InvalidThresholdTableError, NoValidPixelsError, RegionTooLargeError
from .raster import Raster, check_coregistered, read_raster
from .regions import region_mask


@dataclass(frozen=True)
class ClassStat:
    """Area of one severity class inside one region."""
    class_index: int
    name: str
    pixels: int
    hectares: float
    percentage: float


def calculate_nbr(nir, swir):
    """
    Normalized Burn Ratio (NIR - SWIR2) / (NIR + SWIR2) from two band rasters.
    Pixels with a zero denominator are masked.
    """
    check_coregistered(nir, swir)
    nir_data = nir.data.astype(np.float64)
    swir_data = swir.data.astype(np.float64)
    nbr = np.ma.divide(nir_data - swir_data, nir_data + swir_data)
    return Raster(np.ma.masked_invalid(nbr), nir.transform, nir.crs)


def read_nbr(image_path, platform='L8'):
    """
    Calculates NBR from a multi-band GeoTIFF whose band descriptions carry the
    platform's band names (B5/B7 for 'L8', B8/B12 for 'S2').
    """
    nir_name, swir_name = platform_info(platform)['bands']

    with rasterio.open(image_path) as src:
        descriptions = list(src.descriptions)

    missing = [name for name in (nir_name, swir_name) if name not in descriptions]
    if missing:
        raise ValueError(f"Bands {missing} not found in {image_path}, band descriptions are {descriptions}")

    nir = read_raster(image_path, band=descriptions.index(nir_name) + 1)
    swir = read_raster(image_path, band=descriptions.index(swir_name) + 1)
    return calculate_nbr(nir, swir)


def calculate_dnbr(pre_nbr, post_nbr, scale=DNBR_SCALE):
    """
    Calculates dNBR = (pre - post) * scale. A pixel masked in either input is masked in the output.
    """
    check_coregistered(pre_nbr, post_nbr)

    dnbr = (pre_nbr.data.astype(np.float64) - post_nbr.data.astype(np.float64)) * scale
    dnbr = np.ma.masked_invalid(dnbr)

    print(f"dNBR calculated: {dnbr.count()} valid pixels")
    return Raster(dnbr, pre_nbr.transform, pre_nbr.crs)


def validate_thresholds(thresholds):
    thresholds = np.asarray(thresholds, dtype=np.float64)
    if thresholds.shape != (N_CLASSES,):
        raise InvalidThresholdTableError(
            f"Expected {N_CLASSES} thresholds, got {thresholds.size}")
    if np.isnan(thresholds).any() or not np.all(np.diff(thresholds) > 0):
        raise InvalidThresholdTableError(
            f"Thresholds must be strictly ascending: {thresholds.tolist()}")
    return thresholds


def classify_severity(dnbr, thresholds=DEFAULT_THRESHOLDS):
    """
    Buckets every valid dNBR pixel into severity classes 0-7.

    A pixel gets the smallest index i with dnbr < thresholds[i], so a value equal
    to a threshold falls into the higher class. Values at or above the last
    threshold stay in class 7. Masked pixels stay masked (fill NODATA_CLASS).
    """
    thresholds = validate_thresholds(thresholds)

    values = np.ma.asarray(dnbr.data, dtype=np.float64).filled(np.nan)
    # Number of thresholds <= value
    classes = np.searchsorted(thresholds, values, side='right')
    classes = np.minimum(classes, N_CLASSES - 1).astype(np.uint8)

    mask = np.ma.getmaskarray(dnbr.data) | np.isnan(values)
    classes[mask] = NODATA_CLASS
    classified = np.ma.masked_array(classes, mask=mask, fill_value=NODATA_CLASS)

    print(f"Classification complete: {classified.count()} pixels classified")
    return Raster(classified, dnbr.transform, dnbr.crs)


def _valid_in_region(classified, region, max_pixels, region_crs=None):
    inside = region_mask(classified, region, region_crs)

    n_region = int(inside.sum())
    if max_pixels is not None and n_region > max_pixels:
        raise RegionTooLargeError(n_region, max_pixels)

    return inside & classified.valid_mask


def count_valid_pixels(classified, region=None, max_pixels=MAX_PIXELS, region_crs=None):
    """Number of classified (unmasked) pixels inside the region, all classes included."""
    return int(_valid_in_region(classified, region, max_pixels, region_crs).sum())


def calculate_area(classified, region=None, pixel_size=PIXEL_SIZE, max_pixels=MAX_PIXELS,
                   region_crs=None):
    """
    Calculates pixel count, hectares and percentage of each severity class within a region.

    Parameters:
    - classified (Raster): output of classify_severity.
    - region: anything accepted by regions.to_region, or None for the full extent.
    - pixel_size (float): pixel side length in meters.
    - max_pixels (int or None): fail with RegionTooLargeError above this many region pixels.
    - region_crs: CRS of the region coordinates when it is not the raster's
      (rings and GeoJSON dicts default to EPSG:4326).

    Returns a list of 8 ClassStat in class index order.
    """
    valid = _valid_in_region(classified, region, max_pixels, region_crs)
    total = int(valid.sum())
    if total == 0:
        raise NoValidPixelsError("No valid classified pixels inside the region.")

    counts = np.bincount(np.ma.getdata(classified.data)[valid].astype(np.int64), minlength=N_CLASSES)
    pixel_area_m2 = pixel_size * pixel_size

    area_stats = []
    for class_index, name in enumerate(CLASS_NAMES):
        pixels = int(counts[class_index])
        # Rounded half-up to 2 decimals
        percentage = math.floor(pixels / total * 10000 + 0.5) / 100
        area_stats.append(ClassStat(
            class_index=class_index,
            name=name,
            pixels=pixels,
            hectares=pixels * pixel_area_m2 / 10000,
            percentage=percentage,
        ))

    print(f"Area calculation complete: {total} valid pixels in region.")
    return area_stats
