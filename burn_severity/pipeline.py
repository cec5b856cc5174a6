# burn_severity/pipeline.py
"""
One-call burn severity analysis over a pre/post NBR pair.

pre/post NBR -> dNBR -> severity classes -> one area table per region
"""

import os
from dataclasses import dataclass

from .config import AnalysisConfig
from .local_analysis import calculate_area, calculate_dnbr, classify_severity
from .raster import read_raster
from .report import build_report


@dataclass(frozen=True)
class AnalysisResult:
    dnbr: object
    classified: object
    reports: dict  # region name -> DataFrame


def _as_raster(raster):
    if isinstance(raster, (str, os.PathLike)):
        return read_raster(raster)
    return raster


def run_analysis(pre_nbr, post_nbr, regions=None, config=None):
    """
    Runs the burn severity analysis.

    Parameters:
    - pre_nbr, post_nbr: Raster objects or GeoTIFF paths of the NBR images.
    - regions (dict): report name -> region, e.g. the full study area and a
      smaller sub-rectangle. Defaults to {'study_area': None}, the full extent.
    - config (AnalysisConfig): thresholds, scale, pixel size and pixel budget.
    """
    if config is None:
        config = AnalysisConfig()
    if regions is None:
        regions = {'study_area': None}

    dnbr = calculate_dnbr(_as_raster(pre_nbr), _as_raster(post_nbr), scale=config.scale)
    classified = classify_severity(dnbr, thresholds=config.thresholds)

    reports = {}
    for name, region in regions.items():
        print(f"Burned area by severity class: {name}")
        area_stats = calculate_area(
            classified, region,
            pixel_size=config.pixel_size,
            max_pixels=config.max_pixels,
        )
        reports[name] = build_report(area_stats)

    return AnalysisResult(dnbr=dnbr, classified=classified, reports=reports)
