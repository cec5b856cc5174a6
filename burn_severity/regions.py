# burn_severity/regions.py
import os

import geopandas as gpd
import numpy as np
from rasterio.features import geometry_mask
from shapely.geometry import MultiPolygon, Polygon, mapping, shape
from shapely.geometry.base import BaseGeometry

# GeoJSON and ee.Geometry coordinates are lon/lat
LONLAT_CRS = "EPSG:4326"


def to_region(region, crs=None, region_crs=None):
    """
    Normalizes a region of interest to a shapely (Multi)Polygon in the raster's CRS.

    Parameters:
    - region: shapely geometry, GeoJSON-like dict, list of polygon rings
      (e.g. [[[lon, lat], ...]]), GeoDataFrame/GeoSeries, or a path to a vector file.
    - crs: CRS of the raster. The region is reprojected to it when its own CRS is known.
    - region_crs: CRS of the region coordinates. Defaults to EPSG:4326 for rings
      and GeoJSON dicts. Shapely geometries without region_crs are taken to be
      in the raster's CRS already. Ignored for GeoDataFrames, which carry their own.
    """
    if isinstance(region, (str, os.PathLike)):
        region = gpd.read_file(region)

    if isinstance(region, (gpd.GeoDataFrame, gpd.GeoSeries)):
        if crs is not None and region.crs is not None:
            region = region.to_crs(crs)
        geom = region.union_all()
        region_crs = None
    elif isinstance(region, BaseGeometry):
        geom = region
    elif isinstance(region, dict):
        geom = shape(region)
        region_crs = region_crs or LONLAT_CRS
    else:
        # Rings as in ee.Geometry.Polygon: first ring is the shell.
        geom = Polygon(region[0], region[1:])
        region_crs = region_crs or LONLAT_CRS

    if not isinstance(geom, (Polygon, MultiPolygon)):
        raise ValueError(f"Region must be a polygon or multi-polygon, got {geom.geom_type}")
    if geom.is_empty:
        raise ValueError("Region geometry is empty.")

    if crs is not None and region_crs is not None:
        geom = gpd.GeoSeries([geom], crs=region_crs).to_crs(crs).iloc[0]

    return geom


def region_mask(raster, region=None, region_crs=None):
    """
    Boolean grid, True where the pixel centre lies inside the region.
    A region of None selects the full raster extent.
    """
    if region is None:
        return np.ones(raster.shape, dtype=bool)

    geom = to_region(region, raster.crs, region_crs)
    return geometry_mask(
        [mapping(geom)],
        out_shape=raster.shape,
        transform=raster.transform,
        invert=True,
    )
